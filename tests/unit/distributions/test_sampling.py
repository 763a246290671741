from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_soliton.distributions import ArraySample, InverseTransformSamplingStrategy
from pysatl_soliton.soliton import SolitonDistribution
from tests.utils.sources import SequenceSource


class TestArraySample:
    def test_requires_2d(self):
        with pytest.raises(ValueError, match="2D array"):
            ArraySample(np.arange(3))

    def test_accessors(self):
        data = np.arange(6, dtype=np.int64).reshape(3, 2)
        sample = ArraySample(data)

        assert len(sample) == 3
        assert sample.shape == (3, 2)
        assert sample.dim == sample.dimension == 2
        assert sample.array is data
        assert [row.tolist() for row in sample] == [[0, 1], [2, 3], [4, 5]]


class TestInverseTransformSamplingStrategy:
    def test_maps_uniforms_through_table(self):
        dist = SolitonDistribution.ideal(SequenceSource([0.9, 0.0, 0.5]), 3)
        sample = InverseTransformSamplingStrategy().sample(3, distr=dist)

        assert sample.shape == (3, 1)
        assert sample.array[:, 0].tolist() == [3, 1, 2]

    def test_custom_strategy_used_by_distribution(self):
        class FixedStrategy:
            def sample(self, n, distr, **options):
                return ArraySample(np.full((n, 1), options.get("fill", 7), dtype=np.int64))

        base = SolitonDistribution.ideal(SequenceSource([0.5]), 3)
        dist = SolitonDistribution(
            base.source, base.splits, base.family_name, base.parameters, FixedStrategy()
        )
        assert dist.sample(2, fill=9).array.tolist() == [[9], [9]]
