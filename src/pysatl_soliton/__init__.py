"""
PySATL Soliton
==============

Soliton and Robust Soliton degree distributions for fountain codes: numerically
stable split table construction, inverse-CDF sampling and characteristic
queries over a caller-supplied uniform source.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .soliton import *
from .soliton import __all__ as _soliton_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-soliton")
__all__ = [
    "__version__",
    *_distr_all,
    *_soliton_all,
    *_types_all,
]

del _distr_all
del _soliton_all
del _types_all
