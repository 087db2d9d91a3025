"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── OptionError          (option.py)
        ├── EmptyValueError
        └── MissingValueError

Configuration errors live in :mod:`optval.config.validation` and also
derive from :class:`BaseError`.
"""

from optval.kernel.errors.base import BaseError
from optval.kernel.errors.option import (
    EmptyValueError,
    MissingValueError,
    OptionError,
)

__all__ = [
    "BaseError",
    "EmptyValueError",
    "MissingValueError",
    "OptionError",
]
