"""Kernel value types — public re-export surface.

Modules:
  option.py — Present, Absent, Option and the free-function combinators
  result.py — Ok, Err, Result
"""

from optval.kernel.types.option import (
    Absent,
    Option,
    Present,
    absent,
    and_,
    filter_,
    flat_map,
    from_nullable,
    map_,
    or_,
    present,
)
from optval.kernel.types.result import Err, Ok, Result

__all__ = [
    "Absent",
    "Err",
    "Ok",
    "Option",
    "Present",
    "Result",
    "absent",
    "and_",
    "filter_",
    "flat_map",
    "from_nullable",
    "map_",
    "or_",
    "present",
]
