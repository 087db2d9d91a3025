"""
optval – Optional values without ``None`` checks.

Import path convention::

    from optval import Option, absent, present, map_
    from optval.kernel.errors import EmptyValueError
    from optval.observability.logging import configure_logging
"""

from optval.kernel.errors import EmptyValueError, MissingValueError, OptionError
from optval.kernel.types import (
    Absent,
    Err,
    Ok,
    Option,
    Present,
    Result,
    absent,
    and_,
    filter_,
    flat_map,
    from_nullable,
    map_,
    or_,
    present,
)

__version__ = "0.1.0"
__all__ = [
    "Absent",
    "EmptyValueError",
    "Err",
    "MissingValueError",
    "Ok",
    "Option",
    "OptionError",
    "Present",
    "Result",
    "__version__",
    "absent",
    "and_",
    "filter_",
    "flat_map",
    "from_nullable",
    "map_",
    "or_",
    "present",
]
