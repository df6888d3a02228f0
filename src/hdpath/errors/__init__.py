"""Error hierarchy for HD path parsing and validation."""

from hdpath.errors.hdpath_errors import HDPathError
from hdpath.errors.path_errors import (
    HardeningError,
    ParseError,
    RangeError,
    ShapeError,
    UnknownPurposeError,
)

__all__ = [
    "HDPathError",
    "HardeningError",
    "ParseError",
    "RangeError",
    "ShapeError",
    "UnknownPurposeError",
]
