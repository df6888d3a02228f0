"""Shape checks shared by the fixed-layout paths (standard, account, short).

Each layout is a tuple of hardened flags, one per position. The first
position always holds a BIP-43 purpose.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hdpath.errors.path_errors import HardeningError, RangeError, ShapeError, UnknownPurposeError
from hdpath.path.purpose import Purpose
from hdpath.path.value import PathValue

if TYPE_CHECKING:
    from hdpath.path.base import DerivationPath

logger = logging.getLogger(__name__)

ACCOUNT_LAYOUT = (True, True, True)
SHORT_LAYOUT = (True, True, True, False)
STANDARD_LAYOUT = (True, True, True, False, False)


def validate_layout(
    path: DerivationPath, layout: tuple[bool, ...]
) -> tuple[Purpose, tuple[int, ...]]:
    """Check *path* against *layout* and return its purpose and magnitudes.

    Returns:
        ``(purpose, (magnitude_1, ..., magnitude_n))``.

    Raises:
        ShapeError: Wrong number of segments.
        HardeningError: First position whose hardened flag does not match.
        UnknownPurposeError: First segment is not a supported purpose code.
    """
    values = path.values
    if len(values) != len(layout):
        logger.debug("Rejected %s: %d segments, expected %d", path, len(values), len(layout))
        raise ShapeError(expected=len(layout), actual=len(values))
    for position, (value, hardened) in enumerate(zip(values, layout, strict=True)):
        if value.hardened != hardened:
            logger.debug("Rejected %s: wrong hardening at %d", path, position)
            raise HardeningError(position=position, expected_hardened=hardened)
    purpose = Purpose.from_code(values[0].magnitude)
    if purpose is None:
        logger.debug("Rejected %s: unknown purpose %d", path, values[0].magnitude)
        raise UnknownPurposeError(values[0].magnitude)
    return purpose, tuple(v.magnitude for v in values[1:])


def check_fields(**fields: int) -> None:
    """Raise RangeError for the first field that is not a valid magnitude."""
    for name, value in fields.items():
        if not PathValue.is_ok(value):
            raise RangeError(value, field=name)


def require_fields(owner: str, **fields: int) -> None:
    """Typed-constructor precondition: out-of-range input is a programmer error.

    Raises:
        ValueError: Not an HDPathError, so recoverable-error handlers skip it.
    """
    try:
        check_fields(**fields)
    except RangeError as err:
        logger.error("%s constructed with invalid %s: %s", owner, err.field, err.value)
        raise ValueError(err.message) from None


def require_purpose(owner: str, purpose: object) -> Purpose:
    if isinstance(purpose, Purpose):
        return purpose
    logger.error("%s constructed with invalid purpose: %r", owner, purpose)
    msg = f"Invalid purpose: {purpose!r}"
    raise TypeError(msg)
