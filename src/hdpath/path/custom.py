"""HDPath — a generic path of any depth, with BIP-43 text parsing and formatting.

Grammar::

    path    := "m" ("/" segment)*
    segment := digits ["'" | "h"]

Formatting always uses the apostrophe, so canonical input round-trips exactly.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from hdpath.errors.path_errors import ParseError, RangeError
from hdpath.path.base import DerivationPath
from hdpath.path.value import MAX_MAGNITUDE, PathValue

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

ROOT = "m"
SEPARATOR = "/"
HARDENED_MARKERS = ("'", "h")

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class HDPath(DerivationPath):
    """An ordered sequence of path segments with no layout constraints.

    Attributes:
        values: Segments after the root ``m``, in derivation order.
    """

    values: tuple[PathValue, ...] = ()

    def __post_init__(self) -> None:
        values = tuple(self.values)
        for v in values:
            if not isinstance(v, PathValue):
                msg = f"Expected PathValue, got {type(v).__name__}"
                raise TypeError(msg)
        object.__setattr__(self, "values", values)

    # -- Construction ------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a path like ``m/44'/0'/0'/0/0``.

        Raises:
            ParseError: On a missing root, an empty or non-numeric segment,
                an unknown hardened marker, or a magnitude over ``2^31-1``.
        """
        tokens = text.split(SEPARATOR)
        if tokens[0] != ROOT:
            logger.debug("Rejected path %r: bad root %r", text, tokens[0])
            msg = f"Path must start with {ROOT!r}"
            raise ParseError(msg, text=text, segment=tokens[0])
        return cls(tuple(_parse_segment(token, text) for token in tokens[1:]))

    @classmethod
    def from_encoded(cls, raws: Iterable[int]) -> Self:
        """Build from 32-bit BIP32 child indices."""
        return cls(tuple(PathValue.decode(raw) for raw in raws))

    def child(self, value: PathValue) -> HDPath:
        """A new path with *value* appended."""
        return HDPath((*self.values, value))

    def extend(self, values: Iterable[PathValue]) -> HDPath:
        return HDPath((*self.values, *values))

    # -- Formatting --------------------------------------------------------

    def __str__(self) -> str:
        return format_path(self.values)

    def __repr__(self) -> str:
        return f"HDPath({str(self)!r})"


def format_path(values: Iterable[PathValue]) -> str:
    """Format segments as ``m/<seg>/<seg>...`` using ``'`` for hardened."""
    return ROOT + "".join(f"{SEPARATOR}{v}" for v in values)


def _parse_segment(token: str, text: str) -> PathValue:
    hardened = token.endswith(HARDENED_MARKERS)
    digits = token[:-1] if hardened else token
    if not digits:
        logger.debug("Rejected path %r: empty segment", text)
        msg = "Empty path segment"
        raise ParseError(msg, text=text, segment=token)
    if not _DIGITS.fullmatch(digits):
        logger.debug("Rejected path %r: invalid segment %r", text, token)
        msg = f"Invalid path segment {token!r}"
        raise ParseError(msg, text=text, segment=token)
    try:
        return PathValue(int(digits), hardened=hardened)
    except RangeError as err:
        logger.debug("Rejected path %r: segment %r out of range", text, token)
        msg = f"Path segment {token!r} exceeds {MAX_MAGNITUDE}"
        raise ParseError(msg, text=text, segment=token) from err
