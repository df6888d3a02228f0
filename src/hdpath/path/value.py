"""PathValue — a single BIP32 path segment.

A segment is a 31-bit magnitude plus a hardened flag. Its encoded form is the
32-bit BIP32 child index, where the top bit marks hardened derivation:

- ``44'`` encodes to ``0x8000002c``
- ``7`` encodes to ``0x00000007``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from hdpath.errors.path_errors import RangeError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FIRST_BIT = 0x80000000
MAX_MAGNITUDE = FIRST_BIT - 1
MAX_ENCODED = 0xFFFFFFFF


@dataclass(frozen=True, slots=True, order=True)
class PathValue:
    """One segment of an HD path.

    Attributes:
        magnitude: Index in ``0..2^31-1``.
        hardened: True for hardened derivation (``'`` suffix).

    Raises:
        RangeError: If *magnitude* is not an int in the 31-bit range.
    """

    magnitude: int
    hardened: bool = False

    def __post_init__(self) -> None:
        if not PathValue.is_ok(self.magnitude):
            raise RangeError(self.magnitude, field="magnitude")

    @staticmethod
    def is_ok(value: int) -> bool:
        """True if *value* can be used as an unencoded segment magnitude."""
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return 0 <= value < FIRST_BIT

    @classmethod
    def normal(cls, magnitude: int) -> Self:
        return cls(magnitude, hardened=False)

    @classmethod
    def hardened_at(cls, magnitude: int) -> Self:
        return cls(magnitude, hardened=True)

    # -- Encoding ----------------------------------------------------------

    def encode(self) -> int:
        """Encode as a 32-bit BIP32 child index."""
        return self.magnitude | FIRST_BIT if self.hardened else self.magnitude

    @classmethod
    def decode(cls, raw: int) -> Self:
        """Decode a 32-bit BIP32 child index.

        Every 32-bit unsigned value is a valid encoding.

        Raises:
            RangeError: If *raw* is outside ``0..2^32-1``.
        """
        if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw <= MAX_ENCODED:
            raise RangeError(raw, field="child index")
        return cls(raw & MAX_MAGNITUDE, hardened=bool(raw & FIRST_BIT))

    def __str__(self) -> str:
        return f"{self.magnitude}'" if self.hardened else str(self.magnitude)
