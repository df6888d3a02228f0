"""Read-only protocol shared by every HD path type.

A path is an ordered sequence of :class:`PathValue` after the implicit root
``m``. Key derivation code consumes it as encoded child indices or as the
length-prefixed big-endian byte string used by hardware wallets.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from hdpath.errors.path_errors import ShapeError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hdpath.path.custom import HDPath
    from hdpath.path.value import PathValue

# One length byte precedes the segments in the byte encoding
MAX_ENCODED_DEPTH = 0xFF


class DerivationPath(ABC):
    """Base class for generic and fixed-layout paths."""

    __slots__ = ()

    @property
    @abstractmethod
    def values(self) -> tuple[PathValue, ...]:
        """Segments in derivation order."""

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[PathValue]:
        return iter(self.values)

    def __getitem__(self, pos: int) -> PathValue:
        return self.values[pos]

    def get(self, pos: int) -> PathValue | None:
        """Segment at *pos*, or None when out of bounds."""
        if 0 <= pos < len(self.values):
            return self.values[pos]
        return None

    def encoded(self) -> tuple[int, ...]:
        """Segments as 32-bit BIP32 child indices."""
        return tuple(v.encode() for v in self.values)

    def to_bytes(self) -> bytes:
        """Encode as one length byte followed by 4-byte big-endian indices.

        Raises:
            ShapeError: If the path has more than 255 segments.
        """
        depth = len(self.values)
        if depth > MAX_ENCODED_DEPTH:
            raise ShapeError(expected=MAX_ENCODED_DEPTH, actual=depth, maximum=True)
        return struct.pack("B", depth) + b"".join(struct.pack(">I", i) for i in self.encoded())

    def to_hd_path(self) -> HDPath:
        from hdpath.path.custom import HDPath

        return HDPath(self.values)
