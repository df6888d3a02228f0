"""BIP-43 purpose codes — the first, always hardened, segment of a path.

Supported standards:
- BIP-44 ``44'``: P2PKH (Pubkey)
- BIP-49 ``49'``: P2WPKH nested in P2SH (ScriptHash)
- BIP-84 ``84'``: native P2WPKH (Witness)
- BIP-86 ``86'``: single-key P2TR (Taproot)
"""

from __future__ import annotations

import enum

from hdpath.path.value import PathValue


class Purpose(int, enum.Enum):
    """Known purpose codes.

    New purposes are added here together with a label in ``_LABELS``.
    """

    PUBKEY = 44
    SCRIPT_HASH = 49
    WITNESS = 84
    TAPROOT = 86

    @classmethod
    def from_code(cls, code: int) -> Purpose | None:
        """Return the purpose for *code*, or None if it is not supported."""
        try:
            return cls(code)
        except ValueError:
            return None

    def to_code(self) -> int:
        return int(self.value)

    def as_value(self) -> PathValue:
        """The hardened segment this purpose occupies at position 0."""
        return PathValue.hardened_at(self.value)

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label


_LABELS: dict[Purpose, str] = {
    Purpose.PUBKEY: "Pubkey",
    Purpose.SCRIPT_HASH: "ScriptHash",
    Purpose.WITNESS: "Witness",
    Purpose.TAPROOT: "Taproot",
}
