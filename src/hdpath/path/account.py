"""AccountHDPath — the three hardened levels shared by every address of an account.

Represents ``m/purpose'/coin_type'/account'``. It is displayed with ``x``
placeholders for the levels it leaves open, e.g. ``m/84'/0'/1'/x/x``, and is
used to derive :class:`StandardHDPath` values with :meth:`address_at`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from hdpath.path.base import DerivationPath
from hdpath.path.custom import HDPath, format_path
from hdpath.path.layout import (
    ACCOUNT_LAYOUT,
    check_fields,
    require_fields,
    require_purpose,
    validate_layout,
)
from hdpath.path.purpose import Purpose
from hdpath.path.standard import StandardHDPath
from hdpath.path.value import PathValue

if TYPE_CHECKING:
    from hdpath.config.settings import PathDefaults

# Shown in place of the change and index levels
UNRESOLVED_SUFFIX = "/x/x"


@dataclass(frozen=True, slots=True, order=True)
class AccountHDPath(DerivationPath):
    """Account root path.

    Attributes:
        purpose: BIP-43 purpose.
        coin_type: SLIP-44 coin type.
        account: Account number.
    """

    purpose: Purpose
    coin_type: int
    account: int

    def __post_init__(self) -> None:
        require_purpose("AccountHDPath", self.purpose)
        require_fields("AccountHDPath", coin_type=self.coin_type, account=self.account)

    @classmethod
    def try_new(cls, purpose: Purpose, coin_type: int, account: int) -> Self:
        """Raises RangeError instead of ValueError for out-of-range values."""
        check_fields(coin_type=coin_type, account=account)
        return cls(purpose, coin_type, account)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``m/purpose'/coin_type'/account'``, optionally followed by ``/x/x``."""
        if text.endswith(UNRESOLVED_SUFFIX):
            text = text[: -len(UNRESOLVED_SUFFIX)]
        return cls.from_hd_path(HDPath.parse(text))

    @classmethod
    def from_hd_path(cls, path: DerivationPath) -> Self:
        purpose, (coin_type, account) = validate_layout(path, ACCOUNT_LAYOUT)
        return cls(purpose, coin_type, account)

    @classmethod
    def from_standard(cls, path: StandardHDPath) -> Self:
        return cls(path.purpose, path.coin_type, path.account)

    @classmethod
    def default(cls, defaults: PathDefaults | None = None) -> Self:
        """``m/44'/0'/0'``, or the components of *defaults* when given."""
        if defaults is None:
            return cls(Purpose.PUBKEY, 0, 0)
        return cls(defaults.purpose, defaults.coin_type, defaults.account)

    def address_at(self, change: int, index: int) -> StandardHDPath:
        """Derive the path of an address within this account.

        Raises:
            RangeError: If *change* or *index* is outside ``0..2^31-1``.
        """
        return StandardHDPath.try_new(self.purpose, self.coin_type, self.account, change, index)

    @property
    def values(self) -> tuple[PathValue, ...]:
        return (
            self.purpose.as_value(),
            PathValue.hardened_at(self.coin_type),
            PathValue.hardened_at(self.account),
        )

    def __str__(self) -> str:
        return format_path(self.values) + UNRESOLVED_SUFFIX
