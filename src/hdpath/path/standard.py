"""StandardHDPath — the five-level BIP-44 address path.

Layout: ``m/purpose'/coin_type'/account'/change/index``, e.g. ``m/44'/0'/0'/0/0``.
The first three levels are always hardened and the last two never are.

Two ways in, with different failure modes:

- ``StandardHDPath(...)`` takes typed values. Passing an integer outside
  ``0..2^31-1`` is a programmer error and raises ``ValueError``; check user
  input with :meth:`PathValue.is_ok` or use :meth:`StandardHDPath.try_new`.
- ``StandardHDPath.parse(text)`` takes untrusted text and raises a subclass
  of :class:`HDPathError` describing what is wrong with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from hdpath.path.base import DerivationPath
from hdpath.path.custom import HDPath, format_path
from hdpath.path.layout import (
    STANDARD_LAYOUT,
    check_fields,
    require_fields,
    require_purpose,
    validate_layout,
)
from hdpath.path.purpose import Purpose
from hdpath.path.value import PathValue

if TYPE_CHECKING:
    from hdpath.config.settings import PathDefaults
    from hdpath.path.account import AccountHDPath


@dataclass(frozen=True, slots=True, order=True)
class StandardHDPath(DerivationPath):
    """Full path to a single address.

    Attributes:
        purpose: BIP-43 purpose.
        coin_type: SLIP-44 coin type.
        account: Account number.
        change: 0 for receive addresses, 1 for change.
        index: Address index within the chain.
    """

    purpose: Purpose
    coin_type: int
    account: int
    change: int
    index: int

    def __post_init__(self) -> None:
        require_purpose("StandardHDPath", self.purpose)
        require_fields(
            "StandardHDPath",
            coin_type=self.coin_type,
            account=self.account,
            change=self.change,
            index=self.index,
        )

    # -- Construction ------------------------------------------------------

    @classmethod
    def try_new(
        cls, purpose: Purpose, coin_type: int, account: int, change: int, index: int
    ) -> Self:
        """Like the constructor, but out-of-range values are recoverable.

        Raises:
            RangeError: Naming the first field that is out of range.
        """
        check_fields(coin_type=coin_type, account=account, change=change, index=index)
        return cls(purpose, coin_type, account, change, index)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``m/purpose'/coin_type'/account'/change/index``.

        Raises:
            ParseError: Malformed text.
            ShapeError: Not exactly five segments.
            HardeningError: Hardened markers do not follow the layout.
            UnknownPurposeError: Unsupported purpose code.
        """
        return cls.from_hd_path(HDPath.parse(text))

    @classmethod
    def from_hd_path(cls, path: DerivationPath) -> Self:
        purpose, (coin_type, account, change, index) = validate_layout(path, STANDARD_LAYOUT)
        return cls(purpose, coin_type, account, change, index)

    @classmethod
    def default(cls, defaults: PathDefaults | None = None) -> Self:
        """``m/44'/0'/0'/0/0``, or the components of *defaults* when given.

        The environment is only consulted by a ``PathDefaults`` the caller builds.
        """
        if defaults is None:
            return cls(Purpose.PUBKEY, 0, 0, 0, 0)
        return cls(
            defaults.purpose, defaults.coin_type, defaults.account, defaults.change, defaults.index
        )

    # -- Views -------------------------------------------------------------

    @property
    def values(self) -> tuple[PathValue, ...]:
        return (
            self.purpose.as_value(),
            PathValue.hardened_at(self.coin_type),
            PathValue.hardened_at(self.account),
            PathValue.normal(self.change),
            PathValue.normal(self.index),
        )

    def account_path(self) -> AccountHDPath:
        """The account this address belongs to."""
        from hdpath.path.account import AccountHDPath

        return AccountHDPath(self.purpose, self.coin_type, self.account)

    def __str__(self) -> str:
        return format_path(self.values)
