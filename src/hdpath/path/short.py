"""ShortHDPath — four-level ``m/purpose'/coin_type'/account'/index`` paths.

Some account-based chains skip the change level, e.g. ``m/44'/60'/0'/0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from hdpath.path.base import DerivationPath
from hdpath.path.custom import HDPath, format_path
from hdpath.path.layout import (
    SHORT_LAYOUT,
    check_fields,
    require_fields,
    require_purpose,
    validate_layout,
)
from hdpath.path.purpose import Purpose
from hdpath.path.value import PathValue

if TYPE_CHECKING:
    from hdpath.path.account import AccountHDPath


@dataclass(frozen=True, slots=True, order=True)
class ShortHDPath(DerivationPath):
    purpose: Purpose
    coin_type: int
    account: int
    index: int

    def __post_init__(self) -> None:
        require_purpose("ShortHDPath", self.purpose)
        require_fields(
            "ShortHDPath", coin_type=self.coin_type, account=self.account, index=self.index
        )

    @classmethod
    def try_new(cls, purpose: Purpose, coin_type: int, account: int, index: int) -> Self:
        check_fields(coin_type=coin_type, account=account, index=index)
        return cls(purpose, coin_type, account, index)

    @classmethod
    def parse(cls, text: str) -> Self:
        return cls.from_hd_path(HDPath.parse(text))

    @classmethod
    def from_hd_path(cls, path: DerivationPath) -> Self:
        purpose, (coin_type, account, index) = validate_layout(path, SHORT_LAYOUT)
        return cls(purpose, coin_type, account, index)

    @property
    def values(self) -> tuple[PathValue, ...]:
        return (
            self.purpose.as_value(),
            PathValue.hardened_at(self.coin_type),
            PathValue.hardened_at(self.account),
            PathValue.normal(self.index),
        )

    def account_path(self) -> AccountHDPath:
        from hdpath.path.account import AccountHDPath

        return AccountHDPath(self.purpose, self.coin_type, self.account)

    def __str__(self) -> str:
        return format_path(self.values)
