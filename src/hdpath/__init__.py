"""Parse, validate and format BIP-32/43/44 HD wallet derivation paths.

Basic usage::

    from hdpath import AccountHDPath, Purpose, StandardHDPath

    path = StandardHDPath.parse("m/44'/0'/0'/0/0")
    path.account          # 0
    str(StandardHDPath(Purpose.WITNESS, 0, 1, 0, 101))   # "m/84'/0'/1'/0/101"

    account = AccountHDPath(Purpose.PUBKEY, 0, 1)
    str(account)                  # "m/44'/0'/1'/x/x"
    str(account.address_at(0, 7))  # "m/44'/0'/1'/0/7"

Values are limited to ``2^31-1`` because the top bit of a BIP32 child index
marks hardened derivation. Check untrusted integers with
``PathValue.is_ok`` before passing them to a constructor.
"""

from __future__ import annotations

from hdpath.errors import (
    HardeningError,
    HDPathError,
    ParseError,
    RangeError,
    ShapeError,
    UnknownPurposeError,
)
from hdpath.path import (
    AccountHDPath,
    DerivationPath,
    HDPath,
    PathValue,
    Purpose,
    ShortHDPath,
    StandardHDPath,
)

__version__ = "0.1.0"

__all__ = [
    "AccountHDPath",
    "DerivationPath",
    "HDPath",
    "HDPathError",
    "HardeningError",
    "ParseError",
    "PathValue",
    "Purpose",
    "RangeError",
    "ShapeError",
    "ShortHDPath",
    "StandardHDPath",
    "UnknownPurposeError",
]
