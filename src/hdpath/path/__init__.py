"""HD path model — segments, purposes, generic and fixed-layout paths.

Provides:
- ``PathValue``: one segment (31-bit magnitude + hardened flag)
- ``Purpose``: supported BIP-43 purpose codes
- ``HDPath``: generic path with text parsing and formatting
- ``StandardHDPath``: ``m/purpose'/coin'/account'/change/index``
- ``AccountHDPath``: ``m/purpose'/coin'/account'``
- ``ShortHDPath``: ``m/purpose'/coin'/account'/index``
"""

from __future__ import annotations

from hdpath.path.account import AccountHDPath
from hdpath.path.base import DerivationPath
from hdpath.path.custom import HDPath
from hdpath.path.purpose import Purpose
from hdpath.path.short import ShortHDPath
from hdpath.path.standard import StandardHDPath
from hdpath.path.value import FIRST_BIT, MAX_MAGNITUDE, PathValue

__all__ = [
    "FIRST_BIT",
    "MAX_MAGNITUDE",
    "AccountHDPath",
    "DerivationPath",
    "HDPath",
    "PathValue",
    "Purpose",
    "ShortHDPath",
    "StandardHDPath",
]
