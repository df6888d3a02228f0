"""Path validation errors raised by parsing and derivation entry points."""

from __future__ import annotations

from hdpath.errors.hdpath_errors import HDPathError


class RangeError(HDPathError):
    """A raw integer does not fit in the 31-bit segment magnitude."""

    def __init__(self, value: object, *, field: str = "value") -> None:
        super().__init__(f"Invalid {field}: {value}", code="range")
        self.field = field
        self.value = value


class ParseError(HDPathError):
    """Malformed textual path."""

    def __init__(self, message: str, *, text: str, segment: str | None = None) -> None:
        super().__init__(message, code="parse")
        self.text = text
        self.segment = segment


class ShapeError(HDPathError):
    """A path does not have the number of segments a layout or encoding allows.

    With ``maximum=True``, *expected* is an upper bound rather than an exact count.
    """

    def __init__(self, *, expected: int, actual: int, maximum: bool = False) -> None:
        bound = f"at most {expected}" if maximum else str(expected)
        super().__init__(f"Expected {bound} path segments, got {actual}", code="shape")
        self.expected = expected
        self.actual = actual
        self.maximum = maximum


class HardeningError(HDPathError):
    """A segment's hardened flag does not match the layout at its position."""

    def __init__(self, *, position: int, expected_hardened: bool) -> None:
        kind = "hardened" if expected_hardened else "non-hardened"
        super().__init__(f"Segment {position} must be {kind}", code="hardening")
        self.position = position
        self.expected_hardened = expected_hardened


class UnknownPurposeError(HDPathError):
    """The purpose segment is not a supported BIP-43 purpose code."""

    def __init__(self, code_value: int) -> None:
        super().__init__(f"Unknown purpose: {code_value}", code="unknown-purpose")
        self.code_value = code_value
