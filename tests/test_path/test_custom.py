"""Tests for the generic path parser and formatter — path/custom.py."""

from __future__ import annotations

import pytest

from hdpath.errors import HDPathError, ParseError, RangeError, ShapeError
from hdpath.path.custom import HDPath
from hdpath.path.value import PathValue

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParse:
    def test_standard_path(self) -> None:
        path = HDPath.parse("m/44'/0'/0'/0/0")
        assert path.values == (
            PathValue.hardened_at(44),
            PathValue.hardened_at(0),
            PathValue.hardened_at(0),
            PathValue(0),
            PathValue(0),
        )

    def test_segment_order_preserved(self) -> None:
        path = HDPath.parse("m/1/2/3/4/5/6/7")
        assert [v.magnitude for v in path] == [1, 2, 3, 4, 5, 6, 7]

    def test_h_marker(self) -> None:
        assert HDPath.parse("m/84h/0h/0h/1/5") == HDPath.parse("m/84'/0'/0'/1/5")

    def test_root_only_is_empty(self) -> None:
        path = HDPath.parse("m")
        assert len(path) == 0
        assert str(path) == "m"

    def test_single_segment(self) -> None:
        assert HDPath.parse("m/0").values == (PathValue(0),)

    def test_leading_zeros(self) -> None:
        assert HDPath.parse("m/007'").values == (PathValue.hardened_at(7),)

    def test_max_magnitude(self) -> None:
        path = HDPath.parse("m/2147483647'/2147483647")
        assert path.encoded() == (0xFFFFFFFF, 0x7FFFFFFF)

    def test_deep_path(self) -> None:
        text = "m/" + "/".join(str(i) for i in range(40))
        assert len(HDPath.parse(text)) == 40


class TestParseErrors:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "x/44'/0'/0'/0/0",
            "M/44'/0'/0'/0/0",
            "/44'/0'",
            "44'/0'",
            " m/0",
        ],
    )
    def test_bad_root(self, text: str) -> None:
        with pytest.raises(ParseError):
            HDPath.parse(text)

    @pytest.mark.parametrize("text", ["m/", "m//1", "m/1/", "m/'", "m/h"])
    def test_empty_segment(self, text: str) -> None:
        with pytest.raises(ParseError, match="Empty"):
            HDPath.parse(text)

    @pytest.mark.parametrize(
        "text",
        ["m/a", "m/1a", "m/-1", "m/+1", "m/1.5", "m/44H", "m/44''", "m/44'h", "m/4 4", "m/0x10"],
    )
    def test_invalid_segment(self, text: str) -> None:
        with pytest.raises(ParseError, match="Invalid"):
            HDPath.parse(text)

    def test_non_ascii_digits(self) -> None:
        with pytest.raises(ParseError):
            HDPath.parse("m/٤٤")

    def test_over_range(self) -> None:
        with pytest.raises(ParseError) as exc:
            HDPath.parse("m/44'/2147483648")
        assert exc.value.segment == "2147483648"
        assert isinstance(exc.value.__cause__, RangeError)

    def test_over_range_hardened(self) -> None:
        with pytest.raises(ParseError):
            HDPath.parse("m/4294967295'")

    def test_error_carries_input(self) -> None:
        with pytest.raises(ParseError) as exc:
            HDPath.parse("m/44'/zz")
        assert exc.value.text == "m/44'/zz"
        assert exc.value.segment == "zz"
        assert exc.value.code == "parse"

    def test_is_recoverable(self) -> None:
        with pytest.raises(HDPathError):
            HDPath.parse("nope")


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestFormat:
    def test_canonical_round_trip(self) -> None:
        for text in ("m", "m/0", "m/44'/0'/0'/0/0", "m/84'/1'/2'/1/999", "m/0'/1/2'/3"):
            assert str(HDPath.parse(text)) == text

    def test_apostrophe_is_canonical(self) -> None:
        assert str(HDPath.parse("m/44h/60h/0h/0/1")) == "m/44'/60'/0'/0/1"

    def test_repr(self) -> None:
        assert repr(HDPath.parse("m/1'")) == "HDPath(\"m/1'\")"


# ---------------------------------------------------------------------------
# Construction and sequence access
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_from_list(self) -> None:
        path = HDPath([PathValue(1), PathValue.hardened_at(2)])
        assert path.values == (PathValue(1), PathValue.hardened_at(2))
        assert str(path) == "m/1/2'"

    def test_empty(self) -> None:
        assert HDPath() == HDPath.parse("m")

    def test_rejects_raw_ints(self) -> None:
        with pytest.raises(TypeError):
            HDPath([1, 2])  # type: ignore[list-item]

    def test_from_encoded(self) -> None:
        path = HDPath.from_encoded([0x8000002C, 0x80000000, 0x80000000, 0, 7])
        assert str(path) == "m/44'/0'/0'/0/7"

    def test_child(self) -> None:
        base = HDPath.parse("m/44'/0'")
        child = base.child(PathValue.hardened_at(3))
        assert str(child) == "m/44'/0'/3'"
        assert str(base) == "m/44'/0'"

    def test_extend(self) -> None:
        path = HDPath.parse("m/84'").extend([PathValue.hardened_at(0), PathValue(1)])
        assert str(path) == "m/84'/0'/1"

    def test_hashable(self) -> None:
        assert len({HDPath.parse("m/1'"), HDPath.parse("m/1h"), HDPath.parse("m/1")}) == 2


class TestSequenceAccess:
    def test_len_iter_index(self) -> None:
        path = HDPath.parse("m/44'/0'/7")
        assert len(path) == 3
        assert list(path) == list(path.values)
        assert path[2] == PathValue(7)
        assert path[-1] == PathValue(7)

    def test_get(self) -> None:
        path = HDPath.parse("m/44'/0'")
        assert path.get(0) == PathValue.hardened_at(44)
        assert path.get(2) is None
        assert path.get(-1) is None

    def test_encoded(self) -> None:
        assert HDPath.parse("m/44'/0'/0'/0/1").encoded() == (
            0x8000002C,
            0x80000000,
            0x80000000,
            0,
            1,
        )

    def test_to_bytes(self) -> None:
        data = HDPath.parse("m/44'/0'/1").to_bytes()
        assert data == bytes.fromhex("03" "8000002c" "80000000" "00000001")

    def test_to_bytes_empty(self) -> None:
        assert HDPath().to_bytes() == b"\x00"

    def test_to_bytes_too_deep(self) -> None:
        path = HDPath([PathValue(0)] * 256)
        with pytest.raises(ShapeError) as exc_info:
            path.to_bytes()
        assert exc_info.value.maximum is True
        assert exc_info.value.message == "Expected at most 255 path segments, got 256"

    def test_to_bytes_max_depth(self) -> None:
        encoded = HDPath([PathValue(0)] * 255).to_bytes()
        assert encoded[0] == 255
        assert len(encoded) == 1 + 255 * 4

    def test_to_hd_path_copy(self) -> None:
        path = HDPath.parse("m/1/2")
        assert path.to_hd_path() == path
