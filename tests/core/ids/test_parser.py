"""
Tests for ID parser and validator.

These tests verify that the parser splits prefix, hash and child path
correctly, disambiguates hyphenated prefixes, and rejects malformed input.
"""

import pytest

from terseid.core.ids import (
    InvalidIdError,
    PrefixMismatchError,
    is_valid_hash_segment,
    is_valid_id_format,
    normalize_id,
    parse_id,
    render_id,
    validate_prefix,
)


class TestParseId:
    """Tests for parse_id."""

    def test_simple_id(self) -> None:
        """Test a plain prefix-hash ID."""
        parsed = parse_id("bd-a7x")
        assert parsed.prefix == "bd"
        assert parsed.hash == "a7x"
        assert parsed.child_path == ()

    def test_uppercase_is_lowercased(self) -> None:
        """Input is lowercased before parsing."""
        parsed = parse_id("BD-A7X")
        assert parsed.prefix == "bd"
        assert parsed.hash == "a7x"

    def test_child_path_scenario(self) -> None:
        """bd-a7x3q9.1.3 has two child segments."""
        parsed = parse_id("bd-a7x3q9.1.3")
        assert parsed.prefix == "bd"
        assert parsed.hash == "a7x3q9"
        assert parsed.child_path == (1, 3)
        assert parsed.depth() == 2
        assert parsed.parent() == "bd-a7x3q9.1"

    def test_hyphenated_prefix(self) -> None:
        """The last valid dash separates prefix from hash."""
        parsed = parse_id("my-proj-a7x3q9")
        assert parsed.prefix == "my-proj"
        assert parsed.hash == "a7x3q9"

    def test_hyphenated_prefix_multiple_dashes(self) -> None:
        """Test prefixes with several dashes."""
        parsed = parse_id("a-b-c-d-k2m.4")
        assert parsed.prefix == "a-b-c-d"
        assert parsed.hash == "k2m"
        assert parsed.child_path == (4,)

    def test_three_letter_prefix_word_before_hash(self) -> None:
        """A 3-letter hash-looking suffix is taken as the hash."""
        parsed = parse_id("my-app-abc")
        assert parsed.prefix == "my-app"
        assert parsed.hash == "abc"

    def test_max_u32_child(self) -> None:
        """Child segments may use the full unsigned 32-bit range."""
        parsed = parse_id("bd-a7x.4294967295")
        assert parsed.child_path == (4294967295,)

    def test_zero_child_segment(self) -> None:
        """Zero is a valid child segment."""
        assert parse_id("bd-a7x.0").child_path == (0,)

    def test_many_child_segments(self) -> None:
        """Test arbitrary nesting depth."""
        parsed = parse_id("bd-a7x.1.2.3.4.5.6.7.8")
        assert parsed.child_path == (1, 2, 3, 4, 5, 6, 7, 8)

    @pytest.mark.parametrize("id_str", ["bd-abc", "bd-123", "bd-a1b", "bd-zzz"])
    def test_three_char_hash_any_base36(self, id_str: str) -> None:
        """3-char hashes accept any base36 combination."""
        assert parse_id(id_str).hash == id_str[3:]

    @pytest.mark.parametrize("id_str", ["bd-abcd", "bd-hello", "bd-proj"])
    def test_long_hash_requires_digit(self, id_str: str) -> None:
        """4+ char hashes without a digit are rejected."""
        with pytest.raises(InvalidIdError):
            parse_id(id_str)

    def test_all_digit_hashes(self) -> None:
        """All-digit hashes are fine at any length."""
        assert parse_id("bd-123").hash == "123"
        assert parse_id("bd-1234").hash == "1234"

    def test_twelve_char_hash(self) -> None:
        """12 characters is the longest hash."""
        assert parse_id("bd-a1b2c3d4e5f6").hash == "a1b2c3d4e5f6"

    def test_thirteen_char_hash_rejected(self) -> None:
        """Hashes longer than 12 characters are rejected."""
        with pytest.raises(InvalidIdError):
            parse_id("bd-a1b2c3d4e5f6g")

    @pytest.mark.parametrize(
        "id_str",
        [
            "",
            "bd",
            "a7x3q9",
            "bd-",
            "-a7x",
            "bd-a7",
            "bd-a7x!",
            "bd-a_x",
            "bd-a x",
            "bd-a-x",
            "bd-a7x.1-abc",
            "bd-a7x.-abc",
            "bd.7-k2m",
            "b d-a7x",
            "bd_x-a7x",
            "--a7x",
        ],
    )
    def test_invalid_formats(self, id_str: str) -> None:
        """Test that malformed IDs raise InvalidIdError."""
        with pytest.raises(InvalidIdError) as exc_info:
            parse_id(id_str)
        assert exc_info.value.id == id_str

    @pytest.mark.parametrize(
        "id_str",
        ["bd-a7x.", "bd-a7x.abc", "bd-a7x.1..2", "bd-a7x.-1", "bd-a7x.+1", "bd-a7x.4294967296"],
    )
    def test_invalid_child_segments(self, id_str: str) -> None:
        """Child segments must be unsigned 32-bit integers."""
        with pytest.raises(InvalidIdError):
            parse_id(id_str)

    def test_invalid_id_is_value_error(self) -> None:
        """InvalidIdError can be caught as ValueError."""
        with pytest.raises(ValueError, match="invalid ID format: nope"):
            parse_id("nope")


class TestRoundTrip:
    """parse_id(render_id(...)) returns the same parts."""

    @pytest.mark.parametrize(
        "prefix,hash,child_path",
        [
            ("bd", "a7x", ()),
            ("bd", "a7x3q9", (1, 3)),
            ("my-proj", "a7x3q9", ()),
            ("my-proj", "k2m", (0, 4294967295)),
        ],
    )
    def test_roundtrip(self, prefix: str, hash: str, child_path: tuple[int, ...]) -> None:
        """Rendering then parsing is lossless."""
        rendered = render_id(prefix, hash, child_path)
        parsed = parse_id(rendered)
        assert (parsed.prefix, parsed.hash, parsed.child_path) == (prefix, hash, child_path)
        assert parsed.to_id_string() == rendered

    def test_roundtrip_uppercase_normalizes(self) -> None:
        """Uppercase input renders in normalized form."""
        assert parse_id("BD-A7X.2").to_id_string() == normalize_id("BD-A7X.2")


class TestIsValidHashSegment:
    """Tests for is_valid_hash_segment."""

    def test_valid(self) -> None:
        """Test accepted segments."""
        for segment in ["abc", "a7x", "a7x3q9", "0000", "a1b2c3d4e5f6"]:
            assert is_valid_hash_segment(segment) is True

    def test_invalid(self) -> None:
        """Test rejected segments."""
        for segment in ["", "ab", "abcd", "A7X", "a7x!", "a1b2c3d4e5f6g"]:
            assert is_valid_hash_segment(segment) is False


class TestIsValidIdFormat:
    """Tests for is_valid_id_format."""

    def test_valid(self) -> None:
        """Test that valid IDs return True."""
        assert is_valid_id_format("bd-a7x") is True
        assert is_valid_id_format("BD-A7X") is True
        assert is_valid_id_format("my-proj-a7x3q9.1") is True

    def test_invalid(self) -> None:
        """Test that invalid IDs return False without raising."""
        assert is_valid_id_format("") is False
        assert is_valid_id_format("bd-") is False
        assert is_valid_id_format("bd-a7x.x") is False
        assert is_valid_id_format("bd-a7x.1-abc") is False
        assert is_valid_id_format("no dashes here") is False


class TestNormalizeId:
    """Tests for normalize_id."""

    def test_lowercases(self) -> None:
        """Test lowercasing."""
        assert normalize_id("BD-A7X") == "bd-a7x"
        assert normalize_id("Bd-A7x") == "bd-a7x"
        assert normalize_id("bd-a7x") == "bd-a7x"

    def test_does_not_validate(self) -> None:
        """Invalid IDs are lowercased, not rejected."""
        assert normalize_id("NOT AN ID!") == "not an id!"


class TestValidatePrefix:
    """Tests for validate_prefix."""

    def test_expected_match(self) -> None:
        """The expected prefix passes and returns the parsed ID."""
        parsed = validate_prefix("bd-a7x", "bd")
        assert parsed.hash == "a7x"

    def test_allowed_match(self) -> None:
        """A prefix from the allowed list passes."""
        assert validate_prefix("tk-a7x", "bd", ["tk", "ops"]).prefix == "tk"

    def test_mismatch_scenario(self) -> None:
        """tk-r2m does not belong to bd."""
        with pytest.raises(PrefixMismatchError) as exc_info:
            validate_prefix("tk-r2m", "bd", ["bd"])
        assert exc_info.value.expected == "bd"
        assert exc_info.value.found == "tk"
        assert str(exc_info.value) == "prefix mismatch: expected 'bd', found 'tk'"

    def test_invalid_id(self) -> None:
        """Unparseable IDs raise InvalidIdError, not a mismatch."""
        with pytest.raises(InvalidIdError):
            validate_prefix("garbage", "bd")

    def test_hyphenated_prefix(self) -> None:
        """Hyphenated prefixes compare whole."""
        assert validate_prefix("my-proj-a7x3q9", "my-proj").prefix == "my-proj"
        with pytest.raises(PrefixMismatchError):
            validate_prefix("my-proj-a7x3q9", "proj")

    def test_case_insensitive(self) -> None:
        """IDs and expected prefixes are compared lowercased."""
        assert validate_prefix("BD-A7X", "BD").prefix == "bd"
