# ABOUTME: Unit tests for ISBN normalization and cross-format detection.
# ABOUTME: Validates separator stripping, X check digits, and 10/13 length pairing.

import pytest

from shelfscan.identify.isbn import is_cross_format, normalize_isbn


class TestNormalizeIsbn:
    """Tests for normalize_isbn."""

    def test_hyphens_and_spaces_match_plain_form(self) -> None:
        """A hyphenated ISBN normalizes to the same value as its bare digits."""
        assert normalize_isbn("978-0-451-52493-5") == normalize_isbn("9780451524935")
        assert normalize_isbn("978 0 451 52493 5") == "9780451524935"

    def test_keeps_check_character_x(self) -> None:
        """The X check character survives; lowercase x is folded to upper."""
        assert normalize_isbn("0-8044-2957-X") == "080442957X"
        assert normalize_isbn("0-8044-2957-x") == "080442957X"

    def test_strips_prefix_text(self) -> None:
        """Labels like 'ISBN:' are stripped along with separators."""
        assert normalize_isbn("ISBN: 0451524934") == "0451524934"

    def test_empty_string(self) -> None:
        assert normalize_isbn("") == ""

    def test_no_checksum_validation(self) -> None:
        """Syntactically plausible but invalid checksums are kept as-is."""
        assert normalize_isbn("123-456-789-0") == "1234567890"


class TestIsCrossFormat:
    """Tests for is_cross_format."""

    @pytest.mark.parametrize(
        ("first", "second", "expected"),
        [
            ("9780451524935", "0451524934", True),
            ("0451524934", "9780451524935", True),
            ("978-0-451-52493-5", "0-451-52493-4", True),
            ("9780451524935", "9780451524935", False),
            ("0451524934", "0451524934", False),
            ("12345", "9780451524935", False),
        ],
    )
    def test_length_pairing(self, first: str, second: str, expected: bool) -> None:
        assert is_cross_format(first, second) is expected
