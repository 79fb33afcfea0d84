# ABOUTME: ISBN normalization for format-agnostic identifier comparison.
# ABOUTME: Strips separators and detects the ISBN-10 / ISBN-13 cross-format case.

import re

_NON_ISBN_CHARS_RE = re.compile(r"[^0-9X]", re.IGNORECASE)

ISBN10_LENGTH = 10
ISBN13_LENGTH = 13


def normalize_isbn(isbn: str) -> str:
    """Strip everything except digits and the check character X.

    No checksum validation is done; "978-0-451-52493-5" and "9780451524935"
    normalize to the same value. A lowercase x is folded to X.
    """
    return _NON_ISBN_CHARS_RE.sub("", isbn).upper()


def is_cross_format(first: str, second: str) -> bool:
    """Whether one normalized ISBN is 10 characters long and the other 13.

    This is the weaker identifier match: the same title is often listed under
    both an ISBN-10 and an ISBN-13 without the strings ever being equal.
    """
    lengths = {len(normalize_isbn(first)), len(normalize_isbn(second))}
    return lengths == {ISBN10_LENGTH, ISBN13_LENGTH}
