# ABOUTME: Match scoring between an extracted (noisy) record and a catalog candidate.
# ABOUTME: Additive evidence weights for ISBN, title, author and publisher, with an ISBN short-circuit.

from shelfscan.identify.isbn import is_cross_format
from shelfscan.identify.types import CandidateRecord, ExtractedRecord

# Identifier evidence
ISBN_EXACT_SCORE = 100.0
_WEIGHT_ISBN_CROSS_FORMAT = 90.0

# Title evidence
_WEIGHT_TITLE_EXACT = 40.0
_WEIGHT_TITLE_CONTAINS = 30.0
_WEIGHT_TITLE_OVERLAP_MAX = 25.0
_MIN_OVERLAP_WORD_LENGTH = 3

# Author evidence
_WEIGHT_AUTHOR_EXACT = 30.0
_WEIGHT_AUTHOR_CONTAINS = 20.0
_WEIGHT_AUTHOR_SURNAME = 15.0

# Publisher evidence
_WEIGHT_PUBLISHER = 10.0


def _clean(value: str | None) -> str:
    """Lowercase and trim for comparison; missing values become ""."""
    return value.strip().lower() if value else ""


def _contains_either(a: str, b: str) -> bool:
    return a in b or b in a


def title_overlap(extracted_title: str, candidate_title: str) -> float:
    """Partial title credit from shared words, capped at the overlap maximum.

    Counts extracted words longer than two characters that appear inside, or
    contain, any candidate word. The count is divided by the longer title's
    word count.
    """
    extracted_words = extracted_title.split()
    candidate_words = candidate_title.split()
    if not extracted_words or not candidate_words:
        return 0.0

    common = [
        word
        for word in extracted_words
        if len(word) >= _MIN_OVERLAP_WORD_LENGTH
        and any(_contains_either(word, other) for other in candidate_words)
    ]
    ratio = len(common) / max(len(extracted_words), len(candidate_words))
    return min(_WEIGHT_TITLE_OVERLAP_MAX, ratio * _WEIGHT_TITLE_OVERLAP_MAX)


def _title_score(extracted_title: str, candidate_title: str) -> float:
    if extracted_title == candidate_title:
        return _WEIGHT_TITLE_EXACT
    if _contains_either(extracted_title, candidate_title):
        return _WEIGHT_TITLE_CONTAINS
    return title_overlap(extracted_title, candidate_title)


def _author_score(extracted_author: str, candidate_author: str) -> float:
    if extracted_author == candidate_author:
        return _WEIGHT_AUTHOR_EXACT
    if _contains_either(extracted_author, candidate_author):
        return _WEIGHT_AUTHOR_CONTAINS
    # Surname heuristic: last whitespace-delimited token
    if extracted_author.split()[-1] == candidate_author.split()[-1]:
        return _WEIGHT_AUTHOR_SURNAME
    return 0.0


def score_candidate(extracted: ExtractedRecord, candidate: CandidateRecord) -> float:
    """Score how well a catalog candidate matches the extracted record.

    Pure and deterministic. Identical raw ISBN strings return
    ISBN_EXACT_SCORE immediately; everything else is an independent, additive block:

    - ISBN-10 vs ISBN-13 (cross-format): +90
    - title: exact +40, substring either way +30, else word overlap up to +25
    - author: exact +30, substring either way +20, same surname +15
    - publisher: exact or substring either way +10

    Blocks only apply when both sides carry the field. The result is >= 0
    with no hard ceiling.
    """
    score = 0.0

    if extracted.isbn and candidate.isbn:
        if extracted.isbn == candidate.isbn:
            return ISBN_EXACT_SCORE
        if is_cross_format(extracted.isbn, candidate.isbn):
            score += _WEIGHT_ISBN_CROSS_FORMAT

    extracted_title = _clean(extracted.title)
    candidate_title = _clean(candidate.title)
    if extracted_title and candidate_title:
        score += _title_score(extracted_title, candidate_title)

    extracted_author = _clean(extracted.author)
    candidate_author = _clean(candidate.author)
    if extracted_author and candidate_author:
        score += _author_score(extracted_author, candidate_author)

    extracted_publisher = _clean(extracted.publisher)
    candidate_publisher = _clean(candidate.publisher)
    if (
        extracted_publisher
        and candidate_publisher
        and _contains_either(extracted_publisher, candidate_publisher)
    ):
        score += _WEIGHT_PUBLISHER

    return score
