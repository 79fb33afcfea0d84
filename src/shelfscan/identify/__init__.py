# ABOUTME: Identification package: resolves noisy extracted book data to catalog candidates.
# ABOUTME: Exports the record types and the main pipeline operations.

from shelfscan.identify.cascade import QueryCascade, run_cascade
from shelfscan.identify.duplicates import IdentifiedCandidate, is_duplicate
from shelfscan.identify.isbn import normalize_isbn
from shelfscan.identify.pipeline import identify
from shelfscan.identify.provider import CatalogSearch, SearchResponse
from shelfscan.identify.ranking import rank_candidates
from shelfscan.identify.scoring import score_candidate
from shelfscan.identify.types import (
    CandidateRecord,
    ExistingLibraryEntry,
    ExtractedRecord,
    ScoredCandidate,
)

__all__ = [
    "CandidateRecord",
    "CatalogSearch",
    "ExistingLibraryEntry",
    "ExtractedRecord",
    "IdentifiedCandidate",
    "QueryCascade",
    "ScoredCandidate",
    "SearchResponse",
    "identify",
    "is_duplicate",
    "normalize_isbn",
    "rank_candidates",
    "run_cascade",
    "score_candidate",
]
