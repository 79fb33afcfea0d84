# ABOUTME: Ranks catalog candidates by match score against the extracted record.
# ABOUTME: Stable descending sort; the score is dropped from the returned records.

from collections.abc import Iterable

from shelfscan.identify.scoring import score_candidate
from shelfscan.identify.types import CandidateRecord, ExtractedRecord, ScoredCandidate


def score_candidates(
    extracted: ExtractedRecord, candidates: Iterable[CandidateRecord]
) -> list[ScoredCandidate]:
    """Score every candidate, keeping the search service's order."""
    return [ScoredCandidate(c, score_candidate(extracted, c)) for c in candidates]


def rank_scored(
    extracted: ExtractedRecord, candidates: Iterable[CandidateRecord]
) -> list[ScoredCandidate]:
    """Scored candidates, best first. Ties keep their original relative order."""
    # list.sort is stable, including with reverse=True
    scored = score_candidates(extracted, candidates)
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored


def rank_candidates(
    extracted: ExtractedRecord, candidates: Iterable[CandidateRecord]
) -> list[CandidateRecord]:
    """Sort candidates by relevance to the extracted record, best first."""
    return [s.candidate for s in rank_scored(extracted, candidates)]
