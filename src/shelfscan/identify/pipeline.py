# ABOUTME: End-to-end identification: cascade search, relevance ranking, duplicate annotation.
# ABOUTME: The single entry point the CLI uses to turn an ExtractedRecord into ranked picks.

import logging
from collections.abc import Sequence

from shelfscan.identify.cascade import QueryCascade
from shelfscan.identify.duplicates import IdentifiedCandidate, annotate_duplicates
from shelfscan.identify.provider import SearchFn
from shelfscan.identify.ranking import rank_candidates
from shelfscan.identify.types import ExistingLibraryEntry, ExtractedRecord

logger = logging.getLogger(__name__)


def identify(
    extracted: ExtractedRecord,
    search: SearchFn,
    library: Sequence[ExistingLibraryEntry] = (),
) -> list[IdentifiedCandidate]:
    """Resolve an extracted record to ranked, library-annotated candidates.

    An empty list means nothing could be identified; the caller should fall
    back to manual entry.
    """
    if extracted.is_empty:
        logger.info("Nothing extracted; skipping catalog search")
        return []

    result = QueryCascade(search).run(extracted)
    ranked = rank_candidates(extracted, result.candidates)
    return annotate_duplicates(ranked, library)
