# ABOUTME: Query cascade that turns a partial ExtractedRecord into catalog candidates.
# ABOUTME: Tries increasingly permissive queries in order and stops at the first non-empty one.

import logging
from dataclasses import dataclass, field
from enum import Enum

from shelfscan.identify.http import FetchError
from shelfscan.identify.provider import SearchFn
from shelfscan.identify.types import CandidateRecord, ExtractedRecord

logger = logging.getLogger(__name__)

# Number of leading title words kept for the broad fallback query.
_BROAD_QUERY_WORDS = 3


class CascadeState(Enum):
    PENDING = "pending"
    QUERY_ISSUED = "query_issued"
    STOP_FOUND = "stop_found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class CascadeQuery:
    """One step of the cascade: the rule that produced it and the query text."""

    rule: str
    query: str


@dataclass
class CascadeResult:
    """Outcome of one cascade run."""

    state: CascadeState
    candidates: list[CandidateRecord] = field(default_factory=list)
    issued: list[CascadeQuery] = field(default_factory=list)
    matched: CascadeQuery | None = None


def _present(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def isbn_query(isbn: str) -> str:
    return f"isbn:{isbn}"


def phrase_query(value: str) -> str:
    return f'"{value}"'


def author_query(author: str) -> str:
    return f'inauthor:"{author}"'


def publisher_query(publisher: str) -> str:
    return f'inpublisher:"{publisher}"'


def broad_query(title: str) -> str:
    """First three whitespace-delimited words of the title, unquoted."""
    return " ".join(title.split()[:_BROAD_QUERY_WORDS])


def plan_queries(record: ExtractedRecord) -> list[CascadeQuery]:
    """Build the ordered, field-driven queries for a record.

    ISBN always comes first. Title and author combine into one query when
    both are known; otherwise whichever one is present gets its own. A
    publisher query, when possible, is always tried last. The broad title
    fallback is not included here; see fallback_query().
    """
    title = _present(record.title)
    author = _present(record.author)
    isbn = _present(record.isbn)
    publisher = _present(record.publisher)

    queries: list[CascadeQuery] = []
    if isbn:
        queries.append(CascadeQuery("isbn", isbn_query(isbn)))

    if title and author:
        queries.append(
            CascadeQuery("title_author", f"{phrase_query(title)} {phrase_query(author)}")
        )
    elif title:
        queries.append(CascadeQuery("title", phrase_query(title)))
    elif author:
        queries.append(CascadeQuery("author", author_query(author)))

    if publisher:
        queries.append(CascadeQuery("publisher", publisher_query(publisher)))

    return queries


def fallback_query(record: ExtractedRecord) -> CascadeQuery | None:
    """The broad query tried once everything else came back empty, if a title exists."""
    title = _present(record.title)
    if not title:
        return None
    return CascadeQuery("broad", broad_query(title))


class QueryCascade:
    """Drives a search function through the planned queries for one scan.

    States move PENDING -> QUERY_ISSUED (once per step) and end in either
    STOP_FOUND or EXHAUSTED. Later queries are only issued when every earlier
    one came back empty, and results are never merged across steps.
    """

    def __init__(self, search: SearchFn) -> None:
        self._search = search
        self.state = CascadeState.PENDING

    def run(self, record: ExtractedRecord) -> CascadeResult:
        steps = plan_queries(record)
        fallback = fallback_query(record)
        if fallback is not None:
            steps.append(fallback)

        issued: list[CascadeQuery] = []
        for step in steps:
            self.state = CascadeState.QUERY_ISSUED
            issued.append(step)
            items = self._issue(step)
            if items:
                self.state = CascadeState.STOP_FOUND
                logger.info(
                    "Cascade matched on %s query %r (%d candidates)",
                    step.rule,
                    step.query,
                    len(items),
                )
                return CascadeResult(
                    state=self.state, candidates=items, issued=issued, matched=step
                )
            logger.debug("Cascade step %s %r was empty", step.rule, step.query)

        self.state = CascadeState.EXHAUSTED
        logger.info("Cascade exhausted after %d query step(s)", len(issued))
        return CascadeResult(state=self.state, issued=issued)

    def _issue(self, step: CascadeQuery) -> list[CandidateRecord]:
        """Run a single step; a failed search counts as zero results."""
        try:
            response = self._search(step.query)
        except FetchError as exc:
            logger.warning("Cascade step %s %r failed: %s", step.rule, step.query, exc)
            return []
        return list(response.items)


def run_cascade(record: ExtractedRecord, search: SearchFn) -> list[CandidateRecord]:
    """Resolve a record to the first non-empty page of catalog candidates."""
    return QueryCascade(search).run(record).candidates
