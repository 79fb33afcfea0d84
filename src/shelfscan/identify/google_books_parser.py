# ABOUTME: Parsing functions for Google Books volumes API JSON responses.
# ABOUTME: Converts volume objects into canonical CandidateRecord instances.

from typing import Any

from shelfscan.identify.provider import SearchResponse
from shelfscan.identify.types import UNKNOWN_AUTHOR, CandidateRecord

AUTHOR_DELIMITER = ", "

# Identifier types in order of preference.
_ISBN_TYPES = ("ISBN_13", "ISBN_10")


def select_isbn(identifiers: list[dict[str, Any]] | None) -> str | None:
    """Pick an ISBN from an industryIdentifiers list, preferring ISBN-13."""
    if not identifiers:
        return None
    by_type: dict[str, str] = {}
    for entry in identifiers:
        if not isinstance(entry, dict):
            continue
        id_type = entry.get("type")
        value = entry.get("identifier")
        if id_type in _ISBN_TYPES and value and id_type not in by_type:
            by_type[id_type] = value
    for id_type in _ISBN_TYPES:
        if id_type in by_type:
            return by_type[id_type]
    return None


def parse_publication_year(published_date: str | None) -> int | None:
    """Take the year from the leading four characters of a date string.

    Google Books dates come as "1949", "1949-06" or "1949-06-08". Anything
    whose first four characters are not an integer is dropped.
    """
    if not published_date:
        return None
    try:
        year = int(published_date[:4])
    except ValueError:
        return None
    return year or None


def secure_cover_url(url: str | None) -> str | None:
    """Force an image link onto https."""
    if not url:
        return None
    if url.startswith("http:"):
        return "https:" + url[len("http:") :]
    return url


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _first_category(categories: Any) -> str | None:
    """First non-empty string of a categories list; anything else is ignored."""
    if not isinstance(categories, list):
        return None
    for category in categories:
        if isinstance(category, str) and category:
            return category
    return None


def parse_volume(volume: dict[str, Any]) -> CandidateRecord:
    """Parse a single Google Books volume object into a CandidateRecord.

    The title is taken verbatim. Multiple authors are joined into one string,
    and only the first category becomes the genre.
    """
    info = volume.get("volumeInfo") or {}

    authors = [a for a in info.get("authors") or [] if a]
    categories = info.get("categories")
    page_count = info.get("pageCount")
    image_links = info.get("imageLinks") or {}
    cover = image_links.get("thumbnail") or image_links.get("smallThumbnail")

    return CandidateRecord(
        title=info.get("title") or "",
        author=AUTHOR_DELIMITER.join(authors) or UNKNOWN_AUTHOR,
        isbn=select_isbn(info.get("industryIdentifiers")),
        publisher=info.get("publisher") or None,
        publication_year=parse_publication_year(info.get("publishedDate")),
        description=info.get("description") or None,
        page_count=page_count if _is_positive_int(page_count) else None,
        genre=_first_category(categories),
        cover_url=secure_cover_url(cover),
        external_id=volume.get("id") or None,
    )


def parse_search_response(data: Any) -> SearchResponse:
    """Parse a volumes search response into a SearchResponse.

    A response with no "items" key (Google omits it when nothing matched)
    yields an empty page.
    """
    if not isinstance(data, dict):
        return SearchResponse()

    items = [parse_volume(v) for v in data.get("items") or [] if isinstance(v, dict)]
    try:
        total = int(data.get("totalItems") or 0)
    except (TypeError, ValueError):
        total = len(items)
    return SearchResponse(items=items, total_items=total)
