"""Parse and normalize Open Library API responses."""
import logging
from typing import Dict, Any, List, Optional
from booknest.models import BookSummary, BookDetail

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description available."


def _int_or_none(value: Any) -> Optional[int]:
    # bool is an int subclass; Open Library never means a flag here
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def parse_summary(doc: Any) -> Optional[BookSummary]:
    """
    Parse a single entry of the search response ``docs`` array.
    
    Args:
        doc: One search result document
        
    Returns:
        BookSummary, or None if the document is not an object or has no work key
    """
    if not isinstance(doc, dict):
        logger.warning(f"Skipping malformed search result: {doc!r}")
        return None
    
    book_id = doc.get("key")
    if not book_id or not isinstance(book_id, str):
        logger.warning(f"Skipping search result without a key: {doc.get('title')!r}")
        return None
    
    authors = doc.get("author_name") or []
    if isinstance(authors, str):
        authors = [authors]
    
    return BookSummary(
        id=book_id,
        title=doc.get("title") or "Unknown Title",
        authors=[a for a in authors if isinstance(a, str)],
        first_publish_year=_int_or_none(doc.get("first_publish_year")),
        cover_id=_int_or_none(doc.get("cover_i"))
    )


def parse_search_response(response_json: Dict[str, Any], limit: int = 10) -> List[BookSummary]:
    """
    Parse a search response, keeping at most the first ``limit`` documents.
    
    Args:
        response_json: Complete search response JSON
        limit: Number of leading documents to consume
        
    Returns:
        Summaries in server order
    """
    docs = response_json.get("docs") or []
    summaries = []
    
    for doc in docs[:limit]:
        summary = parse_summary(doc)
        if summary:
            summaries.append(summary)
    
    return summaries


def normalize_description(raw: Any) -> str:
    """Reduce a string or ``{"value": ...}`` description to plain text."""
    if isinstance(raw, dict):
        raw = raw.get("value")
    if isinstance(raw, str) and raw:
        return raw
    return NO_DESCRIPTION


def parse_detail(response_json: Dict[str, Any]) -> BookDetail:
    """Parse a work-detail payload into the enrichment fields."""
    return BookDetail(
        page_count=_int_or_none(response_json.get("number_of_pages")),
        description=normalize_description(response_json.get("description"))
    )
