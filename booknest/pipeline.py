"""Search-then-enrich fetch pipeline."""
import asyncio
import logging
from typing import List

from booknest.async_client import AsyncOpenLibraryClient
from booknest.exceptions import DetailError
from booknest.models import SearchQuery, BookSummary, EnrichedBook
from booknest.parse import parse_search_response, parse_detail

logger = logging.getLogger(__name__)

MAX_RESULTS = 10


class FetchPipeline:
    """
    Runs one search and enriches each result with a detail lookup.
    
    Detail lookups for a run are started together and all of them are
    awaited before the run returns. A failed lookup degrades only its own
    book; a failed search fails the whole run with ``SearchError``.
    """
    
    def __init__(self, client: AsyncOpenLibraryClient, limit: int = 10):
        self.client = client
        self.limit = min(limit, MAX_RESULTS)
    
    async def run(self, query: SearchQuery) -> List[EnrichedBook]:
        """
        Search for ``query`` and enrich the leading results.
        
        Args:
            query: Genre and year filters
            
        Returns:
            Enriched books in search-result order
            
        Raises:
            SearchError: If the search request fails
        """
        response = await self.client.search(query.genre, query.year)
        summaries = parse_search_response(response, self.limit)
        logger.info(f"Search returned {len(summaries)} books; fetching details")
        
        # gather keeps argument order regardless of completion order
        books = await asyncio.gather(*(self._enrich(s) for s in summaries))
        
        enriched = sum(1 for book in books if book.is_enriched)
        logger.info(f"Enriched {enriched}/{len(books)} books")
        return list(books)
    
    async def _enrich(self, summary: BookSummary) -> EnrichedBook:
        try:
            payload = await self.client.get_detail(summary.id)
        except DetailError as e:
            logger.warning(f"Error fetching book details: {e}")
            return EnrichedBook.from_summary(summary)
        
        return EnrichedBook.from_summary(summary, parse_detail(payload))
