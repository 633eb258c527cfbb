"""Async HTTP client for the Open Library search and work APIs."""
import asyncio
import httpx
from typing import Optional, Dict, Any
import logging

from booknest.exceptions import SearchError, DetailError

logger = logging.getLogger(__name__)


class AsyncOpenLibraryClient:
    """Async client for book searches and per-work detail lookups."""
    
    SEARCH_URL = "https://openlibrary.org/search.json"
    BASE_URL = "https://openlibrary.org"
    
    def __init__(
        self,
        search_url: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 10,
        max_concurrent: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize async client.
        
        Args:
            search_url: Search endpoint (defaults to Open Library)
            base_url: Base URL that work keys are appended to
            timeout: Request timeout in seconds
            max_concurrent: Cap on in-flight detail requests; None for no cap
            transport: Optional httpx transport (used by tests)
        """
        self.search_url = search_url or self.SEARCH_URL
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.semaphore = asyncio.Semaphore(max_concurrent) if max_concurrent else None
        
        # One pooled client for every request; moved works answer with 3xx
        self.client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            follow_redirects=True
        )
    
    async def search(self, genre: str, year: str) -> Dict[str, Any]:
        """
        Search for books by genre text and first publication year.
        
        Args:
            genre: Free-text query
            year: Value for ``first_publish_year``, passed through unvalidated
            
        Returns:
            Parsed JSON response containing a ``docs`` list
            
        Raises:
            SearchError: On network failure, non-2xx status or malformed payload
        """
        params = {"q": genre, "first_publish_year": year}
        
        try:
            logger.info(f"Search request: q={genre!r} first_publish_year={year!r}")
            response = await self.client.get(self.search_url, params=params)
            
            if not response.is_success:
                logger.error(f"Search returned status {response.status_code}")
                raise SearchError()
            
            payload = response.json()
        
        except httpx.HTTPError as e:
            logger.error(f"Search request failed: {e}")
            raise SearchError() from e
        except ValueError as e:
            logger.error(f"Search response is not JSON: {e}")
            raise SearchError() from e
        
        if not isinstance(payload, dict) or not isinstance(payload.get("docs"), list):
            logger.error("Search response has no docs list")
            raise SearchError()
        
        return payload
    
    def detail_url(self, book_id: str) -> str:
        """Work keys look like ``/works/OL123W``; the detail document is ``<key>.json``."""
        if not book_id.startswith("/"):
            book_id = f"/{book_id}"
        return f"{self.base_url}{book_id}.json"
    
    async def get_detail(self, book_id: str) -> Dict[str, Any]:
        """
        Fetch the detail document for one work.
        
        Raises:
            DetailError: On any failure for this work
        """
        url = self.detail_url(book_id)
        
        if self.semaphore is None:
            return await self._get_detail(book_id, url)
        
        async with self.semaphore:
            return await self._get_detail(book_id, url)
    
    async def _get_detail(self, book_id: str, url: str) -> Dict[str, Any]:
        try:
            logger.debug(f"Detail request: {url}")
            response = await self.client.get(url)
            
            if not response.is_success:
                raise DetailError(book_id, f"status {response.status_code}")
            
            payload = response.json()
        
        except httpx.HTTPError as e:
            raise DetailError(book_id, str(e)) from e
        except ValueError as e:
            raise DetailError(book_id, "response is not JSON") from e
        
        if not isinstance(payload, dict):
            raise DetailError(book_id, "unexpected payload")
        
        return payload
    
    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
    
    async def __aenter__(self):
        """Async context manager entry."""
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
