"""Shared fixtures: a scripted stand-in for the Open Library client."""
import asyncio
from typing import Dict, List, Optional

import pytest

from booknest.exceptions import SearchError, DetailError


def make_doc(key: str, title: str, **extra) -> dict:
    doc = {"key": key, "title": title}
    doc.update(extra)
    return doc


class FakeOpenLibraryClient:
    """Answers searches by genre and details by work key, with optional delays."""
    
    def __init__(
        self,
        results: Optional[Dict[str, List[dict]]] = None,
        details: Optional[Dict[str, dict]] = None,
        detail_delays: Optional[Dict[str, float]] = None,
        search_delays: Optional[Dict[str, float]] = None,
        failing_details=(),
        failing_searches=()
    ):
        self.results = results or {}
        self.details = details or {}
        self.detail_delays = detail_delays or {}
        self.search_delays = search_delays or {}
        self.failing_details = set(failing_details)
        self.failing_searches = set(failing_searches)
        self.searches = []
        self.completed_details = []
    
    async def search(self, genre: str, year: str) -> dict:
        self.searches.append((genre, year))
        await asyncio.sleep(self.search_delays.get(genre, 0))
        if genre in self.failing_searches:
            raise SearchError()
        return {"docs": self.results.get(genre, [])}
    
    async def get_detail(self, book_id: str) -> dict:
        await asyncio.sleep(self.detail_delays.get(book_id, 0))
        self.completed_details.append(book_id)
        if book_id in self.failing_details:
            raise DetailError(book_id, "status 500")
        return self.details.get(book_id, {})


@pytest.fixture
def fake_client_factory():
    return FakeOpenLibraryClient


@pytest.fixture
def three_books():
    """Search docs A, B, C with matching detail payloads."""
    docs = [
        make_doc("/works/A", "Book A", author_name=["Ann"], first_publish_year=2020, cover_i=1),
        make_doc("/works/B", "Book B", author_name=["Bob", "Bea"], first_publish_year=2020),
        make_doc("/works/C", "Book C", first_publish_year=2020, cover_i=3),
    ]
    details = {
        "/works/A": {"number_of_pages": 320, "description": "About A"},
        "/works/B": {"number_of_pages": 210, "description": {"type": "/type/text", "value": "About B"}},
        "/works/C": {"number_of_pages": 150},
    }
    return docs, details
