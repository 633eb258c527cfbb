"""Data models for queries and books."""
from dataclasses import dataclass, field
from typing import Optional, List


@dataclass(frozen=True)
class SearchQuery:
    """Genre and year filters, both free text."""
    genre: str
    year: str


@dataclass
class BookSummary:
    """A single entry from the search response."""
    id: str
    title: str
    authors: List[str] = field(default_factory=list)
    first_publish_year: Optional[int] = None
    cover_id: Optional[int] = None


@dataclass
class BookDetail:
    """Fields taken from the work-detail lookup."""
    page_count: Optional[int]
    description: str


@dataclass
class EnrichedBook:
    """Search summary plus whatever enrichment succeeded."""
    id: str
    title: str
    authors: List[str] = field(default_factory=list)
    first_publish_year: Optional[int] = None
    cover_id: Optional[int] = None
    page_count: Optional[int] = None
    description: Optional[str] = None
    
    @classmethod
    def from_summary(
        cls,
        summary: BookSummary,
        detail: Optional[BookDetail] = None
    ) -> "EnrichedBook":
        """Merge a summary with its detail; a missing detail leaves it un-enriched."""
        book = cls(
            id=summary.id,
            title=summary.title,
            authors=list(summary.authors),
            first_publish_year=summary.first_publish_year,
            cover_id=summary.cover_id
        )
        if detail is not None:
            book.page_count = detail.page_count
            book.description = detail.description
        return book
    
    @property
    def is_enriched(self) -> bool:
        return self.description is not None
    
    @property
    def authors_str(self) -> str:
        """Format authors as comma-separated string."""
        return ", ".join(self.authors) if self.authors else "Unknown Author"
    
    @property
    def published_str(self) -> str:
        return str(self.first_publish_year) if self.first_publish_year else "Unknown"
