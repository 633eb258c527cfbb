"""Configuration management."""
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


class Config:
    """Application configuration."""
    
    # Open Library endpoints
    SEARCH_URL = os.getenv("OPENLIBRARY_SEARCH_URL", "https://openlibrary.org/search.json")
    API_BASE_URL = os.getenv("OPENLIBRARY_BASE_URL", "https://openlibrary.org")
    COVERS_URL = os.getenv("OPENLIBRARY_COVERS_URL", "https://covers.openlibrary.org/b/id")
    PLACEHOLDER_COVER = os.getenv("PLACEHOLDER_COVER", "/placeholder.svg?height=200&width=130")
    
    # Defaults
    DEFAULT_TIMEOUT = float(os.getenv("DEFAULT_TIMEOUT", "10"))
    RESULT_LIMIT = min(int(os.getenv("RESULT_LIMIT", "10")), 10)  # never more than 10
    MAX_CONCURRENT = _optional_int("MAX_CONCURRENT")  # None means unlimited
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    
    def cover_url(self, cover_id: Optional[int]) -> str:
        """Build the medium cover URL, or the placeholder when there is no cover."""
        if cover_id:
            return f"{self.COVERS_URL}/{cover_id}-M.jpg"
        return self.PLACEHOLDER_COVER
