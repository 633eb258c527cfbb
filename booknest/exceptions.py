"""Exceptions raised by the Open Library client and fetch pipeline."""
from typing import Optional


SEARCH_FAILED_MESSAGE = "An error occurred while fetching books. Please try again."


class BookNestError(Exception):
    """Base class for all BookNest errors."""


class SearchError(BookNestError):
    """The search request failed; no results can be shown."""

    def __init__(self, message: str = SEARCH_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


class DetailError(BookNestError):
    """A single work-detail request failed."""

    def __init__(self, book_id: str, reason: Optional[str] = None):
        self.book_id = book_id
        self.reason = reason
        message = f"Detail lookup failed for {book_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
