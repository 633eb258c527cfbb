"""Fixed candidate lists and autocomplete filtering."""
from datetime import date
from typing import Iterable, List, Optional, Tuple

POPULAR_GENRES: Tuple[str, ...] = (
    "Fiction", "Fantasy", "Science Fiction", "Mystery", "Thriller", "Romance",
    "Historical Fiction", "Non-fiction", "Biography", "Self-help", "Horror",
)


def recent_years(count: int = 10, today: Optional[date] = None) -> Tuple[int, ...]:
    """The ``count`` most recent calendar years, newest first."""
    current = (today or date.today()).year
    return tuple(current - i for i in range(count))


# Computed once at import
RECENT_YEARS: Tuple[int, ...] = recent_years()


def filter_suggestions(text: str, candidates: Iterable) -> List[str]:
    """
    Case-insensitive substring match of ``text`` against ``candidates``.
    
    Args:
        text: Partial user input
        candidates: Fixed candidate values (rendered with ``str``)
        
    Returns:
        Matching candidates as strings, in candidate order; empty for empty input
    """
    if not text:
        return []
    
    needle = text.lower()
    return [str(c) for c in candidates if needle in str(c).lower()]
