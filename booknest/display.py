"""Render result lists for the terminal."""
import json
from typing import List, Optional
from tabulate import tabulate

from booknest.config import Config
from booknest.models import EnrichedBook
from booknest.parse import NO_DESCRIPTION


def _truncate(text: str, width: int) -> str:
    return text[:width] + "..." if len(text) > width else text


def book_to_dict(book: EnrichedBook, config: Config) -> dict:
    return {
        "id": book.id,
        "title": book.title,
        "authors": book.authors,
        "first_publish_year": book.first_publish_year,
        "page_count": book.page_count,
        "description": book.description,
        "cover_url": config.cover_url(book.cover_id)
    }


def format_expanded(book: EnrichedBook, config: Config) -> str:
    """Full detail card for the selected book."""
    lines = [
        book.title,
        f"by {book.authors_str}",
        f"Published: {book.published_str}",
    ]
    if book.page_count:
        lines.append(f"Pages: {book.page_count}")
    lines.append(f"Cover: {config.cover_url(book.cover_id)}")
    lines.append("")
    lines.append(book.description or NO_DESCRIPTION)
    return "\n".join(lines)


def format_books(
    books: List[EnrichedBook],
    format_type: str,
    config: Config,
    selected_id: Optional[str] = None
) -> str:
    """Render books in the given format; the selected book is expanded."""
    if format_type == "json":
        return json.dumps([book_to_dict(book, config) for book in books], indent=2)
    
    if format_type == "compact":
        lines = []
        for i, book in enumerate(books, 1):
            marker = "*" if book.id == selected_id else " "
            lines.append(f"{marker}{i}. {book.title} - {book.authors_str}")
        return "\n".join(lines)
    
    headers = ["#", "Title", "Authors", "Published", "Pages", "Description"]
    rows = [
        [
            i,
            _truncate(book.title, 50),
            _truncate(book.authors_str, 30),
            book.published_str,
            book.page_count or "",
            # the expanded card below carries the full text
            _truncate(book.description or NO_DESCRIPTION, 60)
        ]
        for i, book in enumerate(books, 1)
    ]
    output = tabulate(rows, headers=headers, tablefmt="grid")
    
    for book in books:
        if book.id == selected_id:
            output += "\n\n" + format_expanded(book, config)
    return output
