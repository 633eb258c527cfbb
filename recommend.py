#!/usr/bin/env python3
"""BookNest CLI - genre and year book recommendations from Open Library."""
import argparse
import asyncio
import sys
import logging

from booknest.async_client import AsyncOpenLibraryClient
from booknest.config import Config
from booknest.controller import RecommendationClient
from booknest.display import format_books
from booknest.pipeline import FetchPipeline
from booknest.suggestions import POPULAR_GENRES, RECENT_YEARS, filter_suggestions

logger = logging.getLogger(__name__)


async def fetch_recommendations(args, config: Config) -> RecommendationClient:
    """Drive the controller the way the form does: fill both fields, wait for the fetch."""
    async with AsyncOpenLibraryClient(
        search_url=config.SEARCH_URL,
        base_url=config.API_BASE_URL,
        timeout=config.DEFAULT_TIMEOUT,
        max_concurrent=config.MAX_CONCURRENT
    ) as client:
        controller = RecommendationClient(FetchPipeline(client, limit=config.RESULT_LIMIT))
        
        controller.set_genre(args.genre)
        if controller.set_year(args.year) is None:
            # A field is empty, so nothing fired; submit anyway like the button
            controller.submit()
        
        await controller.wait_idle()
        return controller


def choose_book(controller: RecommendationClient, number: int) -> bool:
    """Toggle the 1-based ``number`` result; False if it is out of range."""
    books = controller.state.books
    if not 1 <= number <= len(books):
        print(f"No book #{number}; pick 1-{len(books)}")
        return False
    controller.toggle(books[number - 1])
    return True


def browse(controller: RecommendationClient, args, config: Config):
    """Prompt for result numbers and toggle their expanded view."""
    while True:
        answer = input("\nBook number to expand/collapse (blank to quit): ").strip()
        if not answer:
            return
        if not answer.isdigit():
            print("Please enter a number")
            continue
        if choose_book(controller, int(answer)):
            print("\n" + render(controller, args.format, config))


def render(controller: RecommendationClient, format_type: str, config: Config) -> str:
    return format_books(
        controller.state.books,
        format_type,
        config,
        selected_id=controller.state.selected_id
    )


def search_books(args, config: Config) -> int:
    """Fetch, render and optionally browse recommendations."""
    controller = asyncio.run(fetch_recommendations(args, config))
    state = controller.state
    
    if state.error:
        logger.error(f"❌ {state.error}")
        return 1
    
    if not state.books:
        print("No books found.")
        return 0
    
    if args.expand is not None:
        choose_book(controller, args.expand)
    
    print("\nRecommended Books:\n")
    print(render(controller, args.format, config))
    
    if args.interactive:
        browse(controller, args, config)
    return 0


def show_suggestions(args) -> int:
    """Print the live suggestions for partial input."""
    candidates = POPULAR_GENRES if args.field == "genre" else RECENT_YEARS
    for suggestion in filter_suggestions(args.text, candidates):
        print(suggestion)
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="BookNest - book recommendations by genre and year",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Recommendations as a table
  %(prog)s search --genre Fantasy --year 2020
  
  # Expand the third result
  %(prog)s search --genre Mystery --year 2019 --expand 3
  
  # Browse results interactively
  %(prog)s search --genre Horror --year 2021 --interactive
  
  # Autocomplete suggestions
  %(prog)s suggest genre fan
        """
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    
    # Search command
    search_parser = subparsers.add_parser("search", help="Get recommendations")
    search_parser.add_argument("--genre", default="", help="Genre text")
    search_parser.add_argument("--year", default="", help="First publication year")
    search_parser.add_argument("--format", choices=["table", "json", "compact"], default="table", help="Output format")
    search_parser.add_argument("--expand", type=int, help="Expand result number N")
    search_parser.add_argument("--interactive", action="store_true", help="Toggle results after listing")
    
    # Suggest command
    suggest_parser = subparsers.add_parser("suggest", help="Show autocomplete suggestions")
    suggest_parser.add_argument("field", choices=["genre", "year"], help="Field being typed")
    suggest_parser.add_argument("text", help="Partial input")
    
    args = parser.parse_args()
    
    if not args.command:
        parser.print_help()
        sys.exit(1)
    
    config = Config()
    
    # Configure logging
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    
    try:
        if args.command == "search":
            sys.exit(search_books(args, config))
        
        elif args.command == "suggest":
            sys.exit(show_suggestions(args))
    
    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
