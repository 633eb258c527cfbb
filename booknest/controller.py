"""Recommendation controller: input, fetch and selection state."""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

from booknest.exceptions import SearchError
from booknest.models import SearchQuery, EnrichedBook
from booknest.pipeline import FetchPipeline
from booknest.suggestions import POPULAR_GENRES, RECENT_YEARS, filter_suggestions

logger = logging.getLogger(__name__)

GENRE = "genre"
YEAR = "year"


@dataclass
class RecommendationState:
    """Everything the front end renders."""
    genre: str = ""
    year: str = ""
    genre_suggestions: List[str] = field(default_factory=list)
    year_suggestions: List[str] = field(default_factory=list)
    books: List[EnrichedBook] = field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    selected_id: Optional[str] = None
    
    @property
    def query_ready(self) -> bool:
        return bool(self.genre and self.year)


class RecommendationClient:
    """
    Owns a RecommendationState and exposes its only mutators.
    
    Fetches run as tasks on the running event loop. They start on
    ``submit()``, when genre and year first become both filled in, and when
    a suggestion is picked while both are filled in. Runs are numbered and
    only the newest one may publish; older runs finish their requests but
    their results are dropped.
    """
    
    def __init__(
        self,
        pipeline: FetchPipeline,
        genres: Sequence[str] = POPULAR_GENRES,
        years: Sequence[int] = RECENT_YEARS
    ):
        self.pipeline = pipeline
        self.state = RecommendationState()
        self.genres = genres
        self.years = years
        self._generation = 0
        self._pending: Set[asyncio.Task] = set()
    
    # Input
    
    def set_genre(self, text: str) -> Optional[asyncio.Task]:
        """Update the genre field; returns the fetch task if one was started."""
        was_ready = self.state.query_ready
        self.state.genre = text
        self.state.genre_suggestions = filter_suggestions(text, self.genres)
        return self._trigger_on_edge(was_ready)
    
    def set_year(self, text: str) -> Optional[asyncio.Task]:
        """Update the year field; returns the fetch task if one was started."""
        was_ready = self.state.query_ready
        self.state.year = text
        self.state.year_suggestions = filter_suggestions(text, self.years)
        return self._trigger_on_edge(was_ready)
    
    def select_suggestion(self, field_name: str, value) -> Optional[asyncio.Task]:
        """Set ``field_name`` to the chosen suggestion and close its list."""
        if field_name == GENRE:
            self.state.genre = str(value)
            self.state.genre_suggestions = []
        elif field_name == YEAR:
            self.state.year = str(value)
            self.state.year_suggestions = []
        else:
            raise ValueError(f"Unknown field: {field_name}")
        
        # Picking a suggestion completes the field
        if self.state.query_ready:
            return self._start()
        return None
    
    def submit(self) -> asyncio.Task:
        """Start a fetch for the current fields, whatever they contain."""
        return self._start()
    
    # Selection
    
    def toggle(self, book: EnrichedBook):
        """Expand ``book``, or collapse it if it is already expanded."""
        if self.state.selected_id == book.id:
            self.state.selected_id = None
        else:
            self.state.selected_id = book.id
    
    @property
    def selected_book(self) -> Optional[EnrichedBook]:
        for book in self.state.books:
            if book.id == self.state.selected_id:
                return book
        return None
    
    # Fetching
    
    async def wait_idle(self):
        """Wait until every started fetch has settled."""
        while True:
            pending = [task for task in self._pending if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending)
    
    def _trigger_on_edge(self, was_ready: bool) -> Optional[asyncio.Task]:
        if self.state.query_ready and not was_ready:
            return self._start()
        return None
    
    def _start(self) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        
        self._generation += 1
        generation = self._generation
        query = SearchQuery(genre=self.state.genre, year=self.state.year)
        
        self.state.loading = True
        self.state.error = None
        
        task = loop.create_task(self._run(query, generation))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task
    
    def _is_current(self, generation: int) -> bool:
        return generation == self._generation
    
    async def _run(self, query: SearchQuery, generation: int):
        logger.info(f"Fetch #{generation}: genre={query.genre!r} year={query.year!r}")
        try:
            books = await self.pipeline.run(query)
        except SearchError as e:
            if self._is_current(generation):
                # Previous results stay visible under the error
                self.state.error = e.message
        else:
            if self._is_current(generation):
                self.state.books = books
                if self.selected_book is None:
                    self.state.selected_id = None
        finally:
            if self._is_current(generation):
                self.state.loading = False
            else:
                logger.debug(f"Fetch #{generation} superseded by #{self._generation}; discarded")
