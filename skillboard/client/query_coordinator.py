"""
Skill board query coordination for interactive clients.

The coordinator owns the board's view state: the raw search input, the
committed (debounced) search string, the selected category and the current
page. Only page changes hit the server. Search and category are applied
locally to the page already fetched, so a match sitting on another page
does not show up until the user pages there.

State machine::

    IDLE -> DEBOUNCING -> FETCHING -> SETTLED | FAILED

A failed fetch keeps the last good page on screen.
"""

from __future__ import annotations

import enum
import logging
import time
from typing import Callable, Iterable, List, Optional

from skillboard.errors import InvalidArgument, SkillBoardError
from skillboard.schemas.overview import PageResult, SkillAggregate

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"
SEARCH_DEBOUNCE_SECONDS = 0.3
DEFAULT_PAGE_SIZE = 10

FetchPage = Callable[[int, int], PageResult]


class CoordinatorState(str, enum.Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    FETCHING = "fetching"
    SETTLED = "settled"
    FAILED = "failed"


class Debouncer:
    """Holds the latest value until ``delay`` seconds pass without a new one."""

    def __init__(self, delay: float = SEARCH_DEBOUNCE_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.delay = delay
        self.clock = clock
        self._value: Optional[str] = None
        self._deadline: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def push(self, value: str) -> None:
        self._value = value
        self._deadline = self.clock() + self.delay

    def cancel(self) -> None:
        self._value = None
        self._deadline = None

    def poll(self) -> Optional[str]:
        """Return the surviving value once its deadline has passed, else None."""
        if self._deadline is None or self.clock() < self._deadline:
            return None
        value = self._value
        self.cancel()
        return value


# ======================
# CLIENT-SIDE FILTERS
# ======================

def matches_search(aggregate: SkillAggregate, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    if needle in aggregate.name.lower():
        return True
    for member in [*aggregate.teachers, *aggregate.learners]:
        if needle in member.name.lower():
            return True
        if member.email and needle in member.email.lower():
            return True
    return False


def matches_category(aggregate: SkillAggregate, category: str) -> bool:
    return category == ALL_CATEGORIES or aggregate.name == category


def filter_aggregates(
    aggregates: Iterable[SkillAggregate],
    search: str = "",
    category: str = ALL_CATEGORIES,
) -> List[SkillAggregate]:
    return [
        aggregate
        for aggregate in aggregates
        if matches_search(aggregate, search) and matches_category(aggregate, category)
    ]


# ======================
# COORDINATOR
# ======================

class QueryCoordinator:
    def __init__(
        self,
        fetch_page: FetchPage,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if page_size <= 0:
            raise InvalidArgument("page_size must be a positive integer")
        self.fetch_page = fetch_page
        self.page_size = page_size
        self._debouncer = Debouncer(debounce_seconds, clock)

        self.state = CoordinatorState.IDLE
        self.search_input = ""
        self.search = ""
        self.category = ALL_CATEGORIES
        self.page = 1
        self.data: Optional[PageResult] = None
        self.error: Optional[SkillBoardError] = None

    # ----- search & category -----

    def type_search(self, text: str) -> None:
        self.search_input = text
        self._debouncer.push(text)
        self.state = CoordinatorState.DEBOUNCING

    def tick(self) -> bool:
        """Commit the debounced search if its window has elapsed."""
        committed = self._debouncer.poll()
        if committed is None:
            return False
        self.search = committed
        self._settle_view()
        return True

    def select_category(self, category: str) -> None:
        self.category = category or ALL_CATEGORIES

    def clear_filters(self) -> None:
        # Page position is deliberately left alone.
        self._debouncer.cancel()
        self.search_input = ""
        self.search = ""
        self.category = ALL_CATEGORIES
        if self.state is CoordinatorState.DEBOUNCING:
            self._settle_view()

    # ----- paging -----

    def load(self) -> Optional[PageResult]:
        return self.go_to_page(self.page)

    def go_to_page(self, page: int) -> Optional[PageResult]:
        """
        Fetch ``page``. On failure the previous page stays displayed and the
        error is kept on ``self.error``; calling again retries.
        """
        if page < 1:
            raise InvalidArgument("page must be a positive integer")

        previous_state = self.state
        self.state = CoordinatorState.FETCHING
        try:
            result = self.fetch_page(page, self.page_size)
        except SkillBoardError as exc:
            logger.warning("Failed to load skill board page %s: %s", page, exc.message)
            self.error = exc
            self.state = CoordinatorState.FAILED
            if previous_state is CoordinatorState.DEBOUNCING:
                # Keystrokes are still waiting on their commit.
                self.state = CoordinatorState.DEBOUNCING
            return None
        except Exception:
            self.state = previous_state
            raise

        self.data = result
        self.page = page
        self.error = None
        self.state = (
            CoordinatorState.DEBOUNCING if self._debouncer.pending else CoordinatorState.SETTLED
        )
        return result

    def next_page(self) -> Optional[PageResult]:
        if not self.has_next_page:
            return None
        return self.go_to_page(self.page + 1)

    def prev_page(self) -> Optional[PageResult]:
        if not self.has_prev_page:
            return None
        return self.go_to_page(self.page - 1)

    @property
    def has_next_page(self) -> bool:
        return bool(self.data and self.data.pagination.has_next_page)

    @property
    def has_prev_page(self) -> bool:
        return bool(self.data and self.data.pagination.has_prev_page)

    @property
    def total_pages(self) -> int:
        return self.data.pagination.total_pages if self.data else 1

    # ----- view -----

    @property
    def visible_skills(self) -> List[SkillAggregate]:
        if self.data is None:
            return []
        return filter_aggregates(self.data.skills, self.search, self.category)

    def _settle_view(self) -> None:
        if self.error is not None:
            self.state = CoordinatorState.FAILED
        elif self.data is not None:
            self.state = CoordinatorState.SETTLED
        else:
            self.state = CoordinatorState.IDLE
