"""Pagination over fully loaded listing datasets.

The engine keeps a single page cursor per review session and derives the
visible window from whatever dataset the caller supplies at read time. All
window values are recomputed on every read; nothing is cached between calls,
so a filtered or reloaded dataset is picked up as soon as it is passed in.

Datasets may be any sized, sliceable sequence or a pandas object; pandas
objects are sliced positionally through ``.iloc``.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Dict, Generic, Optional, Sequence, Tuple, TypeVar, Union

import pandas as pd

from config import DEFAULT_INITIAL_PAGE, DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")

Dataset = Union[Sequence[Any], pd.DataFrame, pd.Series]


class InvalidPaginationConfig(ValueError):
    """Raised when a page size or initial page is not a positive integer."""


def _require_positive_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidPaginationConfig(f"{name} must be a positive integer, got {value!r}.")
    if value < 1:
        raise InvalidPaginationConfig(f"{name} must be at least 1, got {value}.")
    return int(value)


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the number of pages; an empty dataset has zero pages."""
    if total_rows <= 0:
        return 0
    return math.ceil(total_rows / page_size)


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_slice(page_number: int, page_size: int, total_rows: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page_number - 1) * page_size
    end = min(start + page_size, total_rows)
    return start, end


def slice_dataset(dataset: Dataset, start: int, end: int):
    """Slice a dataset by position, using ``.iloc`` for pandas objects."""
    if isinstance(dataset, (pd.DataFrame, pd.Series)):
        return dataset.iloc[start:end]
    return dataset[start:end]


@dataclass
class PaginationState:
    """Caller-owned cursor for one review session.

    ``page_size`` is fixed for the session; only the navigation functions
    below move ``current_page``.
    """

    current_page: int = DEFAULT_INITIAL_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        self.page_size = _require_positive_int(self.page_size, "page_size")
        self.current_page = _require_positive_int(self.current_page, "initial_page")


@dataclass(frozen=True)
class PageWindow:
    current_page: int
    total_pages: int
    start_index: int
    end_index: int
    total_items: int


@dataclass(frozen=True)
class PageFlags:
    can_go_next: bool
    can_go_prev: bool


@dataclass(frozen=True)
class PageView:
    """Read-only snapshot of one page and the navigation flags around it."""

    current_page: int
    total_pages: int
    page_size: int
    current_data: Any
    can_go_next: bool
    can_go_prev: bool
    start_index: int
    end_index: int
    total_items: int

    def to_dict(self) -> Dict[str, Any]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


def create_pagination_state(
    page_size: Optional[int] = None,
    initial_page: Optional[int] = None,
) -> PaginationState:
    """Start a new session, applying defaults for omitted options."""
    return PaginationState(
        current_page=DEFAULT_INITIAL_PAGE if initial_page is None else initial_page,
        page_size=DEFAULT_PAGE_SIZE if page_size is None else page_size,
    )


def derive_window(dataset: Dataset, state: PaginationState) -> PageWindow:
    """Derive the current window from the dataset length at call time."""
    total_items = len(dataset)
    total_pages = compute_total_pages(total_items, state.page_size)
    # The stored page can outlive a dataset that shrank since the last read.
    current_page = clamp_page_number(state.current_page, total_pages)
    start_index, end_index = page_slice(current_page, state.page_size, total_items)
    return PageWindow(
        current_page=current_page,
        total_pages=total_pages,
        start_index=start_index,
        end_index=end_index,
        total_items=total_items,
    )


def derive_flags(state: PaginationState, total_pages: int) -> PageFlags:
    current_page = clamp_page_number(state.current_page, total_pages)
    return PageFlags(
        can_go_next=current_page < total_pages,
        can_go_prev=current_page > 1,
    )


def paginate(dataset: Dataset, state: PaginationState) -> PageView:
    """Build the full page view for the current state."""
    window = derive_window(dataset, state)
    flags = derive_flags(state, window.total_pages)
    return PageView(
        current_page=window.current_page,
        total_pages=window.total_pages,
        page_size=state.page_size,
        current_data=slice_dataset(dataset, window.start_index, window.end_index),
        can_go_next=flags.can_go_next,
        can_go_prev=flags.can_go_prev,
        start_index=window.start_index,
        end_index=window.end_index,
        total_items=window.total_items,
    )


def go_to_page(state: PaginationState, dataset: Dataset, page: int) -> int:
    """Move to ``page``, clamped into the pages the dataset has right now.

    Non-integer numbers are truncated with ``int()`` first and infinities land
    on the first or last page. NaN is rejected with ``ValueError``. Returns the
    page the cursor landed on.
    """
    total_pages = compute_total_pages(len(dataset), state.page_size)
    if isinstance(page, float) and math.isnan(page):
        raise ValueError("Page number must be a number, got NaN.")
    if isinstance(page, float) and math.isinf(page):
        requested = max(total_pages, 1) if page > 0 else 1
    else:
        requested = int(page)
    state.current_page = clamp_page_number(requested, total_pages)
    if state.current_page != requested:
        logger.debug(
            "Clamped page request %s to %s (%s pages).", requested, state.current_page, total_pages
        )
    return state.current_page


def next_page(state: PaginationState, dataset: Dataset) -> int:
    return go_to_page(state, dataset, derive_window(dataset, state).current_page + 1)


def prev_page(state: PaginationState, dataset: Dataset) -> int:
    return go_to_page(state, dataset, derive_window(dataset, state).current_page - 1)


class CsvPagination(Generic[T]):
    """Pairs a dataset reference with a pagination state.

    Every attribute is derived on access from the dataset currently held, so
    ``update_data`` is enough to re-point the session at a new dataset.
    """

    def __init__(
        self,
        data: Dataset,
        page_size: Optional[int] = None,
        initial_page: Optional[int] = None,
        state: Optional[PaginationState] = None,
    ) -> None:
        self.data = data
        self.state = state if state is not None else create_pagination_state(page_size, initial_page)

    def update_data(self, data: Dataset) -> None:
        self.data = data

    def view(self) -> PageView:
        return paginate(self.data, self.state)

    def go_to_page(self, page: int) -> int:
        return go_to_page(self.state, self.data, page)

    def next_page(self) -> int:
        return next_page(self.state, self.data)

    def prev_page(self) -> int:
        return prev_page(self.state, self.data)

    @property
    def page_size(self) -> int:
        return self.state.page_size

    @property
    def current_page(self) -> int:
        return derive_window(self.data, self.state).current_page

    @property
    def total_pages(self) -> int:
        return compute_total_pages(len(self.data), self.state.page_size)

    @property
    def total_items(self) -> int:
        return len(self.data)

    @property
    def start_index(self) -> int:
        return derive_window(self.data, self.state).start_index

    @property
    def end_index(self) -> int:
        return derive_window(self.data, self.state).end_index

    @property
    def current_data(self):
        window = derive_window(self.data, self.state)
        return slice_dataset(self.data, window.start_index, window.end_index)

    @property
    def can_go_next(self) -> bool:
        return derive_flags(self.state, self.total_pages).can_go_next

    @property
    def can_go_prev(self) -> bool:
        return derive_flags(self.state, self.total_pages).can_go_prev

    def __repr__(self) -> str:
        return (
            f"CsvPagination(page={self.current_page}/{self.total_pages}, "
            f"page_size={self.page_size}, total_items={self.total_items})"
        )
