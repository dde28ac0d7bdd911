"""Lazy, page-spanning iteration over list endpoints.

Vendor list endpoints return one *page* per request. Each vendor's page
envelope model satisfies the :class:`Page` protocol, which lets
:class:`AsyncPaginator` walk every page without knowing the JSON shape::

    paginator = client.workers().list_stream()
    async for worker in paginator:
        ...

After a page's items are exhausted the paginator fetches the next page only
if *all* of the following hold:

* the page reports ``has_more_pages()``;
* the page had at least one item;
* the page's ``next_page_token()`` differs from the token of the page
  before it (``None`` before the first page).

The last two rules stop a server that keeps claiming more data while
returning nothing new. A failed fetch is raised once from the iterator,
after which the iterator is exhausted.
"""

from __future__ import annotations

import enum
import logging
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Generic,
    Optional,
    Protocol,
    TypeVar,
    runtime_checkable,
)

import httpx

from apiwrap.exceptions import ApiwrapError

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
P = TypeVar("P", bound="Page[Any]")


@runtime_checkable
class Page(Protocol[T_co]):
    """One deserialised page of a collection endpoint."""

    def has_more_pages(self) -> bool:
        """Whether the server indicates that more pages exist."""
        ...

    def next_page_token(self) -> Optional[str]:
        """Opaque continuation token, compared only for equality."""
        ...

    def next_page(self, request: httpx.Request) -> httpx.Request:
        """Return *request* rewritten to target the following page."""
        ...

    def items(self) -> list[T_co]:
        """The page's records, in server order."""
        ...


class PageFetcher(Protocol):
    """The client side of pagination: build and send page requests."""

    def build_request(
        self, method: str, path: str, params: Optional[dict[str, Any]] = None
    ) -> httpx.Request: ...

    async def send_page(
        self, request: httpx.Request, model: type[P], documented_errors: bool = True
    ) -> P: ...


class PaginatorState(enum.Enum):
    FETCHING = "fetching"
    HAS_PAGE = "has_page"
    DONE = "done"
    FAILED = "failed"


def with_params(request: httpx.Request, **params: Any) -> httpx.Request:
    """Set query parameters on *request*, replacing existing values, and return it."""
    url = request.url
    for key, value in params.items():
        url = url.copy_set_param(key, value)
    request.url = url
    return request


class AsyncPaginator(Generic[T]):
    """Async iterator over every item of every page of a list endpoint.

    Args:
        fetcher: Client used for follow-up pages.
        method: HTTP method of the list endpoint.
        path: Path of the list endpoint, relative to the client base URL.
        page_model: Page envelope model that responses are validated into.
        first_page: Coroutine function fetching the first page.
        params: Query parameters carried over to every follow-up request.
        documented_errors: Whether the endpoint documents its error bodies;
            passed to the fetcher for every follow-up page.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        method: str,
        path: str,
        page_model: type[Page[T]],
        first_page: Callable[[], Awaitable[Page[T]]],
        params: Optional[dict[str, Any]] = None,
        documented_errors: bool = True,
    ) -> None:
        self._fetcher = fetcher
        self._method = method
        self._path = path
        self._page_model = page_model
        self._first_page = first_page
        self._params = dict(params or {})
        self._documented_errors = documented_errors

        self._state = PaginatorState.FETCHING
        self._page: Optional[Page[T]] = None
        self._items: list[T] = []
        self._index = 0
        self._prev_token: Optional[str] = None
        self._error: Optional[ApiwrapError] = None
        self._pages_fetched = 0

    @property
    def state(self) -> PaginatorState:
        return self._state

    @property
    def pages_fetched(self) -> int:
        """Number of pages fetched successfully so far."""
        return self._pages_fetched

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        while True:
            if self._state is PaginatorState.DONE:
                raise StopAsyncIteration

            if self._state is PaginatorState.FAILED:
                error = self._error
                self._error = None
                self._state = PaginatorState.DONE
                assert error is not None
                raise error

            if self._state is PaginatorState.FETCHING:
                await self._fetch()
                continue

            if self._index < len(self._items):
                item = self._items[self._index]
                self._index += 1
                return item

            self._advance()

    async def to_list(self, limit: Optional[int] = None) -> list[T]:
        """Collect items into a list, stopping after *limit* items when given.

        No page beyond the one holding the last wanted item is fetched.
        """
        items: list[T] = []
        if limit is not None and limit <= 0:
            return items
        async for item in self:
            items.append(item)
            if limit is not None and len(items) >= limit:
                break
        return items

    async def _fetch(self) -> None:
        try:
            if self._page is None:
                logger.debug("Fetching first page of %s %s", self._method, self._path)
                page = await self._first_page()
            else:
                logger.debug(
                    "Fetching page %d of %s %s",
                    self._pages_fetched + 1,
                    self._method,
                    self._path,
                )
                request = self._fetcher.build_request(self._method, self._path, self._params)
                request = self._page.next_page(request)
                page = await self._fetcher.send_page(
                    request, self._page_model, self._documented_errors
                )
        except ApiwrapError as exc:
            logger.debug("Stopping %s %s: %s", self._method, self._path, exc)
            self._error = exc
            self._state = PaginatorState.FAILED
            return
        except Exception:
            self._state = PaginatorState.DONE
            raise

        self._pages_fetched += 1
        self._page = page
        self._items = list(page.items())
        self._index = 0
        self._state = PaginatorState.HAS_PAGE

    def _advance(self) -> None:
        """Decide, after the current page is exhausted, whether to fetch another."""
        page = self._page
        assert page is not None
        token = page.next_page_token()

        if not page.has_more_pages():
            reason = "no more pages"
        elif not self._items:
            reason = "empty page"
        elif token == self._prev_token:
            reason = f"page token did not advance ({token!r})"
        else:
            self._prev_token = token
            self._state = PaginatorState.FETCHING
            return

        logger.debug(
            "Stopping %s %s after %d page(s): %s",
            self._method,
            self._path,
            self._pages_fetched,
            reason,
        )
        self._state = PaginatorState.DONE
