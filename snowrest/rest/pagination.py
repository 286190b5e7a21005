""" Cursor based pagination over discord's listing endpoints.

Discord pages most listings with an `after` query parameter holding the
id of the last item already seen. `paginate_after` drives such an
endpoint page by page and hands every record out through one async
iterator. The next page is only requested once the consumer asks for
a record past the end of the current one, so breaking out of an
`async for` (or calling `aclose`) is all it takes to stop early.

The cursor is taken from the last record of each page as is. Records
are not sorted or de-duplicated, so a server that returns ids out of
order can make the iteration skip or repeat records.
"""

import logging
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Mapping,
    Sequence,
    TypeVar,
)

__all__ = ("paginate_after", "Fetcher", "IdExtractor")

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Fetcher = Callable[[Mapping[str, Any]], Awaitable[Sequence[T]]]
""" Performs one request for the given query parameters and returns
the decoded page.
"""

IdExtractor = Callable[[T], int]
""" Pulls the snowflake of a record as an integer. """


async def paginate_after(
    fetch: Fetcher[T],
    id_of: IdExtractor[T],
    start: int,
    page_size: int,
) -> AsyncIterator[T]:
    """Iterate over every record of a listing, oldest first.

    Parameters
    ----------
    fetch : typing.Callable[[typing.Mapping], typing.Awaitable[typing.Sequence[T]]]
        Requests one page, it is called with `after` and `limit`.
    id_of : typing.Callable[[T], builtins.int]
        Returns the id of a record.
    start : builtins.int
        The cursor for the first request, `0` starts from the
        beginning.
    page_size : builtins.int
        The `limit` sent with every request.

    Raises
    ------
    builtins.ValueError
        `page_size` is not positive or `start` is negative (raised
        on the first iteration, before any request is made).
    Exception
        Whatever `fetch` raises, it is propagated unchanged and ends
        the iteration.

    Yields
    ------
    T
        The records in the order the pages returned them.
    """

    if page_size <= 0:
        raise ValueError(f"page_size must be positive, not {page_size}")
    if start < 0:
        raise ValueError(f"start must not be negative, not {start}")

    cursor = start
    pages = 0

    while True:
        page = await fetch({"after": cursor, "limit": page_size})
        pages += 1

        if not page:
            _LOGGER.debug("pagination exhausted after %d request(s)", pages)
            return

        for record in page:
            yield record

        cursor = id_of(page[-1])
