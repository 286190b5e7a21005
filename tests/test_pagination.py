from typing import Any, Dict, List, Mapping, Sequence

import pytest

from snowrest.rest import HTTPException, paginate_after


class PagedEndpoint:
    """Serves pre-built pages in order and records every request."""

    def __init__(self, *pages: Sequence[Dict[str, Any]], fail_at: int = -1):
        self.pages = list(pages)
        self.fail_at = fail_at
        self.requests: List[Mapping[str, Any]] = []

    async def __call__(self, params: Mapping[str, Any]) -> Sequence[Dict[str, Any]]:
        self.requests.append(dict(params))
        if len(self.requests) - 1 == self.fail_at:
            raise HTTPException(500, {"message": "Internal Server Error", "code": 0})
        if not self.pages:
            return []
        return self.pages.pop(0)


def records(*ids: int) -> List[Dict[str, Any]]:
    return [{"id": str(i)} for i in ids]


def id_of(record: Mapping[str, Any]) -> int:
    return int(record["id"])


async def collect(iterator) -> List[Any]:
    return [item async for item in iterator]


@pytest.mark.asyncio
async def test_yields_all_pages_in_order():
    endpoint = PagedEndpoint(records(1, 2), records(3), records(7, 9))

    result = await collect(paginate_after(endpoint, id_of, 0, 2))

    assert [id_of(r) for r in result] == [1, 2, 3, 7, 9]
    assert len(endpoint.requests) == 4


@pytest.mark.asyncio
async def test_cursor_follows_last_record_of_previous_page():
    endpoint = PagedEndpoint(records(10, 20), records(35, 40))

    await collect(paginate_after(endpoint, id_of, 5, 2))

    assert endpoint.requests == [
        {"after": 5, "limit": 2},
        {"after": 20, "limit": 2},
        {"after": 40, "limit": 2},
    ]


@pytest.mark.asyncio
async def test_empty_first_page():
    endpoint = PagedEndpoint()

    assert await collect(paginate_after(endpoint, id_of, 0, 100)) == []
    assert len(endpoint.requests) == 1


@pytest.mark.asyncio
async def test_250_records_take_four_requests():
    ids = list(range(1, 251))
    endpoint = PagedEndpoint(
        records(*ids[:100]), records(*ids[100:200]), records(*ids[200:])
    )

    result = await collect(paginate_after(endpoint, id_of, 0, 100))

    assert len(result) == 250
    assert [request["after"] for request in endpoint.requests] == [0, 100, 200, 250]
    assert all(request["limit"] == 100 for request in endpoint.requests)


@pytest.mark.asyncio
async def test_failure_is_raised_after_first_page():
    endpoint = PagedEndpoint(records(1, 2), records(3, 4), records(5), fail_at=1)
    seen = []

    with pytest.raises(HTTPException) as info:
        async for record in paginate_after(endpoint, id_of, 0, 2):
            seen.append(id_of(record))

    assert info.value.code == 500
    assert seen == [1, 2]
    assert len(endpoint.requests) == 2


@pytest.mark.asyncio
async def test_stopping_early_issues_no_more_requests():
    endpoint = PagedEndpoint(records(1, 2), records(3, 4))
    iterator = paginate_after(endpoint, id_of, 0, 2)

    assert id_of(await iterator.__anext__()) == 1
    assert id_of(await iterator.__anext__()) == 2
    await iterator.aclose()

    assert len(endpoint.requests) == 1


@pytest.mark.asyncio
async def test_nothing_is_requested_until_iterated():
    endpoint = PagedEndpoint(records(1))

    iterator = paginate_after(endpoint, id_of, 0, 10)

    assert endpoint.requests == []
    await iterator.aclose()


@pytest.mark.asyncio
async def test_independent_iterators():
    endpoint_a = PagedEndpoint(records(1))
    endpoint_b = PagedEndpoint(records(50, 60))

    first = paginate_after(endpoint_a, id_of, 0, 5)
    second = paginate_after(endpoint_b, id_of, 0, 5)

    assert id_of(await second.__anext__()) == 50
    assert [id_of(r) for r in await collect(first)] == [1]
    assert [id_of(r) for r in await collect(second)] == [60]
    assert endpoint_b.requests[-1] == {"after": 60, "limit": 5}


@pytest.mark.asyncio
@pytest.mark.parametrize("start, page_size", [(0, 0), (0, -1), (-1, 10)])
async def test_invalid_arguments(start, page_size):
    endpoint = PagedEndpoint(records(1))

    with pytest.raises(ValueError):
        await collect(paginate_after(endpoint, id_of, start, page_size))

    assert endpoint.requests == []
