import json
from typing import Any, List, Mapping, Optional, Tuple

import aiohttp
import attr
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from multidict import CIMultiDict

from snowrest.rest import RestClient, Router


@attr.define
class RecordedRequest:
    """A request as the server received it."""

    method: str = attr.field()
    path: str = attr.field()
    query: Mapping[str, str] = attr.field()
    headers: CIMultiDict = attr.field()
    body: str = attr.field()

    def json(self) -> Any:
        return json.loads(self.body)


class DiscordStub:
    """Answers every request from a queue of canned replies and keeps
    what it received. Served by a real aiohttp server."""

    def __init__(self):
        self.replies: List[Tuple[int, str, Optional[str]]] = []
        self.calls: List[RecordedRequest] = []
        self.base_url = ""

    def reply_json(self, data: Any, status: int = 200) -> "DiscordStub":
        self.replies.append((status, json.dumps(data), "application/json"))
        return self

    def reply_text(
        self, text: str, status: int, content_type: str = "text/plain"
    ) -> "DiscordStub":
        self.replies.append((status, text, content_type))
        return self

    def reply_empty(self, status: int = 204) -> "DiscordStub":
        self.replies.append((status, "", None))
        return self

    @property
    def last(self) -> RecordedRequest:
        return self.calls[-1]

    async def handle(self, request: web.Request) -> web.Response:
        self.calls.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                query=dict(request.query),
                headers=CIMultiDict(request.headers),
                body=await request.text(),
            )
        )

        status, body, content_type = self.replies.pop(0)
        if content_type is None:
            return web.Response(status=status)
        return web.Response(status=status, text=body, content_type=content_type)


@pytest_asyncio.fixture
async def discord() -> DiscordStub:
    stub = DiscordStub()

    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", stub.handle)

    async with TestServer(app) as server:
        stub.base_url = str(server.make_url(""))
        yield stub


@pytest_asyncio.fixture
async def session() -> aiohttp.ClientSession:
    async with aiohttp.ClientSession() as session:
        yield session


@pytest.fixture
def router(session: aiohttp.ClientSession, discord: DiscordStub) -> Router:
    return Router(session=session, token="secret", base_url=discord.base_url)


@pytest.fixture
def client(router: Router) -> RestClient:
    return RestClient(router)
