import json as jsonlib
import logging
from typing import Any, Final, Mapping, MutableMapping, Optional

import aiohttp
import attr
from multidict import CIMultiDict

from .. import __version__
from .builders import JSONBuilder, ParamsBuilder
from .errors import HTTPException
from .response import Response
from .route import BASE_URL, Route

__all__ = ("Router", "USER_AGENT")

_LOGGER = logging.getLogger(__name__)

USER_AGENT: Final[
    str
] = f"DiscordBot (https://github.com/snowrest/snowrest, {__version__})"


@attr.define(kw_only=True)
class Router:
    """Executes requests against discord's REST API. Every service of a
    `RestClient` shares one router. The router does not create or close
    the session, and it neither waits on ratelimits nor retries: a
    failed request surfaces as `HTTPException` straight away.
    """

    session: aiohttp.ClientSession = attr.field()
    """ The session used for every HTTP request """

    token: str = attr.field(repr=False)
    """ The bot token sent in the `Authorization` header, do not
    share it with anyone!
    """

    user_agent: str = attr.field(default=USER_AGENT)
    """ The user agent header (discord asks for the format
    `DiscordBot ($url, $versionNumber)`)
    """

    base_url: str = attr.field(default=BASE_URL)
    """ API root that routes are resolved against """

    async def request(
        self,
        *,
        route: Route,
        json: Optional[JSONBuilder] = None,
        params: Optional[ParamsBuilder] = None,
        reason: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        """Makes a HTTP request to the provided `Route`.

        Parameters
        ----------
        route : snowrest.rest.route.Route
            The route to request to.
        json : typing.Optional[snowrest.rest.builders.JSONBuilder]
            JSON body of the request.
        params : typing.Optional[snowrest.rest.builders.ParamsBuilder]
            The query string parameters.
        reason : typing.Optional[builtins.str]
            The reason for the request, if the endpoint supports the
            `X-Audit-Log-Reason` header.
        headers : typing.Optional[typing.Mapping[builtins.str, builtins.str]]
            Extra headers, the ones set by the router replace them
            whatever their case.

        Raises
        ------
        snowrest.rest.errors.HTTPException
            Discord answered with a non 2xx status.

        Returns
        -------
        snowrest.rest.response.Response
            What discord sent back to us.
        """

        request_headers: CIMultiDict = CIMultiDict(headers or {})
        request_headers["Authorization"] = "Bot " + self.token
        request_headers["User-Agent"] = self.user_agent

        if reason is not None:
            request_headers["X-Audit-Log-Reason"] = reason

        kwargs: MutableMapping[str, Any] = {"headers": request_headers}
        if json is not None:
            request_headers["Content-Type"] = "application/json"
            kwargs["data"] = jsonlib.dumps(json.build())
        if params is not None:
            kwargs["params"] = params.build()

        _LOGGER.debug("%s params=%s", route, kwargs.get("params"))

        async with self.session.request(
            route.method, route.url(self.base_url), **kwargs
        ) as response:
            text = await response.text(encoding="utf-8")
            content_type = response.headers.get("Content-Type")

        if 200 <= response.status < 300:
            return Response(response.status, data=text, content_type=content_type)

        try:
            data = jsonlib.loads(text)
        except jsonlib.JSONDecodeError:
            data = text

        _LOGGER.warning("%s failed with status %s", route, response.status)
        raise HTTPException(code=response.status, data=data)

    async def request_json(self, **kwargs: Any) -> Any:
        """Same as `request` but returns the decoded JSON body."""

        response = await self.request(**kwargs)
        return response.json()
