from typing import Any, Dict, Final, final
from urllib import parse

import attr

__all__ = ("Route", "BASE_URL")

BASE_URL: Final[str] = "https://discord.com/api/v10"


@final
@attr.define(init=False)
class Route:
    """Describes one endpoint call: the HTTP method, the path template
    and the values to interpolate into it.
    """

    method: str = attr.field()
    """ HTTP method the request will take """

    path: str = attr.field()
    """ The path template, e.g. `/guilds/{guild_id}` """

    params: Dict[str, Any] = attr.field()
    """ Values for the placeholders in `path` """

    def __init__(self, method: str, path: str, **params: Any):
        self.method = method.upper()
        self.path = path
        self.params = params

    @property
    def compiled_path(self) -> str:
        """The path with every placeholder filled in (and quoted)"""

        return self.path.format_map(
            {
                key: parse.quote(str(value), safe="")
                for key, value in self.params.items()
            }
        )

    def url(self, base_url: str = BASE_URL) -> str:
        """The full URL of the route relative to `base_url`"""

        return base_url.rstrip("/") + self.compiled_path

    def __str__(self) -> str:
        return f"{self.method} {self.compiled_path}"
