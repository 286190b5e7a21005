import json as jsonlib
from typing import Any, Optional, final

import attr

__all__ = ("Response",)


@final
@attr.define
class Response:
    """What discord sent back after a HTTP request."""

    code: int = attr.field()
    """ The status code of the response """

    data: str = attr.field()
    """ The raw body of the response, use `json` to decode it """

    content_type: Optional[str] = attr.field(default=None)
    """ The content-type of the response, `None` when there is
    no body (204 No Content).
    """

    def json(self) -> Any:
        """Returns the decoded JSON body, `None` for an empty body.

        Raises
        ------
        builtins.ValueError
            The response is not `application/json`.
        """

        if not self.data:
            return None

        mime = (self.content_type or "").split(";")[0].strip()
        if mime != "application/json":
            raise ValueError(
                f"content-type must be `application/json` not `{self.content_type}`"
            )
        return jsonlib.loads(self.data)
