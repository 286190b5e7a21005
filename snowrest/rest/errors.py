from typing import Any, Iterator, Mapping, Optional, Tuple, Union

import attr

__all__ = ("ClientException", "HTTPException")


def walk_errors(
    node: Any, path: Tuple[str, ...] = ()
) -> Iterator[Tuple[str, str, str]]:
    """Walk discord's nested `errors` object, yielding a
    `(field, code, message)` triple for every leaf `_errors` entry.
    List indices become part of the field path.
    """

    if isinstance(node, Mapping):
        for key, value in node.items():
            if key == "_errors":
                for item in value:
                    yield ".".join(path), item.get("code"), item.get("message")
            else:
                yield from walk_errors(value, path + (str(key),))
    elif isinstance(node, list):
        for index, value in enumerate(node):
            yield from walk_errors(value, path + (str(index),))


class ClientException(Exception):
    """Base class for REST client exceptions"""


@attr.define(init=False, repr=False)
class HTTPException(ClientException):
    """Raised when discord answers a request with a non 2xx status.
    The status code and the (decoded if possible) body are kept.
    """

    code: int = attr.field()
    """ The HTTP status code """

    data: Union[str, Mapping[str, Any]] = attr.field()
    """ The JSON body of the response, or its raw text if the body
    was not JSON
    """

    def __init__(self, code: int, data: Union[str, Mapping[str, Any]]):
        self.code = code
        self.data = data

        super().__init__(repr(self))

    @property
    def message(self) -> Optional[str]:
        """Error message sent by discord"""

        if isinstance(self.data, Mapping):
            return self.data.get("message")
        return None

    @property
    def errno(self) -> Optional[int]:
        """Discord's JSON error code, not the HTTP status"""

        if isinstance(self.data, Mapping):
            return self.data.get("code")
        return None

    @property
    def errors(self) -> Optional[str]:
        """The per field validation errors, one per line"""

        if not isinstance(self.data, Mapping):
            return self.data or None

        if "errors" not in self.data:
            return None

        return "\n".join(
            f"{field} ({code}): {message}"
            for field, code, message in walk_errors(self.data["errors"])
        )

    def __repr__(self) -> str:
        text = f"{self.code}: {self.message} ({self.errno})"
        errors = self.errors
        if errors:
            text += "\n" + errors
        return text
