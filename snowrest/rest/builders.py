from __future__ import annotations

import copy
from typing import Any, Mapping, MutableMapping, Optional, Union

import attr

from ..snowflake import Snowflake

__all__ = ("JSONBuilder", "ParamsBuilder")

ParamValue = Union[str, int, bool, Snowflake]


@attr.define(init=False)
class JSONBuilder:
    """Represents a JSON request body"""

    inner: MutableMapping[str, Any] = attr.field(init=False)
    """ The inner representation of the JSON """

    def __init__(self, **kwargs: Any):
        self.inner = {}

        for key, value in kwargs.items():
            self.add(key, value)

    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Any]]) -> JSONBuilder:
        return cls(**(payload or {}))

    def add(self, key: str, value: Any) -> JSONBuilder:
        """Add a key to the JSON mapping

        Parameters
        ----------
        key : builtins.str
            The key.
        value : typing.Any
            The value that the key represents. Snowflakes are sent as
            strings and objects with a `to_json` method are converted
            with it.

        Returns
        -------
        snowrest.rest.builders.JSONBuilder
            The builder object, can be used for chaining.
        """

        if isinstance(value, Snowflake):
            value = value.as_string()
        elif hasattr(value, "to_json"):
            value = value.to_json()

        self.inner[key] = value
        return self

    def build(self) -> Mapping[str, Any]:
        """Builds the JSON object into a mapping (deep copied)."""

        return copy.deepcopy(self.inner)


@attr.define(init=False)
class ParamsBuilder:
    """Represents the parameters of the query string, quoting is
    left to aiohttp.
    """

    inner: MutableMapping[str, str] = attr.field(init=False)

    def __init__(self, **kwargs: ParamValue):
        self.inner = {}

        for key, value in kwargs.items():
            self.add(key, value)

    @classmethod
    def from_mapping(cls, params: Optional[Mapping[str, ParamValue]]) -> ParamsBuilder:
        return cls(**(params or {}))

    def add(self, key: str, value: ParamValue) -> ParamsBuilder:
        """Add a parameter, booleans become `true`/`false` and every
        other value its string form.

        Returns
        -------
        snowrest.rest.builders.ParamsBuilder
            The builder object, can be used for chaining.
        """

        if isinstance(value, bool):
            self.inner[key] = "true" if value else "false"
        else:
            self.inner[key] = str(value)

        return self

    def build(self) -> Mapping[str, str]:
        return dict(self.inner)
