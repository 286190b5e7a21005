from __future__ import annotations

import datetime
from typing import Final, Union, final

import attr

__all__ = ("Snowflake", "DISCORD_EPOCH")

DISCORD_EPOCH: Final[int] = 1420070400000
""" The first millisecond of 2015, the epoch discord snowflakes count from """

MAX_VALUE: Final[int] = (1 << 64) - 1


def _validate(instance: Snowflake, attribute: attr.Attribute, value: int):
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"snowflake out of range: {value}")


@final
@attr.define(frozen=True, order=True)
class Snowflake:
    """An unsigned 64 bit identifier, discord sends these over the
    wire as strings to avoid precision loss in javascript.
    """

    value: int = attr.field(validator=_validate)
    """ The integer value of the snowflake """

    @classmethod
    def of(cls, value: Union[int, str, Snowflake]) -> Snowflake:
        """Create a snowflake from an integer, its string form or
        another snowflake.

        Parameters
        ----------
        value : typing.Union[builtins.int, builtins.str, Snowflake]
            The value to convert, strings must be ASCII decimal digits.

        Raises
        ------
        builtins.TypeError
            The value is not an int, a str or a snowflake (booleans
            and floats included).
        builtins.ValueError
            The value is not a valid unsigned 64 bit integer.

        Returns
        -------
        snowrest.snowflake.Snowflake
        """

        if isinstance(value, Snowflake):
            return value
        if isinstance(value, str):
            text = value.strip()
            if not (text.isascii() and text.isdigit()):
                raise ValueError(f"invalid snowflake: {value!r}")
            return cls(int(text))
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot make a snowflake from {type(value).__name__}")

        return cls(value)

    @staticmethod
    def as_int(value: Union[int, str, Snowflake]) -> int:
        """Shortcut for `Snowflake.of(value).value`, handy for pulling
        the id out of a raw payload.
        """

        return Snowflake.of(value).value

    def as_string(self) -> str:
        return str(self.value)

    @property
    def timestamp(self) -> datetime.datetime:
        """The time the snowflake was generated at (UTC)"""

        millis = (self.value >> 22) + DISCORD_EPOCH
        return datetime.datetime.fromtimestamp(
            millis / 1000, tz=datetime.timezone.utc
        )

    def __str__(self) -> str:
        return self.as_string()

    def __int__(self) -> int:
        return self.value
