from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence, Tuple, final

import attr

if TYPE_CHECKING:
    from .rest.client import RestClient

__all__ = ("ResumeEvent",)


@final
@attr.frozen(repr=False)
class ResumeEvent:
    """Dispatched by discord when a gateway connection is successfully
    resumed. This is only a data holder, nothing in this package
    connects to the gateway.
    """

    client: RestClient = attr.field()
    """ The client the event belongs to """

    trace: Tuple[str, ...] = attr.field(converter=tuple)
    """ Debugging trace sent by discord, the servers that handled
    the resume.
    """

    @classmethod
    def from_payload(cls, client: RestClient, payload: Any) -> ResumeEvent:
        trace: Sequence[str] = payload.get("_trace") or ()
        return cls(client, trace)

    def __repr__(self) -> str:
        return f"ResumeEvent(trace={list(self.trace)!r})"
