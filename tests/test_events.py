import attr
import pytest

from snowrest import ResumeEvent


@pytest.mark.asyncio
async def test_resume_event_holds_trace(client):
    event = ResumeEvent.from_payload(
        client, {"_trace": ["gateway-prd-1", "session-2"]}
    )

    assert event.client is client
    assert event.trace == ("gateway-prd-1", "session-2")
    assert repr(event) == "ResumeEvent(trace=['gateway-prd-1', 'session-2'])"


@pytest.mark.asyncio
async def test_resume_event_is_immutable(client):
    event = ResumeEvent(client, [])

    with pytest.raises(attr.exceptions.FrozenInstanceError):
        event.trace = ("x",)
    assert ResumeEvent.from_payload(client, {}).trace == ()
