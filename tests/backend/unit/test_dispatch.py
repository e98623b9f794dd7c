"""
Unit tests for core.dispatch.
Uses a standalone PatternDispatcher with in-memory handlers; no database.
"""
import pytest
from pydantic import BaseModel

from app.core.dispatch import PatternDispatcher, Reply
from app.core.errors import NotFound, StoreFailure, VersionConflict


pytestmark = pytest.mark.asyncio


class EchoIn(BaseModel):
    name: str
    count: int = 1


@pytest.fixture
def dispatcher():
    d = PatternDispatcher()

    @d.pattern("demo.echo", EchoIn)
    async def echo(body: EchoIn):
        return {"name": body.name, "count": body.count}

    @d.pattern("demo.raw")
    async def raw(payload):
        return payload

    @d.pattern("demo.missing")
    async def missing(_payload):
        raise NotFound("Profile", "abc")

    @d.pattern("demo.conflict")
    async def conflict(_payload):
        raise VersionConflict("Profile")

    @d.pattern("demo.broken")
    async def broken(_payload):
        raise StoreFailure("Profile", "read", RuntimeError("db down"))

    return d


async def test_success_envelope(dispatcher):
    reply = await dispatcher.dispatch("demo.echo", {"name": "x", "count": 3})
    assert reply.ok
    assert reply.status_code == 200
    assert reply.body["success"] is True
    assert reply.body["data"] == {"name": "x", "count": 3}
    assert "timestamp" in reply.body


async def test_handler_without_schema_gets_raw_payload(dispatcher):
    reply = await dispatcher.dispatch("demo.raw", {"any": ["thing"]})
    assert reply.body["data"] == {"any": ["thing"]}


async def test_missing_payload_is_empty_object(dispatcher):
    reply = await dispatcher.dispatch("demo.raw", None)
    assert reply.body["data"] == {}


async def test_unknown_pattern(dispatcher):
    reply = await dispatcher.dispatch("demo.nope", {})
    assert not reply.ok
    assert reply.status_code == 404
    assert reply.body["error"]["code"] == "UNKNOWN_PATTERN"
    assert "demo.nope" in reply.body["error"]["message"]


async def test_schema_violation_becomes_validation_failure(dispatcher):
    reply = await dispatcher.dispatch("demo.echo", {"count": "many"})
    assert reply.status_code == 400
    error = reply.body["error"]
    assert error["kind"] == "validation_failure"
    assert {tuple(d["loc"]) for d in error["details"]} == {("name",), ("count",)}


async def test_non_object_payload_is_rejected(dispatcher):
    reply = await dispatcher.dispatch("demo.echo", ["name"])
    assert reply.status_code == 400
    assert reply.body["error"]["code"] == "VALIDATION_FAILED"


@pytest.mark.parametrize(
    "pattern, status, kind",
    [
        ("demo.missing", 404, "not_found"),
        ("demo.conflict", 409, "version_conflict"),
        ("demo.broken", 500, "store_failure"),
    ],
)
async def test_record_errors_become_error_replies(dispatcher, pattern, status, kind):
    reply = await dispatcher.dispatch(pattern, {})
    assert reply.status_code == status
    assert reply.body["success"] is False
    assert reply.body["error"]["kind"] == kind


async def test_duplicate_registration_is_rejected(dispatcher):
    with pytest.raises(ValueError):
        @dispatcher.pattern("demo.echo")
        async def again(_payload):
            return None


async def test_patterns_listing(dispatcher):
    assert "demo.echo" in dispatcher
    assert dispatcher.patterns == sorted(dispatcher.patterns)
    assert len(dispatcher.patterns) == 5


async def test_reply_failure_uses_error_status():
    reply = Reply.failure(VersionConflict("Settings"))
    assert reply.status_code == 409
    assert reply.body["error"]["code"] == "VERSION_CONFLICT"


async def test_registered_application_patterns():
    from app.api.v1.patterns import build_dispatcher

    registered = build_dispatcher().patterns
    for name in (
        "profile.create",
        "profile.findAll",
        "settings.reset",
        "subscription.cancel",
        "subscription.checkExpiration",
        "subscription.findExpiringSoon",
        "status.ban",
        "status.findAllBanned",
    ):
        assert name in registered
    assert len(registered) == 34


async def test_unclassified_handler_failure_is_answered():
    d = PatternDispatcher()

    @d.pattern("demo.dropped")
    async def dropped(_payload):
        raise ConnectionResetError("connection lost")

    reply = await d.dispatch("demo.dropped", {})
    assert reply.status_code == 500
    assert reply.body["success"] is False
    assert reply.body["error"]["kind"] == "store_failure"
    assert reply.body["error"]["code"] == "STORE_FAILURE"
