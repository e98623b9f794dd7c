"""
WebSocket integration tests for /ws/rpc.
Only messages that are answered before touching the database are exercised:
framing errors, unknown patterns and payload validation.
"""
import uuid

from fastapi.testclient import TestClient

from app.main import app


class TestWebSocketRpc:
    """Request/reply and event semantics of the message route."""

    def test_reply_carries_request_id(self):
        client = TestClient(app)
        with client.websocket_connect("/ws/rpc") as websocket:
            websocket.send_json({"pattern": "profile.nope", "data": {}, "id": "req-1"})
            reply = websocket.receive_json()
            assert reply["id"] == "req-1"
            assert reply["success"] is False
            assert reply["error"]["code"] == "UNKNOWN_PATTERN"

    def test_validation_failure_reply(self):
        client = TestClient(app)
        with client.websocket_connect("/ws/rpc") as websocket:
            websocket.send_json({"pattern": "profile.findById", "data": {"id": "nope"}, "id": 7})
            reply = websocket.receive_json()
            assert reply["id"] == 7
            assert reply["error"]["kind"] == "validation_failure"

    def test_message_without_id_gets_no_reply(self):
        client = TestClient(app)
        with client.websocket_connect("/ws/rpc") as websocket:
            # Event: processed, nothing sent back
            websocket.send_json({"pattern": "profile.nope", "data": {}})
            websocket.send_json({"pattern": "profile.nope", "data": {}, "id": "after-event"})
            reply = websocket.receive_json()
            assert reply["id"] == "after-event"

    def test_malformed_json(self):
        client = TestClient(app)
        with client.websocket_connect("/ws/rpc") as websocket:
            websocket.send_text("{not json")
            reply = websocket.receive_json()
            assert reply["success"] is False
            assert reply["error"]["code"] == "BAD_MESSAGE"

    def test_message_without_pattern(self):
        client = TestClient(app)
        with client.websocket_connect("/ws/rpc") as websocket:
            websocket.send_json({"data": {"id": str(uuid.uuid4())}, "id": "x"})
            reply = websocket.receive_json()
            assert reply["id"] == "x"
            assert reply["error"]["code"] == "BAD_MESSAGE"

    def test_lost_connection_reply_keeps_id_and_socket(self, monkeypatch):
        from app.core.store import RecordStore

        async def _drop(self, **filters):
            raise ConnectionResetError("connection lost")

        monkeypatch.setattr(RecordStore, "get_active", _drop)
        client = TestClient(app)
        with client.websocket_connect("/ws/rpc") as websocket:
            websocket.send_json({"pattern": "profile.findById", "data": {"id": str(uuid.uuid4())}, "id": "1"})
            reply = websocket.receive_json()
            assert reply["id"] == "1"
            assert reply["error"]["kind"] == "store_failure"

            # Socket is still usable afterwards
            websocket.send_json({"pattern": "profile.nope", "data": {}, "id": "2"})
            assert websocket.receive_json()["id"] == "2"
