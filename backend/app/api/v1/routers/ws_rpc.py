import json
import logging

from fastapi import APIRouter, Depends, WebSocket
from starlette.websockets import WebSocketDisconnect

from app.api.v1.deps import get_ws_dispatcher
from app.core.dispatch import PatternDispatcher, Reply
from app.core.errors import ValidationFailure

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _bad_message(message: str) -> dict:
    return Reply.failure(ValidationFailure(message, code="BAD_MESSAGE")).body


@router.websocket("/ws/rpc")
async def ws_rpc(ws: WebSocket, dispatcher: PatternDispatcher = Depends(get_ws_dispatcher)):
    """
    WebSocket endpoint carrying pattern messages.

    Message flow:
    1. Client sends: {"pattern": "profile.findById", "data": {...}, "id": "42"}
    2. Server dispatches and answers: {"id": "42", "success": ..., ...}

    A message without "id" is an event: it is processed and nothing is sent
    back. Frames that are not a JSON object get a BAD_MESSAGE reply.
    """
    await ws.accept()
    logger.info("[ws_rpc] connected")
    try:
        while True:
            raw = await ws.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                await ws.send_text(json.dumps(_bad_message("Message is not valid JSON")))
                continue
            if not isinstance(msg, dict) or not isinstance(msg.get("pattern"), str):
                reply = _bad_message("Message must be an object with a string 'pattern'")
                if isinstance(msg, dict) and "id" in msg:
                    reply["id"] = msg["id"]
                await ws.send_text(json.dumps(reply))
                continue

            reply = await dispatcher.dispatch(msg["pattern"], msg.get("data"))
            if "id" not in msg:
                continue
            await ws.send_text(json.dumps({"id": msg["id"], **reply.body}))
    except WebSocketDisconnect:
        logger.info("[ws_rpc] disconnected")
