from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.api.v1.deps import get_dispatcher
from app.core.dispatch import PatternDispatcher

router = APIRouter(prefix="/rpc", tags=["rpc"])


@router.get("", response_model=dict)
async def list_patterns(dispatcher: PatternDispatcher = Depends(get_dispatcher)):
    """List every registered message pattern."""
    return {"success": True, "data": {"patterns": dispatcher.patterns}}


@router.post("/{pattern}")
async def call_pattern(
    pattern: str,
    payload: Any = Body(default=None),
    dispatcher: PatternDispatcher = Depends(get_dispatcher),
):
    """
    Request/reply entry point for a message pattern.

    The JSON body is the pattern's payload, e.g.
        POST /api/v1/rpc/profile.findById   {"id": "..."}

    Returns:
        JSONResponse: {"success": True, "data": ...} with 200, or
        {"success": False, "error": {...}} with the status of the error kind
        (404 not found, 409 duplicate / version conflict, 400 validation,
        500 store failure).
    """
    reply = await dispatcher.dispatch(pattern, payload)
    return JSONResponse(status_code=reply.status_code, content=reply.body)
