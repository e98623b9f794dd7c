# app/api/v1/deps.py
from fastapi import Request, WebSocket
from starlette.requests import HTTPConnection

from app.core.dispatch import PatternDispatcher


def _dispatcher_for(conn: HTTPConnection) -> PatternDispatcher:
    dispatcher = getattr(conn.app.state, "dispatcher", None)
    if dispatcher is None:
        # Built lazily so tests can run the app without the startup hook
        from app.api.v1.patterns import build_dispatcher
        dispatcher = build_dispatcher()
        conn.app.state.dispatcher = dispatcher
    return dispatcher


async def get_dispatcher(request: Request) -> PatternDispatcher:
    """
    FastAPI dependency returning the application's PatternDispatcher.

    Usage:
        @router.post("/rpc/{pattern}")
        async def rpc(pattern: str, dispatcher: PatternDispatcher = Depends(get_dispatcher)):
            ...
    """
    return _dispatcher_for(request)


async def get_ws_dispatcher(websocket: WebSocket) -> PatternDispatcher:
    """Same as get_dispatcher, for WebSocket routes."""
    return _dispatcher_for(websocket)
