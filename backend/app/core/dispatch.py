# app/core/dispatch.py
"""
Pattern-keyed message dispatch.

Handlers register under a pattern string (e.g. "profile.create") together with
the pydantic schema of their payload. dispatch() validates the payload, runs
the handler and always returns an explicit Reply: record errors are turned
into error replies here and nowhere else.
"""
import datetime as dt
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from app.core.errors import ErrorKind, RecordError, StoreFailure, ValidationFailure

logger = logging.getLogger("uvicorn.error")

Handler = Callable[[Any], Awaitable[Any]]


class UnknownPattern(RecordError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, pattern: str):
        super().__init__(f"No handler registered for pattern: {pattern}", code="UNKNOWN_PATTERN")


@dataclass
class Reply:
    """
    Outcome of one dispatched message.

    body is the envelope sent to the client:
      success -> {"success": True, "data": ...}
      failure -> {"success": False, "error": {"code", "kind", "message"}}
    """
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return bool(self.body.get("success"))

    @classmethod
    def success(cls, data: Any) -> "Reply":
        return cls(200, {"success": True, "data": data, "timestamp": _timestamp()})

    @classmethod
    def failure(cls, error: RecordError) -> "Reply":
        return cls(error.status_code, {"success": False, "error": error.to_dict(), "timestamp": _timestamp()})


def _timestamp() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat()


def _validation_details(exc: ValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


class PatternDispatcher:
    """
    Registry of pattern handlers.

    Usage:
        dispatcher = PatternDispatcher()

        @dispatcher.pattern("profile.findById", IdIn)
        async def find_by_id(body: IdIn):
            ...

        reply = await dispatcher.dispatch("profile.findById", {"id": "..."})
    """

    def __init__(self):
        self._handlers: Dict[str, Tuple[Handler, Optional[Type[BaseModel]]]] = {}

    def pattern(self, name: str, schema: Optional[Type[BaseModel]] = None):
        def decorator(fn: Handler) -> Handler:
            if name in self._handlers:
                raise ValueError(f"Pattern already registered: {name}")
            self._handlers[name] = (fn, schema)
            return fn
        return decorator

    @property
    def patterns(self) -> list:
        return sorted(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    async def dispatch(self, pattern: str, payload: Optional[Dict[str, Any]] = None) -> Reply:
        started = time.perf_counter()
        logger.info("[rpc] <- %s", pattern)
        try:
            data = await self._run(pattern, payload or {})
        except RecordError as exc:
            elapsed = (time.perf_counter() - started) * 1000
            if exc.kind is ErrorKind.STORE_FAILURE:
                logger.error("[rpc] x %s %s (+%.0fms): %s", pattern, exc.code, elapsed, exc.message)
            else:
                logger.warning("[rpc] x %s %s (+%.0fms): %s", pattern, exc.code, elapsed, exc.message)
            return Reply.failure(exc)
        except Exception as exc:
            # Unclassified failure outside the store boundary; still answered with an envelope
            logger.exception("[rpc] x %s unexpected failure", pattern)
            return Reply.failure(StoreFailure("request", f"handle {pattern}", exc))
        logger.info("[rpc] -> %s ok (+%.0fms)", pattern, (time.perf_counter() - started) * 1000)
        return Reply.success(data)

    async def _run(self, pattern: str, payload: Dict[str, Any]) -> Any:
        try:
            handler, schema = self._handlers[pattern]
        except KeyError:
            raise UnknownPattern(pattern) from None

        if schema is None:
            return await handler(payload)
        if not isinstance(payload, dict):
            raise ValidationFailure("Payload must be a JSON object")
        try:
            body = schema.model_validate(payload)
        except ValidationError as exc:
            raise ValidationFailure(
                f"Invalid payload for {pattern}",
                details=_validation_details(exc),
            ) from exc
        return await handler(body)
