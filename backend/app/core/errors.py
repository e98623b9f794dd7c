# app/core/errors.py
"""
Error taxonomy for record operations.

Every failure a record manager can report is a RecordError carrying an
ErrorKind. The kind decides how the transport layer answers (404 / 409 /
400 / 500 equivalents); the code is the stable machine-readable string
sent to clients.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    DUPLICATE_ACTIVE_RECORD = "duplicate_active_record"
    VERSION_CONFLICT = "version_conflict"
    PARENT_NOT_FOUND = "parent_not_found"
    VALIDATION_FAILURE = "validation_failure"
    STORE_FAILURE = "store_failure"


# HTTP-equivalent status for each kind
KIND_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PARENT_NOT_FOUND: 404,
    ErrorKind.DUPLICATE_ACTIVE_RECORD: 409,
    ErrorKind.VERSION_CONFLICT: 409,
    ErrorKind.VALIDATION_FAILURE: 400,
    ErrorKind.STORE_FAILURE: 500,
}


class RecordError(Exception):
    """Base class for all record-level failures."""
    kind: ErrorKind = ErrorKind.STORE_FAILURE

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.kind.name

    @property
    def status_code(self) -> int:
        return KIND_STATUS[self.kind]

    def to_dict(self) -> dict:
        return {"code": self.code, "kind": self.kind.value, "message": self.message}


def _entity_code(entity: str) -> str:
    return entity.upper().replace(" ", "_")


class NotFound(RecordError):
    """Record does not exist or is soft-deleted."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, identifier):
        super().__init__(f"{entity} not found: {identifier}", code=f"{_entity_code(entity)}_NOT_FOUND")
        self.entity = entity
        self.identifier = identifier


class ParentNotFound(RecordError):
    """A child create referenced a missing or soft-deleted parent."""
    kind = ErrorKind.PARENT_NOT_FOUND

    def __init__(self, entity: str, identifier):
        super().__init__(f"{entity} not found: {identifier}", code="PARENT_NOT_FOUND")
        self.entity = entity
        self.identifier = identifier


class DuplicateActiveRecord(RecordError):
    """Natural-key collision with a non-deleted record."""
    kind = ErrorKind.DUPLICATE_ACTIVE_RECORD

    def __init__(self, entity: str, key: str, value):
        super().__init__(f"{entity} already exists for {key}: {value}", code="DUPLICATE_ACTIVE_RECORD")
        self.entity = entity


class VersionConflict(RecordError):
    """Caller's expected version is stale, or another writer won the race."""
    kind = ErrorKind.VERSION_CONFLICT

    def __init__(self, entity: str):
        super().__init__(
            f"{entity} has been modified. Please refresh and try again.",
            code="VERSION_CONFLICT",
        )
        self.entity = entity


class ValidationFailure(RecordError):
    """Business-rule violation beyond field-level shape."""
    kind = ErrorKind.VALIDATION_FAILURE

    def __init__(self, message: str, code: str = "VALIDATION_FAILED", details=None):
        super().__init__(message, code=code)
        self.details = details

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.details is not None:
            data["details"] = self.details
        return data


class StoreFailure(RecordError):
    """Unclassified persistent-store failure, wrapped with its cause."""
    kind = ErrorKind.STORE_FAILURE

    def __init__(self, entity: str, operation: str, cause: Exception):
        super().__init__(f"Failed to {operation} {entity}", code="STORE_FAILURE")
        self.entity = entity
        self.cause = cause
