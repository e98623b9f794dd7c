# app/services/lifecycle.py
"""
Versioned record lifecycle shared by every record manager.

Create (with restore-on-create for soft-deleted natural keys), active-only
lookups, optimistic-locked partial update, soft delete and administrative
transitions. Each manager owns one LifecycleProtocol configured for its
entity instead of inheriting from a common base class.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from tortoise.models import Model

from app.core.errors import (
    DuplicateActiveRecord,
    NotFound,
    ParentNotFound,
    ValidationFailure,
    VersionConflict,
)
from app.core.store import RecordStore, utc_now

logger = logging.getLogger("uvicorn.error")

# Envelope columns are owned by the protocol; patches can never set them
ENVELOPE_FIELDS = frozenset({"id", "created_at", "updated_at", "is_deleted", "deleted_at", "version"})


@dataclass
class ParentRef:
    """Foreign-key reference that must point at an active parent row."""
    store: RecordStore
    field: str  # e.g. "user_profile_id"


@dataclass
class LifecycleProtocol:
    """
    Generic lifecycle for one entity type.

    Attributes:
        store: table handle for the entity
        natural_key: business-unique column driving duplicate detection and restore
                     (None for entities that may have many rows per parent)
        parent: optional parent reference checked on create
        defaults: values applied on fresh insert for fields the caller left out
    """
    store: RecordStore
    natural_key: Optional[str] = None
    parent: Optional[ParentRef] = None
    defaults: Mapping[str, Any] = field(default_factory=dict)

    @property
    def entity(self) -> str:
        return self.store.entity

    @property
    def immutable_fields(self) -> frozenset:
        extra = {self.natural_key} if self.natural_key else set()
        if self.parent:
            extra.add(self.parent.field)
        return ENVELOPE_FIELDS | extra

    # -------- create / restore --------
    async def create(self, payload: Dict[str, Any]) -> Model:
        """
        Create a record, restore a soft-deleted one, or reject a duplicate.

        Evaluated in this order:
          1. parent must exist and be active        -> ParentNotFound
          2. natural key matches an active row      -> DuplicateActiveRecord
          3. natural key matches a soft-deleted row -> restore that row
          4. otherwise insert with version = 1
        """
        values = {k: v for k, v in payload.items() if k not in ENVELOPE_FIELDS}

        if self.parent is not None:
            parent_id = values.get(self.parent.field)
            if parent_id is None or await self.parent.store.get_active(id=parent_id) is None:
                raise ParentNotFound(self.parent.store.entity, parent_id)

        if self.natural_key is not None:
            key_value = values.get(self.natural_key)
            if key_value is None:
                raise ValidationFailure(f"{self.natural_key} is required", code="NATURAL_KEY_REQUIRED")
            existing = await self.store.get_any(**{self.natural_key: key_value})
            if existing is not None:
                if not existing.is_deleted:
                    raise DuplicateActiveRecord(self.entity, self.natural_key, key_value)
                return await self._restore(existing, values)

        record = await self.store.insert(
            conflict_key=self.natural_key,
            **{**self.defaults, **values},
        )
        logger.info("[lifecycle] %s created: %s", self.entity, record.id)
        return record

    async def _restore(self, existing: Model, values: Dict[str, Any]) -> Model:
        fields = {k: v for k, v in values.items() if k not in self.immutable_fields}
        fields.update(is_deleted=False, deleted_at=None)
        written = await self.store.update_where(
            {"id": existing.id, "is_deleted": True, "version": existing.version},
            fields,
        )
        if not written:
            # Someone restored (or recreated) the same key between our read and write
            raise DuplicateActiveRecord(self.entity, self.natural_key, getattr(existing, self.natural_key))
        logger.info("[lifecycle] %s restored from soft delete: %s", self.entity, existing.id)
        return await self.store.get_any(id=existing.id)

    # -------- reads --------
    async def find_by_id(self, record_id) -> Model:
        record = await self.store.get_active(id=record_id)
        if record is None:
            raise NotFound(self.entity, record_id)
        return record

    async def find_by_natural_key(self, value) -> Model:
        record = await self.store.get_active(**{self.natural_key: value})
        if record is None:
            raise NotFound(self.entity, value)
        return record

    async def find_raw(self, record_id) -> Optional[Model]:
        """Maintenance-only lookup: returns the row even when soft-deleted."""
        return await self.store.get_any(id=record_id)

    async def exists_active(self, record_id) -> bool:
        return await self.store.get_active(id=record_id) is not None

    # -------- mutations --------
    async def update(
        self,
        record_id,
        patch: Dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Model:
        """
        Partial update guarded by optimistic locking.

        Only keys present in `patch` are written. The write is conditioned on
        the version that was just read, so a writer racing between the read and
        the write is detected too. No internal retry: the caller re-fetches.
        """
        current = await self.find_by_id(record_id)
        if expected_version is not None and expected_version != current.version:
            raise VersionConflict(self.entity)

        fields = {k: v for k, v in patch.items() if k not in self.immutable_fields}
        written = await self.store.update_where(
            {"id": current.id, "is_deleted": False, "version": current.version},
            fields,
        )
        if not written:
            if await self.store.get_active(id=current.id) is None:
                raise NotFound(self.entity, record_id)
            raise VersionConflict(self.entity)

        logger.info("[lifecycle] %s updated: %s (v%d)", self.entity, current.id, current.version + 1)
        return await self.store.get_any(id=current.id)

    async def soft_delete(self, record_id) -> None:
        current = await self.find_by_id(record_id)
        written = await self.store.update_where(
            {"id": current.id, "is_deleted": False},
            {"is_deleted": True, "deleted_at": utc_now()},
        )
        if not written:
            raise NotFound(self.entity, record_id)
        logger.info("[lifecycle] %s soft deleted: %s", self.entity, current.id)

    async def apply(self, record_id, fields: Dict[str, Any]) -> Model:
        """
        Administrative transition write.

        No caller-supplied version: the version is still incremented atomically,
        but a concurrent user update is overridden rather than rejected.
        """
        written = await self.store.update_where(
            {"id": record_id, "is_deleted": False},
            {k: v for k, v in fields.items() if k not in self.immutable_fields},
        )
        if not written:
            raise NotFound(self.entity, record_id)
        return await self.store.get_any(id=record_id)
