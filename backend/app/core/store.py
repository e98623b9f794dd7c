# app/core/store.py
"""
Store boundary for record managers.

RecordStore wraps one Tortoise model and exposes the handful of operations the
lifecycle protocol needs: point lookups, filtered scans, inserts and atomic
conditional updates. ORM and driver exceptions never leave this module unclassified.
"""
import datetime as dt
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional, Type

from tortoise.exceptions import IntegrityError
from tortoise.expressions import F
from tortoise.models import Model

from app.core.errors import DuplicateActiveRecord, RecordError, StoreFailure

logger = logging.getLogger("uvicorn.error")


def utc_now() -> dt.datetime:
    """
    Get current UTC datetime with timezone information.

    Returns:
        dt.datetime: Current UTC datetime with timezone awareness
    """
    return dt.datetime.now(dt.timezone.utc)


class RecordStore:
    """
    Thin handle over a single table.

    Instances are created once per process (see app.services.registry) and
    passed explicitly to the managers that use them.
    """

    def __init__(self, model: Type[Model], entity: str):
        self.model = model
        self.entity = entity  # Human-readable name used in error messages

    @contextmanager
    def _guard(self, operation: str):
        try:
            yield
        except RecordError:
            raise
        except Exception as exc:
            logger.exception("[store] %s %s failed", operation, self.entity)
            raise StoreFailure(self.entity, operation, exc) from exc

    # -------- reads --------
    async def get_any(self, **filters) -> Optional[Model]:
        """Point lookup that also sees soft-deleted rows (maintenance path)."""
        with self._guard("read"):
            return await self.model.filter(**filters).first()

    async def get_active(self, **filters) -> Optional[Model]:
        with self._guard("read"):
            return await self.model.filter(is_deleted=False, **filters).first()

    async def list_active(
        self,
        order_by: Iterable[str] = ("-created_at",),
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        **filters,
    ) -> List[Model]:
        qs = self.model.filter(is_deleted=False, **filters).order_by(*order_by)
        if offset:
            qs = qs.offset(offset)
        if limit is not None:
            qs = qs.limit(limit)
        with self._guard("list"):
            return await qs

    async def count_active(self, **filters) -> int:
        with self._guard("count"):
            return await self.model.filter(is_deleted=False, **filters).count()

    # -------- writes --------
    async def insert(self, conflict_key: Optional[str] = None, **values) -> Model:
        """
        Insert a new row.

        A uniqueness violation on the natural key means a concurrent create won
        the race; it is reported as DuplicateActiveRecord.
        """
        with self._guard("create"):
            try:
                return await self.model.create(**values)
            except IntegrityError as exc:
                if conflict_key is None:
                    raise
                raise DuplicateActiveRecord(self.entity, conflict_key, values.get(conflict_key)) from exc

    async def update_where(
        self,
        filters: Dict[str, Any],
        values: Dict[str, Any],
        bump_version: bool = True,
    ) -> int:
        """
        Atomic conditional write.

        Only rows matching `filters` at write time are touched, so passing the
        version that was read turns this into a compare-and-set. Returns the
        number of rows written (0 means the precondition no longer holds).
        """
        values = dict(values)
        values["updated_at"] = utc_now()
        if bump_version:
            values["version"] = F("version") + 1
        with self._guard("update"):
            return await self.model.filter(**filters).update(**values)
