"""
Unit tests for core.errors and the store error boundary.
"""
import pytest
from tortoise.exceptions import OperationalError

from app.core.errors import (
    DuplicateActiveRecord,
    ErrorKind,
    NotFound,
    ParentNotFound,
    StoreFailure,
    ValidationFailure,
    VersionConflict,
)
from app.core.store import RecordStore
from app.models import UserProfile


class TestErrorKinds:
    @pytest.mark.parametrize(
        "error, status",
        [
            (NotFound("Profile", "1"), 404),
            (ParentNotFound("Profile", "1"), 404),
            (DuplicateActiveRecord("Profile", "auth_user_id", "u1"), 409),
            (VersionConflict("Profile"), 409),
            (ValidationFailure("bad"), 400),
            (StoreFailure("Profile", "read", RuntimeError("x")), 500),
        ],
    )
    def test_status_codes(self, error, status):
        assert error.status_code == status

    def test_not_found_code_is_entity_specific(self):
        assert NotFound("Subscription", "42").code == "SUBSCRIPTION_NOT_FOUND"

    def test_to_dict(self):
        data = DuplicateActiveRecord("Profile", "auth_user_id", "u1").to_dict()
        assert data["kind"] == ErrorKind.DUPLICATE_ACTIVE_RECORD.value
        assert data["code"] == "DUPLICATE_ACTIVE_RECORD"
        assert "u1" in data["message"]

    def test_validation_details_only_when_present(self):
        assert "details" not in ValidationFailure("bad").to_dict()
        assert ValidationFailure("bad", details=[{"loc": ["x"]}]).to_dict()["details"] == [{"loc": ["x"]}]

    def test_version_conflict_message(self):
        assert "Please refresh and try again" in VersionConflict("Settings").message


class TestStoreGuard:
    def test_orm_errors_are_wrapped(self):
        store = RecordStore(UserProfile, "Profile")
        with pytest.raises(StoreFailure) as exc:
            with store._guard("read"):
                raise OperationalError("connection lost")
        assert isinstance(exc.value.cause, OperationalError)
        assert exc.value.kind is ErrorKind.STORE_FAILURE

    def test_record_errors_pass_through(self):
        store = RecordStore(UserProfile, "Profile")
        with pytest.raises(VersionConflict):
            with store._guard("update"):
                raise VersionConflict("Profile")

    def test_driver_errors_are_wrapped(self):
        store = RecordStore(UserProfile, "Profile")
        with pytest.raises(StoreFailure) as exc:
            with store._guard("read"):
                raise ConnectionResetError("connection lost")
        assert isinstance(exc.value.cause, ConnectionResetError)
        assert exc.value.status_code == 500
