"""Unit tests for OrganizationService (two writes with compensation)."""

from unittest.mock import AsyncMock

import pytest

from schoolpay.application.services import OrganizationService
from schoolpay.domain.exceptions import RecordNotFoundException, RecordStoreException

ORG = {
    "instituteName": "Unity Secondary School",
    "instituteType": "secondary",
    "otherType": "none",
    "email": "admin@unity.edu.ng",
    "phone": "+2348000000002",
    "address": "12 School Road, Lagos",
    "review_status": "pending",
}


def _store() -> AsyncMock:
    store = AsyncMock()
    store.create.return_value = "org-1"
    return store


async def test_activate_creates_org_then_links_owner() -> None:
    store = _store()
    org_id = await OrganizationService(store).activate("u1", "true", ORG)

    assert org_id == "org-1"
    collection, data = store.create.await_args.args
    assert collection == "organizations"
    assert data["owner_id"] == "u1"
    assert "status" not in data
    store.update.assert_awaited_once_with(
        "users", "u1", {"org_status": "true", "org_id": "org-1"}
    )
    store.delete.assert_not_awaited()


async def test_activate_removes_org_when_owner_missing() -> None:
    store = _store()
    store.update.side_effect = RecordNotFoundException("users", "ghost")

    with pytest.raises(RecordNotFoundException):
        await OrganizationService(store).activate("ghost", "true", ORG)
    store.delete.assert_awaited_once_with("organizations", "org-1")


async def test_activate_reraises_original_error_when_compensation_fails() -> None:
    store = _store()
    store.update.side_effect = RecordStoreException("update", "users")
    store.delete.side_effect = RecordStoreException("delete", "organizations")

    with pytest.raises(RecordStoreException) as exc_info:
        await OrganizationService(store).activate("u1", "true", ORG)
    assert exc_info.value.operation == "update"


async def test_activate_does_not_update_owner_when_create_fails() -> None:
    store = _store()
    store.create.side_effect = RecordStoreException("create", "organizations")

    with pytest.raises(RecordStoreException):
        await OrganizationService(store).activate("u1", "true", ORG)
    store.update.assert_not_awaited()
