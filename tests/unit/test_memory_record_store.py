"""Unit tests for InMemoryRecordStore (the contract FirestoreRecordStore also follows)."""

import pytest

from schoolpay.domain.exceptions import RecordNotFoundException
from schoolpay.infrastructure.memory import InMemoryRecordStore


async def test_create_generates_distinct_ids() -> None:
    store = InMemoryRecordStore()
    a = await store.create("support", {"name": "a"})
    b = await store.create("support", {"name": "b"})
    assert a != b
    assert {r["id"] for r in await store.list("support")} == {a, b}


async def test_create_with_id_overwrites() -> None:
    store = InMemoryRecordStore()
    await store.create("users", {"email": "old@example.com", "phone": "1"}, doc_id="u1")
    await store.create("users", {"email": "new@example.com"}, doc_id="u1")
    assert await store.get("users", "u1") == {"email": "new@example.com", "id": "u1"}


async def test_returned_records_are_copies() -> None:
    store = InMemoryRecordStore()
    await store.create("users", {"tags": ["a"]}, doc_id="u1")
    record = await store.get("users", "u1")
    record["tags"].append("b")
    assert (await store.get("users", "u1"))["tags"] == ["a"]


async def test_inequality_filter_skips_records_without_field() -> None:
    store = InMemoryRecordStore()
    await store.create("users", {"uid": "u1"}, doc_id="u1")
    await store.create("users", {"uid": "u2"}, doc_id="u2")
    await store.create("users", {"email": "legacy@example.com"}, doc_id="u3")
    records = await store.list("users", "uid", "!=", "u1")
    assert [r["id"] for r in records] == ["u2"]


async def test_update_merges_and_requires_existing_document() -> None:
    store = InMemoryRecordStore()
    await store.create("payments", {"title": "Tuition", "amount": 10.0}, doc_id="f1")
    await store.update("payments", "f1", {"amount": 12.5})
    assert await store.get("payments", "f1") == {"title": "Tuition", "amount": 12.5, "id": "f1"}

    with pytest.raises(RecordNotFoundException) as exc_info:
        await store.update("payments", "ghost", {"amount": 1.0})
    assert exc_info.value.details == {"collection": "payments", "record_id": "ghost"}


async def test_unsupported_operator_raises() -> None:
    with pytest.raises(ValueError):
        await InMemoryRecordStore().list("users", "uid", ">", "u1")
