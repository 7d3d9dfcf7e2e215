"""Unit tests for FirestoreRecordStore against a mocked Firestore REST API."""

import json

import httpx
import pytest

from schoolpay.domain.exceptions import RecordNotFoundException, RecordStoreException
from schoolpay.infrastructure.firebase._rest_client import FirestoreRESTClient
from schoolpay.infrastructure.firebase.record_store import FirestoreRecordStore

_DOCS = "https://firestore.googleapis.com/v1/projects/demo/databases/(default)/documents"


def _store(handler) -> tuple[FirestoreRecordStore, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(recording))
    client = FirestoreRESTClient("demo", api_key="web-key", http_client=http)
    return FirestoreRecordStore(client), seen


async def test_create_with_id_sets_document_and_sends_api_key() -> None:
    store, seen = _store(lambda r: httpx.Response(200, json={}))
    doc_id = await store.create("users", {"uid": "u1", "org_status": "false"}, doc_id="u1")

    assert doc_id == "u1"
    [request] = seen
    assert request.method == "PATCH"
    assert request.url.path.endswith("/documents/users/u1")
    assert request.url.params["key"] == "web-key"
    assert "Authorization" not in request.headers
    assert json.loads(request.content)["fields"]["uid"] == {"stringValue": "u1"}


async def test_create_without_id_posts_generated_document_id() -> None:
    store, seen = _store(lambda r: httpx.Response(200, json={}))
    doc_id = await store.create("payments", {"title": "Tuition"})

    [request] = seen
    assert request.method == "POST"
    assert request.url.path.endswith("/documents/payments")
    assert request.url.params["documentId"] == doc_id


async def test_get_missing_document_returns_none() -> None:
    store, _ = _store(lambda r: httpx.Response(404, json={"error": {"message": "nope"}}))
    assert await store.get("users", "ghost") is None


async def test_get_returns_fields_with_id() -> None:
    body = {
        "name": f"{_DOCS}/users/u1".split("/v1/")[1],
        "fields": {"email": {"stringValue": "ada@example.com"}},
    }
    store, _ = _store(lambda r: httpx.Response(200, json=body))
    assert await store.get("users", "u1") == {"email": "ada@example.com", "id": "u1"}


async def test_list_builds_field_filter_query() -> None:
    rows = [
        {"document": {"name": "projects/demo/databases/(default)/documents/users/u2",
                      "fields": {"uid": {"stringValue": "u2"}}}},
        {"readTime": "2024-01-01T00:00:00Z"},
    ]
    store, seen = _store(lambda r: httpx.Response(200, json=rows))
    records = await store.list("users", "uid", "!=", "u1")

    assert records == [{"uid": "u2", "id": "u2"}]
    [request] = seen
    assert request.url.path.endswith("/documents:runQuery")
    query = json.loads(request.content)["structuredQuery"]
    assert query["from"] == [{"collectionId": "users"}]
    assert query["where"]["fieldFilter"] == {
        "field": {"fieldPath": "uid"},
        "op": "NOT_EQUAL",
        "value": {"stringValue": "u1"},
    }


async def test_list_with_only_read_time_is_empty() -> None:
    store, _ = _store(lambda r: httpx.Response(200, json=[{"readTime": "2024-01-01T00:00:00Z"}]))
    assert await store.list("payments", "org_id", "==", "org-x") == []


async def test_update_uses_mask_and_existence_precondition() -> None:
    store, seen = _store(lambda r: httpx.Response(200, json={}))
    await store.update("users", "u1", {"org_status": "true", "org_id": "o1"})

    [request] = seen
    assert request.method == "PATCH"
    assert request.url.params.get_list("updateMask.fieldPaths") == ["org_status", "org_id"]
    assert request.url.params["currentDocument.exists"] == "true"


async def test_update_missing_document_raises_not_found() -> None:
    store, _ = _store(lambda r: httpx.Response(404, json={"error": {"message": "no entity"}}))
    with pytest.raises(RecordNotFoundException):
        await store.update("payments", "ghost", {"title": "x"})


async def test_delete_missing_document_is_not_an_error() -> None:
    store, _ = _store(lambda r: httpx.Response(404))
    await store.delete("payments", "ghost")


async def test_server_error_maps_to_record_store_exception() -> None:
    store, _ = _store(
        lambda r: httpx.Response(403, json={"error": {"message": "Missing or insufficient permissions."}})
    )
    with pytest.raises(RecordStoreException) as exc_info:
        await store.create("support", {"name": "Ada"})
    assert exc_info.value.operation == "create"
    assert "insufficient permissions" in str(exc_info.value.__cause__)


async def test_transport_error_maps_to_record_store_exception() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    store, _ = _store(refuse)
    with pytest.raises(RecordStoreException):
        await store.list("payments", "org_id", "==", "o1")


@pytest.mark.parametrize(
    ("doc_id", "encoded"),
    [
        ("a#b", b"/documents/messages/a%23b"),
        ("m1?currentDocument.exists=false", b"/documents/messages/m1%3FcurrentDocument.exists%3Dfalse"),
        ("50%25", b"/documents/messages/50%2525"),
        ("ada lovelace", b"/documents/messages/ada%20lovelace"),
    ],
)
async def test_document_ids_are_percent_encoded_in_the_path(doc_id: str, encoded: bytes) -> None:
    store, seen = _store(lambda r: httpx.Response(200, json={}))
    assert await store.create("messages", {"text": "hi"}, doc_id=doc_id) == doc_id

    [request] = seen
    path, _, query = request.url.raw_path.partition(b"?")
    assert path.endswith(encoded)
    assert b"currentDocument" not in query


async def test_get_keeps_unencoded_id_on_record() -> None:
    body = {"name": "projects/demo/databases/(default)/documents/users/a#b", "fields": {}}
    store, seen = _store(lambda r: httpx.Response(200, json=body))
    assert await store.get("users", "a#b") == {"id": "a#b"}
    assert seen[0].url.raw_path.partition(b"?")[0].endswith(b"/documents/users/a%23b")


@pytest.mark.parametrize("doc_id", [".", "..", "__name__", "a/b", ""])
async def test_reserved_or_malformed_document_ids_are_rejected(doc_id: str) -> None:
    store, seen = _store(lambda r: httpx.Response(200, json={}))
    with pytest.raises(ValueError):
        await store.create("messages", {"text": "hi"}, doc_id=doc_id)
    assert seen == []


async def test_list_rejects_operators_outside_equality() -> None:
    store, seen = _store(lambda r: httpx.Response(200, json=[]))
    with pytest.raises(ValueError, match="Unsupported query operator"):
        await store.list("users", "age", "<", 3)
    assert seen == []
