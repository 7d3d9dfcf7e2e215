"""Thin Firestore REST API client (no firebase-admin).

Authenticates either with a service account (google-auth access token) or
with the Firebase web API key (``?key=``, access governed by security rules).
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import AsyncIterator
from typing import Any
from urllib.parse import quote

import httpx

from schoolpay.infrastructure.firebase._rest_encoding import (
    decode_document,
    document_id,
    encode_document,
    encode_value,
)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"
_SIMPLE_FIELD = re.compile(r"^[a-zA-Z_][a-zA-Z_0-9]*$")
_RESERVED_ID = re.compile(r"^(\.|\.\.|__.*__)$")


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


def _field_path(field: str) -> str:
    """Quote a field name with backticks unless it is a simple identifier."""
    if _SIMPLE_FIELD.match(field):
        return field
    return "`" + field.replace("\\", "\\\\").replace("`", "\\`") + "`"


class FirestoreError(Exception):
    """Raised when the Firestore REST API answers with an unexpected status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(f"Firestore returned {status_code}: {message}")


class DocumentNotFoundError(FirestoreError):
    """Raised when a precondition requires an existing document and it is missing."""


def _error_message(resp: httpx.Response) -> str:
    try:
        return resp.json().get("error", {}).get("message", resp.reason_phrase)
    except (ValueError, AttributeError):
        return resp.reason_phrase


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", collection_path: str, document_id: str):
        self._client = client
        self.id = document_id
        self._path = f"{collection_path}/{quote(document_id, safe='')}"

    async def set(self, data: dict[str, Any]) -> None:
        """Create or overwrite the document (PATCH without a mask replaces all fields)."""
        await self._client._send("PATCH", self._path, body=encode_document(data))

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        out = await self._client._send("GET", self._path, missing_ok=True)
        if out is None:
            return None
        return DocumentSnapshot(self.id, decode_document(out))

    async def update(self, data: dict[str, Any]) -> None:
        """Merge the given fields into an existing document.

        Raises:
            DocumentNotFoundError: If the document does not exist.
        """
        params: dict[str, Any] = {
            "updateMask.fieldPaths": [_field_path(k) for k in data],
            "currentDocument.exists": "true",
        }
        await self._client._send(
            "PATCH", self._path, params=params, body=encode_document(data)
        )

    async def delete(self) -> None:
        """Delete the document. Idempotent if document is already missing (404)."""
        await self._client._send("DELETE", self._path, missing_ok=True)


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


_OP_MAP: dict[str, str] = {"==": "EQUAL", "!=": "NOT_EQUAL"}


class _Query:
    """Query on one collection with an optional single field filter (runQuery)."""

    def __init__(
        self,
        client: "FirestoreRESTClient",
        parent: str,
        collection_id: str,
        *,
        where_field: str | None = None,
        where_op: str = "==",
        where_value: Any = None,
    ):
        if where_field is not None and where_op not in _OP_MAP:
            raise ValueError(f"Unsupported query operator: {where_op!r}")
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._where_field = where_field
        self._where_op = _OP_MAP.get(where_op, "EQUAL")
        self._where_value = where_value

    def structured_query(self) -> dict[str, Any]:
        structured: dict[str, Any] = {
            "from": [{"collectionId": self._collection_id}],
        }
        if self._where_field is not None:
            structured["where"] = {
                "fieldFilter": {
                    "field": {"fieldPath": _field_path(self._where_field)},
                    "op": self._where_op,
                    "value": encode_value(self._where_value),
                }
            }
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        resp = await self._client._send(
            "POST",
            f"{self._parent}:runQuery",
            body={"structuredQuery": self.structured_query()},
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            doc = item.get("document")
            if not doc:
                continue
            yield DocumentSnapshot(document_id(doc), decode_document(doc))


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")
        self.id = self._path.rsplit("/", 1)[-1]

    def document(self, document_id: str) -> DocumentReference:
        """Reference a document by id; the id is percent-encoded into the URL path.

        Raises:
            ValueError: Empty, contains '/', or is a reserved id (".", "..", "__x__").
        """
        if not document_id or "/" in document_id or _RESERVED_ID.match(document_id):
            raise ValueError(f"Invalid document id: {document_id!r}")
        return DocumentReference(self._client, self._path, document_id)

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        """Create a document with the given ID (Firestore answers 409 if it exists)."""
        await self._client._send(
            "POST",
            self._path,
            params={"documentId": document_id},
            body=encode_document(data),
        )

    def where(self, field: str, op: str, value: Any) -> _Query:
        """Start a query with one field filter; run it with .stream()."""
        return _Query(
            self._client,
            self._parent(),
            self.id,
            where_field=field,
            where_op=op,
            where_value=value,
        )

    def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Yield every document in the collection."""
        return _Query(self._client, self._parent(), self.id).stream()

    def _parent(self) -> str:
        return self._path.rsplit("/", 1)[0]


class FirestoreRESTClient:
    """Lightweight Firestore client using the REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials=None,
        *,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._credentials = credentials
        self._api_key = api_key
        self._prefix = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str | None:
        """Return a valid access token, or None in API-key mode.

        Token refresh is a blocking google-auth call, so it runs in the thread pool.
        """
        if self._credentials is None:
            return None
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict | None = None,
        missing_ok: bool = False,
    ) -> Any:
        """Perform one REST call. A 404 returns None when missing_ok, else raises."""
        headers = {"Content-Type": "application/json"}
        query: dict[str, Any] = dict(params or {})
        token = await self.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        elif self._api_key:
            query["key"] = self._api_key
        resp = await self._http.request(
            method, f"{_BASE}/{path}", headers=headers, params=query, json=body
        )
        if resp.status_code == 404:
            if missing_ok:
                return None
            raise DocumentNotFoundError(404, _error_message(resp))
        if resp.status_code not in (200, 204):
            raise FirestoreError(resp.status_code, _error_message(resp))
        if method == "DELETE" or not resp.content:
            return {}
        return resp.json()
