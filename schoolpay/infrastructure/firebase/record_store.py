"""Firestore-backed record store (implements RecordStore)."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from google.auth.exceptions import GoogleAuthError

from schoolpay.application.interfaces.record_store import FilterOp
from schoolpay.domain.exceptions import RecordNotFoundException, RecordStoreException
from schoolpay.infrastructure.firebase._rest_client import (
    DocumentNotFoundError,
    FirestoreError,
    FirestoreRESTClient,
)
from schoolpay.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)

_STORE_ERRORS = (FirestoreError, httpx.HTTPError, GoogleAuthError)


class FirestoreRecordStore:
    """Record store over the Firestore REST client.

    Maps client and transport errors to RecordStoreException so callers never
    see httpx or Firestore types.
    """

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    async def create(
        self, collection: str, data: dict[str, Any], doc_id: str | None = None
    ) -> str:
        """Set the document when the caller names it, otherwise create under a new CUID."""
        coll = self._client.collection(collection)
        try:
            if doc_id is not None:
                await coll.document(doc_id).set(data)
                return doc_id
            new_id = generate_cuid()
            await coll.create(new_id, data)
            return new_id
        except _STORE_ERRORS as e:
            raise RecordStoreException("create", collection) from e

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        try:
            snapshot = await self._client.collection(collection).document(doc_id).get()
        except _STORE_ERRORS as e:
            raise RecordStoreException("get", collection) from e
        if snapshot is None:
            return None
        return {**snapshot.to_dict(), "id": snapshot.id}

    async def list(
        self,
        collection: str,
        field: str | None = None,
        op: FilterOp = "==",
        value: Any = None,
    ) -> list[dict[str, Any]]:
        coll = self._client.collection(collection)
        query = coll.where(field, op, value) if field is not None else coll
        records: list[dict[str, Any]] = []
        try:
            async for snapshot in query.stream():
                records.append({**snapshot.to_dict(), "id": snapshot.id})
        except _STORE_ERRORS as e:
            raise RecordStoreException("list", collection) from e
        return records

    async def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        try:
            await self._client.collection(collection).document(doc_id).update(fields)
        except DocumentNotFoundError:
            raise RecordNotFoundException(collection, doc_id) from None
        except _STORE_ERRORS as e:
            raise RecordStoreException("update", collection) from e

    async def delete(self, collection: str, doc_id: str) -> None:
        try:
            await self._client.collection(collection).document(doc_id).delete()
        except _STORE_ERRORS as e:
            raise RecordStoreException("delete", collection) from e

    async def aclose(self) -> None:
        await self._client.aclose()
        logger.info("Firestore HTTP client closed")
