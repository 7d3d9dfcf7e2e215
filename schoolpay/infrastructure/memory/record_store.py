"""In-process record store (DATABASE_BACKEND=memory).

For local development without a Firebase project and for tests. Data lives for
the lifetime of the store instance only.
"""

from __future__ import annotations

import copy
from typing import Any

from schoolpay.application.interfaces.record_store import FilterOp
from schoolpay.domain.exceptions import RecordNotFoundException
from schoolpay.shared.utils.generators import generate_cuid


class InMemoryRecordStore:
    """Dict-of-dicts record store with the same contract as FirestoreRecordStore."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def _coll(self, collection: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(collection, {})

    async def create(
        self, collection: str, data: dict[str, Any], doc_id: str | None = None
    ) -> str:
        new_id = doc_id if doc_id is not None else generate_cuid()
        self._coll(collection)[new_id] = copy.deepcopy(data)
        return new_id

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        data = self._coll(collection).get(doc_id)
        if data is None:
            return None
        return {**copy.deepcopy(data), "id": doc_id}

    async def list(
        self,
        collection: str,
        field: str | None = None,
        op: FilterOp = "==",
        value: Any = None,
    ) -> list[dict[str, Any]]:
        if op not in ("==", "!="):
            raise ValueError(f"Unsupported query operator: {op!r}")
        records = []
        for doc_id, data in self._coll(collection).items():
            if field is not None:
                # Firestore excludes documents lacking the field from both == and != queries.
                if field not in data:
                    continue
                if (data[field] == value) != (op == "=="):
                    continue
            records.append({**copy.deepcopy(data), "id": doc_id})
        return records

    async def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        data = self._coll(collection).get(doc_id)
        if data is None:
            raise RecordNotFoundException(collection, doc_id)
        data.update(copy.deepcopy(fields))

    async def delete(self, collection: str, doc_id: str) -> None:
        self._coll(collection).pop(doc_id, None)

    async def aclose(self) -> None:
        return None
