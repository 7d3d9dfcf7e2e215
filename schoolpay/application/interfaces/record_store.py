"""Record store interface (port) for the application layer.

Services depend on this Protocol only; the Firestore and in-memory adapters in
schoolpay.infrastructure implement it. Records are plain dicts; reads return
the document id merged in under "id".
"""

from __future__ import annotations

from typing import Any, Literal, Protocol

FilterOp = Literal["==", "!="]


class RecordStore(Protocol):
    """Create/read/update/delete/query documents in named collections.

    Every method raises RecordStoreException when the backing store is
    unreachable or rejects the operation.
    """

    async def create(
        self, collection: str, data: dict[str, Any], doc_id: str | None = None
    ) -> str:
        """Write a document and return its id.

        With doc_id the document is created or overwritten under that id;
        without it a new id is generated.
        """

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return the record (with "id") or None if it does not exist."""

    async def list(
        self,
        collection: str,
        field: str | None = None,
        op: FilterOp = "==",
        value: Any = None,
    ) -> list[dict[str, Any]]:
        """Return records matching a single-field filter (all records when field is None)."""

    async def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        """Merge fields into an existing document; RecordNotFoundException if absent."""

    async def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document; deleting a missing document is not an error."""

    async def aclose(self) -> None:
        """Release connections held by the store."""
