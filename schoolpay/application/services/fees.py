"""Fee service: fees an organization charges, stored in the payments collection."""

from __future__ import annotations

import logging
from typing import Any

from schoolpay.application.interfaces.collections import COLLECTION_FEES
from schoolpay.application.interfaces.record_store import RecordStore
from schoolpay.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class FeeService:
    def __init__(self, store: RecordStore) -> None:
        self._store = store

    async def create_fee(
        self, title: str, amount: float, description: str, org_id: str
    ) -> str:
        now = utc_now()
        fee_id = await self._store.create(
            COLLECTION_FEES,
            {
                "title": title,
                "amount": amount,
                "description": description,
                "org_id": org_id,
                "createdAt": now,
                "updatedAt": now,
            },
        )
        logger.info("Fee %s created for organization %s", fee_id, org_id)
        return fee_id

    async def list_fees(self, org_id: str) -> list[dict[str, Any]]:
        """Return the fees whose org_id matches (empty list when none)."""
        return await self._store.list(COLLECTION_FEES, "org_id", "==", org_id)

    async def update_fee(self, fee_id: str, changes: dict[str, Any]) -> None:
        """Apply the given fields and refresh updatedAt. Raises RecordNotFoundException if absent."""
        await self._store.update(COLLECTION_FEES, fee_id, {**changes, "updatedAt": utc_now()})
        logger.info("Fee %s updated", fee_id)

    async def delete_fee(self, fee_id: str) -> None:
        await self._store.delete(COLLECTION_FEES, fee_id)
        logger.info("Fee %s deleted", fee_id)
