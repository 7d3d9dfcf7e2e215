"""Transaction service: append-only payment records."""

from __future__ import annotations

import logging
from typing import Any

from schoolpay.application.interfaces.collections import COLLECTION_TRANSACTIONS
from schoolpay.application.interfaces.record_store import RecordStore
from schoolpay.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class TransactionService:
    def __init__(self, store: RecordStore) -> None:
        self._store = store

    async def record(self, data: dict[str, Any]) -> str:
        """Store a transaction reported by the client; return its id."""
        tx_id = await self._store.create(
            COLLECTION_TRANSACTIONS, {**data, "createdAt": utc_now()}
        )
        logger.info("Transaction %s recorded (reference %s)", tx_id, data.get("reference"))
        return tx_id
