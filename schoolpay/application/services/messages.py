"""Message service: chat messages keyed by a client-chosen id."""

from __future__ import annotations

import logging
from typing import Any

from schoolpay.application.interfaces.collections import COLLECTION_MESSAGES
from schoolpay.application.interfaces.record_store import RecordStore
from schoolpay.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class MessageService:
    def __init__(self, store: RecordStore) -> None:
        self._store = store

    async def send(
        self,
        message_id: str,
        *,
        to_user_id: str,
        from_user_id: str,
        text: str,
        timestamp: Any,
        status: str,
        unread: bool = True,
    ) -> str:
        """Store the message under message_id; resending the same id overwrites it."""
        await self._store.create(
            COLLECTION_MESSAGES,
            {
                "to_user_id": to_user_id,
                "from_user_id": from_user_id,
                "text": text,
                "timestamp": timestamp,
                "status": status,
                "unread": unread,
                "createdAt": utc_now(),
            },
            doc_id=message_id,
        )
        logger.info("Message %s stored", message_id)
        return message_id
