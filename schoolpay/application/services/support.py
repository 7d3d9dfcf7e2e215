"""Support service: user complaints."""

from __future__ import annotations

import logging

from schoolpay.application.interfaces.collections import COLLECTION_SUPPORT
from schoolpay.application.interfaces.record_store import RecordStore
from schoolpay.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class SupportService:
    def __init__(self, store: RecordStore) -> None:
        self._store = store

    async def submit_complaint(self, name: str, email: str, complaint: str) -> str:
        complaint_id = await self._store.create(
            COLLECTION_SUPPORT,
            {"name": name, "email": email, "complaint": complaint, "createdAt": utc_now()},
        )
        logger.info("Complaint %s submitted", complaint_id)
        return complaint_id
