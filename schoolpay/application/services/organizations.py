"""Organization activation: create the organization and link it to its owner."""

from __future__ import annotations

import logging
from typing import Any

from schoolpay.application.interfaces.collections import (
    COLLECTION_ORGANIZATIONS,
    COLLECTION_USERS,
)
from schoolpay.application.interfaces.record_store import RecordStore
from schoolpay.domain.exceptions import SchoolPayException
from schoolpay.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class OrganizationService:
    """Activates an organization for a user.

    Two independent writes: the organization document, then the owner's
    org_status/org_id. If the second write fails the organization is deleted
    again so no orphan is left behind, and the original error is re-raised.
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    async def activate(
        self, owner_id: str, status: str, details: dict[str, Any]
    ) -> str:
        """Create the organization and update the owner; return the organization id.

        details holds the organization fields (instituteName, instituteType,
        otherType, email, phone, address, review_status) as sent by the client.

        Raises:
            RecordNotFoundException: If owner_id is not an existing user.
            RecordStoreException: If either write fails.
        """
        org_id = await self._store.create(
            COLLECTION_ORGANIZATIONS,
            {**details, "owner_id": owner_id, "createdAt": utc_now()},
        )
        try:
            await self._store.update(
                COLLECTION_USERS, owner_id, {"org_status": status, "org_id": org_id}
            )
        except SchoolPayException:
            await self._discard(org_id, owner_id)
            raise
        logger.info("Organization %s activated for user %s", org_id, owner_id)
        return org_id

    async def _discard(self, org_id: str, owner_id: str) -> None:
        try:
            await self._store.delete(COLLECTION_ORGANIZATIONS, org_id)
        except SchoolPayException:
            logger.exception(
                "Could not remove organization %s after failing to link owner %s",
                org_id,
                owner_id,
            )
        else:
            logger.warning(
                "Organization %s removed: owner %s could not be updated", org_id, owner_id
            )
