"""User application service: registration, lookup and chat contacts."""

from __future__ import annotations

import logging
from typing import Any

from schoolpay.application.interfaces.collections import COLLECTION_USERS
from schoolpay.application.interfaces.record_store import RecordStore
from schoolpay.domain.exceptions import RecordNotFoundException
from schoolpay.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class UserService:
    """Users are keyed by their Firebase Auth uid."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    async def create_user(
        self, user_id: str, surname: str, firstname: str, email: str, phone: str
    ) -> str:
        """Write the user document under user_id (re-registering overwrites it)."""
        doc_id = await self._store.create(
            COLLECTION_USERS,
            {
                "uid": user_id,
                "email": email,
                "surname": surname,
                "firstname": firstname,
                "phone": phone,
                "org_status": "false",
                "createdAt": utc_now(),
            },
            doc_id=user_id,
        )
        logger.info("User created: %s", doc_id)
        return doc_id

    async def get_user(self, user_id: str) -> dict[str, Any]:
        """Return the user record. Raises RecordNotFoundException if absent."""
        user = await self._store.get(COLLECTION_USERS, user_id)
        if user is None:
            raise RecordNotFoundException(COLLECTION_USERS, user_id)
        return user

    async def list_contacts(self, uid: str) -> list[dict[str, Any]]:
        """Return every user except uid, shaped for the contact list."""
        users = await self._store.list(COLLECTION_USERS, "uid", "!=", uid)
        contacts = []
        for user in users:
            # Guard for records whose document id and uid field disagree.
            if user["id"] == uid:
                continue
            name = " ".join(
                part for part in (user.get("firstname"), user.get("surname")) if part
            )
            contacts.append(
                {
                    "id": user["id"],
                    "name": name or user.get("email") or user["id"],
                    "email": user.get("email"),
                    "phone": user.get("phone"),
                    "avatar": user.get("avatar"),
                }
            )
        return contacts
