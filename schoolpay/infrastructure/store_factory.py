"""Select the record store implementation from settings."""

from schoolpay.application.interfaces.record_store import RecordStore
from schoolpay.core.config import Settings


def create_record_store(settings: Settings) -> RecordStore:
    """Return the record store for settings.database_backend ('firestore' or 'memory')."""
    if settings.database_backend == "memory":
        from schoolpay.infrastructure.memory import InMemoryRecordStore

        return InMemoryRecordStore()
    from schoolpay.infrastructure.firebase import create_firestore_store

    return create_firestore_store(settings)
