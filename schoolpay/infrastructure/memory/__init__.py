"""Process-local record store."""

from schoolpay.infrastructure.memory.record_store import InMemoryRecordStore

__all__ = ["InMemoryRecordStore"]
