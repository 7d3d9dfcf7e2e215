"""Firestore integration over the REST API."""

from schoolpay.infrastructure.firebase.client import (
    create_firestore_client,
    create_firestore_store,
)
from schoolpay.infrastructure.firebase.record_store import FirestoreRecordStore

__all__ = [
    "FirestoreRecordStore",
    "create_firestore_client",
    "create_firestore_store",
]
