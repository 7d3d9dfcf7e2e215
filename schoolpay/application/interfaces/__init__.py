"""Ports used by application services."""

from schoolpay.application.interfaces.record_store import FilterOp, RecordStore

__all__ = ["FilterOp", "RecordStore"]
