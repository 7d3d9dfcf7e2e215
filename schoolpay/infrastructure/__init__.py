"""Infrastructure: record store adapters and identity token verification."""

from schoolpay.infrastructure.store_factory import create_record_store

__all__ = ["create_record_store"]
