"""Shared utilities: logging setup and cross-cutting helpers. No business logic."""

from schoolpay.shared.utils import generate_cuid, utc_now

__all__ = ["generate_cuid", "utc_now"]
