"""Small helpers for time and id generation."""

from schoolpay.shared.utils.datetime import utc_now
from schoolpay.shared.utils.generators import generate_cuid

__all__ = ["generate_cuid", "utc_now"]
