"""Logging configuration for the application."""

import logging
import sys

from schoolpay.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. Safe to call more than once (basicConfig is a
    no-op once the root logger has handlers).
    """
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # httpx logs every request line at INFO, including the API key query param.
    logging.getLogger("httpx").setLevel(logging.WARNING)
