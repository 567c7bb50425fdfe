"""
Logger factory for the invoice dashboard backend.

Handlers and format are configured once by dashboard.main; modules only ask
for a named logger at the configured LOG_LEVEL.

Never log plaintext passwords, stored digests, access tokens or API keys.
Raw database errors stay in server logs; callers get generic messages.
"""

import logging

from dashboard.config import settings


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` at settings.LOG_LEVEL (INFO if unrecognised)."""
    logger = logging.getLogger(name)

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    logger.setLevel(level if isinstance(level, int) else logging.INFO)

    return logger
