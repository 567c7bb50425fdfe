"""
Navigation and cache-invalidation signals used by mutation actions.

- redirect(path) aborts the action and hands control to the view at ``path``.
  The app turns the resulting RedirectSignal into a 303 response.
- revalidate_path(path) records that the view layer's rendering of ``path``
  is stale.
"""

import logging
from typing import NoReturn

logger = logging.getLogger(__name__)


class RedirectSignal(Exception):
    """Raised to transfer control to another view."""

    def __init__(self, path: str):
        super().__init__(f"Redirect to {path}")
        self.path = path


def redirect(path: str) -> NoReturn:
    """Abort the current action and redirect the caller to ``path``."""
    logger.debug(f"Redirecting to {path}")
    raise RedirectSignal(path)


def revalidate_path(path: str) -> None:
    """Signal that cached renderings of ``path`` must be discarded."""
    logger.info(f"Revalidating path {path}")
