"""
Login action.
"""

import logging
from typing import Any, Mapping, Optional

from supabase import Client

from dashboard.auth.provider import AuthError, sign_in

logger = logging.getLogger(__name__)


async def authenticate(
    supabase_client: Client,
    prev_state: Optional[str],
    form_data: Mapping[str, Any],
) -> Optional[str]:
    """
    Sign in with the credentials provider.

    Returns:
        "Invalid credentials." or "Something went wrong." when sign-in fails

    Raises:
        RedirectSignal: On success (raised by sign_in)
        Exception: Any non-auth error, unchanged
    """
    try:
        await sign_in("credentials", supabase_client, form_data)
    except AuthError as error:
        logger.info(f"Sign-in failed: {error.type}")
        if error.type == "CredentialsSignin":
            return "Invalid credentials."
        return "Something went wrong."

    return None
