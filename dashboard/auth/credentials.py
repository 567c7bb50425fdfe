"""
Credentials check for the email/password login.

get_user() distinguishes "no such user" (returns None) from "the lookup
failed" (raises DatabaseError). authorize() turns every ordinary rejection
into None and only lets real failures propagate.
"""

from typing import Any, Dict, Mapping, Optional, cast

import bcrypt
from supabase import Client

from dashboard.db.errors import DatabaseError
from dashboard.schemas.auth import LoginCredentials
from dashboard.schemas.validation import safe_parse
from dashboard.utils.logging import get_logger

logger = get_logger(__name__)


async def get_user(supabase_client: Client, email: str) -> Optional[Dict[str, Any]]:
    """
    Look up a user by exact email.

    Args:
        supabase_client: Supabase client (anonymous during login)
        email: Email to match, case-sensitively

    Returns:
        The user row ({id, name, email, password}) or None if no row matches

    Raises:
        DatabaseError: If the lookup itself fails
    """
    try:
        result = (
            supabase_client.table("users")
            .select("*")
            .eq("email", email)
            .limit(1)
            .execute()
        )
    except Exception as e:
        logger.error(f"Database error fetching user: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch user.") from e

    if not result.data:
        logger.debug("No user found for submitted email")
        return None

    return cast(Dict[str, Any], result.data[0])


# bcrypt only reads the first 72 bytes; bcrypt>=5 raises instead of truncating
BCRYPT_MAX_PASSWORD_BYTES = 72


def verify_password(password: str, password_hash: str) -> bool:
    """Compare a plaintext password against a stored bcrypt digest."""
    secret = password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
    return bcrypt.checkpw(secret, password_hash.encode("utf-8"))


async def authorize(
    supabase_client: Client,
    credentials: Mapping[str, Any],
) -> Optional[Dict[str, Any]]:
    """
    Credentials-provider callback.

    Returns the user row only when the credentials are well formed, the
    email exists and the password matches. Every other outcome is None.

    Raises:
        DatabaseError: If the user lookup fails
    """
    parsed = safe_parse(LoginCredentials, credentials)

    if parsed.success:
        login = cast(LoginCredentials, parsed.data)
        user = await get_user(supabase_client, login.email)
        if user is None:
            logger.info("Invalid credentials: unknown email")
            return None

        if verify_password(login.password, user["password"]):
            logger.info(f"Credentials accepted for user {user.get('id')}")
            return user

    logger.info("Invalid credentials")
    return None
