"""
Supabase client factory.

Every action and query receives its client as an argument; the client is
built per request by the route layer and never stored at module level.

RULES:
1. NEVER use the service_role key for user operations
2. Dashboard requests carry the user's JWT, so RLS policies apply
3. Login runs before a session exists and uses an anonymous client
"""

import logging
from typing import Optional

from dashboard.config import settings
from supabase import Client, create_client

logger = logging.getLogger(__name__)


def get_supabase_client(access_token: Optional[str] = None) -> Client:
    """
    Create a Supabase client, optionally bound to a user's access token.

    Args:
        access_token: The user's JWT access token from Supabase Auth
                      (verified in dashboard/auth/dependencies.py). When
                      omitted the client runs with the publishable key only.

    Returns:
        A Supabase client. With a token, all queries are subject to RLS
        as that user.

    Example:
        >>> from dashboard.auth.dependencies import get_authenticated_user
        >>> client = get_supabase_client(auth_user.access_token)
        >>> result = client.table("invoices").select("*").execute()
    """
    client: Client = create_client(
        supabase_url=settings.SUPABASE_URL,
        supabase_key=settings.SUPABASE_PUBLISHABLE_KEY
    )

    if access_token:
        # The token's 'sub' claim becomes auth.uid() in RLS policies
        client.auth.set_session(access_token, access_token)
        logger.debug("Created Supabase client with user token (RLS enforced)")
    else:
        logger.debug("Created anonymous Supabase client")

    return client
