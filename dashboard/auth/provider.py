"""
Identity provider: runs a sign-in strategy and classifies its failures.

Failures surface as AuthError subclasses whose ``type`` tells callers what
went wrong. Anything that is not an AuthError (including RedirectSignal on
success) passes through untouched.
"""

from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from supabase import Client

from dashboard.auth.credentials import authorize
from dashboard.utils.navigation import redirect
from dashboard.utils.constants import DASHBOARD_PATH
from dashboard.utils.logging import get_logger

logger = get_logger(__name__)

AuthorizeCallback = Callable[[Client, Mapping[str, Any]], Awaitable[Optional[Dict[str, Any]]]]


class AuthError(Exception):
    """Base class for sign-in failures."""

    type = "AuthError"


class CredentialsSignin(AuthError):
    """The authorize callback rejected the credentials."""

    type = "CredentialsSignin"


class CallbackRouteError(AuthError):
    """The authorize callback raised instead of returning a result."""

    type = "CallbackRouteError"


class AuthConfigurationError(AuthError):
    """The requested provider does not exist."""

    type = "Configuration"


PROVIDERS: Dict[str, AuthorizeCallback] = {
    "credentials": authorize,
}


async def sign_in(
    provider: str,
    supabase_client: Client,
    form_data: Mapping[str, Any],
    redirect_to: str = DASHBOARD_PATH,
) -> None:
    """
    Sign a user in with the named provider.

    Raises:
        RedirectSignal: On success, to ``redirect_to``
        CredentialsSignin: If the credentials were rejected
        CallbackRouteError: If the authorize callback failed
        AuthConfigurationError: If ``provider`` is unknown
    """
    authorize_callback = PROVIDERS.get(provider)
    if authorize_callback is None:
        raise AuthConfigurationError(f"Unknown sign-in provider: {provider}")

    credentials = {
        "email": form_data.get("email"),
        "password": form_data.get("password"),
    }

    try:
        user = await authorize_callback(supabase_client, credentials)
    except Exception as e:
        logger.error(f"Authorize callback for provider '{provider}' failed: {e}")
        raise CallbackRouteError("Failed to authorize credentials") from e

    if user is None:
        raise CredentialsSignin("Invalid credentials")

    logger.info(f"User {user.get('id')} signed in with provider '{provider}'")
    redirect(redirect_to)
