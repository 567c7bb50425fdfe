"""
Login endpoint.

POST /login takes the login form (email, password). A successful sign-in
redirects to the dashboard (303); a rejected one returns 401 with the
message to show under the form.

This endpoint is PUBLIC: the caller has no session yet, so it uses an
anonymous Supabase client.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from dashboard.db.client import get_supabase_client
from dashboard.schemas.auth import LoginErrorResponse
from dashboard.services.auth_service import authenticate
from dashboard.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginErrorResponse,
    summary="Sign in with email and password",
    responses={
        status.HTTP_303_SEE_OTHER: {"description": "Signed in; redirect to the dashboard"},
        status.HTTP_401_UNAUTHORIZED: {"model": LoginErrorResponse},
    },
)
async def login(request: Request) -> JSONResponse:
    form_data = await request.form()
    supabase_client = get_supabase_client()

    error_message = await authenticate(supabase_client, None, form_data)

    logger.info("Login rejected")
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=LoginErrorResponse(message=error_message).model_dump(),
    )
