"""
Dashboard overview endpoints: revenue chart, latest invoices, summary cards.

All endpoints are read-only and require a bearer token.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard.auth.dependencies import AuthenticatedUser, get_authenticated_user
from dashboard.db.client import get_supabase_client
from dashboard.db.errors import DatabaseError
from dashboard.schemas.dashboard import (
    CardDataResponse,
    LatestInvoicesResponse,
    Revenue,
    RevenueResponse,
)
from dashboard.schemas.invoices import LatestInvoice
from dashboard.services.dashboard_service import fetch_card_data, fetch_revenue
from dashboard.services.invoice_service import fetch_latest_invoices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/revenue",
    response_model=RevenueResponse,
    status_code=status.HTTP_200_OK,
    summary="Revenue chart data",
)
async def get_revenue(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)]
) -> RevenueResponse:
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        rows = await fetch_revenue(supabase_client)
    except DatabaseError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "fetch_error", "details": str(e)}
        )

    return RevenueResponse(revenue=[Revenue(**row) for row in rows])


@router.get(
    "/latest-invoices",
    response_model=LatestInvoicesResponse,
    status_code=status.HTTP_200_OK,
    summary="Five most recent invoices",
)
async def get_latest_invoices(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)]
) -> LatestInvoicesResponse:
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        invoices = await fetch_latest_invoices(supabase_client)
    except DatabaseError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "fetch_error", "details": str(e)}
        )

    return LatestInvoicesResponse(invoices=[LatestInvoice(**invoice) for invoice in invoices])


@router.get(
    "/cards",
    response_model=CardDataResponse,
    status_code=status.HTTP_200_OK,
    summary="Summary card totals",
    description="""
    Invoice count, customer count and formatted paid/pending totals.

    The four underlying reads run concurrently; if any fails the endpoint
    returns 500 with no partial data.
    """
)
async def get_card_data(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)]
) -> CardDataResponse:
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        card_data = await fetch_card_data(supabase_client)
    except DatabaseError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "fetch_error", "details": str(e)}
        )

    return CardDataResponse(**card_data)
