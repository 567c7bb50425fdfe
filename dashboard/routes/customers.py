"""
Customer endpoints: the invoice form's customer options and the customers table.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dashboard.auth.dependencies import AuthenticatedUser, get_authenticated_user
from dashboard.db.client import get_supabase_client
from dashboard.db.errors import DatabaseError
from dashboard.schemas.customers import (
    CustomerField,
    CustomerListResponse,
    CustomerTableResponse,
    CustomerTableRow,
)
from dashboard.services.customer_service import fetch_customers, fetch_filtered_customers

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get(
    "",
    response_model=CustomerListResponse,
    status_code=status.HTTP_200_OK,
    summary="List customers (id and name)",
)
async def list_customers(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)]
) -> CustomerListResponse:
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        customers = await fetch_customers(supabase_client)
    except DatabaseError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "fetch_error", "details": str(e)}
        )

    return CustomerListResponse(customers=[CustomerField(**c) for c in customers])


@router.get(
    "/table",
    response_model=CustomerTableResponse,
    status_code=status.HTTP_200_OK,
    summary="Customers table with invoice totals",
)
async def get_customer_table(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    query: str = Query("", description="Case-insensitive customer name/email search"),
) -> CustomerTableResponse:
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        customers = await fetch_filtered_customers(supabase_client, query)
    except DatabaseError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "fetch_error", "details": str(e)}
        )

    return CustomerTableResponse(
        customers=[CustomerTableRow(**c) for c in customers],
        query=query,
    )
