"""
Invoice API endpoints.

Mutations accept form-encoded bodies (the invoice form posts customerId,
amount and status) and either redirect to the invoice listing (303) or
return an ActionState describing what went wrong.

Queries back the paginated invoices table and the edit form.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, status
from fastapi.responses import JSONResponse

from dashboard.auth.dependencies import AuthenticatedUser, get_authenticated_user
from dashboard.db.client import get_supabase_client
from dashboard.db.errors import DatabaseError
from dashboard.schemas.invoices import (
    ActionState,
    InvoiceForm,
    InvoiceListResponse,
    InvoicePagesResponse,
    InvoiceTableRow,
)
from dashboard.services.invoice_service import (
    create_invoice,
    delete_invoice,
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoices_pages,
    update_invoice,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])


def _action_state_response(state: ActionState) -> JSONResponse:
    """422 for field errors, 500 for a persistence failure, 200 otherwise."""
    if state.errors:
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif state.message:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    else:
        status_code = status.HTTP_200_OK

    return JSONResponse(status_code=status_code, content=state.model_dump(exclude_none=True))


def _fetch_error(e: DatabaseError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": "fetch_error", "details": str(e)}
    )


@router.post(
    "",
    response_model=ActionState,
    summary="Create invoice",
    description="""
    Create an invoice from a submitted form.

    On success the invoice listing is revalidated and the caller is
    redirected to it (303). Validation failures return 422 with per-field
    messages; a database failure returns 500 with a generic message.
    """
)
async def create_invoice_endpoint(
    request: Request,
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)]
) -> JSONResponse:
    """
    Create an invoice.

    Auth -> get_authenticated_user dependency
    Parse/Validate -> done by the action (form is untyped on purpose)
    Persistence -> single insert inside create_invoice
    """
    form_data = await request.form()
    supabase_client = get_supabase_client(auth_user.access_token)

    state = await create_invoice(supabase_client, None, form_data)
    return _action_state_response(state)


@router.put(
    "/{invoice_id}",
    response_model=ActionState,
    summary="Update invoice",
)
async def update_invoice_endpoint(
    request: Request,
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    invoice_id: str = Path(..., description="Invoice UUID"),
) -> JSONResponse:
    """Update customer, amount and status; the id comes from the path only."""
    form_data = await request.form()
    supabase_client = get_supabase_client(auth_user.access_token)

    state = await update_invoice(supabase_client, invoice_id, None, form_data)
    return _action_state_response(state)


@router.delete(
    "/{invoice_id}",
    response_model=ActionState,
    status_code=status.HTTP_200_OK,
    summary="Delete invoice",
)
async def delete_invoice_endpoint(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    invoice_id: str = Path(..., description="Invoice UUID"),
) -> JSONResponse:
    """Delete an invoice. Does not redirect."""
    supabase_client = get_supabase_client(auth_user.access_token)

    state = await delete_invoice(supabase_client, invoice_id)
    return _action_state_response(state)


@router.get(
    "",
    response_model=InvoiceListResponse,
    status_code=status.HTTP_200_OK,
    summary="Search invoices",
    description="""
    One page (6 rows) of invoices whose customer name or email contains
    the search query, newest first.
    """
)
async def list_invoices(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    query: str = Query("", description="Case-insensitive customer name/email search"),
    page: int = Query(1, ge=1, description="1-based page number"),
) -> InvoiceListResponse:
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        invoices = await fetch_filtered_invoices(supabase_client, query, page)
    except DatabaseError as e:
        raise _fetch_error(e)

    return InvoiceListResponse(
        invoices=[InvoiceTableRow(**invoice) for invoice in invoices],
        query=query,
        page=page,
    )


@router.get(
    "/pages",
    response_model=InvoicePagesResponse,
    status_code=status.HTTP_200_OK,
    summary="Count invoice pages",
)
async def get_invoice_pages(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    query: str = Query("", description="Same search as GET /invoices"),
) -> InvoicePagesResponse:
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        total_pages = await fetch_invoices_pages(supabase_client, query)
    except DatabaseError as e:
        raise _fetch_error(e)

    return InvoicePagesResponse(total_pages=total_pages)


@router.get(
    "/{invoice_id}",
    response_model=InvoiceForm,
    status_code=status.HTTP_200_OK,
    summary="Get invoice for editing",
)
async def get_invoice(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    invoice_id: str = Path(..., description="Invoice UUID"),
) -> InvoiceForm:
    """Return the invoice with its amount in dollars; 404 if it does not exist."""
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        invoice = await fetch_invoice_by_id(supabase_client, invoice_id)
    except DatabaseError as e:
        raise _fetch_error(e)

    if invoice is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": f"Invoice {invoice_id} not found"}
        )

    return InvoiceForm(**invoice)
