"""
Invoice actions and invoice queries.

Mutations follow one contract: validate the submitted form, convert the
amount from dollars to cents, issue exactly one write, then revalidate the
invoice listing and redirect to it. Validation and persistence failures come
back as an ActionState; they are never raised.

Queries issue one read, reshape the rows for display and raise DatabaseError
with a generic message if the read fails.
"""

import logging
import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Mapping, Optional, cast

from supabase import Client

from dashboard.db.errors import DatabaseError
from dashboard.db.filters import customer_match_filter
from dashboard.schemas.invoices import ActionState, CreateInvoice, UpdateInvoice
from dashboard.schemas.validation import safe_parse
from dashboard.utils.constants import INVOICES_PATH, ITEMS_PER_PAGE, LATEST_INVOICES_LIMIT
from dashboard.utils.formatting import format_currency
from dashboard.utils.navigation import redirect, revalidate_path

logger = logging.getLogger(__name__)


def to_cents(amount: Decimal) -> int:
    """Convert a dollar amount to integer cents (half-up)."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def _invoice_form_values(form_data: Mapping[str, Any]) -> Dict[str, Any]:
    # Only these keys are read from the form; id and date never come from it
    return {
        "customer_id": form_data.get("customerId"),
        "amount": form_data.get("amount"),
        "status": form_data.get("status"),
    }


def _flatten_customer(row: Dict[str, Any]) -> Dict[str, Any]:
    """Merge the embedded ``customers`` object into the invoice row."""
    flat = {key: value for key, value in row.items() if key != "customers"}
    customer = row.get("customers") or {}
    flat.update(customer)
    return flat


# --- Actions ---

async def create_invoice(
    supabase_client: Client,
    prev_state: Optional[ActionState],
    form_data: Mapping[str, Any],
) -> ActionState:
    """
    Create an invoice from a submitted form.

    Args:
        supabase_client: Supabase client for this request
        prev_state: State returned by the previous submission (unused)
        form_data: Raw form fields (customerId, amount, status)

    Returns:
        ActionState with field errors or a failure message

    Raises:
        RedirectSignal: On success, to the invoice listing
    """
    validated = safe_parse(CreateInvoice, _invoice_form_values(form_data))

    if not validated.success:
        return ActionState(
            errors=validated.errors,
            message="Missing Fields, Failed to create an invoice.",
        )

    fields = cast(CreateInvoice, validated.data)
    invoice_data = {
        "customer_id": fields.customer_id,
        "amount": to_cents(fields.amount),
        "status": fields.status,
        "date": _today(),
    }

    logger.info(
        f"Creating invoice: customer_id={fields.customer_id}, status={fields.status}"
    )

    try:
        supabase_client.table("invoices").insert(invoice_data).execute()
    except Exception as e:
        logger.error(f"Failed to create invoice: {e}", exc_info=True)
        return ActionState(message="Failed to create invoice")

    revalidate_path(INVOICES_PATH)
    redirect(INVOICES_PATH)


async def update_invoice(
    supabase_client: Client,
    invoice_id: str,
    prev_state: Optional[ActionState],
    form_data: Mapping[str, Any],
) -> ActionState:
    """
    Update customer, amount and status of an existing invoice.

    ``invoice_id`` is passed separately so a form can never retarget the
    update. ``date`` is left untouched.

    Raises:
        RedirectSignal: On success, to the invoice listing
    """
    validated = safe_parse(UpdateInvoice, _invoice_form_values(form_data))

    if not validated.success:
        return ActionState(
            errors=validated.errors,
            message="Missing Fields, Failed to update invoice.",
        )

    fields = cast(UpdateInvoice, validated.data)
    updates = {
        "customer_id": fields.customer_id,
        "amount": to_cents(fields.amount),
        "status": fields.status,
    }

    logger.info(f"Updating invoice {invoice_id}: status={fields.status}")

    try:
        (
            supabase_client.table("invoices")
            .update(updates)
            .eq("id", invoice_id)
            .execute()
        )
    except Exception as e:
        logger.error(f"Failed to update invoice {invoice_id}: {e}", exc_info=True)
        return ActionState(message="Failed to update invoice")

    revalidate_path(INVOICES_PATH)
    redirect(INVOICES_PATH)


async def delete_invoice(supabase_client: Client, invoice_id: str) -> ActionState:
    """
    Delete an invoice by id.

    Invoked in place from a table row, so it revalidates the listing but
    does not redirect.

    Returns:
        Empty ActionState on success, ActionState(message=...) on failure
    """
    logger.info(f"Deleting invoice {invoice_id}")

    try:
        supabase_client.table("invoices").delete().eq("id", invoice_id).execute()
    except Exception as e:
        logger.error(f"Failed to delete invoice {invoice_id}: {e}", exc_info=True)
        return ActionState(message="Failed to delete invoice")

    revalidate_path(INVOICES_PATH)
    return ActionState()


# --- Queries ---

async def fetch_latest_invoices(supabase_client: Client) -> List[Dict[str, Any]]:
    """
    Fetch the five most recent invoices with their customer details.

    Returns:
        List of {id, amount (formatted), name, email, image_url}
    """
    try:
        result = (
            supabase_client.table("invoices")
            .select("id, amount, customers(name, email, image_url)")
            .order("date", desc=True)
            .limit(LATEST_INVOICES_LIMIT)
            .execute()
        )
        rows = cast(List[Dict[str, Any]], result.data or [])

        latest_invoices = []
        for row in rows:
            invoice = _flatten_customer(row)
            invoice["amount"] = format_currency(row.get("amount"))
            latest_invoices.append(invoice)
    except Exception as e:
        logger.error(f"Database error fetching latest invoices: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch the latest invoices.") from e

    return latest_invoices


async def fetch_filtered_invoices(
    supabase_client: Client,
    query: str,
    current_page: int,
) -> List[Dict[str, Any]]:
    """
    Fetch one page of invoices whose customer name or email contains ``query``.

    Args:
        supabase_client: Supabase client for this request
        query: Case-insensitive search string (empty matches everything)
        current_page: 1-based page number; pages hold ITEMS_PER_PAGE rows

    Returns:
        Up to ITEMS_PER_PAGE rows of {id, amount, date, status, name, email,
        image_url}, newest first
    """
    offset = (current_page - 1) * ITEMS_PER_PAGE
    logger.debug(f"Fetching invoices query={query!r} page={current_page} offset={offset}")

    try:
        request = supabase_client.table("invoices").select(
            "id, amount, date, status, customers!inner(name, email, image_url)"
        )
        if query:
            request = request.or_(customer_match_filter(query), reference_table="customers")

        result = (
            request
            .order("date", desc=True)
            .range(offset, offset + ITEMS_PER_PAGE - 1)
            .execute()
        )
        rows = cast(List[Dict[str, Any]], result.data or [])
        invoices = [_flatten_customer(row) for row in rows]
    except Exception as e:
        logger.error(f"Database error fetching invoices: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch invoices.") from e

    return invoices


async def fetch_invoices_pages(supabase_client: Client, query: str = "") -> int:
    """
    Count the pages of invoices matching ``query``.

    Returns:
        ceil(matching invoices / ITEMS_PER_PAGE); 0 when nothing matches
    """
    try:
        request = supabase_client.table("invoices").select(
            "id, customers!inner(name, email)", count="exact"
        )
        if query:
            request = request.or_(customer_match_filter(query), reference_table="customers")

        result = request.execute()
        total = result.count or 0
    except Exception as e:
        logger.error(f"Database error counting invoices: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch total number of invoices.") from e

    return math.ceil(total / ITEMS_PER_PAGE)


async def fetch_invoice_by_id(
    supabase_client: Client,
    invoice_id: str,
) -> Optional[Dict[str, Any]]:
    """
    Fetch one invoice for the edit form.

    Returns:
        {id, customer_id, amount (dollars), status}, or None if no invoice
        has that id
    """
    try:
        result = (
            supabase_client.table("invoices")
            .select("id, customer_id, amount, status")
            .eq("id", invoice_id)
            .execute()
        )
    except Exception as e:
        logger.error(f"Database error fetching invoice {invoice_id}: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch invoice.") from e

    if not result.data:
        logger.warning(f"Invoice {invoice_id} not found")
        return None

    invoice = dict(cast(Dict[str, Any], result.data[0]))
    invoice["amount"] = invoice["amount"] / 100
    return invoice
