"""
Customer queries for the invoice form and the customers table.

Customers are read-only from this backend's point of view.
"""

import logging
from typing import Any, Dict, List, cast

from supabase import Client

from dashboard.db.errors import DatabaseError
from dashboard.db.filters import customer_match_filter
from dashboard.utils.formatting import format_currency

logger = logging.getLogger(__name__)


async def fetch_customers(supabase_client: Client) -> List[Dict[str, Any]]:
    """
    Fetch id and name of every customer, alphabetically.

    Used to populate the customer select on the invoice form.
    """
    try:
        result = (
            supabase_client.table("customers")
            .select("id, name")
            .order("name", desc=False)
            .execute()
        )
    except Exception as e:
        logger.error(f"Database error fetching customers: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch all customers.") from e

    return cast(List[Dict[str, Any]], result.data or [])


def _summarize_customer(row: Dict[str, Any]) -> Dict[str, Any]:
    invoices = row.get("invoices") or []
    total_pending = sum(
        int(inv.get("amount") or 0) for inv in invoices if inv.get("status") == "pending"
    )
    total_paid = sum(
        int(inv.get("amount") or 0) for inv in invoices if inv.get("status") == "paid"
    )
    return {
        "id": row["id"],
        "name": row["name"],
        "email": row["email"],
        "image_url": row.get("image_url"),
        "total_invoices": len(invoices),
        "total_pending": format_currency(total_pending),
        "total_paid": format_currency(total_paid),
    }


async def fetch_filtered_customers(
    supabase_client: Client,
    query: str,
) -> List[Dict[str, Any]]:
    """
    Fetch customers whose name or email contains ``query``, with invoice totals.

    Customers without invoices are included with zero totals.

    Returns:
        List of {id, name, email, image_url, total_invoices, total_pending,
        total_paid}, ordered by name
    """
    try:
        request = supabase_client.table("customers").select(
            "id, name, email, image_url, invoices(amount, status)"
        )
        if query:
            request = request.or_(customer_match_filter(query))

        result = request.order("name", desc=False).execute()
        rows = cast(List[Dict[str, Any]], result.data or [])
        customers = [_summarize_customer(row) for row in rows]
    except Exception as e:
        logger.error(f"Database error fetching customer table: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch customer table.") from e

    return customers
