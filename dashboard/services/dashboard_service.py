"""
Dashboard overview queries: revenue chart and summary cards.
"""

import asyncio
import logging
from typing import Any, Dict, List, cast

from supabase import Client

from dashboard.db.errors import DatabaseError
from dashboard.utils.formatting import format_currency

logger = logging.getLogger(__name__)


async def fetch_revenue(supabase_client: Client) -> List[Dict[str, Any]]:
    """Fetch every row of the revenue aggregate, unmodified."""
    try:
        result = supabase_client.table("revenue").select("*").execute()
    except Exception as e:
        logger.error(f"Database error fetching revenue: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch revenue data.") from e

    return cast(List[Dict[str, Any]], result.data or [])


def _sum_amounts(rows: List[Dict[str, Any]]) -> int:
    return sum(int(row.get("amount") or 0) for row in rows)


async def fetch_card_data(supabase_client: Client) -> Dict[str, Any]:
    """
    Compute the four dashboard card aggregates.

    The four reads are independent and run concurrently. If any of them
    fails the whole call fails; there are no partial results.

    Returns:
        Dict with number_of_invoices, number_of_customers,
        total_paid_invoices and total_pending_invoices (formatted)
    """
    invoice_count_query = supabase_client.table("invoices").select("id", count="exact")
    customer_count_query = supabase_client.table("customers").select("id", count="exact")
    paid_query = supabase_client.table("invoices").select("amount").eq("status", "paid")
    pending_query = supabase_client.table("invoices").select("amount").eq("status", "pending")

    try:
        invoices, customers, paid, pending = await asyncio.gather(
            asyncio.to_thread(invoice_count_query.execute),
            asyncio.to_thread(customer_count_query.execute),
            asyncio.to_thread(paid_query.execute),
            asyncio.to_thread(pending_query.execute),
        )

        card_data = {
            "number_of_invoices": invoices.count or 0,
            "number_of_customers": customers.count or 0,
            "total_paid_invoices": format_currency(_sum_amounts(paid.data or [])),
            "total_pending_invoices": format_currency(_sum_amounts(pending.data or [])),
        }
    except Exception as e:
        logger.error(f"Database error fetching card data: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch card data.") from e

    logger.info(
        f"Card data: invoices={card_data['number_of_invoices']}, "
        f"customers={card_data['number_of_customers']}"
    )
    return card_data
