"""
Service layer for the invoice dashboard backend.

Contains the invoice actions and the dashboard queries:
- Actions validate form input, write once, and revalidate/redirect
- Queries read once (or fan out once), reshape rows and raise DatabaseError
  with a generic message on failure

Every function takes the Supabase client as its first argument.
"""

from .auth_service import authenticate
from .customer_service import fetch_customers, fetch_filtered_customers
from .dashboard_service import fetch_card_data, fetch_revenue
from .invoice_service import (
    create_invoice,
    delete_invoice,
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoices_pages,
    fetch_latest_invoices,
    update_invoice,
)

__all__ = [
    "authenticate",
    "create_invoice",
    "update_invoice",
    "delete_invoice",
    "fetch_latest_invoices",
    "fetch_filtered_invoices",
    "fetch_invoices_pages",
    "fetch_invoice_by_id",
    "fetch_revenue",
    "fetch_card_data",
    "fetch_customers",
    "fetch_filtered_customers",
]
