"""
Database access layer for the invoice dashboard backend.

All persistence goes through a Supabase client (PostgREST query builder)
that callers construct per request and pass in explicitly.

DO NOT define table schemas, migrations, or RLS policies here.
Tables consumed: invoices, customers, users, revenue.
"""

from .client import get_supabase_client
from .errors import DatabaseError

__all__ = ["get_supabase_client", "DatabaseError"]
