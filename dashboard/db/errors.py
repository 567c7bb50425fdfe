"""
Errors raised by the data layer.
"""


class DatabaseError(Exception):
    """
    A persistence call failed.

    The message is always a short, user-safe description of the failed
    operation (e.g. "Failed to fetch invoices."). The raw Supabase/PostgREST
    error is logged where it happened and chained as ``__cause__``; it is
    never part of the message.
    """
