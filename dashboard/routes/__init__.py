"""
FastAPI routers for all API endpoints.

Each module defines a router for one area (invoices, dashboard, customers,
login, health). Routers build the per-request Supabase client and delegate
to the service layer.
"""
