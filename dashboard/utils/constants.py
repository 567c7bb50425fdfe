"""
Shared constants for the dashboard data layer.

Route paths here are the paths of the dashboard views that consume this
backend; they are used for cache invalidation and redirects after mutations.
"""

# Invoice table page size (fetch_filtered_invoices / fetch_invoices_pages)
ITEMS_PER_PAGE = 6

# Number of rows shown on the "latest invoices" card
LATEST_INVOICES_LIMIT = 5

DASHBOARD_PATH = "/dashboard"
INVOICES_PATH = "/dashboard/invoices"
