"""
Pydantic schemas for dashboard overview endpoints.
"""

from typing import List

from pydantic import BaseModel, Field

from dashboard.schemas.invoices import LatestInvoice


class Revenue(BaseModel):
    month: str = Field(..., examples=["Jan"])
    revenue: int


class RevenueResponse(BaseModel):
    revenue: List[Revenue]


class LatestInvoicesResponse(BaseModel):
    invoices: List[LatestInvoice]


class CardDataResponse(BaseModel):
    """
    Aggregates shown on the dashboard summary cards.

    Totals are formatted currency strings computed from cents.
    """
    number_of_invoices: int = Field(..., ge=0)
    number_of_customers: int = Field(..., ge=0)
    total_paid_invoices: str = Field(..., examples=["$1,234.56"])
    total_pending_invoices: str = Field(..., examples=["$789.00"])
