"""
Pydantic schemas for customer endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CustomerField(BaseModel):
    """Customer option for the invoice form's customer select."""

    id: str
    name: str


class CustomerListResponse(BaseModel):
    customers: List[CustomerField]


class CustomerTableRow(BaseModel):
    """Customer with invoice totals for the customers table."""

    id: str
    name: str
    email: str
    image_url: Optional[str] = None
    total_invoices: int = Field(..., ge=0)
    total_pending: str = Field(..., examples=["$120.00"])
    total_paid: str = Field(..., examples=["$980.50"])


class CustomerTableResponse(BaseModel):
    customers: List[CustomerTableRow]
    query: str
