"""
Pydantic schemas for invoice actions and invoice queries.

The form models are the type boundary for submitted invoice forms; the
response models define what the invoice endpoints return.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import ClassVar, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from dashboard.schemas.validation import FormModel

InvoiceStatus = Literal["pending", "paid"]


# --- Form models ---

class InvoiceFields(FormModel):
    """
    User-editable invoice fields, as submitted by the invoice form.

    ``amount`` is in dollars here; actions convert it to cents.
    """

    error_messages: ClassVar[Dict[str, str]] = {
        "customer_id": "Please select a customer",
        "amount": "Amount must be greater than $0",
        "status": "Please select an invoice status",
    }

    customer_id: str = Field(..., min_length=1, description="Customer UUID")
    amount: Decimal = Field(..., gt=0, description="Amount in dollars")
    status: InvoiceStatus = Field(..., description="Invoice status")

    @field_validator("amount")
    @classmethod
    def validate_at_least_one_cent(cls, v: Decimal) -> Decimal:
        # Stored as integer cents, so anything that rounds to 0 is not positive
        if (v * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP) < 1:
            raise ValueError("amount rounds to less than one cent")
        return v


class Invoice(InvoiceFields):
    """Full invoice shape; ``id`` and ``date`` are assigned by the server."""

    id: str = Field(..., description="Invoice UUID")
    date: str = Field(..., description="ISO calendar date (YYYY-MM-DD)")


# Create and update accept the same reduced shape: id comes from the URL,
# date is stamped on create and never changes.
CreateInvoice = InvoiceFields
UpdateInvoice = InvoiceFields


class ActionState(BaseModel):
    """
    Result of a mutation action that did not redirect.

    An empty state (no errors, no message) means success.
    """

    errors: Optional[Dict[str, List[str]]] = Field(
        None,
        description="Field name -> validation messages"
    )
    message: Optional[str] = Field(None, description="Human-readable summary")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "errors": {"amount": ["Amount must be greater than $0"]},
                    "message": "Missing Fields, Failed to create an invoice."
                }
            ]
        }
    }


# --- Query response models ---

class InvoiceForm(BaseModel):
    """Invoice pre-populated into the edit form (amount back in dollars)."""

    id: str = Field(..., description="Invoice UUID")
    customer_id: str = Field(..., description="Customer UUID")
    amount: float = Field(..., description="Amount in dollars", examples=[12.5])
    status: InvoiceStatus = Field(..., description="Invoice status")


class InvoiceTableRow(BaseModel):
    """One row of the paginated invoices table."""

    id: str
    amount: int = Field(..., description="Amount in cents")
    date: str
    status: InvoiceStatus
    name: str
    email: str
    image_url: Optional[str] = None


class InvoiceListResponse(BaseModel):
    """Response for GET /invoices."""

    invoices: List[InvoiceTableRow]
    query: str
    page: int


class InvoicePagesResponse(BaseModel):
    """Response for GET /invoices/pages."""

    total_pages: int = Field(..., ge=0)


class LatestInvoice(BaseModel):
    """Row of the latest-invoices dashboard card."""

    id: str
    amount: str = Field(..., description="Formatted amount", examples=["$1,250.00"])
    name: str
    email: str
    image_url: Optional[str] = None
