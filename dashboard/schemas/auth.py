"""
Pydantic schemas for the credentials login flow.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from dashboard.schemas.validation import FormModel

# local@label.label...tld; no leading dot or ".." in the local part
EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE,
)


class LoginCredentials(FormModel):
    """
    Credentials accepted by the credentials provider.

    Both values are kept exactly as submitted: the email is matched
    verbatim against stored users and the password goes to bcrypt as typed.
    """

    model_config = {
        "str_strip_whitespace": False,
    }

    email: str = Field(..., description="Account email")
    password: str = Field(..., min_length=6, description="Plaintext password")

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        if not EMAIL_PATTERN.fullmatch(v):
            raise ValueError("value is not a valid email address")
        return v


class LoginErrorResponse(BaseModel):
    """Returned by POST /login when sign-in does not succeed."""

    message: Optional[str] = Field(
        None,
        examples=["Invalid credentials.", "Something went wrong."]
    )
