"""
Tests for the invoice form schema and the safe_parse boundary.
"""

from decimal import Decimal

import pytest

from dashboard.schemas.auth import LoginCredentials
from dashboard.schemas.invoices import CreateInvoice, Invoice, UpdateInvoice
from dashboard.schemas.validation import safe_parse


class TestInvoiceFormSchema:
    """Field rules for customer_id, amount and status."""

    def test_valid_form_is_coerced(self):
        result = safe_parse(
            CreateInvoice,
            {"customer_id": "c1", "amount": "12.50", "status": "pending"}
        )

        assert result.success
        assert result.errors == {}
        assert result.data.customer_id == "c1"
        assert result.data.amount == Decimal("12.50")
        assert result.data.status == "pending"

    def test_all_fields_invalid_reports_each_field(self):
        result = safe_parse(
            CreateInvoice,
            {"customer_id": "", "amount": "-5", "status": "bogus"}
        )

        assert not result.success
        assert result.data is None
        assert result.errors == {
            "customer_id": ["Please select a customer"],
            "amount": ["Amount must be greater than $0"],
            "status": ["Please select an invoice status"],
        }

    def test_missing_fields_report_custom_messages(self):
        result = safe_parse(
            CreateInvoice,
            {"customer_id": None, "amount": None, "status": None}
        )

        assert set(result.errors) == {"customer_id", "amount", "status"}
        assert result.errors["customer_id"] == ["Please select a customer"]

    @pytest.mark.parametrize("amount", ["0", "-0.01", "abc", "", "NaN", "0.004"])
    def test_non_positive_or_non_numeric_amount_is_rejected(self, amount):
        result = safe_parse(
            CreateInvoice,
            {"customer_id": "c1", "amount": amount, "status": "paid"}
        )

        assert result.errors == {"amount": ["Amount must be greater than $0"]}

    def test_status_must_be_exact_literal(self):
        result = safe_parse(
            CreateInvoice,
            {"customer_id": "c1", "amount": "10", "status": "PAID"}
        )

        assert result.errors == {"status": ["Please select an invoice status"]}

    def test_create_and_update_share_reduced_shape(self):
        assert CreateInvoice is UpdateInvoice
        assert "id" not in CreateInvoice.model_fields
        assert "date" not in CreateInvoice.model_fields
        assert {"id", "date"} <= set(Invoice.model_fields)

    def test_form_supplied_id_is_ignored(self):
        result = safe_parse(
            UpdateInvoice,
            {"customer_id": "c1", "amount": "5", "status": "paid", "id": "other-invoice"}
        )

        assert result.success
        assert not hasattr(result.data, "id")


class TestLoginCredentialsSchema:
    """LoginCredentials keeps values exactly as submitted."""

    def test_valid_credentials(self):
        result = safe_parse(
            LoginCredentials,
            {"email": "user@nextmail.com", "password": "123456"}
        )

        assert result.success

    def test_malformed_email_and_short_password(self):
        result = safe_parse(
            LoginCredentials,
            {"email": "not-an-email", "password": "123"}
        )

        assert not result.success
        assert set(result.errors) == {"email", "password"}

    def test_half_cent_rounds_up_to_a_valid_amount(self):
        result = safe_parse(
            CreateInvoice,
            {"customer_id": "c1", "amount": "0.005", "status": "paid"}
        )

        assert result.success

    def test_password_whitespace_is_preserved(self):
        result = safe_parse(
            LoginCredentials,
            {"email": "user@nextmail.com", "password": "  secret1  "}
        )

        assert result.data.password == "  secret1  "

    def test_short_password_is_measured_before_any_trimming(self):
        result = safe_parse(
            LoginCredentials,
            {"email": "user@nextmail.com", "password": "  abc "}
        )

        assert result.success

    def test_email_is_not_normalized(self):
        result = safe_parse(
            LoginCredentials,
            {"email": "Ada@Example.COM", "password": "123456"}
        )

        assert result.data.email == "Ada@Example.COM"

    @pytest.mark.parametrize("email", ["user@shop.local", "user@intranet.test", "o'neil@nextmail.com"])
    def test_private_domains_are_well_formed(self, email):
        result = safe_parse(LoginCredentials, {"email": email, "password": "123456"})

        assert result.success

    @pytest.mark.parametrize(
        "email",
        ["user@nextmail", ".user@nextmail.com", "us..er@nextmail.com", "user@nextmail.com\n", " user@nextmail.com"],
    )
    def test_malformed_emails_are_rejected(self, email):
        result = safe_parse(LoginCredentials, {"email": email, "password": "123456"})

        assert set(result.errors) == {"email"}
