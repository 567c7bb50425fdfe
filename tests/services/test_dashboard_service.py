"""
Tests for dashboard overview queries (revenue and card data).
"""

from unittest.mock import MagicMock

import pytest

from dashboard.db.errors import DatabaseError
from dashboard.services.dashboard_service import fetch_card_data, fetch_revenue


@pytest.fixture
def card_tables(supabase_client):
    """
    Route client.table(name) to per-table mocks.

    invoices.select(...).execute()           -> invoice count
    invoices.select(...).eq(status).execute() -> paid / pending rows
    customers.select(...).execute()          -> customer count
    """
    invoices_table = MagicMock()
    customers_table = MagicMock()
    supabase_client.table.side_effect = lambda name: {
        "invoices": invoices_table,
        "customers": customers_table,
    }[name]

    invoices_select = invoices_table.select.return_value
    invoices_select.execute.return_value = MagicMock(count=3)

    by_status = {
        "paid": MagicMock(data=[{"amount": 100000}, {"amount": 250}]),
        "pending": MagicMock(data=[{"amount": 500}]),
    }
    status_queries = {
        status: MagicMock(**{"execute.return_value": response})
        for status, response in by_status.items()
    }
    invoices_select.eq.side_effect = lambda column, value: status_queries[value]

    customers_table.select.return_value.execute.return_value = MagicMock(count=2)

    return {
        "invoices": invoices_table,
        "customers": customers_table,
        "status_queries": status_queries,
    }


class TestFetchRevenue:

    @pytest.mark.asyncio
    async def test_returns_rows_unmodified(self, supabase_client):
        rows = [{"month": "Jan", "revenue": 2000}, {"month": "Feb", "revenue": 1800}]
        supabase_client.table.return_value.select.return_value.execute.return_value = (
            MagicMock(data=rows)
        )

        result = await fetch_revenue(supabase_client)

        supabase_client.table.assert_called_once_with("revenue")
        assert result == rows

    @pytest.mark.asyncio
    async def test_failure_raises_generic_error(self, supabase_client):
        supabase_client.table.return_value.select.return_value.execute.side_effect = (
            Exception("relation \"revenue\" does not exist")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await fetch_revenue(supabase_client)

        assert str(exc_info.value) == "Failed to fetch revenue data."


class TestFetchCardData:

    @pytest.mark.asyncio
    async def test_aggregates_counts_and_formatted_totals(self, supabase_client, card_tables):
        result = await fetch_card_data(supabase_client)

        assert result == {
            "number_of_invoices": 3,
            "number_of_customers": 2,
            "total_paid_invoices": "$1,002.50",
            "total_pending_invoices": "$5.00",
        }
        card_tables["invoices"].select.return_value.eq.assert_any_call("status", "paid")
        card_tables["invoices"].select.return_value.eq.assert_any_call("status", "pending")

    @pytest.mark.asyncio
    async def test_empty_tables_give_zero_totals(self, supabase_client, card_tables):
        card_tables["invoices"].select.return_value.execute.return_value = MagicMock(count=0)
        card_tables["customers"].select.return_value.execute.return_value = MagicMock(count=0)
        for query in card_tables["status_queries"].values():
            query.execute.return_value = MagicMock(data=[])

        result = await fetch_card_data(supabase_client)

        assert result == {
            "number_of_invoices": 0,
            "number_of_customers": 0,
            "total_paid_invoices": "$0.00",
            "total_pending_invoices": "$0.00",
        }

    @pytest.mark.asyncio
    async def test_any_failed_read_fails_the_aggregate(self, supabase_client, card_tables):
        card_tables["customers"].select.return_value.execute.side_effect = Exception("timeout")

        with pytest.raises(DatabaseError) as exc_info:
            await fetch_card_data(supabase_client)

        assert str(exc_info.value) == "Failed to fetch card data."

    @pytest.mark.asyncio
    async def test_failed_status_read_fails_the_aggregate(self, supabase_client, card_tables):
        card_tables["status_queries"]["pending"].execute.side_effect = Exception("boom")

        with pytest.raises(DatabaseError, match="Failed to fetch card data."):
            await fetch_card_data(supabase_client)
