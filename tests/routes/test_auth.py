"""
Tests for POST /login.
"""

from unittest.mock import AsyncMock, patch

import bcrypt
import pytest
from fastapi.testclient import TestClient

from dashboard.main import app
from dashboard.utils.navigation import RedirectSignal


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def mock_supabase():
    with patch("dashboard.routes.auth.get_supabase_client") as factory:
        yield factory


class TestLogin:

    def test_success_redirects_to_dashboard(self, client, mock_supabase):
        with patch(
            "dashboard.routes.auth.authenticate",
            new=AsyncMock(side_effect=RedirectSignal("/dashboard")),
        ) as mock_authenticate:
            response = client.post(
                "/login",
                data={"email": "user@nextmail.com", "password": "123456"},
                follow_redirects=False,
            )

        assert response.status_code == 303
        assert response.headers["location"] == "/dashboard"
        # Anonymous client: the caller has no session yet
        mock_supabase.assert_called_once_with()
        form_data = mock_authenticate.call_args[0][2]
        assert form_data["email"] == "user@nextmail.com"

    def test_rejected_credentials_return_401_with_message(self, client, mock_supabase):
        with patch(
            "dashboard.routes.auth.authenticate",
            new=AsyncMock(return_value="Invalid credentials."),
        ):
            response = client.post(
                "/login",
                data={"email": "user@nextmail.com", "password": "wrongpw"},
            )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials."}

    def test_unknown_user_goes_through_real_provider(self, client, mock_supabase):
        lookup = mock_supabase.return_value.table.return_value.select.return_value
        lookup.eq.return_value.limit.return_value.execute.return_value.data = []

        response = client.post(
            "/login",
            data={"email": "ghost@nextmail.com", "password": "123456"},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials."}

    def test_lookup_failure_returns_generic_message(self, client, mock_supabase):
        lookup = mock_supabase.return_value.table.return_value.select.return_value
        lookup.eq.return_value.limit.return_value.execute.side_effect = Exception("down")

        response = client.post(
            "/login",
            data={"email": "user@nextmail.com", "password": "123456"},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Something went wrong."}

    def test_long_wrong_password_is_invalid_credentials(self, client, mock_supabase):
        digest = bcrypt.hashpw(b"123456", bcrypt.gensalt(rounds=4)).decode("utf-8")
        lookup = mock_supabase.return_value.table.return_value.select.return_value
        lookup.eq.return_value.limit.return_value.execute.return_value.data = [
            {"id": "u1", "name": "User", "email": "user@nextmail.com", "password": digest}
        ]

        response = client.post(
            "/login",
            data={"email": "user@nextmail.com", "password": "x" * 80},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials."}
