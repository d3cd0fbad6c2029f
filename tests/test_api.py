"""
Tests for the REST API.
"""

import inspect

import pytest
from fastapi.testclient import TestClient

from workdays.api import app


@pytest.fixture
def client():
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def short_week():
    """Calendar payload: Monday to Wednesday with Christmas 2023 off."""
    return {"work_days": ["Mon", "Tue", "Wed"], "holidays": ["2023-12-25"]}


class TestEndDate:
    """Tests for POST /end-date."""

    def test_default_calendar(self, client):
        """Test twenty work days on the default calendar."""
        response = client.post("/end-date", json={"start_date": "2023-08-21", "days": 20})

        assert response.status_code == 200
        data = response.json()
        assert data["end_date"] == "2023-09-18"
        assert data["calendar_days"] == 28
        assert data["work_days"] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

    def test_custom_calendar(self, client, short_week):
        """Test a calendar sent with the request."""
        response = client.post(
            "/end-date",
            json={"start_date": "2023-12-18", "days": 4, "calendar": short_week},
        )

        assert response.status_code == 200
        assert response.json()["end_date"] == "2023-12-27"

    def test_backwards(self, client):
        """Test a negative day count."""
        response = client.post("/end-date", json={"start_date": "2023-08-28", "days": -5})

        assert response.status_code == 200
        assert response.json()["end_date"] == "2023-08-21"
        assert response.json()["calendar_days"] == -7

    def test_no_work_days(self, client):
        """Test that an empty work week is a client error."""
        response = client.post(
            "/end-date",
            json={"start_date": "2023-08-21", "days": 5, "calendar": {"work_days": []}},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "No work days defined"

    def test_overflow(self, client):
        """Test that an impossible day count is rejected."""
        response = client.post(
            "/end-date", json={"start_date": "2023-08-21", "days": 100_000_000}
        )

        assert response.status_code == 422

    def test_invalid_weekday(self, client):
        """Test that an unknown weekday fails request validation."""
        response = client.post(
            "/end-date",
            json={"start_date": "2023-08-21", "days": 5, "calendar": {"work_days": ["Funday"]}},
        )

        assert response.status_code == 422

    def test_unknown_calendar_field(self, client):
        """Test that unknown calendar fields are rejected."""
        response = client.post(
            "/end-date",
            json={"start_date": "2023-08-21", "days": 5, "calendar": {"weekends": ["Sat"]}},
        )

        assert response.status_code == 422


class TestCountAndCheck:
    """Tests for POST /count and POST /check."""

    def test_count(self, client):
        """Test counting a week with a holiday."""
        response = client.post(
            "/count",
            json={
                "start_date": "2023-08-21",
                "end_date": "2023-08-28",
                "calendar": {"holidays": ["2023-08-23"]},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["work_days_count"] == 4
        assert data["calendar_days"] == 7
        assert data["holidays_in_range"] == ["2023-08-23"]

    def test_count_reversed_range(self, client):
        """Test that a reversed range counts zero."""
        response = client.post(
            "/count", json={"start_date": "2023-08-28", "end_date": "2023-08-21"}
        )

        assert response.status_code == 200
        assert response.json()["work_days_count"] == 0

    def test_check_holiday(self, client, short_week):
        """Test checking a holiday."""
        response = client.post(
            "/check", json={"checked_date": "2023-12-25", "calendar": short_week}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["weekday"] == "Monday"
        assert data["is_work_day"] is False
        assert data["is_work_weekday"] is True
        assert data["is_holiday"] is True


class TestInfoEndpoints:
    """Tests for the informational endpoints."""

    def test_root(self, client):
        """Test the root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Workdays API"

    def test_health(self, client):
        """Test the health check."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_default_calendar(self, client):
        """Test the default calendar endpoint."""
        response = client.get("/calendar")

        assert response.status_code == 200
        assert response.json() == {
            "work_days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
            "holidays": [],
        }


class TestCalendarSchema:
    """Tests for the published calendar contract."""

    def work_day_items(self, client):
        """Return the item schemas advertised for calendar work_days."""
        schemas = client.get("/openapi.json").json()["components"]["schemas"]
        items = []
        for name, schema in schemas.items():
            if not name.startswith("WorkCalendarConfig"):
                continue
            field = schema["properties"]["work_days"]
            for variant in field.get("anyOf", [field]):
                if variant.get("type") == "array":
                    items.append(variant["items"])
        return items

    def test_work_days_advertised_as_names(self, client):
        """Test that work_days items are published as weekday name strings."""
        items = self.work_day_items(client)

        assert items
        for item in items:
            assert item["type"] == "string"
            assert "Monday" in item["enum"]
            assert "Mon" in item["enum"]

    def test_advertised_names_are_accepted(self, client):
        """Test that every advertised weekday name is accepted in a request."""
        names = self.work_day_items(client)[0]["enum"]

        response = client.post(
            "/end-date",
            json={"start_date": "2023-08-21", "days": 7, "calendar": {"work_days": names}},
        )

        assert response.status_code == 200
        assert response.json()["end_date"] == "2023-08-28"

    def test_integer_weekdays_rejected(self, client):
        """Test that integer weekdays are rejected as the schema says."""
        response = client.post(
            "/end-date",
            json={"start_date": "2023-08-21", "days": 5, "calendar": {"work_days": [0, 1]}},
        )

        assert response.status_code == 422


class TestHandlers:
    """Tests for how the calculation endpoints are declared."""

    @pytest.mark.parametrize("path", ["/end-date", "/count", "/check"])
    def test_calculation_endpoints_run_in_threadpool(self, path):
        """Test that day-walking endpoints are plain functions, not coroutines."""
        route = next(r for r in app.routes if getattr(r, "path", None) == path)

        assert not inspect.iscoroutinefunction(route.endpoint)
