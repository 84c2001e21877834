"""Shared pytest fixtures and configuration."""

import os
import pytest
from freezegun import freeze_time

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")
os.environ.setdefault("APP_BASE_URL", "https://allagentconnect.com")
os.environ.setdefault("LOG_MASK_SENSITIVE", "true")

from src.models.contact import Contact
from tests.utils.factories import (
    create_client_need_data,
    create_hot_sheet_data,
    create_listing_data,
    create_profile_data,
)


@pytest.fixture
def boston_listing():
    """3 bed Boston single family at $500,000."""
    return create_listing_data(
        listing_id="listing-boston-1",
        city="Boston",
        state="MA",
        zip_code="02116",
        price=500000,
        bedrooms=3,
        bathrooms=2,
        square_feet=1800,
        property_type="Single Family",
        neighborhood="Back Bay",
    )


@pytest.fixture
def agent_profile():
    return create_profile_data(profile_id="agent-1", email="listing.agent@example.com", first_name="Lena", last_name="Agent")


@pytest.fixture
def boston_hot_sheet():
    """Hot sheet for Boston under $600k, 2+ beds."""
    return create_hot_sheet_data(
        hot_sheet_id="hs-boston",
        criteria={"state": "MA", "cities": ["Boston"], "maxPrice": 600000, "bedrooms": 2},
        owner=create_profile_data(profile_id="user-1", email="buyer@example.com", first_name="Bea"),
    )


@pytest.fixture
def immediate_hot_sheet(boston_hot_sheet):
    """The Boston hot sheet on the immediately schedule."""
    return {**boston_hot_sheet, "id": "hs-instant", "notification_schedule": "immediately"}


@pytest.fixture
def boston_client_need():
    return create_client_need_data(
        need_id="need-boston",
        state="MA",
        city="Boston",
        property_type="single_family",
        max_price=650000,
        submitter=create_profile_data(profile_id="user-2", email="consumer@example.com", first_name="Cy"),
    )


@pytest.fixture
def listing_agent(agent_profile):
    return Contact.model_validate(agent_profile)


@pytest.fixture
def freeze_time_fixture():
    """Fixture for freezing time in tests."""
    with freeze_time("2024-12-09 12:00:00") as frozen_time:
        yield frozen_time


@pytest.fixture
def mock_vercel_request():
    """Mock Vercel serverless function request."""
    return {
        "method": "POST",
        "path": "/api/listings/search",
        "headers": {
            "content-type": "application/json",
            "x-correlation-id": "req_test",
        },
        "body": '{"state": "MA"}',
        "query": {}
    }
