"""Shared fixtures for the meeting store and API tests.

Provides:
- A fixed clock so participant join timestamps are predictable
- A fresh in-memory MeetingService per test
- A TestClient bound to an app that does not touch meetings.json
"""

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from meeting_management_api.app.main import create_app
from meeting_management_api.app.schemas.meeting import MeetingCategory, MeetingData, MeetingType
from meeting_management_api.app.services.meeting_service import MeetingService


NOW = datetime(2024, 1, 1, 9, 30, 45, 123456)


def make_meeting(name: str = "M1", responsible_person: str = "A", **overrides) -> MeetingData:
    fields = {
        "name": name,
        "responsible_person": responsible_person,
        "description": "Jono Java meetas",
        "meeting_category": MeetingCategory.CODE_MONKEY,
        "meeting_type": MeetingType.LIVE,
        "start_date": datetime(2024, 1, 1, 10, 0),
        "end_date": datetime(2024, 1, 1, 12, 0),
    }
    fields.update(overrides)
    return MeetingData(**fields)


@pytest.fixture
def service() -> MeetingService:
    return MeetingService(clock=lambda: NOW)


@pytest.fixture
def client(service) -> TestClient:
    app = create_app(service=service, persist=False)
    with TestClient(app) as test_client:
        yield test_client
