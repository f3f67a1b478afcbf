"""Tests for the requests-based MeetingManagementClient.

The HTTP session is a MagicMock, so no server is needed.
"""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from meeting_management_client import MeetingManagementClient


def _response(status_code: int = 200, payload=None) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = b"" if payload is None else b"x"
    response.json.return_value = payload
    response.text = "" if payload is None else str(payload)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session) -> MeetingManagementClient:
    return MeetingManagementClient(base_url="http://meetings.local/", session=session)


class TestListMeetings:
    def test_translates_filters_to_query_params(self, api, session):
        session.request.return_value = _response(payload=[{"name": "M1"}])

        meetings, error = api.list_meetings(
            responsible_person="A",
            meeting_type="Live",
            start_date=date(2024, 1, 1),
            min_attendees=0,
            description=None,
        )

        assert error is None
        assert meetings == [{"name": "M1"}]
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://meetings.local/api/v1/meetings/"
        assert kwargs["params"] == {
            "responsiblePerson": "A",
            "type": "Live",
            "startDate": "2024-01-01",
            "minAttendees": 0,
        }

    def test_unknown_filter_raises(self, api):
        with pytest.raises(TypeError, match="colour"):
            api.list_meetings(colour="red")

    def test_http_error_returns_empty_list_and_error(self, api, session):
        session.request.return_value = _response(400, {"detail": "For the meeting type only Live or InPerson values are accepted."})
        meetings, error = api.list_meetings(meeting_type="Remote")
        assert meetings == []
        assert error == {
            "status_code": 400,
            "message": "For the meeting type only Live or InPerson values are accepted.",
        }


class TestMeetingOperations:
    def test_get_meeting_quotes_name(self, api, session):
        session.request.return_value = _response(payload={"name": "Sprint review"})
        meeting, error = api.get_meeting("Sprint review")
        assert error is None
        assert meeting == {"name": "Sprint review"}
        assert session.request.call_args.kwargs["url"] == "http://meetings.local/api/v1/meetings/Sprint%20review"

    def test_get_missing_meeting(self, api, session):
        session.request.return_value = _response(404, {"detail": "Meeting with that name was not found."})
        meeting, error = api.get_meeting("missing")
        assert meeting is None
        assert error["status_code"] == 404

    def test_create_meeting_posts_payload(self, api, session):
        session.request.return_value = _response(201, None)
        payload = {"name": "M1", "responsiblePerson": "A"}
        api.create_meeting(payload)
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == payload

    def test_delete_meeting(self, api, session):
        session.request.return_value = _response(204)
        assert api.delete_meeting("M1", "A") == (True, None)
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "DELETE"
        assert kwargs["params"] == {"responsiblePerson": "A"}

    def test_delete_refused(self, api, session):
        session.request.return_value = _response(404, {"detail": "Only responsible person can delete the meeting."})
        success, error = api.delete_meeting("M1", "WrongPerson")
        assert success is False
        assert error["message"] == "Only responsible person can delete the meeting."

    def test_add_participants_returns_already_invited(self, api, session):
        session.request.return_value = _response(201, {"message": "WARNING!", "alreadyInvited": ["A"]})
        already_invited, error = api.add_participants("M1", ["B", "A"])
        assert error is None
        assert already_invited == ["A"]
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"].endswith("/M1/addParticipant")
        assert kwargs["json"] == ["B", "A"]

    def test_remove_participants(self, api, session):
        session.request.return_value = _response(payload={"message": "ok"})
        assert api.remove_participants("M1", ["B"]) == (True, None)
        assert session.request.call_args.kwargs["url"].endswith("/M1/removeParticipant")

    def test_connection_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("refused")
        meeting, error = api.get_meeting("M1")
        assert meeting is None
        assert error == {"status_code": None, "message": "refused"}
