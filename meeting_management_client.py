"""Meeting Management API client.

A thin wrapper around the REST API served by ``meeting_management_api``.
The client uses the ``requests`` library and exposes one method per
endpoint:

* :meth:`list_meetings` – list meetings, optionally filtered.
* :meth:`get_meeting` – fetch a single meeting by name.
* :meth:`create_meeting` – create or replace a meeting.
* :meth:`delete_meeting` – delete a meeting as its responsible person.
* :meth:`add_participants` – invite participants to a meeting.
* :meth:`remove_participants` – remove participants from a meeting.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``error`` is a dictionary with the keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

# Keyword arguments of ``list_meetings`` and the query parameters they map to.
_FILTER_PARAMS = {
    "description": "description",
    "responsible_person": "responsiblePerson",
    "category": "category",
    "meeting_type": "type",
    "start_date": "startDate",
    "end_date": "endDate",
    "min_attendees": "minAttendees",
}


class MeetingManagementClient:
    """Client for the meetings endpoints of the Meeting Management API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/v1/meetings",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            prefix: Path under which the meeting routes are mounted.
            timeout: Timeout in seconds for every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _url(self, *parts: str) -> str:
        path = self.prefix + "".join("/" + quote(part, safe="") for part in parts)
        return f"{self.base_url}{path}"

    def _request(
        self, method: str, url: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the decoded JSON
            body (``None`` for empty responses).
        """
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Meeting operations
    # ------------------------------------------------------------------
    def list_meetings(self, **filters: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve meetings matching the given filters.

        Args:
            **filters: Any of ``description``, ``responsible_person``,
                ``category``, ``meeting_type``, ``start_date``,
                ``end_date`` (``date`` or ISO string) and
                ``min_attendees``.  ``None`` values are ignored.
        Returns:
            A tuple ``(meetings, error)``.
        """
        unknown = set(filters) - set(_FILTER_PARAMS)
        if unknown:
            raise TypeError(f"Unknown meeting filter(s): {', '.join(sorted(unknown))}")
        params: Dict[str, Any] = {}
        for key, value in filters.items():
            if value is None:
                continue
            if isinstance(value, date):
                value = value.isoformat()
            params[_FILTER_PARAMS[key]] = value
        data, error = self._request("GET", self._url() + "/", params=params or None)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_meeting(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single meeting by name."""
        return self._request("GET", self._url(name))

    def create_meeting(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a meeting, replacing any meeting with the same name.

        Args:
            payload: Meeting fields in their JSON form (``name``,
                ``responsiblePerson``, ``meetingCategory``, ...).
        """
        return self._request("POST", self._url() + "/", json_body=payload)

    def delete_meeting(self, name: str, responsible_person: str) -> Tuple[bool, Optional[Error]]:
        """Delete a meeting as its responsible person.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._url(name), params={"responsiblePerson": responsible_person})
        if error:
            return False, error
        return True, None

    def add_participants(self, name: str, participants: List[str]) -> Tuple[List[str], Optional[Error]]:
        """Invite participants to a meeting.

        Returns:
            A tuple ``(already_invited, error)`` where ``already_invited``
            lists the names that were not added because they were
            present already.
        """
        data, error = self._request("PUT", self._url(name, "addParticipant"), json_body=list(participants))
        if error:
            return [], error
        return list((data or {}).get("alreadyInvited", [])), None

    def remove_participants(self, name: str, participants: List[str]) -> Tuple[bool, Optional[Error]]:
        """Remove participants from a meeting.

        The responsible person is never removed by the server.
        """
        _, error = self._request("DELETE", self._url(name, "removeParticipant"), json_body=list(participants))
        if error:
            return False, error
        return True, None
