"""
Business logic for meetings.

``MeetingService`` keeps meetings in an in‑memory list keyed by their
unique name.  Saving a meeting whose name already exists replaces the
previous entry entirely.  The responsible person is always stored as a
participant and can never be removed through ``remove_participants``;
only the responsible person may delete a meeting.

All operations take a single re‑entrant lock, so the store can be
shared by concurrent request handlers.  Readers receive deep copies
taken under that lock; stored meetings and their participant maps are
never handed out.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from ..schemas.meeting import Meeting, MeetingData
from .meeting_filter import MeetingFilter


logger = logging.getLogger(__name__)


class MeetingNotFoundError(ValueError):
    """Raised when an operation targets a meeting name that is not stored."""

    def __init__(self, name: str) -> None:
        super().__init__("Meeting with such name was not found")
        self.name = name


class MeetingService:
    """In‑memory meeting store."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._meetings: List[Meeting] = []
        self._lock = threading.RLock()
        self._clock = clock or datetime.now

    def _now(self) -> datetime:
        # Join timestamps are kept with minute precision.
        return self._clock().replace(second=0, microsecond=0)

    def query(self, filters: Optional[MeetingFilter] = None) -> List[Meeting]:
        """Return the meetings matching every criterion set in ``filters``.

        With no filters (or an empty ``MeetingFilter``) every stored
        meeting is returned, in store order.  The returned meetings are
        copies taken under the lock; later participant changes do not
        show through them.
        """
        filters = filters or MeetingFilter()
        with self._lock:
            return [meeting.model_copy(deep=True) for meeting in self._meetings if filters.matches(meeting)]

    def find_by_name(self, name: str) -> Optional[Meeting]:
        """Return a copy of the meeting called ``name`` or ``None``."""
        with self._lock:
            meeting = self._find(name)
            if meeting is not None:
                return meeting.model_copy(deep=True)
        logger.debug("Meeting '%s' not found", name)
        return None

    def upsert(self, data: MeetingData) -> Meeting:
        """Store ``data`` as a new meeting, replacing any meeting with the same name.

        The responsible person is (re)added to the participants with the
        current time, even when the supplied participants already list
        them.
        """
        participants = dict(data.participants or {})
        participants[data.responsible_person] = self._now()
        meeting = Meeting(
            name=data.name,
            responsible_person=data.responsible_person,
            description=data.description,
            meeting_category=data.meeting_category,
            meeting_type=data.meeting_type,
            start_date=data.start_date,
            end_date=data.end_date,
            participants=participants,
        )
        with self._lock:
            before = len(self._meetings)
            self._meetings = [m for m in self._meetings if m.name != data.name]
            replaced = len(self._meetings) != before
            self._meetings.append(meeting)
            snapshot = meeting.model_copy(deep=True)
        logger.info(
            "%s meeting '%s' (responsible: %s)",
            "Replaced" if replaced else "Created",
            meeting.name,
            meeting.responsible_person,
        )
        return snapshot

    def delete(self, name: str, responsible_person: str) -> bool:
        """Delete the meeting only if both ``name`` and ``responsible_person`` match.

        Returns ``True`` when a meeting was removed.
        """
        with self._lock:
            remaining = [
                m for m in self._meetings
                if not (m.name == name and m.responsible_person == responsible_person)
            ]
            deleted = len(remaining) != len(self._meetings)
            self._meetings = remaining
        if deleted:
            logger.info("Deleted meeting '%s' on request of %s", name, responsible_person)
        else:
            logger.warning("Refused to delete meeting '%s' for %s: no such meeting or not responsible", name, responsible_person)
        return deleted

    def add_participants(self, name: str, participants: Iterable[str]) -> List[str]:
        """Add participants that are not yet invited to the meeting.

        Returns the names that were already present and therefore not
        added, in the order they were given.  Raises
        ``MeetingNotFoundError`` if the meeting does not exist.
        """
        with self._lock:
            meeting = self._get_or_raise(name)
            already_invited: List[str] = []
            joined_at = self._now()
            for participant in participants:
                if participant in meeting.participants:
                    already_invited.append(participant)
                else:
                    meeting.participants[participant] = joined_at
        logger.info(
            "Added participants to meeting '%s'; %d already invited",
            name,
            len(already_invited),
        )
        return already_invited

    def remove_participants(self, name: str, participants: Iterable[str]) -> None:
        """Remove the listed participants, never the responsible person.

        Names not present in the meeting are ignored.  Raises
        ``MeetingNotFoundError`` if the meeting does not exist.
        """
        with self._lock:
            meeting = self._get_or_raise(name)
            removed = 0
            for participant in participants:
                if participant == meeting.responsible_person:
                    continue
                if meeting.participants.pop(participant, None) is not None:
                    removed += 1
        logger.info("Removed %d participant(s) from meeting '%s'", removed, name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._meetings)

    def _find(self, name: str) -> Optional[Meeting]:
        # Callers hold the lock; the stored meeting itself is returned.
        for meeting in self._meetings:
            if meeting.name == name:
                return meeting
        return None

    def _get_or_raise(self, name: str) -> Meeting:
        meeting = self._find(name)
        if meeting is None:
            raise MeetingNotFoundError(name)
        return meeting
