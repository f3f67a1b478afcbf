"""
Predicates used to filter meetings.

``MeetingFilter`` bundles the optional criteria accepted by
``GET /meetings``.  Every criterion is independent: when it is
``None`` it matches every meeting, and ``matches`` combines the
criteria that are set with a logical AND.

Date criteria are strict.  ``start_date_after`` keeps meetings that
start after midnight of the given day; ``end_date_before`` keeps
meetings that end before 23:59 of the given day.  A meeting without a
description never matches a description filter, and a meeting without
an end date never matches an end date filter.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..schemas.meeting import Meeting, MeetingCategory, MeetingType

END_OF_DAY = time(23, 59)


@dataclass
class MeetingFilter:
    description_contains: Optional[str] = None
    responsible_person: Optional[str] = None
    category: Optional[MeetingCategory] = None
    meeting_type: Optional[MeetingType] = None
    start_date_after: Optional[date] = None
    end_date_before: Optional[date] = None
    min_participant_count: Optional[int] = None

    def __post_init__(self) -> None:
        if self.min_participant_count is not None and self.min_participant_count < 0:
            raise ValueError("Minimal value of attendees should be positive.")

    def matches(self, meeting: Meeting) -> bool:
        return (
            self._description_matches(meeting)
            and self._responsible_person_matches(meeting)
            and self._category_matches(meeting)
            and self._type_matches(meeting)
            and self._starts_after(meeting)
            and self._ends_before(meeting)
            and self._has_min_participants(meeting)
        )

    def _description_matches(self, meeting: Meeting) -> bool:
        if self.description_contains is None:
            return True
        if meeting.description is None:
            return False
        return self.description_contains.lower() in meeting.description.lower()

    def _responsible_person_matches(self, meeting: Meeting) -> bool:
        return self.responsible_person is None or meeting.responsible_person == self.responsible_person

    def _category_matches(self, meeting: Meeting) -> bool:
        return self.category is None or meeting.meeting_category == self.category

    def _type_matches(self, meeting: Meeting) -> bool:
        return self.meeting_type is None or meeting.meeting_type == self.meeting_type

    def _starts_after(self, meeting: Meeting) -> bool:
        if self.start_date_after is None:
            return True
        return meeting.start_date > datetime.combine(self.start_date_after, time.min)

    def _ends_before(self, meeting: Meeting) -> bool:
        if self.end_date_before is None:
            return True
        if meeting.end_date is None:
            return False
        return meeting.end_date < datetime.combine(self.end_date_before, END_OF_DAY)

    def _has_min_participants(self, meeting: Meeting) -> bool:
        return self.min_participant_count is None or len(meeting.participants) >= self.min_participant_count
