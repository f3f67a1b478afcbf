"""
Pydantic models for meeting data.

Field names follow the camelCase JSON layout of ``meetings.json``
(``responsiblePerson``, ``meetingCategory``, ``startDate`` ...) via
aliases, while Python code uses snake_case attributes.

* ``MeetingData`` carries every meeting field; participants are
  optional.  It is used for records read back from disk.
* ``MeetingCreate`` adds the request‑time checks: non‑blank name and
  responsible person, present or future start date and future end date.
* ``Meeting`` is the stored representation returned by the API.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


CATEGORY_ERROR = "For the meeting category only CodeMonkey, Hub, Short, or TeamBuilding values are accepted."
TYPE_ERROR = "For the meeting type only Live or InPerson values are accepted."


class MeetingCategory(str, Enum):
    CODE_MONKEY = "CodeMonkey"
    HUB = "Hub"
    SHORT = "Short"
    TEAM_BUILDING = "TeamBuilding"


class MeetingType(str, Enum):
    LIVE = "Live"
    IN_PERSON = "InPerson"


def parse_category(value) -> MeetingCategory:
    """Return the category for an exact literal or raise ``ValueError``."""
    if isinstance(value, MeetingCategory):
        return value
    try:
        return MeetingCategory(value)
    except ValueError:
        raise ValueError(CATEGORY_ERROR) from None


def parse_type(value) -> MeetingType:
    """Return the meeting type for an exact literal or raise ``ValueError``."""
    if isinstance(value, MeetingType):
        return value
    try:
        return MeetingType(value)
    except ValueError:
        raise ValueError(TYPE_ERROR) from None


def _as_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    # Stored dates are local date-times; offsets are converted away.
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class MeetingData(BaseModel):
    name: str = Field(..., examples=["Weekly Java sync"])
    responsible_person: str = Field(..., alias="responsiblePerson", examples=["Jonas"])
    description: Optional[str] = Field(None, examples=["Jono Java meetas"])
    meeting_category: MeetingCategory = Field(..., alias="meetingCategory", examples=["CodeMonkey"])
    meeting_type: MeetingType = Field(..., alias="meetingType", examples=["Live"])
    start_date: datetime = Field(..., alias="startDate", examples=["2030-01-01T10:00:00"])
    end_date: Optional[datetime] = Field(None, alias="endDate", examples=["2030-01-01T12:00:00"])
    participants: Optional[Dict[str, datetime]] = None

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("meeting_category", mode="before")
    @classmethod
    def validate_category(cls, v):
        return parse_category(v)

    @field_validator("meeting_type", mode="before")
    @classmethod
    def validate_type(cls, v):
        return parse_type(v)

    @field_validator("start_date", "end_date")
    @classmethod
    def normalise_dates(cls, v):
        return _as_local_naive(v)

    @field_validator("participants")
    @classmethod
    def normalise_join_times(cls, v):
        if v is None:
            return v
        return {name: _as_local_naive(joined_at) for name, joined_at in v.items()}


class MeetingCreate(MeetingData):
    """Schema for creating (or replacing) a meeting through the API."""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Meeting must contain a name.")
        return v

    @field_validator("responsible_person")
    @classmethod
    def responsible_person_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("A responsible Person for the meeting has to be set.")
        return v

    @field_validator("start_date")
    @classmethod
    def start_date_present_or_future(cls, v: datetime) -> datetime:
        v = _as_local_naive(v)
        if v < datetime.now().replace(second=0, microsecond=0):
            raise ValueError("The start date of the meeting should be present or future date.")
        return v

    @field_validator("end_date")
    @classmethod
    def end_date_future(cls, v: Optional[datetime]) -> Optional[datetime]:
        v = _as_local_naive(v)
        if v is not None and v <= datetime.now():
            raise ValueError("The end date of the meeting should be future date.")
        return v


class Meeting(MeetingData):
    """A stored meeting.

    The model is frozen: only the contents of ``participants`` change
    after creation, and the map always contains the responsible person.
    """

    participants: Dict[str, datetime] = Field(default_factory=dict)

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "frozen": True,
    }


class ParticipantsAdded(BaseModel):
    """Response body of the add‑participants endpoint."""

    message: str
    already_invited: List[str] = Field(default_factory=list, alias="alreadyInvited")

    model_config = {
        "populate_by_name": True,
    }


class ParticipantsRemoved(BaseModel):
    """Response body of the remove‑participants endpoint."""

    message: str
