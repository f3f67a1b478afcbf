"""
Meeting endpoints for API v1.

These routes expose the meeting store: listing with filters, lookup by
name, creation (which replaces a meeting of the same name), deletion
by the responsible person and participant management.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status

from meeting_management_api.app.schemas.meeting import (
    Meeting,
    MeetingCreate,
    ParticipantsAdded,
    ParticipantsRemoved,
    parse_category,
    parse_type,
)
from meeting_management_api.app.services.meeting_filter import MeetingFilter
from meeting_management_api.app.services.meeting_service import MeetingNotFoundError, MeetingService


router = APIRouter()


def get_meeting_service(request: Request) -> MeetingService:
    """Return the meeting store attached to the running application."""
    return request.app.state.meeting_service


def _require_participants(participants: Optional[List[str]]) -> List[str]:
    if not participants:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Participants list is empty.")
    return participants


@router.get("/", response_model=List[Meeting])
async def list_meetings(
    description: Optional[str] = Query(None),
    responsible_person: Optional[str] = Query(None, alias="responsiblePerson"),
    category: Optional[str] = Query(None, description="CodeMonkey, Hub, Short or TeamBuilding"),
    meeting_type: Optional[str] = Query(None, alias="type", description="Live or InPerson"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    min_attendees: Optional[int] = Query(None, alias="minAttendees"),
    service: MeetingService = Depends(get_meeting_service),
) -> List[Meeting]:
    """List meetings, optionally filtered.

    - **description**: case‑insensitive substring of the description.
    - **responsiblePerson**: exact responsible person.
    - **category** / **type**: exact enum values.
    - **startDate**: meetings starting after the beginning of that day.
    - **endDate**: meetings ending before 23:59 of that day.
    - **minAttendees**: meetings with at least that many participants.

    Invalid category, type or a negative ``minAttendees`` yield 400.
    """
    try:
        filters = MeetingFilter(
            description_contains=description,
            responsible_person=responsible_person,
            category=parse_category(category) if category is not None else None,
            meeting_type=parse_type(meeting_type) if meeting_type is not None else None,
            start_date_after=start_date,
            end_date_before=end_date,
            min_participant_count=min_attendees,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return service.query(filters)


@router.get("/{name}", response_model=Meeting)
async def get_meeting(name: str, service: MeetingService = Depends(get_meeting_service)) -> Meeting:
    """Retrieve a single meeting by its name.  Raises 404 if it does not exist."""
    meeting = service.find_by_name(name)
    if meeting is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meeting with that name was not found.")
    return meeting


@router.post("/", response_model=Meeting, status_code=status.HTTP_201_CREATED)
async def create_meeting(
    meeting: MeetingCreate,
    service: MeetingService = Depends(get_meeting_service),
) -> Meeting:
    """Create a meeting.

    A meeting with the same name is replaced.  The responsible person
    is always added to the participants.
    """
    return service.upsert(meeting)


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meeting(
    name: str,
    responsible_person: str = Query(..., alias="responsiblePerson"),
    service: MeetingService = Depends(get_meeting_service),
) -> None:
    """Delete a meeting.  Only its responsible person may do so."""
    if not service.delete(name, responsible_person):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=(
                "Only responsible person can delete the meeting.\n"
                "Please make sure the responsible person is correct for this meeting."
            ),
        )
    return None


@router.put(
    "/{name}/addParticipant",
    response_model=ParticipantsAdded,
    status_code=status.HTTP_201_CREATED,
)
async def add_participants(
    name: str,
    participants: Optional[List[str]] = Body(None),
    service: MeetingService = Depends(get_meeting_service),
) -> ParticipantsAdded:
    """Add participants to a meeting.

    Names that are already invited are not added again; they are
    reported back in ``alreadyInvited``.
    """
    participants = _require_participants(participants)
    try:
        already_invited = service.add_participants(name, participants)
    except MeetingNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    if already_invited:
        message = (
            f"WARNING! {already_invited} participant(s) are already invited.\n"
            "Already invited participant(s) won't be added to the meeting's participants list.\n"
            "All other users that were not present in the meeting before will be added."
        )
    else:
        message = "Successfully added participants."
    return ParticipantsAdded(message=message, already_invited=already_invited)


@router.delete("/{name}/removeParticipant", response_model=ParticipantsRemoved)
async def remove_participants(
    name: str,
    participants: Optional[List[str]] = Body(None),
    service: MeetingService = Depends(get_meeting_service),
) -> ParticipantsRemoved:
    """Remove participants from a meeting.

    The responsible person is never removed, even when listed.
    """
    participants = _require_participants(participants)
    try:
        service.remove_participants(name, participants)
    except MeetingNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ParticipantsRemoved(
        message=(
            "Participants, if they were present, are successfully deleted.\n"
            "NOTE: Meeting's responsible person won't be deleted from the meeting."
        )
    )
