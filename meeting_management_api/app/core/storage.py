"""
JSON file persistence for the meeting store.

Meetings are read from ``settings.meetings_file`` when the application
starts and written back when it stops.  The file holds a JSON array of
meeting records::

    [
      {
        "name": "Weekly Java sync",
        "responsiblePerson": "Jonas",
        "description": "Jono Java meetas",
        "meetingCategory": "CodeMonkey",
        "meetingType": "Live",
        "startDate": "2030-01-01T10:00:00",
        "endDate": "2030-01-01T12:00:00",
        "participants": {"Jonas": "2029-12-01T09:30:00"}
      }
    ]

Dates are ISO‑8601 local date‑times.  Read and write failures are
logged and never abort startup or shutdown.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from .config import settings
from ..schemas.meeting import MeetingData
from ..services.meeting_service import MeetingService


logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[MeetingData])


def get_storage_path() -> str:
    """Compute the path of the meetings JSON file.

    If ``settings.meetings_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    file_path = settings.meetings_file
    if os.path.isabs(file_path):
        return file_path
    base_dir = Path(__file__).resolve().parent.parent.parent  # meeting_management_api/
    return str((base_dir / file_path).resolve())


def load_meetings(service: MeetingService, path: Optional[str] = None) -> int:
    """Upsert every record of the JSON file into ``service``.

    Returns the number of records loaded; ``0`` when the file is missing
    or cannot be parsed.
    """
    path = path or get_storage_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        records = _records_adapter.validate_python(raw)
    except FileNotFoundError:
        logger.info("No meetings file at %s; starting with an empty store", path)
        return 0
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Unable to read any meetings from %s: %s", path, e)
        return 0
    for record in records:
        service.upsert(record)
    logger.info("Loaded %d meeting(s) from %s", len(records), path)
    return len(records)


def save_meetings(service: MeetingService, path: Optional[str] = None) -> bool:
    """Write every stored meeting to the JSON file.

    Returns ``True`` on success.
    """
    path = path or get_storage_path()
    meetings = service.query()
    payload = [meeting.model_dump(mode="json", by_alias=True) for meeting in meetings]
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Unable to save meetings to %s: %s", path, e)
        return False
    logger.info("Saved %d meeting(s) to %s", len(payload), path)
    return True
