"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON shape of meetings as they travel over HTTP
and to and from the persisted ``meetings.json`` file.
"""
