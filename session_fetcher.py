#!/usr/bin/env python3
"""
Fetch conference sessions from the sessions API.
"""

import logging
import math
from datetime import datetime, tzinfo
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo

import requests
from pydantic import BaseModel, ConfigDict, Field, field_validator

import config

logger = logging.getLogger(__name__)


class Speaker(BaseModel):
    """Speaker attached to a session."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(default="", description="Speaker display name")

    @field_validator("name", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


class Session(BaseModel):
    """Conference session as returned by the sessions API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: str = Field(default="", alias="sourceId", description="Session source code")
    title: str = Field(default="", description="Session title")
    start: Optional[datetime] = Field(default=None, alias="slot_start")
    end: Optional[datetime] = Field(default=None, alias="slot_end")
    room: Optional[str] = Field(default=None, alias="slot_roomId")
    speakers: List[Speaker] = Field(default_factory=list)
    state: str = "confirmed"

    @field_validator("code", "title", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("speakers", mode="before")
    @classmethod
    def none_to_list(cls, v):
        return [] if v is None else v


def to_local(value: Optional[datetime], tz: tzinfo) -> Optional[datetime]:
    """Convert an offset-aware timestamp to ``tz``; naive timestamps are kept as local time."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(tz)


def parse_sessions(items: List[Dict[str, Any]], timezone: str = config.SCHEDULE_TIMEZONE) -> List[Session]:
    """Turn raw API items into sessions with local timestamps."""
    tz = ZoneInfo(timezone)
    sessions = []
    for item in items:
        session = Session.model_validate(item)
        session.start = to_local(session.start, tz)
        session.end = to_local(session.end, tz)
        sessions.append(session)
    return sessions


def fetch_sessions(
    url: str = config.SESSIONS_API_URL,
    event: str = config.EVENT,
    size: int = config.PAGE_SIZE,
    timezone: str = config.SCHEDULE_TIMEZONE,
) -> List[Session]:
    """
    Fetch every session of an event with a single GET.

    Returns:
        List of Session records

    Raises:
        requests.RequestException: if the request fails or returns a non-2xx status
        KeyError, TypeError, ValueError: if the payload has no data.items or an item is malformed
    """
    try:
        response = requests.get(
            url,
            params={"size": size, "event": event},
            headers={"accept": "application/json"},
            timeout=config.REQUEST_TIMEOUT,
        )
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Error fetching schedule data: {e}")
        raise

    try:
        items = response.json()["data"]["items"]
        sessions = parse_sessions(items, timezone)
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Error fetching schedule data: unexpected payload: {e}")
        raise

    logger.info(f"Fetched {len(items)} sessions for {event}")
    return sessions


def session_day(session: Session) -> Optional[str]:
    """Local day of a session as YYYY-MM-DD, or None when it has no start."""
    if session.start is None:
        return None
    return session.start.date().isoformat()


def speaker_names(session: Session) -> str:
    return ", ".join(speaker.name for speaker in session.speakers)


def duration_minutes(session: Session) -> float:
    """Length of the session in minutes (0 when start or end is missing)."""
    if session.start is None or session.end is None:
        return 0
    return (session.end - session.start).total_seconds() / 60


def format_minutes(minutes: float) -> str:
    # Whole minutes render without a decimal part
    if minutes == math.floor(minutes):
        return f"{int(minutes)} minutes"
    return f"{minutes} minutes"
