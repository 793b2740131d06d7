#!/usr/bin/env python3
"""
Build one tab per room listing the room's sessions for the day.

Room tabs are copies of a template tab. Session rows start at row 8 and span
columns A-T; hand-entered show caller columns survive re-syncs (see row_merge).
"""

import logging
from datetime import datetime
from typing import Any, List, Optional, Sequence

import config
import sheet_formatting as fmt
from row_merge import ROW_WIDTH, merge_rows
from session_fetcher import Session, duration_minutes, format_minutes, session_day, speaker_names
from sheets_client import SheetsClient

logger = logging.getLogger(__name__)

FIRST_SESSION_ROW = 8  # 1-based sheet row of the first session
TEMPLATE_ROW_HEIGHT = 30
SESSION_ROW_HEIGHT = 50


def clock_time(value: Optional[datetime]) -> str:
    """12 hour clock time like '9:05 AM'."""
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def room_sessions(sessions: Sequence[Session], room_id: str, day: str) -> List[Session]:
    """Sessions held in a room on a day, ordered by start time."""
    selected = [s for s in sessions if s.room == room_id and session_day(s) == day]
    return sorted(selected, key=lambda s: s.start)


def session_row(session: Session, index: int) -> List[Any]:
    row = [
        session.code,
        index + 1,
        clock_time(session.start),
        format_minutes(duration_minutes(session)),
        clock_time(session.end),
        session.title,
        speaker_names(session),
        config.PRESENTATION_URL.format(code=session.code),
        "-",
        "-",
        "-",
        "-",
    ]
    return row + [""] * (ROW_WIDTH - len(row))


def build_room_rows(
    sheet_name: str, sessions: Sequence[Session], current_values: Sequence[Sequence[Any]]
) -> List[dict]:
    """
    Value ranges for a room tab, one per session.

    Args:
        sheet_name: Tab title
        sessions: The room's sessions, already ordered
        current_values: Values currently in the tab (A1 downwards)

    Returns:
        List of {'range': ..., 'values': [[...]]} items for a values batchUpdate
    """
    data = []
    for index, session in enumerate(sessions):
        new_row = session_row(session, index)
        current_row = next(
            (row for row in current_values if row and row[0] == session.code), None
        )
        values = merge_rows(new_row, current_row) if current_row else new_row
        sheet_row = index + FIRST_SESSION_ROW
        data.append(
            {
                "range": f"'{sheet_name}'!A{sheet_row}:T{sheet_row}",
                "values": [values],
            }
        )
    return data


def duplicate_and_rename_sheet(client: SheetsClient, sheet_name: str) -> None:
    """Create a room tab from the template unless a tab with that title already exists."""
    if client.sheet_exists(sheet_name):
        logger.info(f"Sheet {sheet_name} already exists, skipping creation")
        return

    new_sheet_id = client.copy_sheet(config.TEMPLATE_SHEET_ID)
    client.batch_update(
        [
            fmt.rename(new_sheet_id, sheet_name),
            fmt.dimension_size(new_sheet_id, "ROWS", TEMPLATE_ROW_HEIGHT),
            fmt.black_borders(
                fmt.grid_range(
                    new_sheet_id,
                    start_row=FIRST_SESSION_ROW - 1,
                    start_column=0,
                    end_column=ROW_WIDTH,
                )
            ),
        ]
    )
    logger.info(f"Sheet duplicated and renamed to: {sheet_name}")


def populate_room_sheet(
    client: SheetsClient,
    sheet_name: str,
    room_id: str,
    sessions: Sequence[Session],
    day: str,
) -> None:
    selected = room_sessions(sessions, room_id, day)
    if not selected:
        logger.info(f"No sessions found for room {sheet_name} on {day}")
        return

    last_row = len(selected) + FIRST_SESSION_ROW
    current_values = client.get_values(f"'{sheet_name}'!A1:T{last_row}")
    client.batch_update_values(build_room_rows(sheet_name, selected, current_values))

    sheet_id = client.sheet_id(sheet_name)
    if sheet_id is None:
        raise ValueError(f"Sheet {sheet_name} not found after writing its rows")

    # Rows from 5 down get the taller height and borders
    client.batch_update(
        [
            fmt.dimension_size(sheet_id, "ROWS", SESSION_ROW_HEIGHT, 4, last_row),
            fmt.black_borders(fmt.grid_range(sheet_id, 4, last_row, 0, ROW_WIDTH)),
        ]
    )
    logger.info(f"Successfully populated and formatted data for {sheet_name}")
