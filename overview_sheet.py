#!/usr/bin/env python3
"""
Build the "overview" tab: a time-by-room grid of the day's sessions.

Row 1 holds the room names, row 2 is left for the room IC / show caller names,
and every following row is a 10 minute slot between 09:00 and 24:00. A session
fills every slot it covers in its room's column and multi-slot sessions are
merged into one cell.
"""

import logging
import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

import config
import sheet_formatting as fmt
from rooms import Room, room_column, rooms
from session_fetcher import Session, duration_minutes, session_day, speaker_names
from sheets_client import SheetsClient

logger = logging.getLogger(__name__)

FIRST_HOUR = 9
LAST_HOUR = 24
SLOT_MINUTES = 10
HEADER_ROWS = 2
COLUMN_WIDTH = 250
ROW_HEIGHT = 40


class Span(NamedTuple):
    """Rows [start_row, end_row) of one grid column, 0-based."""

    start_row: int
    end_row: int
    column: int


def time_slots() -> List[str]:
    return [
        f"{hour:02d}:{minute:02d}"
        for hour in range(FIRST_HOUR, LAST_HOUR)
        for minute in range(0, 60, SLOT_MINUTES)
    ]


def empty_grid(room_list: Sequence[Room]) -> List[List[str]]:
    blanks = [""] * len(room_list)
    grid = [["Time"] + [room.name for room in room_list]]
    grid.append(["Room IC/Show Caller"] + list(blanks))
    for slot in time_slots():
        grid.append([slot] + list(blanks))
    return grid


def session_cell(session: Session) -> str:
    return f"{session.title}\n\n*{speaker_names(session)}*"


def slot_row(session: Session) -> int:
    start = session.start
    return ((start.hour - FIRST_HOUR) * 60 + start.minute) // SLOT_MINUTES + HEADER_ROWS


def build_overview_grid(
    sessions: Sequence[Session], day: str, room_list: Optional[Sequence[Room]] = None
) -> Tuple[List[List[str]], List[Span]]:
    """
    Place the day's sessions into the grid.

    Returns:
        Tuple of (grid values, spans to merge)
    """
    if room_list is None:
        room_list = rooms()
    grid = empty_grid(room_list)
    spans: List[Span] = []

    for session in sessions:
        if session_day(session) != day or session.end is None:
            continue
        column = room_column(session.room, room_list)
        if column is None:
            logger.debug(f"Skipping {session.code}: room {session.room!r} is not on the overview")
            continue

        start_row = slot_row(session)
        num_rows = math.ceil(duration_minutes(session) / SLOT_MINUTES)
        text = session_cell(session)
        for row in range(start_row, start_row + num_rows):
            if HEADER_ROWS <= row < len(grid):
                grid[row][column] = text

        if num_rows > 1:
            span = Span(
                max(start_row, HEADER_ROWS),
                min(start_row + num_rows, len(grid)),
                column,
            )
            if span.end_row - span.start_row > 1 and span not in spans:
                spans.append(span)

    return grid, spans


def format_requests(sheet_id: int, rows: int, columns: int) -> list:
    """Unmerge the grid, then freeze, shade, size and align it."""
    whole = fmt.grid_range(sheet_id, 0, rows, 0, columns)
    return [
        fmt.unmerge_cells(whole),
        fmt.freeze(sheet_id, rows=HEADER_ROWS, columns=1),
        fmt.header_fill(fmt.grid_range(sheet_id, 0, HEADER_ROWS, 0, columns)),
        fmt.header_fill(fmt.grid_range(sheet_id, 0, rows, 0, 1)),
        fmt.dimension_size(sheet_id, "COLUMNS", COLUMN_WIDTH, 0, columns),
        fmt.dimension_size(sheet_id, "ROWS", ROW_HEIGHT, 0, rows),
        fmt.center_wrap(whole),
    ]


def create_or_clear_overview_sheet(client: SheetsClient, room_list: Optional[Sequence[Room]] = None) -> None:
    """Add the overview tab, or clear it when it already exists, and write the room header."""
    if room_list is None:
        room_list = rooms()
    if client.sheet_exists(config.OVERVIEW_SHEET):
        client.clear(config.OVERVIEW_SHEET)
    else:
        client.add_sheet(config.OVERVIEW_SHEET)
    client.update_values(f"{config.OVERVIEW_SHEET}!A1", [[room.name for room in room_list]])


def populate_overview_sheet(
    client: SheetsClient,
    sessions: Sequence[Session],
    day: str,
    room_list: Optional[Sequence[Room]] = None,
) -> None:
    grid, spans = build_overview_grid(sessions, day, room_list)

    sheet_id = client.sheet_id(config.OVERVIEW_SHEET)
    if sheet_id is None:
        logger.error("Could not find overview sheet")
        return

    client.batch_update(format_requests(sheet_id, len(grid), len(grid[0])))
    client.update_values(f"{config.OVERVIEW_SHEET}!A1", grid)
    client.batch_update(
        [
            fmt.merge_cells(fmt.grid_range(sheet_id, span.start_row, span.end_row, span.column, span.column + 1))
            for span in spans
        ]
    )
    logger.info(f"Overview for {day}: placed {len(spans)} merged sessions")
