#!/usr/bin/env python3
"""
Sync conference sessions into the per-day schedule spreadsheets.

Fetches every session once, then for each day fills the overview grid and
one tab per room.

Usage:
    python schedule_sync.py
    python schedule_sync.py --day 2024-11-12 --skip-overview
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, Sequence

import requests

import config
from overview_sheet import create_or_clear_overview_sheet, populate_overview_sheet
from room_sheet import duplicate_and_rename_sheet, populate_room_sheet
from rooms import rooms
from session_fetcher import Session, fetch_sessions
from sheets_client import SheetsClient, build_service

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # Quiet the client libraries
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def sync_day(
    client: SheetsClient,
    sessions: Sequence[Session],
    day: str,
    overview: bool = True,
    room_sheets: bool = True,
) -> List[str]:
    """
    Fill one day's spreadsheet.

    Returns:
        Names of the rooms that failed
    """
    failed = []
    if overview:
        create_or_clear_overview_sheet(client)
        populate_overview_sheet(client, sessions, day)

    if room_sheets:
        for room in rooms():
            try:
                duplicate_and_rename_sheet(client, room.name)
                populate_room_sheet(client, room.name, room.id, sessions, day)
                logger.info(f"Completed processing room {room.name} for {day}")
            except Exception:
                logger.exception(f"Error processing room {room.name} for {day}")
                failed.append(room.name)
    return failed


def sync(service, sessions: Sequence[Session], days: Iterable[str], overview: bool = True, room_sheets: bool = True) -> None:
    for day in days:
        logger.info(f"Processing sheet for {day}")
        client = SheetsClient(service, config.SPREADSHEET_IDS[day])
        try:
            failed = sync_day(client, sessions, day, overview, room_sheets)
        except Exception:
            logger.exception(f"Error processing {day}")
            continue
        if failed:
            logger.warning(f"Completed processing for {day} with {len(failed)} failed rooms: {', '.join(failed)}")
        else:
            logger.info(f"Completed processing for {day}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sync conference sessions into the schedule spreadsheets",
    )
    parser.add_argument(
        "--day",
        action="append",
        choices=list(config.SPREADSHEET_IDS),
        help="Only process this day (repeatable; default: all days)",
    )
    parser.add_argument("--skip-overview", action="store_true", help="Do not rebuild the overview tab")
    parser.add_argument("--skip-rooms", action="store_true", help="Do not update the room tabs")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    days = args.day or list(config.SPREADSHEET_IDS)

    try:
        service = build_service()
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 1

    try:
        sessions = fetch_sessions()
    except (requests.RequestException, KeyError, TypeError, ValueError):
        return 1

    sync(service, sessions, days, overview=not args.skip_overview, room_sheets=not args.skip_rooms)
    return 0


if __name__ == "__main__":
    sys.exit(main())
