#!/usr/bin/env python3
"""
Dump every distinct slot_roomId used by an event's sessions to a JSON file.

Usage:
    python utility/extract_slot_rooms.py
    python utility/extract_slot_rooms.py --event devcon-7 -o slot-rooms.json
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

import requests

import config

logger = logging.getLogger(__name__)


def unique_slot_rooms(items: List[Dict[str, Any]]) -> List[str]:
    """Sorted distinct room ids, ignoring sessions without one."""
    return sorted({item.get('slot_roomId') for item in items if item.get('slot_roomId')})


def extract_slot_rooms(event: str, output_file: str) -> List[str]:
    response = requests.get(
        config.SESSIONS_API_URL,
        params={'event': event},
        headers={'accept': 'application/json'},
        timeout=config.REQUEST_TIMEOUT,
    )
    response.raise_for_status()

    slot_rooms = unique_slot_rooms(response.json()['data']['items'])

    print('All unique slot_roomId combinations:')
    for room_id in slot_rooms:
        print(room_id)
    print(f"\nTotal unique combinations: {len(slot_rooms)}")

    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(slot_rooms, f, indent=2)
    logger.info(f"Results have been saved to {output_file}")

    return slot_rooms


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Dump the unique slot_roomId values of an event.")
    parser.add_argument("--event", default=config.EVENT, help=f"Event id (default: {config.EVENT})")
    parser.add_argument("-o", "--output", default="slot-rooms.json", help="Output JSON file")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        extract_slot_rooms(args.event, args.output)
    except (requests.RequestException, KeyError, ValueError, OSError) as e:
        logger.error(f"Error fetching or processing data: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
