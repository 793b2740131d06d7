"""Room table: room ids, display names and their tab titles."""

from typing import List, NamedTuple, Optional, Sequence

import config


class Room(NamedTuple):
    id: str
    name: str


def rooms() -> List[Room]:
    """All rooms in table order (the overview column order)."""
    return [Room(room_id, name) for room_id, name in config.ROOMS.items()]


def room_column(room_id: Optional[str], room_list: Optional[Sequence[Room]] = None) -> Optional[int]:
    """1-based overview column of a room (column 0 holds the time), None for unknown rooms."""
    if room_list is None:
        room_list = rooms()
    for index, room in enumerate(room_list):
        if room.id == room_id:
            return index + 1
    return None
