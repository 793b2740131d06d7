"""
Reconcile a freshly built room sheet row with the row already stored in the sheet.

Rows span columns A-T. The computed columns are rewritten on every sync, while
column B (the row number) and the last 8 columns hold values people edit by hand
in the sheet (show caller notes), so those are taken from the stored row.
"""

from typing import Any, List, Optional, Sequence

ROW_WIDTH = 20  # columns A-T
PRESERVED_TAIL = 8
INDEX_COLUMN = 1


def merge_rows(new_row: Optional[Sequence[Any]], existing_row: Sequence[Any]) -> List[Any]:
    """
    Merge a new row with the stored row for the same session.

    Args:
        new_row: Row computed from the API data
        existing_row: Row read back from the sheet (may be shorter than 20 cells)

    Returns:
        A new list of exactly ROW_WIDTH cells, or the truncated stored row when
        there is no new row
    """
    existing = list(existing_row[:ROW_WIDTH])
    if not new_row:
        return existing

    merged = list(new_row[:ROW_WIDTH])
    merged.extend([""] * (ROW_WIDTH - len(merged)))

    if len(existing) > INDEX_COLUMN:
        merged[INDEX_COLUMN] = existing[INDEX_COLUMN]

    for i in range(ROW_WIDTH - PRESERVED_TAIL, ROW_WIDTH):
        merged[i] = existing[i] if i < len(existing) else ""

    return merged
