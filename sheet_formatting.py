"""
Builders for Google Sheets batchUpdate requests.
"""

from typing import Any, Dict, Optional

HEADER_GREY = {"red": 0.9, "green": 0.9, "blue": 0.9}
BLACK = {"red": 0, "green": 0, "blue": 0}


def grid_range(
    sheet_id: int,
    start_row: Optional[int] = None,
    end_row: Optional[int] = None,
    start_column: Optional[int] = None,
    end_column: Optional[int] = None,
) -> Dict[str, Any]:
    """GridRange with 0-based, end-exclusive indexes. Omitted bounds are unbounded."""
    rng = {"sheetId": sheet_id}
    bounds = {
        "startRowIndex": start_row,
        "endRowIndex": end_row,
        "startColumnIndex": start_column,
        "endColumnIndex": end_column,
    }
    rng.update({k: v for k, v in bounds.items() if v is not None})
    return rng


def header_fill(rng: Dict[str, Any]) -> Dict[str, Any]:
    """Grey background with bold text."""
    return {
        "repeatCell": {
            "range": rng,
            "cell": {
                "userEnteredFormat": {
                    "backgroundColor": dict(HEADER_GREY),
                    "textFormat": {"bold": True},
                }
            },
            "fields": "userEnteredFormat(backgroundColor,textFormat)",
        }
    }


def center_wrap(rng: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "repeatCell": {
            "range": rng,
            "cell": {
                "userEnteredFormat": {
                    "horizontalAlignment": "CENTER",
                    "verticalAlignment": "MIDDLE",
                    "wrapStrategy": "WRAP",
                }
            },
            "fields": "userEnteredFormat(horizontalAlignment,verticalAlignment,wrapStrategy)",
        }
    }


def dimension_size(
    sheet_id: int,
    dimension: str,
    pixel_size: int,
    start: int = 0,
    end: Optional[int] = None,
) -> Dict[str, Any]:
    """Set the pixel size of ROWS or COLUMNS in [start, end)."""
    rng = {"sheetId": sheet_id, "dimension": dimension, "startIndex": start}
    if end is not None:
        rng["endIndex"] = end
    return {
        "updateDimensionProperties": {
            "range": rng,
            "properties": {"pixelSize": pixel_size},
            "fields": "pixelSize",
        }
    }


def black_borders(rng: Dict[str, Any]) -> Dict[str, Any]:
    """Solid black outer and inner borders."""
    sides = ["top", "bottom", "left", "right", "innerHorizontal", "innerVertical"]
    request = {"range": rng}
    for side in sides:
        request[side] = {"style": "SOLID", "color": dict(BLACK)}
    return {"updateBorders": request}


def freeze(sheet_id: int, rows: int, columns: int) -> Dict[str, Any]:
    return {
        "updateSheetProperties": {
            "properties": {
                "sheetId": sheet_id,
                "gridProperties": {
                    "frozenRowCount": rows,
                    "frozenColumnCount": columns,
                },
            },
            "fields": "gridProperties.frozenRowCount,gridProperties.frozenColumnCount",
        }
    }


def rename(sheet_id: int, title: str) -> Dict[str, Any]:
    return {
        "updateSheetProperties": {
            "properties": {"sheetId": sheet_id, "title": title},
            "fields": "title",
        }
    }


def merge_cells(rng: Dict[str, Any]) -> Dict[str, Any]:
    return {"mergeCells": {"range": rng, "mergeType": "MERGE_ALL"}}


def unmerge_cells(rng: Dict[str, Any]) -> Dict[str, Any]:
    return {"unmergeCells": {"range": rng}}
