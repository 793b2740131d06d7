#!/usr/bin/env python3
"""
Google Sheets API client bound to a single spreadsheet.
"""

import logging
from typing import Any, Dict, List, Optional

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

import config

logger = logging.getLogger(__name__)


def build_service(info: Optional[Dict[str, Any]] = None):
    """
    Build a Sheets v4 service from service account info.

    Args:
        info: Service account dict (defaults to the environment settings)

    Returns:
        Google Sheets API service
    """
    if info is None:
        info = config.service_account_info()
    credentials = service_account.Credentials.from_service_account_info(
        info, scopes=config.SCOPES
    )
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


class SheetsClient:
    """Read and write calls against one spreadsheet."""

    def __init__(self, service, spreadsheet_id: str):
        self.service = service
        self.spreadsheet_id = spreadsheet_id

    def _execute(self, operation: str, request):
        try:
            return request.execute()
        except HttpError as e:
            logger.error(f"Sheets API error during {operation} on {self.spreadsheet_id}: {e}")
            raise

    def sheets(self) -> List[Dict[str, Any]]:
        """Properties of every tab in the spreadsheet."""
        spreadsheet = self._execute(
            "get",
            self.service.spreadsheets().get(spreadsheetId=self.spreadsheet_id),
        )
        return [sheet["properties"] for sheet in spreadsheet.get("sheets", [])]

    def sheet_id(self, title: str) -> Optional[int]:
        for properties in self.sheets():
            if properties.get("title") == title:
                return properties.get("sheetId")
        return None

    def sheet_exists(self, title: str) -> bool:
        return self.sheet_id(title) is not None

    def add_sheet(self, title: str) -> None:
        self.batch_update([{"addSheet": {"properties": {"title": title}}}])

    def clear(self, rng: str) -> None:
        self._execute(
            "clear",
            self.service.spreadsheets().values().clear(
                spreadsheetId=self.spreadsheet_id, range=rng, body={}
            ),
        )

    def get_values(self, rng: str) -> List[List[Any]]:
        """Cell values of a range; trailing empty cells are omitted by the API."""
        result = self._execute(
            "values.get",
            self.service.spreadsheets().values().get(
                spreadsheetId=self.spreadsheet_id, range=rng
            ),
        )
        return result.get("values", [])

    def update_values(self, rng: str, values: List[List[Any]]) -> None:
        self._execute(
            "values.update",
            self.service.spreadsheets().values().update(
                spreadsheetId=self.spreadsheet_id,
                range=rng,
                valueInputOption="USER_ENTERED",
                body={"values": values},
            ),
        )

    def batch_update_values(self, data: List[Dict[str, Any]]) -> None:
        """Write several ranges at once. Each item is {'range': ..., 'values': [...]}."""
        if not data:
            return
        self._execute(
            "values.batchUpdate",
            self.service.spreadsheets().values().batchUpdate(
                spreadsheetId=self.spreadsheet_id,
                body={"valueInputOption": "USER_ENTERED", "data": data},
            ),
        )

    def batch_update(self, requests: List[Dict[str, Any]]) -> None:
        if not requests:
            return
        self._execute(
            "batchUpdate",
            self.service.spreadsheets().batchUpdate(
                spreadsheetId=self.spreadsheet_id, body={"requests": requests}
            ),
        )

    def copy_sheet(self, sheet_id: int) -> int:
        """Copy a tab into this same spreadsheet and return the new tab id."""
        result = self._execute(
            "sheets.copyTo",
            self.service.spreadsheets().sheets().copyTo(
                spreadsheetId=self.spreadsheet_id,
                sheetId=sheet_id,
                body={"destinationSpreadsheetId": self.spreadsheet_id},
            ),
        )
        return result["sheetId"]
