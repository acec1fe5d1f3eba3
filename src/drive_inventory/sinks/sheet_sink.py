"""Google Sheets output for inventory records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from drive_inventory.googleapi.client import SHEETS_BASE_URL, GoogleApiClient
from drive_inventory.googleapi.models import RECORD_HEADER

if TYPE_CHECKING:
    from drive_inventory.googleapi.models import FileRecord

logger = logging.getLogger(__name__)

# Columns cleared in replace mode and probed in append mode
SHEET_COLUMNS = "A:Z"
ANCHOR_CELL = "A1"


class SheetSink:
    """Writes records to a spreadsheet tab, replacing or appending.

    Replace mode clears ``A:Z`` on the tab and writes the header and all rows
    starting at ``A1``. Append mode adds rows below the existing data and only
    writes the header when the tab has no data at all.
    """

    def __init__(
        self,
        google_client: GoogleApiClient,
        spreadsheet_id: str,
        sheet_name: str,
        replace: bool = True,
    ) -> None:
        """Initialise the sheet sink.

        Args:
            google_client: Authenticated GoogleApiClient instance.
            spreadsheet_id: ID of the target spreadsheet.
            sheet_name: Tab to write to.
            replace: True to clear the tab first, False to append.
        """
        self._google = google_client
        self._spreadsheet_id = spreadsheet_id
        self._sheet_name = sheet_name
        self._replace = replace

    def write(self, records: list[FileRecord]) -> str:
        """Write ``records`` to the tab.

        Returns:
            Human-readable description of the destination.
        """
        rows = [record.to_row() for record in records]
        if self._replace:
            self.replace_rows(rows)
        else:
            self.append_rows(rows)
        return f"Sheet '{self._sheet_name}' in {self._spreadsheet_id}"

    def replace_rows(self, rows: list[list[str]]) -> None:
        """Clear the tab and write the header followed by ``rows`` from A1."""
        self._google.post(self._values_url(SHEET_COLUMNS, ":clear"), body={})
        self._google.put(
            self._values_url(ANCHOR_CELL),
            body={
                "range": self._a1(ANCHOR_CELL),
                "majorDimension": "ROWS",
                "values": [list(RECORD_HEADER), *rows],
            },
            params={"valueInputOption": "RAW"},
        )
        logger.info(
            "[replace_rows] replaced sheet content; sheet:%s;row_count:%d",
            self._sheet_name,
            len(rows),
        )

    def append_rows(self, rows: list[list[str]]) -> None:
        """Append ``rows`` after the last data row, adding a header to an empty tab."""
        empty = self.is_empty()
        values: list[list[Any]] = [list(RECORD_HEADER), *rows] if empty else list(rows)
        self._google.post(
            self._values_url(ANCHOR_CELL, ":append"),
            body={"majorDimension": "ROWS", "values": values},
            params={"valueInputOption": "RAW", "insertDataOption": "INSERT_ROWS"},
        )
        logger.info(
            "[append_rows] appended to sheet; sheet:%s;row_count:%d;header_written:%s",
            self._sheet_name,
            len(rows),
            empty,
        )

    def is_empty(self) -> bool:
        """True when no cell in ``A:Z`` holds a non-blank value.

        Checking every returned cell means a tab whose A1 is blank but which
        has data elsewhere is still treated as non-empty.
        """
        response = self._google.get(
            self._values_url(SHEET_COLUMNS),
            params={"valueRenderOption": "UNFORMATTED_VALUE"},
        )
        for row in response.get("values", []):
            for cell in row:
                if cell is not None and str(cell).strip():
                    return False
        return True

    def _a1(self, cells: str) -> str:
        escaped = self._sheet_name.replace("'", "''")
        return f"'{escaped}'!{cells}"

    def _values_url(self, cells: str, action: str = "") -> str:
        range_path = quote(self._a1(cells), safe="")
        spreadsheet = quote(self._spreadsheet_id, safe="")
        return f"{SHEETS_BASE_URL}/spreadsheets/{spreadsheet}/values/{range_path}{action}"
