"""Record sinks: CSV file and Google Sheets outputs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from drive_inventory.config import WRITE_MODE_CSV
from drive_inventory.sinks.csv_sink import CsvSink, to_csv
from drive_inventory.sinks.sheet_sink import SheetSink

if TYPE_CHECKING:
    from drive_inventory.config import AppConfig
    from drive_inventory.googleapi.client import GoogleApiClient
    from drive_inventory.googleapi.models import FileRecord

__all__ = ["CsvSink", "RecordSink", "SheetSink", "record_sink_from_config", "to_csv"]


class RecordSink(Protocol):
    """Persists a complete record list and describes where it went."""

    def write(self, records: list[FileRecord]) -> str: ...


def record_sink_from_config(google_client: GoogleApiClient, config: AppConfig) -> RecordSink:
    """Select and construct the sink named by ``config.write_mode``.

    Args:
        google_client: Authenticated GoogleApiClient (used by the sheet sink).
        config: Application configuration instance.

    Returns:
        CsvSink for WRITE_MODE=csv, otherwise SheetSink.
    """
    if config.write_mode == WRITE_MODE_CSV:
        return CsvSink(config.csv_path)
    return SheetSink(
        google_client=google_client,
        spreadsheet_id=config.sheet_id,
        sheet_name=config.sheet_name,
        replace=config.replace_sheet_content,
    )
