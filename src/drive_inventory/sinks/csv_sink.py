"""CSV export of inventory records."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from drive_inventory.googleapi.models import RECORD_HEADER

if TYPE_CHECKING:
    from collections.abc import Iterable

    from drive_inventory.googleapi.models import FileRecord

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"
_QUOTING_TERMINATOR = "\r\n"


def to_csv(records: Iterable[FileRecord]) -> str:
    """Serialize records to comma-separated text with a header row.

    Fields containing a comma, quote or line break are quoted and embedded
    quotes are doubled, so ``a,"b`` becomes ``"a,""b"``.

    Args:
        records: Records in output order.

    Returns:
        CSV text using ``\\n`` line endings.
    """
    lines = [_format_row(RECORD_HEADER)]
    lines.extend(_format_row(record.to_row()) for record in records)
    return "".join(lines)


def _format_row(values: Iterable[str]) -> str:
    # csv only quotes line-break characters that appear in its lineterminator,
    # so rows are formatted with CRLF and re-terminated with a bare LF.
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator=_QUOTING_TERMINATOR, quoting=csv.QUOTE_MINIMAL)
    writer.writerow(values)
    return buffer.getvalue()[: -len(_QUOTING_TERMINATOR)] + LINE_TERMINATOR


class CsvSink:
    """Writes the full record list to a local CSV file, replacing it."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def write(self, records: list[FileRecord]) -> str:
        """Write ``records`` to the configured path.

        Returns:
            The path written, for reporting.

        Raises:
            OSError: If the file cannot be written.
        """
        self._path.write_text(to_csv(records), encoding="utf-8", newline="")
        logger.info("[write] csv written; path:%s;row_count:%d", self._path, len(records))
        return str(self._path)
