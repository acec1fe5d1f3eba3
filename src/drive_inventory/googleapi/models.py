"""Data models for Drive listing results and inventory records."""

from dataclasses import dataclass, field
from typing import Any

# Drive API JSON field names
FIELD_ID = "id"
FIELD_NAME = "name"
FIELD_MIME_TYPE = "mimeType"
FIELD_SIZE = "size"
FIELD_MODIFIED_TIME = "modifiedTime"
FIELD_FILES = "files"
FIELD_NEXT_PAGE_TOKEN = "nextPageToken"

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"

ROOT_PATH = "/"

RECORD_HEADER = ("Path", "Name", "FileId", "MimeType", "SizeBytes", "ModifiedTime")


@dataclass(frozen=True)
class ChildEntry:
    """A single direct child (file or folder) returned by a Drive listing."""

    id: str
    name: str
    mime_type: str
    size: str | None = None
    modified_time: str | None = None

    @property
    def is_folder(self) -> bool:
        return self.mime_type == FOLDER_MIME_TYPE

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "ChildEntry":
        """Map a raw Drive ``files`` item to a ChildEntry."""
        size = raw.get(FIELD_SIZE)
        return cls(
            id=raw.get(FIELD_ID, ""),
            name=raw.get(FIELD_NAME, ""),
            mime_type=raw.get(FIELD_MIME_TYPE, ""),
            size=str(size) if size not in (None, "") else None,
            modified_time=raw.get(FIELD_MODIFIED_TIME) or None,
        )


@dataclass
class ListingPage:
    """One page of a folder listing plus the token for the next page, if any."""

    entries: list[ChildEntry] = field(default_factory=list)
    next_page_token: str | None = None


@dataclass
class FolderNode:
    """A folder waiting to be expanded, with its path from the scan root."""

    id: str
    path: str


@dataclass
class FileRecord:
    """One output row of the inventory.

    Attributes:
        path: Full logical path from the scan root (e.g. "/2024/report.pdf").
        name: File name as shown in Drive.
        file_id: Drive file ID.
        mime_type: Drive MIME type.
        size_bytes: Size as decimal text, empty for Google-native documents.
        modified_time: RFC 3339 modification timestamp, empty if unknown.
    """

    path: str
    name: str
    file_id: str
    mime_type: str
    size_bytes: str = ""
    modified_time: str = ""

    @classmethod
    def from_entry(cls, entry: ChildEntry, path: str) -> "FileRecord":
        return cls(
            path=path,
            name=entry.name or "",
            file_id=entry.id or "",
            mime_type=entry.mime_type or "",
            size_bytes=entry.size or "",
            modified_time=entry.modified_time or "",
        )

    def to_row(self) -> list[str]:
        """Return the field values in RECORD_HEADER order."""
        return [
            self.path,
            self.name,
            self.file_id,
            self.mime_type,
            self.size_bytes,
            self.modified_time,
        ]


def join_path(parent: str, name: str) -> str:
    """Join a folder path and a child name with a single forward slash.

    Names are used verbatim; no ``..`` or duplicate-slash normalisation.
    """
    if parent == ROOT_PATH:
        return f"{ROOT_PATH}{name}"
    return f"{parent}/{name}"
