"""Unit tests for googleapi/models.py: entry mapping, records and path joins."""

import pytest

from drive_inventory.googleapi.models import (
    FOLDER_MIME_TYPE,
    RECORD_HEADER,
    ChildEntry,
    FileRecord,
    join_path,
)


class TestChildEntry:
    def test_from_api_with_all_fields(self) -> None:
        entry = ChildEntry.from_api(
            {
                "id": "f1",
                "name": "report.pdf",
                "mimeType": "application/pdf",
                "size": "2048",
                "modifiedTime": "2024-03-01T10:00:00.000Z",
            }
        )
        assert entry.id == "f1"
        assert entry.name == "report.pdf"
        assert entry.mime_type == "application/pdf"
        assert entry.size == "2048"
        assert entry.modified_time == "2024-03-01T10:00:00.000Z"

    def test_from_api_without_optional_fields(self) -> None:
        entry = ChildEntry.from_api(
            {"id": "doc1", "name": "Notes", "mimeType": "application/vnd.google-apps.document"}
        )
        assert entry.size is None
        assert entry.modified_time is None

    def test_numeric_size_is_rendered_as_text(self) -> None:
        entry = ChildEntry.from_api({"id": "f1", "name": "a", "mimeType": "x", "size": 12})
        assert entry.size == "12"

    def test_zero_size_is_kept(self) -> None:
        entry = ChildEntry.from_api({"id": "f1", "name": "a", "mimeType": "x", "size": "0"})
        assert entry.size == "0"

    def test_is_folder(self) -> None:
        assert ChildEntry(id="d1", name="2024", mime_type=FOLDER_MIME_TYPE).is_folder is True
        assert ChildEntry(id="f1", name="a.txt", mime_type="text/plain").is_folder is False

    def test_is_immutable(self) -> None:
        entry = ChildEntry(id="f1", name="a.txt", mime_type="text/plain")
        with pytest.raises(AttributeError):
            entry.name = "b.txt"  # type: ignore[misc]


class TestFileRecord:
    def test_from_entry_substitutes_empty_strings(self) -> None:
        entry = ChildEntry(
            id="doc1", name="Notes", mime_type="application/vnd.google-apps.document"
        )
        record = FileRecord.from_entry(entry, "/Notes")
        assert record.to_row() == [
            "/Notes",
            "Notes",
            "doc1",
            "application/vnd.google-apps.document",
            "",
            "",
        ]

    def test_row_follows_header_order(self) -> None:
        record = FileRecord(
            path="/2024/report.pdf",
            name="report.pdf",
            file_id="f1",
            mime_type="application/pdf",
            size_bytes="2048",
            modified_time="2024-03-01T10:00:00.000Z",
        )
        assert dict(zip(RECORD_HEADER, record.to_row(), strict=True)) == {
            "Path": "/2024/report.pdf",
            "Name": "report.pdf",
            "FileId": "f1",
            "MimeType": "application/pdf",
            "SizeBytes": "2048",
            "ModifiedTime": "2024-03-01T10:00:00.000Z",
        }


class TestJoinPath:
    def test_root(self) -> None:
        assert join_path("/", "2024") == "/2024"

    def test_nested(self) -> None:
        assert join_path("/2024", "report.pdf") == "/2024/report.pdf"

    def test_name_is_not_normalised(self) -> None:
        assert join_path("/a", "..") == "/a/.."

    def test_trailing_slash_in_folder_name_is_kept(self) -> None:
        assert join_path("/a/", "b") == "/a//b"
