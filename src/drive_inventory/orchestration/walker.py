"""Breadth-first traversal of a Drive folder tree."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Protocol

from drive_inventory.googleapi.models import ROOT_PATH, FileRecord, FolderNode, join_path

if TYPE_CHECKING:
    from drive_inventory.googleapi.models import ChildEntry

logger = logging.getLogger(__name__)


class ChildLister(Protocol):
    """Returns the complete direct-child list of a folder."""

    def list_children(self, folder_id: str) -> list[ChildEntry]: ...


class TreeWalker:
    """Collects a FileRecord for every non-folder item below a root folder."""

    def __init__(self, lister: ChildLister) -> None:
        """Initialise the walker.

        Args:
            lister: Child source, normally a RetryingListingClient.
        """
        self._lister = lister

    def walk(self, root_folder_id: str) -> list[FileRecord]:
        """Traverse the tree under ``root_folder_id`` breadth-first.

        Folders are expanded in the order they are discovered and each
        folder's children are handled in listing order, so the returned
        records follow that same order. Folder entries are never returned.

        Shortcuts are not resolved, so a tree is assumed to be acyclic.

        Args:
            root_folder_id: Drive ID of the folder to start from.

        Returns:
            Ordered list of FileRecord objects.

        Raises:
            GoogleApiError: If listing any folder ultimately fails. Records
                collected so far are discarded.
        """
        queue: deque[FolderNode] = deque([FolderNode(id=root_folder_id, path=ROOT_PATH)])
        records: list[FileRecord] = []
        folders_expanded = 0

        while queue:
            node = queue.popleft()
            children = self._lister.list_children(node.id)
            folders_expanded += 1

            for child in children:
                child_path = join_path(node.path, child.name)
                if child.is_folder:
                    queue.append(FolderNode(id=child.id, path=child_path))
                else:
                    records.append(FileRecord.from_entry(child, child_path))

            logger.debug(
                "[walk] expanded folder; path:%s;child_count:%d;queued:%d",
                node.path,
                len(children),
                len(queue),
            )

        logger.info(
            "[walk] traversal complete; folder_count:%d;file_count:%d",
            folders_expanded,
            len(records),
        )
        return records
