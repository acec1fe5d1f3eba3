"""Inventory processor: runs the tree walk and hands the records to a sink."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from drive_inventory.googleapi.client import google_client_from_config
from drive_inventory.googleapi.listing import listing_client_from_config
from drive_inventory.orchestration.walker import TreeWalker
from drive_inventory.sinks import RecordSink, record_sink_from_config

if TYPE_CHECKING:
    from drive_inventory.config import AppConfig

logger = logging.getLogger(__name__)


@dataclass
class InventoryResult:
    """Outcome of a completed scan."""

    row_count: int
    destination: str


class InventoryProcessor:
    """Orchestrates the scan-then-write pipeline."""

    def __init__(self, walker: TreeWalker, sink: RecordSink) -> None:
        """Initialise the processor.

        Args:
            walker: TreeWalker used to collect the records.
            sink: Destination for the complete record list.
        """
        self._walker = walker
        self._sink = sink

    def run(self, root_folder_id: str) -> InventoryResult:
        """Scan ``root_folder_id`` and write every record to the sink.

        The sink is only called once the walk has finished, so a failed walk
        writes nothing.

        Args:
            root_folder_id: Drive ID of the folder to inventory.

        Returns:
            InventoryResult with the row count and destination description.
        """
        logger.info("[run] scanning drive; root_folder_id:%s", root_folder_id)
        records = self._walker.walk(root_folder_id)
        logger.info("[run] scan finished; file_count:%d", len(records))
        destination = self._sink.write(records)
        logger.info(
            "[run] records written; row_count:%d;destination:%s",
            len(records),
            destination,
        )
        return InventoryResult(row_count=len(records), destination=destination)


def inventory_processor_from_config(config: AppConfig) -> InventoryProcessor:
    """Construct an InventoryProcessor from application configuration.

    Creates one GoogleApiClient and shares it between the listing client
    and the sheet sink.

    Args:
        config: Application configuration instance.

    Returns:
        Configured InventoryProcessor instance.
    """
    client = google_client_from_config(config)
    walker = TreeWalker(listing_client_from_config(client, config))
    sink = record_sink_from_config(client, config)
    return InventoryProcessor(walker=walker, sink=sink)
