"""Command-line entry point: runs one inventory scan and sets the exit code."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from drive_inventory import __version__
from drive_inventory.config import load_config
from drive_inventory.orchestration.processor import inventory_processor_from_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@click.command()
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Load environment variables from this file before reading config.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log each folder as it is expanded.")
@click.version_option(__version__, prog_name="drive-inventory")
def main(env_file: Path | None, verbose: bool) -> None:
    """Inventory every file below ROOT_FOLDER_ID into a Google Sheet or a CSV file.

    Settings come from the environment: ROOT_FOLDER_ID, WRITE_MODE (sheet|csv),
    SHEET_ID, SHEET_NAME, CSV_PATH, REPLACE_SHEET_CONTENT.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)
    if env_file is not None:
        load_dotenv(env_file, override=False)

    try:
        config = load_config()
        processor = inventory_processor_from_config(config)
        result = processor.run(config.root_folder_id)
    except Exception as exc:
        logger.error("[main] inventory failed; error:%s", exc, exc_info=verbose)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {result.row_count} rows to {result.destination}")
    click.echo("Done.")


if __name__ == "__main__":
    main()
