"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass

WRITE_MODE_SHEET = "sheet"
WRITE_MODE_CSV = "csv"
WRITE_MODES = (WRITE_MODE_SHEET, WRITE_MODE_CSV)

DEFAULT_SHEET_NAME = "ImportScan"
DEFAULT_CSV_FILENAME = "drive_inventory.csv"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Raised when a required setting is missing or a value is invalid."""


@dataclass(frozen=True)
class AppConfig:
    """Centralized application configuration.

    Built once at startup and passed explicitly into the component
    factories. Nothing below this layer reads the environment.
    """

    # Required: no default, fail at startup if missing
    root_folder_id: str

    # Output selection
    write_mode: str = WRITE_MODE_SHEET
    sheet_id: str = ""
    sheet_name: str = DEFAULT_SHEET_NAME
    csv_path: str = DEFAULT_CSV_FILENAME
    replace_sheet_content: bool = True

    # Listing behaviour
    page_size: int = 1000
    max_attempts: int = 5
    base_delay_ms: int = 500


def load_config() -> AppConfig:
    """Construct an AppConfig from environment variables.

    Required environment variables:
        ROOT_FOLDER_ID: Drive folder ID the scan starts from.
        SHEET_ID: Target spreadsheet ID (only when WRITE_MODE=sheet).

    Optional environment variables (with defaults):
        WRITE_MODE: "sheet" (default) or "csv".
        SHEET_NAME: Tab name inside the spreadsheet (default: ImportScan).
        CSV_PATH: Output file for WRITE_MODE=csv
            (default: drive_inventory.csv in the working directory).
        REPLACE_SHEET_CONTENT: "true" (default) clears the tab before writing;
            "false" appends below existing rows.
        LISTING_PAGE_SIZE: Items requested per listing page (default: 1000).
        LISTING_MAX_ATTEMPTS: Attempts per page request (default: 5).
        LISTING_BASE_DELAY_MS: First backoff delay in milliseconds (default: 500).

    Returns:
        Configured AppConfig instance.

    Raises:
        ConfigError: If a required variable is missing or a value is invalid.
    """
    root_folder_id = os.environ.get("ROOT_FOLDER_ID", "").strip()
    if not root_folder_id:
        raise ConfigError("ROOT_FOLDER_ID is required")

    write_mode = os.environ.get("WRITE_MODE", WRITE_MODE_SHEET).strip().lower()
    if write_mode not in WRITE_MODES:
        raise ConfigError(f"WRITE_MODE must be one of {', '.join(WRITE_MODES)}; got {write_mode!r}")

    sheet_id = os.environ.get("SHEET_ID", "").strip()
    if write_mode == WRITE_MODE_SHEET and not sheet_id:
        raise ConfigError("SHEET_ID is required for WRITE_MODE=sheet")

    return AppConfig(
        root_folder_id=root_folder_id,
        write_mode=write_mode,
        sheet_id=sheet_id,
        sheet_name=os.environ.get("SHEET_NAME", DEFAULT_SHEET_NAME),
        csv_path=os.environ.get("CSV_PATH", os.path.join(os.getcwd(), DEFAULT_CSV_FILENAME)),
        replace_sheet_content=_env_bool("REPLACE_SHEET_CONTENT", default=True),
        page_size=_env_int("LISTING_PAGE_SIZE", 1000),
        max_attempts=_env_int("LISTING_MAX_ATTEMPTS", 5),
        base_delay_ms=_env_int("LISTING_BASE_DELAY_MS", 500),
    )


def _env_bool(name: str, *, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean; got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer; got {raw!r}") from exc
    if value < 1:
        raise ConfigError(f"{name} must be at least 1; got {value}")
    return value
