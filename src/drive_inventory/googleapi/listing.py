"""Paginated Drive folder listing with bounded retry for transient errors."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Protocol

from drive_inventory.googleapi.client import DRIVE_BASE_URL, GoogleApiClient, GoogleApiError
from drive_inventory.googleapi.models import (
    FIELD_FILES,
    FIELD_NEXT_PAGE_TOKEN,
    ChildEntry,
    ListingPage,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from drive_inventory.config import AppConfig

logger = logging.getLogger(__name__)

LISTING_FIELDS = "nextPageToken, files(id, name, mimeType, size, modifiedTime)"
MAX_PAGE_SIZE = 1000
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_BASE_DELAY_MS = 500


class PageFetcher(Protocol):
    """Anything that can fetch one page of a folder's direct children."""

    def fetch_page(self, folder_id: str, page_token: str | None = None) -> ListingPage: ...


class ListingClient:
    """Lists one page of a Drive folder's direct, non-trashed children."""

    def __init__(self, google_client: GoogleApiClient, page_size: int = MAX_PAGE_SIZE) -> None:
        """Initialise the listing client.

        Args:
            google_client: Authenticated GoogleApiClient instance.
            page_size: Items requested per page; capped at the Drive maximum.
        """
        self._google = google_client
        self._page_size = min(page_size, MAX_PAGE_SIZE)

    def fetch_page(self, folder_id: str, page_token: str | None = None) -> ListingPage:
        """Fetch a single page of children for ``folder_id``.

        Items from shared drives are included. Errors from the transport are
        not caught here, so callers can inspect ``GoogleApiError.status_code``.

        Args:
            folder_id: Drive ID of the folder to list.
            page_token: Continuation token from the previous page, or None.

        Returns:
            ListingPage with the entries and the next page token (None on the
            last page).
        """
        params = {
            "q": f"'{_escape_query_value(folder_id)}' in parents and trashed = false",
            "fields": LISTING_FIELDS,
            "pageSize": self._page_size,
            "pageToken": page_token,
            "supportsAllDrives": True,
            "includeItemsFromAllDrives": True,
            "corpora": "allDrives",
        }
        response = self._google.get(f"{DRIVE_BASE_URL}/files", params)
        entries = [ChildEntry.from_api(raw) for raw in response.get(FIELD_FILES, [])]
        return ListingPage(
            entries=entries,
            next_page_token=response.get(FIELD_NEXT_PAGE_TOKEN) or None,
        )


class RetryingListingClient:
    """Returns a folder's complete child list, retrying 429 and 5xx responses."""

    def __init__(
        self,
        fetcher: PageFetcher,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay_ms: int = DEFAULT_BASE_DELAY_MS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialise the retrying client.

        Args:
            fetcher: Page source, normally a ListingClient.
            max_attempts: Attempts per page request before the error escapes.
            base_delay_ms: Delay before the first retry; doubled for each
                further retry.
            sleep: Blocking sleep taking seconds.
        """
        self._fetcher = fetcher
        self._max_attempts = max_attempts
        self._base_delay_ms = base_delay_ms
        self._sleep = sleep

    def list_children(self, folder_id: str) -> list[ChildEntry]:
        """Return every direct child of ``folder_id`` across all pages.

        Pages are concatenated in the order they were returned.

        Raises:
            GoogleApiError: On a non-transient status, or once a page has
                failed ``max_attempts`` times.
        """
        children: list[ChildEntry] = []
        page_token: str | None = None
        pages = 0
        while True:
            page = self._fetch_with_retry(folder_id, page_token)
            children.extend(page.entries)
            pages += 1
            page_token = page.next_page_token
            if not page_token:
                break
        logger.debug(
            "[list_children] listed folder; folder_id:%s;pages:%d;child_count:%d",
            folder_id,
            pages,
            len(children),
        )
        return children

    def backoff_delay_ms(self, attempt: int) -> int:
        """Delay in milliseconds after failed attempt number ``attempt`` (0-based)."""
        return int(self._base_delay_ms * 2**attempt)

    def _fetch_with_retry(self, folder_id: str, page_token: str | None) -> ListingPage:
        attempt = 0
        while True:
            try:
                return self._fetcher.fetch_page(folder_id, page_token)
            except GoogleApiError as exc:
                if not is_transient(exc) or attempt + 1 >= self._max_attempts:
                    raise
                delay_ms = self.backoff_delay_ms(attempt)
                logger.warning(
                    "[list_children] retrying page; folder_id:%s;attempt:%d;delay_ms:%d;status:%d",
                    folder_id,
                    attempt + 1,
                    delay_ms,
                    exc.status_code,
                )
                self._sleep(delay_ms / 1000)
                attempt += 1


def is_transient(exc: GoogleApiError) -> bool:
    """True for rate limiting (429) and server-side (5xx) failures."""
    return exc.status_code == 429 or 500 <= exc.status_code < 600


def _escape_query_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def listing_client_from_config(
    google_client: GoogleApiClient,
    config: AppConfig,
) -> RetryingListingClient:
    """Construct a RetryingListingClient from application configuration.

    Args:
        google_client: Authenticated GoogleApiClient instance.
        config: Application configuration instance.

    Returns:
        Configured RetryingListingClient wrapping a ListingClient.
    """
    return RetryingListingClient(
        fetcher=ListingClient(google_client, page_size=config.page_size),
        max_attempts=config.max_attempts,
        base_delay_ms=config.base_delay_ms,
    )
