"""Google REST API client authenticated with Application Default Credentials."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib import request as urllib_request
from urllib.error import HTTPError
from urllib.parse import urlencode

import google.auth
from google.auth import exceptions as google_auth_exceptions
from google.auth.transport.requests import Request as AuthRequest

if TYPE_CHECKING:
    from google.auth.credentials import Credentials

    from drive_inventory.config import AppConfig

logger = logging.getLogger(__name__)

DRIVE_BASE_URL = "https://www.googleapis.com/drive/v3"
SHEETS_BASE_URL = "https://sheets.googleapis.com/v4"
GOOGLE_SCOPES = [
    "https://www.googleapis.com/auth/drive.readonly",
    "https://www.googleapis.com/auth/spreadsheets",
]
REQUEST_TIMEOUT_SECONDS = 60


class GoogleAuthError(Exception):
    """Raised when credentials cannot be found or refreshed."""


class GoogleApiError(Exception):
    """Raised when a Google API returns a non-2xx response."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Google API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class GoogleApiClient:
    """Authenticated JSON client for the Drive and Sheets REST APIs."""

    def __init__(self, credentials: Credentials) -> None:
        """Wrap a google-auth credentials object.

        Args:
            credentials: Credentials carrying the Drive and Sheets scopes.
        """
        self._credentials = credentials

    def _acquire_token(self) -> str:
        """Return a valid Bearer token, refreshing the credentials if needed.

        Returns:
            Access token string.

        Raises:
            GoogleAuthError: If the credentials cannot be refreshed.
        """
        if not self._credentials.valid:
            try:
                self._credentials.refresh(AuthRequest())
            except google_auth_exceptions.GoogleAuthError as exc:
                logger.error("[_acquire_token] credential refresh failed; error:%s", exc)
                raise GoogleAuthError(f"Token refresh failed: {exc}") from exc
        return str(self._credentials.token)

    def get(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Perform an authenticated GET request.

        Args:
            url: Absolute endpoint URL (see DRIVE_BASE_URL / SHEETS_BASE_URL).
            params: Query parameters; booleans are sent as "true"/"false",
                None values are dropped.

        Returns:
            Parsed JSON response body as a dict.

        Raises:
            GoogleAuthError: If token acquisition fails.
            GoogleApiError: If the API returns a non-2xx status code.
        """
        return self._request("GET", url, params)

    def post(
        self,
        url: str,
        body: dict[str, Any],
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Perform an authenticated POST request with a JSON body."""
        return self._request("POST", url, params, body)

    def put(
        self,
        url: str,
        body: dict[str, Any],
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Perform an authenticated PUT request with a JSON body."""
        return self._request("PUT", url, params, body)

    def _request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        token = self._acquire_token()
        query = _encode_params(params)
        full_url = f"{url}?{query}" if query else url
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        data = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"

        req = urllib_request.Request(full_url, data=data, headers=headers, method=method)
        try:
            with urllib_request.urlopen(req, timeout=REQUEST_TIMEOUT_SECONDS) as resp:
                raw = resp.read()
                return json.loads(raw) if raw else {}  # type: ignore[no-any-return]
        except HTTPError as exc:
            raw = exc.read()
            try:
                detail = json.loads(raw).get("error", {}).get("message", exc.reason)
            except (ValueError, AttributeError):
                detail = exc.reason
            raise GoogleApiError(exc.code, str(detail)) from exc


def _encode_params(params: dict[str, Any] | None) -> str:
    """Encode query parameters the way the Google REST APIs expect them."""
    if not params:
        return ""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((key, str(value)))
    return urlencode(pairs)


def google_client_from_config(config: AppConfig) -> GoogleApiClient:
    """Construct a GoogleApiClient from Application Default Credentials.

    GOOGLE_APPLICATION_CREDENTIALS, gcloud user credentials and the metadata
    server are all resolved by google.auth.default(). The config is accepted
    for symmetry with the other factories and is otherwise unused.

    Args:
        config: Application configuration instance.

    Returns:
        Configured GoogleApiClient instance.

    Raises:
        GoogleAuthError: If no default credentials are available.
    """
    try:
        credentials, project = google.auth.default(scopes=GOOGLE_SCOPES)
    except google_auth_exceptions.DefaultCredentialsError as exc:
        logger.error("[google_client_from_config] no default credentials; error:%s", exc)
        raise GoogleAuthError(f"Default credentials not found: {exc}") from exc
    logger.debug("[google_client_from_config] resolved default credentials; project:%s", project)
    return GoogleApiClient(credentials)
