from __future__ import annotations

from typing import Any, Callable, Optional

import requests

from shared.constants import REQUEST_TIMEOUT_SECONDS, SHORTCUT_API_BASE
from shared.schema import Story, Workflow, parse_story, parse_workflows


class TrackerError(RuntimeError):
    pass


class TrackerApiError(TrackerError):
    """Shortcut answered with a non-success status."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.message = message or "Unknown error"
        super().__init__(f"Shortcut API returned status {status_code}: {self.message}")


class TransportError(TrackerError):
    """The request never produced a usable response."""


class ShortcutClient:
    """Minimal Shortcut REST v3 client.

    Every call is a single attempt. Failures surface as ``TrackerApiError``
    (non-2xx), ``TransportError`` (connection or JSON decoding problems) or
    ``shared.schema.ApiShapeError`` (payload shape).
    """

    def __init__(
        self,
        token_provider: Callable[[], str],
        api_base: str = SHORTCUT_API_BASE,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._token_provider = token_provider
        self._api_base = api_base.rstrip("/")
        self._session = session or requests.Session()

    def _get_json(self, path: str) -> Any:
        url = f"{self._api_base}{path}"
        headers = {
            "Shortcut-Token": self._token_provider(),
            "Content-Type": "application/json",
        }
        try:
            response = self._session.request("GET", url, headers=headers, timeout=REQUEST_TIMEOUT_SECONDS)
        except requests.RequestException as exc:
            raise TransportError(f"Request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            if response.status_code >= 400:
                raise TrackerApiError(response.status_code) from exc
            raise TransportError(f"Failed to parse JSON response: {exc}") from exc

        if not 200 <= response.status_code < 300:
            message = payload.get("message") if isinstance(payload, dict) else None
            raise TrackerApiError(response.status_code, message)
        return payload

    def get_story(self, story_id: str) -> Story:
        return parse_story(self._get_json(f"/api/v3/stories/{story_id}"))

    def list_workflows(self) -> list[Workflow]:
        return parse_workflows(self._get_json("/api/v3/workflows"))
