"""Shared constants used by the ticket check entrypoint and API clients."""

from __future__ import annotations

GITHUB_API_BASE = "https://api.github.com"
SHORTCUT_API_BASE = "https://api.app.shortcut.com"

# HTTP timeout for every outbound call, in seconds
REQUEST_TIMEOUT_SECONDS = 20

# Display name used when a story's workflow state id is not in any workflow
UNKNOWN_STATE = "Unknown State"

# Prefix shown in front of story ids in messages, e.g. "SC-123"
TICKET_DISPLAY_PREFIX = "SC-"
