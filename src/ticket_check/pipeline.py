from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, Protocol

from shared.constants import TICKET_DISPLAY_PREFIX
from shared.logging import ContextAdapter, get_logger
from shared.schema import ApiShapeError, Story, Workflow
from shared.shortcut_client import TrackerError
from ticket_check.config import CheckConfig
from ticket_check.extractor import ExtractionMode, extract_ticket_id
from ticket_check.skip import find_skip_match
from ticket_check.validator import Rejected, Skipped, Verdict, validate_ticket
from ticket_check.workflow import build_state_index

logger = get_logger("ticket_check")

_MISSING_ID_HINTS: dict[str, tuple[str, str]] = {
    "prefix": (
        "PR title must start with a Shortcut ticket number.",
        'Valid prefixes: "1234: title", "#1234: title", "sc-1234: title", "#sc-1234: title", "[sc-1234]: title"',
    ),
    "anywhere": (
        "PR title does not contain a valid Shortcut ticket number.",
        'Examples: "SC-123", "sc-456", "SHORTCUT-789"',
    ),
}


class Tracker(Protocol):
    def get_story(self, story_id: str) -> Story: ...

    def list_workflows(self) -> list[Workflow]: ...


class TicketLookupError(RuntimeError):
    def __init__(self, ticket_id: str, cause: Exception) -> None:
        self.ticket_id = ticket_id
        super().__init__(f"Failed to validate ticket {TICKET_DISPLAY_PREFIX}{ticket_id}: {cause}")


def _bind_ticket(log: Any, ticket_id: str) -> Any:
    if isinstance(log, ContextAdapter):
        return ContextAdapter(log.logger, {**log.extra, "ticket_id": ticket_id})
    return log


def missing_ticket_message(title: str, mode: ExtractionMode) -> str:
    headline, hint = _MISSING_ID_HINTS[mode]
    return f'{headline}\n{hint}\nCurrent title: "{title}"'


def fetch_story_and_workflows(tracker: Tracker, ticket_id: str) -> tuple[Story, list[Workflow]]:
    """Fetch the story and the workflow list concurrently."""
    try:
        with ThreadPoolExecutor(max_workers=2) as pool:
            story_future = pool.submit(tracker.get_story, ticket_id)
            workflows_future = pool.submit(tracker.list_workflows)
            story = story_future.result()
            workflows = workflows_future.result()
    except (TrackerError, ApiShapeError) as exc:
        raise TicketLookupError(ticket_id, exc) from exc
    return story, workflows


def run_pipeline(
    title: str,
    config: CheckConfig,
    tracker: Tracker,
    local_logger: Optional[Any] = None,
) -> Verdict:
    """Run skip check, extraction and Shortcut validation for one title.

    Returns a verdict for every expected outcome. Tracker failures raise
    ``TicketLookupError``; nothing is retried.
    """
    log = local_logger or logger

    matched_rule = find_skip_match(title, config.skip_if_title_contains)
    if matched_rule is not None:
        log.info("title_skipped", extra={"extra": {"skip_rule": matched_rule}})
        return Skipped(reason=matched_rule)

    mode = config.extraction_mode
    ticket_id = extract_ticket_id(title, mode)
    if ticket_id is None:
        log.info("ticket_id_missing", extra={"extra": {"mode": mode}})
        return Rejected(reason=missing_ticket_message(title, mode), kind="no_identifier")

    log = _bind_ticket(log, ticket_id)
    log.info("ticket_id_found", extra={"extra": {"mode": mode}})

    story, workflows = fetch_story_and_workflows(tracker, ticket_id)
    verdict = validate_ticket(
        story,
        build_state_index(workflows),
        config.expected_states,
        config.enforce_single_pr,
        ticket_id=ticket_id,
    )
    log.info("ticket_validated", extra={"extra": {"verdict": type(verdict).__name__.lower()}})
    return verdict
