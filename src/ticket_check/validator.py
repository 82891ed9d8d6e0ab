from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Optional, Sequence, Union

from shared.constants import TICKET_DISPLAY_PREFIX
from shared.schema import Story
from ticket_check.workflow import resolve_state_name

RejectionKind = Literal["no_identifier", "multiple_prs", "state_mismatch"]


@dataclass(frozen=True)
class Skipped:
    """The title matched a skip rule; ``reason`` is the rule as configured."""

    reason: str


@dataclass(frozen=True)
class Rejected:
    """The check fails with ``reason`` as the user-facing message."""

    reason: str
    kind: RejectionKind


@dataclass(frozen=True)
class Accepted:
    """The story exists and is in one of the expected states."""

    ticket_id: str
    ticket_title: str
    state_name: str


Verdict = Union[Skipped, Rejected, Accepted]


def _normalize(value: str) -> str:
    return value.strip().lower()


def validate_ticket(
    story: Story,
    state_index: Mapping[int, str],
    expected_states: Sequence[str],
    enforce_unique_pr: bool,
    ticket_id: Optional[str] = None,
) -> Verdict:
    """Decide whether ``story`` may back a pull request.

    The linked PR limit is checked before the workflow state, so a story
    failing both is reported as having multiple PRs. ``ticket_id`` is the id
    as written in the title; it defaults to the story id.
    """
    ticket_id = ticket_id if ticket_id is not None else str(story.id)
    ticket_ref = f"{TICKET_DISPLAY_PREFIX}{ticket_id}"
    state_name = resolve_state_name(state_index, story.workflow_state_id)

    if enforce_unique_pr and len(story.pull_requests) > 1:
        pr_urls = ", ".join(pr.url for pr in story.pull_requests)
        return Rejected(
            reason=f"Multiple PRs linked to ticket {ticket_ref}: {pr_urls}",
            kind="multiple_prs",
        )

    normalized_expected = {_normalize(state) for state in expected_states}
    if _normalize(state_name) not in normalized_expected:
        return Rejected(
            reason=(
                f"Shortcut ticket {ticket_ref} is not in an expected state.\n"
                f'Current state: "{state_name}"\n'
                f"Expected states: {', '.join(expected_states)}\n"
                f'Ticket title: "{story.name}"'
            ),
            kind="state_mismatch",
        )

    return Accepted(ticket_id=ticket_id, ticket_title=story.name, state_name=state_name)
