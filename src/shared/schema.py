from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class ApiShapeError(ValueError):
    """Raised when a Shortcut payload does not have the fields we rely on."""


class LinkedPullRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str


class Story(BaseModel):
    """The subset of a Shortcut story used by the ticket check."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    workflow_state_id: int
    pull_requests: list[LinkedPullRequest] = []
    """Pull requests Shortcut has linked to the story, in API order."""

    @field_validator("pull_requests", mode="before")
    @classmethod
    def default_pull_requests(cls, value: Any) -> Any:
        return [] if value is None else value


class WorkflowState(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str


class Workflow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    states: Optional[list[WorkflowState]] = None
    """Absent for workflows Shortcut returns without a state list."""


def parse_story(raw: Any) -> Story:
    if not isinstance(raw, dict):
        raise ApiShapeError("Story response is not a JSON object")
    try:
        return Story.model_validate(raw)
    except ValidationError as exc:
        raise ApiShapeError(f"Story response failed schema validation: {exc}") from exc


def parse_workflows(raw: Any) -> list[Workflow]:
    if not isinstance(raw, list):
        raise ApiShapeError("Workflows response is not a JSON array")
    try:
        return [Workflow.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise ApiShapeError(f"Workflows response failed schema validation: {exc}") from exc
