from __future__ import annotations

from typing import Iterable, Mapping

from shared.constants import UNKNOWN_STATE
from shared.schema import Workflow


def build_state_index(workflows: Iterable[Workflow]) -> dict[int, str]:
    """Flatten workflow states into ``{state_id: state_name}``.

    A state id present in several workflows keeps the name from the last one.
    """
    index: dict[int, str] = {}
    for workflow in workflows:
        if not workflow.states:
            continue
        for state in workflow.states:
            index[state.id] = state.name
    return index


def resolve_state_name(index: Mapping[int, str], state_id: int) -> str:
    return index.get(state_id, UNKNOWN_STATE)
