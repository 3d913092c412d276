"""Step progress indicator."""

from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel


class StepState(str, Enum):
    """Display state of a wizard step."""

    COMPLETED = "completed"
    ACTIVE = "active"
    INACTIVE = "inactive"


class Step(BaseModel):
    """A wizard step."""

    id: int
    title: str
    description: str = ""


class StepView(BaseModel):
    """A step together with how it should be drawn."""

    id: int
    title: str
    description: str
    state: StepState
    connector_filled: Optional[bool] = None  # None for the last step (no connector)


DEFAULT_STEPS: list[Step] = [
    Step(id=1, title="Upload File", description="Select a LAS, XLSX or CSV file"),
    Step(id=2, title="Map Columns", description="Match headers to standard channels"),
    Step(id=3, title="Review & Export", description="Confirm the channel mapping"),
]


def step_state(step_id: int, current_step: int) -> StepState:
    if step_id < current_step:
        return StepState.COMPLETED
    if step_id == current_step:
        return StepState.ACTIVE
    return StepState.INACTIVE


def step_states(steps: Sequence[Step], current_step: int) -> list[StepView]:
    """Pure function of (steps, current_step); no state is kept."""
    views = []
    for index, step in enumerate(steps):
        is_last = index == len(steps) - 1
        views.append(
            StepView(
                id=step.id,
                title=step.title,
                description=step.description,
                state=step_state(step.id, current_step),
                connector_filled=None if is_last else step.id < current_step,
            )
        )
    return views


_MARKERS = {
    StepState.COMPLETED: "[x]",
    StepState.ACTIVE: "[>]",
    StepState.INACTIVE: "[ ]",
}


def render_steps(steps: Sequence[Step], current_step: int) -> str:
    """Plain-text rendering, e.g. ``[x] 1 Upload File ==== [>] 2 Map Columns ---- [ ] 3 ...``."""
    parts = []
    for view in step_states(steps, current_step):
        parts.append(f"{_MARKERS[view.state]} {view.id} {view.title}")
        if view.connector_filled is not None:
            parts.append("====" if view.connector_filled else "----")
    return " ".join(parts)
