"""Wizard steps and session coordination."""

from .steps import DEFAULT_STEPS, Step, StepState, StepView, render_steps, step_state, step_states
from .session import (
    MAPPING_STEP,
    REVIEW_STEP,
    UPLOAD_STEP,
    WizardSession,
    WizardStateError,
)

__all__ = [
    "DEFAULT_STEPS",
    "Step",
    "StepState",
    "StepView",
    "render_steps",
    "step_state",
    "step_states",
    "MAPPING_STEP",
    "REVIEW_STEP",
    "UPLOAD_STEP",
    "WizardSession",
    "WizardStateError",
]
