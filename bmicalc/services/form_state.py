# bmicalc/services/form_state.py
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .engine import BmiEngine, EvaluationResult


class FormStatus(str, Enum):
    IDLE = "idle"
    SHOWING_ERROR = "showing_error"
    SHOWING_RESULT = "showing_result"


class HeightChanged(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    type: Literal["height_changed"] = "height_changed"
    value: str


class WeightChanged(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    type: Literal["weight_changed"] = "weight_changed"
    value: str


class EvaluateRequested(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["evaluate_requested"] = "evaluate_requested"


FormAction = Annotated[Union[HeightChanged, WeightChanged, EvaluateRequested], Field(discriminator="type")]


class FormState(BaseModel):
    """Snapshot of the calculator form: both raw inputs plus the outcome of the last evaluation."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    height: str = ""
    weight: str = ""
    last_result: Optional[EvaluationResult] = None

    @computed_field
    @property
    def status(self) -> FormStatus:
        if self.last_result is None:
            return FormStatus.IDLE
        if self.last_result.kind == "error":
            return FormStatus.SHOWING_ERROR
        return FormStatus.SHOWING_RESULT


def initial_state() -> FormState:
    return FormState()


def reduce(state: FormState, action: FormAction, strict: bool = True) -> FormState:
    # Edits leave last_result alone; only an evaluation overwrites it
    if isinstance(action, HeightChanged):
        return state.model_copy(update={"height": action.value})
    if isinstance(action, WeightChanged):
        return state.model_copy(update={"weight": action.value})
    if isinstance(action, EvaluateRequested):
        result = BmiEngine(strict=strict).evaluate(state.height, state.weight)
        return state.model_copy(update={"last_result": result})
    raise ValueError(f"Unknown form action: {action!r}")
