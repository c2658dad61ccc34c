# bmicalc/services/engine.py
"""
BMI evaluation engine.

Takes the two raw strings typed into the form, validates them, computes the
BMI and classifies it. Validation failures are returned as values, never
raised, so callers render whichever variant comes back.
"""
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from bmicalc.utils.bmi import BmiCategory, bmi_category, calculate_bmi, format_bmi
from bmicalc.utils.validators import is_positive_number, parse_float


class BmiErrorCode(str, Enum):
    MISSING_INPUT = "missing_input"
    NON_POSITIVE_HEIGHT = "non_positive_height"
    NON_POSITIVE_WEIGHT = "non_positive_weight"


ERROR_MESSAGES = {
    BmiErrorCode.MISSING_INPUT: "Please enter both height and weight.",
    BmiErrorCode.NON_POSITIVE_HEIGHT: "Height must be a positive number.",
    BmiErrorCode.NON_POSITIVE_WEIGHT: "Weight must be a positive number.",
}


class BmiError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    code: BmiErrorCode
    message: str

    @classmethod
    def from_code(cls, code: BmiErrorCode) -> "BmiError":
        return cls(code=code, message=ERROR_MESSAGES[code])


class BmiSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    bmi: str
    category: BmiCategory

    @computed_field
    @property
    def headline(self) -> str:
        return self.category.headline


EvaluationResult = Annotated[Union[BmiSuccess, BmiError], Field(discriminator="kind")]


class BmiEngine:
    def __init__(self, strict: bool = True):
        self.strict = strict

    def evaluate(self, height_cm_text: str, weight_kg_text: str) -> EvaluationResult:
        if not height_cm_text or not weight_kg_text:
            return BmiError.from_code(BmiErrorCode.MISSING_INPUT)

        height_m = parse_float(height_cm_text) / 100
        if not is_positive_number(height_m, self.strict):
            return BmiError.from_code(BmiErrorCode.NON_POSITIVE_HEIGHT)

        weight_kg = parse_float(weight_kg_text)
        if not is_positive_number(weight_kg, self.strict):
            return BmiError.from_code(BmiErrorCode.NON_POSITIVE_WEIGHT)

        bmi = calculate_bmi(weight_kg, height_m)
        return BmiSuccess(bmi=format_bmi(bmi), category=bmi_category(bmi))


def evaluate(height_cm_text: str, weight_kg_text: str, strict: bool = True) -> EvaluationResult:
    return BmiEngine(strict=strict).evaluate(height_cm_text, weight_kg_text)
