# py
from pydantic import BaseModel, ConfigDict, Field

from bmicalc.services.form_state import FormAction, FormState


class BmiEvaluateRequest(BaseModel):
    # Raw form text; numbers sent by JSON clients are taken as their text form
    model_config = ConfigDict(coerce_numbers_to_str=True)

    height: str = Field("", max_length=64)
    weight: str = Field("", max_length=64)


class FormDispatchRequest(BaseModel):
    state: FormState = Field(default_factory=FormState)
    action: FormAction


class HeightConversionResponse(BaseModel):
    feet: float
    inches: float
    total_inches: float
    height_cm: float
