# py
from fastapi import APIRouter, Depends
from loguru import logger

from bmicalc.api.deps import get_strict_parsing
from bmicalc.schemas import FormDispatchRequest
from bmicalc.services.form_state import FormState, initial_state, reduce

router = APIRouter()

@router.get("/bmi/form/initial", response_model=FormState)
async def get_initial_state():
    return initial_state()

@router.post("/bmi/form", response_model=FormState)
async def dispatch_action(body: FormDispatchRequest, strict: bool = Depends(get_strict_parsing)):
    new_state = reduce(body.state, body.action, strict=strict)
    logger.debug("Form action {}: {} -> {}", body.action.type, body.state.status.value, new_state.status.value)
    return new_state
