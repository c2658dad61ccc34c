# py
from fastapi import APIRouter, Depends, Query
from loguru import logger

from bmicalc.api.deps import get_engine
from bmicalc.schemas import BmiEvaluateRequest, HeightConversionResponse
from bmicalc.services.engine import BmiEngine, EvaluationResult
from bmicalc.services.widget import WidgetContent, get_widget_content
from bmicalc.utils.bmi import feet_inches_to_cm

router = APIRouter()

@router.post("/bmi/evaluate", response_model=EvaluationResult)
async def evaluate_bmi(body: BmiEvaluateRequest, engine: BmiEngine = Depends(get_engine)):
    result = engine.evaluate(body.height, body.weight)
    if result.kind == "error":
        logger.info("BMI rejected: {}", result.code.value)
    else:
        logger.info("BMI evaluated: {} ({})", result.bmi, result.category.value)
    return result

@router.get("/bmi/widget", response_model=WidgetContent)
async def widget_content():
    return get_widget_content()

@router.get("/bmi/height-conversion", response_model=HeightConversionResponse)
async def convert_height(feet: float = Query(..., ge=0), inches: float = Query(0, ge=0)):
    height_cm = feet_inches_to_cm(feet, inches)
    logger.debug("Converted {} ft {} in to {} cm", feet, inches, height_cm)
    return HeightConversionResponse(feet=feet, inches=inches, total_inches=feet * 12 + inches, height_cm=height_cm)
