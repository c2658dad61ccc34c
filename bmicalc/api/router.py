# py
from fastapi import APIRouter
from bmicalc.api.routes import bmi, form

api_router = APIRouter()
api_router.include_router(bmi.router, prefix="", tags=["bmi"])
api_router.include_router(form.router, prefix="", tags=["form"])
