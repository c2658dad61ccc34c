# py
from fastapi import Depends
from bmicalc.core.config import Settings, get_settings
from bmicalc.services.engine import BmiEngine


def get_strict_parsing(settings: Settings = Depends(get_settings)) -> bool:
    return settings.STRICT_NUMBER_PARSING


def get_engine(strict: bool = Depends(get_strict_parsing)) -> BmiEngine:
    return BmiEngine(strict=strict)
