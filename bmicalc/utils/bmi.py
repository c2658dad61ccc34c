# py
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum

_CENTS = Decimal("0.01")
_WIDE = Context(prec=400)


class BmiCategory(str, Enum):
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    @property
    def headline(self) -> str:
        return _HEADLINES[self]


_HEADLINES = {
    BmiCategory.UNDERWEIGHT: "You are Underweight😲",
    BmiCategory.NORMAL: "You are Normal😎",
    BmiCategory.OVERWEIGHT: "You are Overweight😐",
    BmiCategory.OBESE: "You are Obese☹️",
}


def calculate_bmi(weight_kg: float, height_m: float) -> float:
    if weight_kg <= 0 or height_m <= 0:
        raise ValueError("Weight and height must be positive")
    squared = height_m * height_m
    if squared == 0:
        # tiny heights underflow to zero when squared
        return math.inf
    return weight_kg / squared


def bmi_category(bmi: float) -> BmiCategory:
    if bmi < 18.5:
        return BmiCategory.UNDERWEIGHT
    if 18.5 <= bmi < 25:
        return BmiCategory.NORMAL
    if 25 <= bmi < 30:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def format_bmi(value: float) -> str:
    """Fixed two-decimal text, halves rounded away from zero on the exact binary value."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        # toFixed falls back to shortest exponent form here, e.g. "1e+21"
        return repr(value)
    cents = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_WIDE)
    return format(cents, "f")


def feet_inches_to_cm(feet: float, inches: float = 0) -> float:
    if feet < 0 or inches < 0:
        raise ValueError("Feet and inches must not be negative")
    return round((feet * 12 + inches) * 2.54, 2)
