# py
import math
import pytest
from bmicalc.utils.bmi import BmiCategory, bmi_category, calculate_bmi, feet_inches_to_cm, format_bmi
from bmicalc.utils.validators import is_positive_number, parse_float


@pytest.mark.parametrize("text,expected", [
    ("170", 170.0),
    ("  170", 170.0),
    ("170cm", 170.0),
    ("+5", 5.0),
    ("-12.5", -12.5),
    (".5", 0.5),
    ("5.", 5.0),
    ("1e3x", 1000.0),
    ("1e", 1.0),
    ("2.5E-1", 0.25),
    ("Infinity", math.inf),
    ("-Infinity", -math.inf),
])
def test_parse_float_prefix(text, expected):
    assert parse_float(text) == expected


@pytest.mark.parametrize("text", ["", "abc", " ", "cm170", ".", "-", "inf", "nan", "\u0661\u0667\u0660", "\uff11\uff17\uff10", "\x1c170", "\x1f170"])
def test_parse_float_without_number(text):
    assert math.isnan(parse_float(text))


@pytest.mark.parametrize("text", ["\ufeff170", "\xa0170", "\u2003170", "\u3000170", "\u2028170", "\v\f170"])
def test_parse_float_skips_unicode_whitespace(text):
    assert parse_float(text) == 170.0


def test_is_positive_number_strict():
    assert is_positive_number(1.7)
    assert not is_positive_number(0.0)
    assert not is_positive_number(-1.0)
    assert not is_positive_number(math.nan)
    assert not is_positive_number(math.inf)


def test_is_positive_number_lenient():
    assert is_positive_number(math.nan, strict=False)
    assert is_positive_number(math.inf, strict=False)
    assert not is_positive_number(0.0, strict=False)
    assert not is_positive_number(-math.inf, strict=False)


def test_calculate_bmi():
    assert calculate_bmi(70, 1.7) == pytest.approx(24.2214, abs=1e-4)
    with pytest.raises(ValueError):
        calculate_bmi(0, 1.7)
    with pytest.raises(ValueError):
        calculate_bmi(70, -1.7)


def test_calculate_bmi_underflowing_height():
    assert calculate_bmi(70, 1e-200) == math.inf


@pytest.mark.parametrize("bmi,category", [
    (10.0, BmiCategory.UNDERWEIGHT),
    (18.49, BmiCategory.UNDERWEIGHT),
    (18.5, BmiCategory.NORMAL),
    (24.99, BmiCategory.NORMAL),
    (25.0, BmiCategory.OVERWEIGHT),
    (29.99, BmiCategory.OVERWEIGHT),
    (30.0, BmiCategory.OBESE),
    (55.0, BmiCategory.OBESE),
    (math.nan, BmiCategory.OBESE),
])
def test_bmi_category_bounds(bmi, category):
    assert bmi_category(bmi) == category


@pytest.mark.parametrize("value,text", [
    (24.221453287197235, "24.22"),
    (20.0, "20.00"),
    (0.125, "0.13"),
    (2.675, "2.67"),
    (1234.5, "1234.50"),
    (math.nan, "NaN"),
    (math.inf, "Infinity"),
    (1e21, "1e+21"),
    (1.5e22, "1.5e+22"),
    (999999999999999868928.0, "999999999999999868928.00"),
])
def test_format_bmi(value, text):
    assert format_bmi(value) == text


def test_headlines():
    assert BmiCategory.UNDERWEIGHT.headline == "You are Underweight😲"
    assert BmiCategory.OBESE.headline == "You are Obese☹️"


def test_feet_inches_to_cm():
    assert feet_inches_to_cm(5, 4) == 162.56
    assert feet_inches_to_cm(6) == 182.88
    with pytest.raises(ValueError):
        feet_inches_to_cm(-5, 4)
