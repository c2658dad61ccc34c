# bmicalc/services/widget.py
"""Static content rendered around the calculator form."""
from typing import List

from pydantic import BaseModel

HEIGHT_HELP_TEXT = (
    "How to convert your height in centimeters\n"
    "For Example\n"
    "if your height is 5 feet and 4 inch so we convert feet to inches\n"
    "5 feet * 12 = 60\n"
    "(now 5 feet is converted to 60 inches)\n"
    "60 inches + 4 inches = 64 inches\n"
    "Now convert inches into Centimeters:\n"
    "64 inches * 2.54 = 162.56"
)


class FieldSpec(BaseModel):
    id: str
    label: str
    unit: str
    placeholder: str
    input_type: str = "number"


class WidgetContent(BaseModel):
    title: str
    description: str
    fields: List[FieldSpec]
    button_label: str
    help_text: str


def get_widget_content() -> WidgetContent:
    return WidgetContent(
        title="BMI Calculator",
        description="Enter your height and weight to calculate your BMI",
        fields=[
            FieldSpec(id="height", label="Height (cm)", unit="cm", placeholder="Enter your height"),
            FieldSpec(id="weight", label="Weight (kg)", unit="kg", placeholder="Enter your weight"),
        ],
        button_label="Calculate",
        help_text=HEIGHT_HELP_TEXT,
    )
