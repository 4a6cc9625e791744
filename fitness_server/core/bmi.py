"""BMI calculation.

BMI = weight_kg / height_m ** 2, rounded to 2 decimals.

Clients have submitted height in two units over time, so the unit is a
policy: ``cm`` divides by 100, ``ft`` multiplies by the meters-per-foot
constant.
"""

from typing import Literal

HeightUnit = Literal["cm", "ft"]

METERS_PER_FOOT = 0.3048

_TO_METERS: dict[str, float] = {
    "cm": 0.01,
    "ft": METERS_PER_FOOT,
}


def height_in_meters(height: float, unit: HeightUnit = "cm") -> float:
    """Convert a submitted height to meters."""
    try:
        factor = _TO_METERS[unit]
    except KeyError:
        raise ValueError(f"Unsupported height unit: {unit}") from None
    return height * factor


def calculate_bmi(weight: float, height: float, unit: HeightUnit = "cm") -> float:
    """
    Calculate BMI from weight (kg) and height.

    Args:
        weight: Weight in kilograms
        height: Height in ``unit``
        unit: ``cm`` or ``ft``

    Returns:
        BMI rounded to 2 decimals

    Raises:
        ValueError: If height or weight is not positive

    Examples:
        >>> calculate_bmi(70, 175)
        22.86
        >>> calculate_bmi(70, 5.75, unit="ft")
        22.79
    """
    if weight <= 0 or height <= 0:
        raise ValueError("Weight and height must be positive")

    height_m = height_in_meters(height, unit)
    return round(weight / height_m**2, 2)
