"""
Spoon conversion for cooks without a kitchen scale.

Converts grams/milliliters into tablespoons or teaspoons using an average
density per ingredient category. Every result is approximate.
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from .categories import IngredientCategory, detect_category
from .quantity import format_quantity, parse_quantity
from .units import to_base_unit

logger = logging.getLogger(__name__)


class SpoonUnit(str, Enum):
    """Household spoon measures a conversion can produce."""

    TABLESPOON = "tablespoon"
    TEASPOON = "teaspoon"


DEFAULT_LANGUAGE = "fr"

SPOON_LABELS: Mapping[str, Mapping[SpoonUnit, str]] = MappingProxyType(
    {
        "fr": MappingProxyType(
            {SpoonUnit.TABLESPOON: "c. à soupe", SpoonUnit.TEASPOON: "c. à café"}
        ),
        "en": MappingProxyType({SpoonUnit.TABLESPOON: "tbsp", SpoonUnit.TEASPOON: "tsp"}),
    }
)

# Grams (or milliliters) filling one tablespoon
DENSITIES: Mapping[IngredientCategory, float] = MappingProxyType(
    {
        IngredientCategory.LIQUID: 15.0,  # water, milk, oil
        IngredientCategory.FINE_SOLID: 10.0,  # flour, icing sugar, cocoa
        IngredientCategory.DENSE: 14.0,  # sugar, salt, rice
        IngredientCategory.PASTY: 20.0,  # butter, honey, paste
    }
)

TABLESPOON_TO_TEASPOON = 3

APPROXIMATE_SUFFIX = " (approx.)"


@dataclass(frozen=True)
class SpoonMeasure:
    """A whole number of spoons."""

    value: int
    unit: SpoonUnit


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one ingredient quantity."""

    value: float
    unit: str
    is_converted: bool
    is_approximate: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase shape used by the app."""
        return {
            "value": self.value,
            "unit": self.unit,
            "isConverted": self.is_converted,
            "isApproximate": self.is_approximate,
        }


def _get_labels(language: str) -> Mapping[SpoonUnit, str]:
    labels = SPOON_LABELS.get(language)
    if labels is None:
        raise ValueError(
            f"Unsupported language: {language!r} (expected one of {', '.join(SPOON_LABELS)})"
        )
    return labels


def get_spoon_label(unit: SpoonUnit, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Get the display label of a spoon unit.

    Raises:
        ValueError: If the language is not supported
    """
    return _get_labels(language)[unit]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def convert_to_spoons(
    value: float, unit: str, category: IngredientCategory
) -> SpoonMeasure | None:
    """
    Convert a weight or volume into tablespoons, or teaspoons below one tablespoon.

    Args:
        value: Numeric quantity
        unit: Unit string (g, ml, kg, l or any of their spellings)
        category: Ingredient category, selects the density

    Returns:
        SpoonMeasure, or None if the unit or value cannot be converted
    """
    if not math.isfinite(value) or value < 0:
        logger.debug("Refusing to convert non-finite or negative value %r", value)
        return None

    base = to_base_unit(value, unit)
    if base is None:
        logger.debug("Unit %r is not convertible to spoons", unit)
        return None

    base_value, _ = base
    tablespoons = base_value / DENSITIES[category]

    if tablespoons < 1:
        teaspoons = tablespoons * TABLESPOON_TO_TEASPOON
        return SpoonMeasure(value=_round_half_up(teaspoons), unit=SpoonUnit.TEASPOON)

    return SpoonMeasure(value=_round_half_up(tablespoons), unit=SpoonUnit.TABLESPOON)


def _is_missing(quantity: str | float | None) -> bool:
    if isinstance(quantity, float) and math.isnan(quantity):
        return True
    return not quantity


def convert_ingredient(
    name: str,
    quantity: str | float | None,
    unit: str | None,
    language: str = DEFAULT_LANGUAGE,
) -> ConversionResult:
    """
    Convert an ingredient quantity into spoons when possible.

    Args:
        name: Ingredient display name, used to detect its category
        quantity: Quantity as a string ("250", "1/2", "2,5") or a number
        unit: Unit of the quantity
        language: Language of the spoon labels ("fr" or "en")

    Returns:
        ConversionResult; is_converted is False when the quantity is missing
        or unparseable, or the unit is not a weight/volume unit
    """
    label_set = _get_labels(language)

    if _is_missing(quantity) or not unit:
        return ConversionResult(value=0, unit=unit or "", is_converted=False, is_approximate=False)

    if isinstance(quantity, (int, float)) and not isinstance(quantity, bool):
        numeric_value: float | None = quantity
    else:
        numeric_value = parse_quantity(str(quantity))

    if numeric_value is None:
        return ConversionResult(value=0, unit=unit, is_converted=False, is_approximate=False)

    category = detect_category(name)
    spoons = convert_to_spoons(numeric_value, unit, category)

    if spoons is None:
        return ConversionResult(
            value=numeric_value, unit=unit, is_converted=False, is_approximate=False
        )

    return ConversionResult(
        value=spoons.value,
        unit=label_set[spoons.unit],
        is_converted=True,
        is_approximate=True,
    )


def format_conversion_result(result: ConversionResult) -> str:
    """
    Format a conversion result for display.

    Examples:
        converted 2 "c. à soupe" -> "2 c. à soupe (approx.)"
        unconverted 3 "pieces" -> "3 pieces"
        unconverted 0 "pinch" -> "pinch"
    """
    if not result.is_converted:
        if result.value:
            return f"{format_quantity(result.value)} {result.unit}"
        return result.unit or ""

    suffix = APPROXIMATE_SUFFIX if result.is_approximate else ""
    return f"{format_quantity(result.value)} {result.unit}{suffix}"


def convert_ingredient_to_string(
    name: str,
    quantity: str | float | None,
    unit: str | None,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Convert an ingredient and format the result for display."""
    return format_conversion_result(convert_ingredient(name, quantity, unit, language))
