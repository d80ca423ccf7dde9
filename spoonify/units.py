"""Unit normalization and base-unit conversion for ingredient quantities."""

import re
from collections.abc import Mapping
from types import MappingProxyType

# Canonical token -> spelling variants (French and English)
UNIT_SPELLINGS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("g", re.compile(r"^(?:g|gr|grams?|grammes?)$")),
    ("ml", re.compile(r"^(?:ml|millilitres?|milliliters?)$")),
    ("kg", re.compile(r"^(?:kg|kilos?|kilograms?|kilogrammes?)$")),
    ("l", re.compile(r"^(?:l|litres?|liters?)$")),
)

WEIGHT_UNITS = frozenset({"g", "kg"})
VOLUME_UNITS = frozenset({"ml", "l"})
CONVERTIBLE_UNITS = WEIGHT_UNITS | VOLUME_UNITS

# Canonical unit -> (base unit, multiplier)
BASE_UNITS: Mapping[str, tuple[str, float]] = MappingProxyType(
    {
        "g": ("g", 1.0),
        "kg": ("g", 1000.0),
        "ml": ("ml", 1.0),
        "l": ("ml", 1000.0),
    }
)


def normalize_unit(unit: str) -> str:
    """
    Collapse unit spelling variants into a canonical token.

    Examples:
        "Grammes" -> "g"
        " millilitres " -> "ml"
        "Kilo" -> "kg"
        "pincée" -> "pincée" (unknown units pass through lowercased)
    """
    lower = unit.lower().strip()

    for canonical, pattern in UNIT_SPELLINGS:
        if pattern.match(lower):
            return canonical

    return lower


def to_base_unit(value: float, unit: str) -> tuple[float, str] | None:
    """
    Convert a value to grams or milliliters.

    Args:
        value: The numeric value
        unit: The unit string (any supported spelling)

    Returns:
        Tuple of (converted_value, base_unit), or None for non-convertible units
    """
    normalized = normalize_unit(unit)
    if normalized not in BASE_UNITS:
        return None

    base_unit, multiplier = BASE_UNITS[normalized]
    return value * multiplier, base_unit


def can_convert_ingredient(unit: str | None) -> bool:
    """Check if an ingredient measured in this unit can be converted to spoons."""
    if not unit:
        return False
    return normalize_unit(unit) in CONVERTIBLE_UNITS
