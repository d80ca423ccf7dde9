"""Portion scaling of ingredient quantities and macros."""

import re
from dataclasses import dataclass, replace

from .quantity import (
    FRACTION_PATTERN,
    UNICODE_FRACTION_PATTERN,
    format_quantity,
    parse_quantity,
)
from .recipe import Ingredient, Recipe

# Bounds of the portion selector
MIN_PORTIONS = 1
MAX_PORTIONS = 15

# Calories per gram of each macronutrient
PROTEIN_KCAL_PER_GRAM = 4
CARB_KCAL_PER_GRAM = 4
FAT_KCAL_PER_GRAM = 9

LEADING_NUMBER_PATTERN = re.compile(r"^(\d+(?:[.,]\d+)?)")


@dataclass
class MacroBreakdown:
    """Macros scaled to a number of portions, with their share of calories."""

    proteins: float
    carbs: float
    fats: float
    protein_percent: float
    carb_percent: float
    fat_percent: float

    @property
    def calories(self) -> float:
        """Calories computed from the macros."""
        return (
            self.proteins * PROTEIN_KCAL_PER_GRAM
            + self.carbs * CARB_KCAL_PER_GRAM
            + self.fats * FAT_KCAL_PER_GRAM
        )


def calculate_ratio(servings: int | None, portions: int) -> float:
    """
    Calculate the ratio to multiply quantities by.

    Args:
        servings: Servings the recipe was written for
        portions: Portions the user wants to cook

    Returns:
        portions / servings, or 1.0 if the recipe has no serving count

    Raises:
        ValueError: If portions is outside MIN_PORTIONS..MAX_PORTIONS
    """
    if not MIN_PORTIONS <= portions <= MAX_PORTIONS:
        raise ValueError(
            f"Portions must be between {MIN_PORTIONS} and {MAX_PORTIONS}, got {portions}"
        )

    if not servings:
        return 1.0

    return portions / servings


def scale_quantity_text(quantity: str | None, ratio: float) -> str | None:
    """
    Scale a quantity string.

    Whole fractions ("1/2", "½", "1½") are scaled as a value. Otherwise the
    leading number is scaled and the rest of the text is kept as-is.

    Examples:
        ("200", 2) -> "400"
        ("1/2", 1.5) -> "0.75"
        ("1½", 2) -> "3"
        ("1,5 environ", 0.5) -> "0.75 environ"
        ("une pincée", 2) -> "une pincée" (no leading number)
    """
    if not quantity or not quantity.strip():
        return quantity

    text = quantity.strip()
    if FRACTION_PATTERN.match(text) or UNICODE_FRACTION_PATTERN.match(text):
        value = parse_quantity(text)
        if value is None:
            return quantity
        return format_quantity(value * ratio)

    match = LEADING_NUMBER_PATTERN.match(quantity)
    if not match:
        return quantity

    original_value = float(match.group(1).replace(",", "."))
    scaled = format_quantity(original_value * ratio)
    return scaled + quantity[match.end() :]


def scale_ingredients(recipe: Recipe, portions: int) -> list[Ingredient]:
    """
    Scale all ingredient quantities of a recipe to a number of portions.

    Decimal commas are rewritten as dots at every ratio, including 1.

    Returns:
        New Ingredient objects; the recipe itself is not modified
    """
    ratio = calculate_ratio(recipe.servings, portions)

    return [
        replace(ing, quantity=scale_quantity_text(ing.quantity, ratio))
        for ing in recipe.ingredients
    ]


def scale_macros(recipe: Recipe, portions: int) -> MacroBreakdown | None:
    """
    Scale a recipe's macros to a number of portions.

    Returns:
        MacroBreakdown, or None if macros or servings are missing, or the
        macros add up to zero calories
    """
    if not recipe.proteins or not recipe.carbs or not recipe.fats or not recipe.servings:
        return None

    ratio = calculate_ratio(recipe.servings, portions)
    proteins = recipe.proteins * ratio
    carbs = recipe.carbs * ratio
    fats = recipe.fats * ratio

    protein_calories = proteins * PROTEIN_KCAL_PER_GRAM
    carb_calories = carbs * CARB_KCAL_PER_GRAM
    fat_calories = fats * FAT_KCAL_PER_GRAM
    total_calories = protein_calories + carb_calories + fat_calories

    if total_calories == 0:
        return None

    return MacroBreakdown(
        proteins=proteins,
        carbs=carbs,
        fats=fats,
        protein_percent=protein_calories / total_calories * 100,
        carb_percent=carb_calories / total_calories * 100,
        fat_percent=fat_calories / total_calories * 100,
    )


def format_portions(portions: int) -> str:
    """Format a portion count, e.g. "1 portion" or "4 portions"."""
    return f"{portions} portion" if portions == 1 else f"{portions} portions"
