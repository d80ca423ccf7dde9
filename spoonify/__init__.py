"""Spoonify - Ingredient spoon conversion for cooks without a kitchen scale."""

__version__ = "1.0.0"

from .categories import IngredientCategory, detect_category
from .converter import (
    ConversionResult,
    SpoonUnit,
    convert_ingredient,
    convert_ingredient_to_string,
    convert_to_spoons,
)
from .export import build_converted_lines, export_ingredients
from .quantity import parse_quantity
from .recipe import Ingredient, Recipe, RecipeError, RecipeFileError, load_recipe
from .scaler import scale_ingredients, scale_macros
from .units import can_convert_ingredient, normalize_unit

__all__ = [
    "IngredientCategory",
    "SpoonUnit",
    "ConversionResult",
    "detect_category",
    "parse_quantity",
    "normalize_unit",
    "convert_to_spoons",
    "convert_ingredient",
    "convert_ingredient_to_string",
    "can_convert_ingredient",
    "Ingredient",
    "Recipe",
    "RecipeError",
    "RecipeFileError",
    "load_recipe",
    "scale_ingredients",
    "scale_macros",
    "build_converted_lines",
    "export_ingredients",
]
