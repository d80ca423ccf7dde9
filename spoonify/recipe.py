"""Recipe records as stored by the app, and loading them from JSON files."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .converter import (
    DEFAULT_LANGUAGE,
    ConversionResult,
    convert_ingredient,
    format_conversion_result,
)
from .quantity import format_quantity

logger = logging.getLogger(__name__)


class RecipeError(Exception):
    """Base exception for recipe handling errors."""


class RecipeFileError(RecipeError):
    """Raised when a recipe file cannot be read or is malformed."""


def _as_text(value: Any) -> str | None:
    """Quantities and units are stored as text; JSON numbers are accepted too."""
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_quantity(value)
    return str(value)


@dataclass
class Ingredient:
    """An ingredient line of a recipe."""

    name: str
    quantity: str | None = None  # Free-form: "250", "1/2", "2,5"
    unit: str | None = None
    food_item_id: str | None = None

    @property
    def original(self) -> str:
        """Quantity, unit and name as written in the recipe."""
        return " ".join(part for part in (self.quantity, self.unit, self.name) if part)

    def convert(self, language: str = DEFAULT_LANGUAGE) -> ConversionResult:
        return convert_ingredient(self.name, self.quantity, self.unit, language)

    def display(self, language: str = DEFAULT_LANGUAGE) -> str:
        """Spoon-friendly display string, e.g. "2 c. à soupe (approx.)"."""
        return format_conversion_result(self.convert(language))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "food_item_id": self.food_item_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ingredient":
        return cls(
            name=data["name"],
            quantity=_as_text(data.get("quantity")),
            unit=_as_text(data.get("unit")),
            food_item_id=data.get("food_item_id"),
        )


@dataclass
class Recipe:
    """A recipe with its ingredients and per-recipe nutrition."""

    title: str
    ingredients: list[Ingredient] = field(default_factory=list)
    servings: int | None = None
    source_url: str | None = None
    calories: float | None = None
    proteins: float | None = None
    carbs: float | None = None
    fats: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert recipe to dictionary for serialization."""
        return {
            "title": self.title,
            "servings": self.servings,
            "source_url": self.source_url,
            "calories": self.calories,
            "proteins": self.proteins,
            "carbs": self.carbs,
            "fats": self.fats,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recipe":
        """
        Create recipe from dictionary.

        Nutrition may be given as top-level fields or as a nested
        "nutrition" object; top-level fields take precedence.
        """
        nutrition = data.get("nutrition") or {}
        ingredients = [Ingredient.from_dict(ing) for ing in data.get("ingredients", [])]
        return cls(
            title=data["title"],
            ingredients=ingredients,
            servings=data.get("servings"),
            source_url=data.get("source_url"),
            calories=data.get("calories", nutrition.get("calories")),
            proteins=data.get("proteins", nutrition.get("proteins")),
            carbs=data.get("carbs", nutrition.get("carbs")),
            fats=data.get("fats", nutrition.get("fats")),
        )


def load_recipe(filepath: str | Path) -> Recipe:
    """
    Load a recipe from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        The parsed Recipe

    Raises:
        RecipeFileError: If the file is missing, not valid JSON, or not a recipe
    """
    path = Path(filepath)
    logger.debug("Loading recipe from %s", path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise RecipeFileError(f"Recipe file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise RecipeFileError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise RecipeFileError(f"Could not read {path}: {e}") from e

    if not isinstance(data, dict) or not data.get("title"):
        raise RecipeFileError(f"{path} is not a recipe: missing 'title'")
    if not isinstance(data.get("ingredients", []), list):
        raise RecipeFileError(f"{path} is not a recipe: 'ingredients' must be a list")
    servings = data.get("servings")
    if servings is not None and (isinstance(servings, bool) or not isinstance(servings, int)):
        raise RecipeFileError(f"{path} is not a recipe: 'servings' must be an integer")

    try:
        recipe = Recipe.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise RecipeFileError(f"Malformed ingredient in {path}: {e}") from e

    logger.debug("Loaded %r with %d ingredients", recipe.title, len(recipe.ingredients))
    return recipe
