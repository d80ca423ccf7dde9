"""Ingredient category detection from display names (French and English)."""

import logging
import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

logger = logging.getLogger(__name__)


class IngredientCategory(str, Enum):
    """Physical category of an ingredient, used to pick a spoon density."""

    LIQUID = "liquid"
    FINE_SOLID = "fine_solid"
    DENSE = "dense"
    PASTY = "pasty"


# Most conversion-eligible ingredients (sugar, salt, rice, grains) are dense
DEFAULT_CATEGORY = IngredientCategory.DENSE


def _words(*words: str) -> re.Pattern[str]:
    """Compile a word-bounded, case-insensitive alternation of keywords."""
    alternation = "|".join(word.replace(" ", r"\s+") for word in words)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


# Checked in declaration order; first category with a matching pattern wins.
# "crème fraîche" and "cream cheese" are pasty, so the bare liquid keywords
# must not claim them first.
CATEGORY_PATTERNS: Mapping[IngredientCategory, tuple[re.Pattern[str], ...]] = MappingProxyType(
    {
        IngredientCategory.LIQUID: (
            _words(
                "eau",
                "lait",
                r"crème(?!\s+fraîche)",
                "huile",
                "bouillon",
                "jus",
                "vin",
                "vinaigre",
                "sauce soja",
                "liquide",
            ),
            _words(
                "water",
                "milk",
                r"cream(?!\s+cheese)",
                "oil",
                "broth",
                "juice",
                "wine",
                "vinegar",
                "liquid",
            ),
        ),
        IngredientCategory.FINE_SOLID: (
            _words(
                "farine", "sucre glace", "cacao", "maïzena", "levure", "bicarbonate", "poudre"
            ),
            _words("flour", "icing sugar", "cocoa", "cornstarch", "baking powder", "powder"),
        ),
        IngredientCategory.DENSE: (
            _words(
                "sucre", "sel", "riz", "quinoa", "lentilles", "pois chiches", "semoule", "graines"
            ),
            _words("sugar", "salt", "rice", "quinoa", "lentils", "chickpeas", "semolina", "seeds"),
        ),
        IngredientCategory.PASTY: (
            _words(
                "beurre",
                "miel",
                "yaourt",
                "fromage blanc",
                "pâte",
                "purée",
                "crème fraîche",
                "tahini",
            ),
            _words("butter", "honey", "yogurt", "cream cheese", "paste", "puree", "tahini"),
        ),
    }
)


def detect_category(name: str) -> IngredientCategory:
    """
    Detect the category of an ingredient from its name.

    Examples:
        "lait demi-écrémé" -> LIQUID
        "icing sugar" -> FINE_SOLID
        "beurre doux" -> PASTY
        "mystery spice" -> DENSE (default)

    Returns:
        The first matching category, or DENSE when nothing matches
    """
    lower_name = (name or "").lower()

    for category, patterns in CATEGORY_PATTERNS.items():
        for pattern in patterns:
            if pattern.search(lower_name):
                return category

    logger.debug("No category pattern matched %r, defaulting to %s", name, DEFAULT_CATEGORY.value)
    return DEFAULT_CATEGORY
