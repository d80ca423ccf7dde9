"""Shared fixtures for spoonify tests."""

import json

import pytest

from spoonify.recipe import Ingredient, Recipe


@pytest.fixture
def crepes_data():
    """Recipe data as stored by the app."""
    return {
        "title": "Crêpes",
        "servings": 4,
        "source_url": "https://www.tiktok.com/@chef/video/123",
        "proteins": 40,
        "carbs": 120,
        "fats": 30,
        "calories": 910,
        "ingredients": [
            {"name": "farine", "quantity": "250", "unit": "g"},
            {"name": "lait", "quantity": "500", "unit": "ml"},
            {"name": "oeufs", "quantity": "4", "unit": "pièces"},
            {"name": "sel", "quantity": None, "unit": "pincée"},
            {"name": "beurre fondu", "quantity": "50", "unit": "g"},
        ],
    }


@pytest.fixture
def crepes(crepes_data):
    """Parsed crêpes recipe."""
    return Recipe.from_dict(crepes_data)


@pytest.fixture
def crepes_file(tmp_path, crepes_data):
    """Crêpes recipe written to a JSON file."""
    path = tmp_path / "crepes.json"
    path.write_text(json.dumps(crepes_data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def simple_ingredients():
    """A few ingredients covering converted and unconverted cases."""
    return [
        Ingredient(name="milk", quantity="30", unit="ml"),
        Ingredient(name="carrot", quantity="2", unit="pieces"),
        Ingredient(name="salt", quantity=None, unit="pinch"),
    ]
