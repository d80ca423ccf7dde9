"""Tests for spoon conversion and the top-level conversion API."""

import math

import pytest

from spoonify.categories import IngredientCategory
from spoonify.converter import (
    DENSITIES,
    ConversionResult,
    SpoonMeasure,
    SpoonUnit,
    convert_ingredient,
    convert_ingredient_to_string,
    convert_to_spoons,
    format_conversion_result,
    get_spoon_label,
)


class TestDensities:
    """Tests for the density table."""

    def test_one_density_per_category(self):
        assert set(DENSITIES) == set(IngredientCategory)

    def test_values(self):
        assert DENSITIES[IngredientCategory.LIQUID] == 15
        assert DENSITIES[IngredientCategory.FINE_SOLID] == 10
        assert DENSITIES[IngredientCategory.DENSE] == 14
        assert DENSITIES[IngredientCategory.PASTY] == 20


class TestConvertToSpoons:
    """Tests for convert_to_spoons function."""

    def test_tablespoons(self):
        result = convert_to_spoons(30, "ml", IngredientCategory.LIQUID)
        assert result == SpoonMeasure(value=2, unit=SpoonUnit.TABLESPOON)

    def test_teaspoons_below_one_tablespoon(self):
        # 5 / 14 = 0.357 tbsp -> 1.07 tsp
        result = convert_to_spoons(5, "g", IngredientCategory.DENSE)
        assert result == SpoonMeasure(value=1, unit=SpoonUnit.TEASPOON)

    def test_exactly_one_tablespoon(self):
        result = convert_to_spoons(10, "g", IngredientCategory.FINE_SOLID)
        assert result == SpoonMeasure(value=1, unit=SpoonUnit.TABLESPOON)

    def test_rounds_half_up(self):
        # 25 / 10 = 2.5 tbsp
        result = convert_to_spoons(25, "g", IngredientCategory.FINE_SOLID)
        assert result == SpoonMeasure(value=3, unit=SpoonUnit.TABLESPOON)

    def test_rounds_down(self):
        # 45 / 20 = 2.25 tbsp
        result = convert_to_spoons(45, "g", IngredientCategory.PASTY)
        assert result == SpoonMeasure(value=2, unit=SpoonUnit.TABLESPOON)

    def test_tiny_amount_rounds_to_zero_teaspoons(self):
        # 1 / 14 * 3 = 0.21 tsp
        result = convert_to_spoons(1, "g", IngredientCategory.DENSE)
        assert result == SpoonMeasure(value=0, unit=SpoonUnit.TEASPOON)

    def test_kilograms_are_scaled(self):
        result = convert_to_spoons(1, "kg", IngredientCategory.FINE_SOLID)
        assert result == SpoonMeasure(value=100, unit=SpoonUnit.TABLESPOON)

    def test_liters_are_scaled(self):
        result = convert_to_spoons(0.3, "l", IngredientCategory.LIQUID)
        assert result == SpoonMeasure(value=20, unit=SpoonUnit.TABLESPOON)

    def test_unit_spelling_variants(self):
        result = convert_to_spoons(30, "Millilitres", IngredientCategory.LIQUID)
        assert result == SpoonMeasure(value=2, unit=SpoonUnit.TABLESPOON)

    @pytest.mark.parametrize("unit", ["pieces", "pincée", "cup", "tbsp"])
    def test_non_convertible_units(self, unit):
        assert convert_to_spoons(2, unit, IngredientCategory.DENSE) is None

    @pytest.mark.parametrize("value", [-5, math.inf, math.nan])
    def test_invalid_values(self, value):
        assert convert_to_spoons(value, "g", IngredientCategory.DENSE) is None

    def test_zero(self):
        result = convert_to_spoons(0, "g", IngredientCategory.DENSE)
        assert result == SpoonMeasure(value=0, unit=SpoonUnit.TEASPOON)


class TestConvertIngredient:
    """Tests for convert_ingredient function."""

    def test_liquid_conversion(self):
        result = convert_ingredient("milk", "30", "ml")
        assert result == ConversionResult(
            value=2, unit="c. à soupe", is_converted=True, is_approximate=True
        )

    def test_teaspoon_fallback(self):
        result = convert_ingredient("salt", "5", "g")
        assert result == ConversionResult(
            value=1, unit="c. à café", is_converted=True, is_approximate=True
        )

    def test_english_labels(self):
        result = convert_ingredient("milk", "30", "ml", language="en")
        assert result.unit == "tbsp"
        result = convert_ingredient("salt", "5", "g", language="en")
        assert result.unit == "tsp"

    def test_numeric_quantity(self):
        result = convert_ingredient("farine", 100, "g")
        assert result.value == 10
        assert result.is_converted is True

    def test_fraction_quantity(self):
        result = convert_ingredient("farine", "1/2", "kg")
        assert result.value == 50
        assert result.unit == "c. à soupe"

    def test_non_convertible_unit_passes_through(self):
        result = convert_ingredient("carrot", "2", "pieces")
        assert result == ConversionResult(
            value=2, unit="pieces", is_converted=False, is_approximate=False
        )

    def test_keeps_raw_unit_spelling(self):
        result = convert_ingredient("oeufs", "3", " Pièces ")
        assert result.unit == " Pièces "

    def test_missing_quantity(self):
        result = convert_ingredient("sugar", None, "g")
        assert result == ConversionResult(
            value=0, unit="g", is_converted=False, is_approximate=False
        )

    @pytest.mark.parametrize("quantity", ["", 0, math.nan])
    def test_falsy_quantity(self, quantity):
        result = convert_ingredient("sugar", quantity, "g")
        assert result == ConversionResult(
            value=0, unit="g", is_converted=False, is_approximate=False
        )

    @pytest.mark.parametrize("unit", [None, ""])
    def test_missing_unit(self, unit):
        result = convert_ingredient("salt", "5", unit)
        assert result == ConversionResult(
            value=0, unit="", is_converted=False, is_approximate=False
        )

    def test_unparseable_quantity(self):
        result = convert_ingredient("sel", "une pincée", "g")
        assert result == ConversionResult(
            value=0, unit="g", is_converted=False, is_approximate=False
        )

    def test_string_zero_is_a_quantity(self):
        result = convert_ingredient("sucre", "0", "g")
        assert result.is_converted is True
        assert result.value == 0

    def test_negative_quantity_not_converted(self):
        result = convert_ingredient("sucre", "-10", "g")
        assert result == ConversionResult(
            value=-10, unit="g", is_converted=False, is_approximate=False
        )

    def test_converted_value_is_non_negative_int(self):
        result = convert_ingredient("beurre", "125", "g")
        assert result.is_converted
        assert isinstance(result.value, int)
        assert result.value >= 0

    def test_unknown_ingredient_uses_dense(self):
        # 28 / 14 = 2
        result = convert_ingredient("mystery", "28", "g")
        assert result.value == 2

    def test_deterministic(self):
        results = {convert_ingredient("huile", "45", "ml") for _ in range(5)}
        assert len(results) == 1

    def test_unsupported_language(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            convert_ingredient("milk", "30", "ml", language="de")


class TestConversionResult:
    """Tests for ConversionResult."""

    def test_to_dict(self):
        result = ConversionResult(value=2, unit="tbsp", is_converted=True, is_approximate=True)
        assert result.to_dict() == {
            "value": 2,
            "unit": "tbsp",
            "isConverted": True,
            "isApproximate": True,
        }

    def test_frozen(self):
        result = ConversionResult(value=2, unit="tbsp", is_converted=True, is_approximate=True)
        with pytest.raises(AttributeError):
            result.value = 3  # type: ignore[misc]


class TestFormatConversionResult:
    """Tests for format_conversion_result function."""

    def test_approximate_suffix(self):
        result = ConversionResult(
            value=2, unit="c. à soupe", is_converted=True, is_approximate=True
        )
        assert format_conversion_result(result) == "2 c. à soupe (approx.)"

    def test_unconverted_with_value(self):
        result = ConversionResult(value=3, unit="pieces", is_converted=False, is_approximate=False)
        assert format_conversion_result(result) == "3 pieces"

    def test_unconverted_decimal_value(self):
        result = ConversionResult(value=1.5, unit="cups", is_converted=False, is_approximate=False)
        assert format_conversion_result(result) == "1.5 cups"

    def test_unconverted_without_value(self):
        result = ConversionResult(value=0, unit="pinch", is_converted=False, is_approximate=False)
        assert format_conversion_result(result) == "pinch"

    def test_unconverted_without_anything(self):
        result = ConversionResult(value=0, unit="", is_converted=False, is_approximate=False)
        assert format_conversion_result(result) == ""


class TestConvertIngredientToString:
    """Tests for convert_ingredient_to_string function."""

    def test_converted(self):
        assert convert_ingredient_to_string("milk", "30", "ml") == "2 c. à soupe (approx.)"

    def test_converted_english(self):
        assert convert_ingredient_to_string("salt", "5", "g", "en") == "1 tsp (approx.)"

    def test_not_convertible(self):
        assert convert_ingredient_to_string("carrot", "2", "pieces") == "2 pieces"

    def test_no_quantity(self):
        assert convert_ingredient_to_string("sel", None, "pincée") == "pincée"


class TestGetSpoonLabel:
    """Tests for get_spoon_label function."""

    def test_french(self):
        assert get_spoon_label(SpoonUnit.TABLESPOON) == "c. à soupe"
        assert get_spoon_label(SpoonUnit.TEASPOON, "fr") == "c. à café"

    def test_english(self):
        assert get_spoon_label(SpoonUnit.TABLESPOON, "en") == "tbsp"

    def test_unsupported(self):
        with pytest.raises(ValueError):
            get_spoon_label(SpoonUnit.TABLESPOON, "es")
