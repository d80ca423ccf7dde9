"""CLI entry point for Spoonify."""

import logging

import click

from . import __version__
from .categories import detect_category
from .config import SUPPORTED_LANGUAGES, get_language
from .converter import convert_ingredient_to_string
from .export import ConvertedLine, build_converted_lines, export_ingredients
from .logging_config import setup_logging
from .recipe import Recipe, RecipeError, load_recipe
from .scaler import MAX_PORTIONS, MIN_PORTIONS, format_portions, scale_ingredients, scale_macros
from .units import can_convert_ingredient, normalize_unit

language_option = click.option(
    "--language",
    "-l",
    type=click.Choice(SUPPORTED_LANGUAGES, case_sensitive=False),
    default=None,
    help="Spoon label language (defaults to SPOONIFY_LANGUAGE or fr)",
)


def display_recipe(recipe: Recipe, lines: list[ConvertedLine], portions: int | None) -> None:
    """Display a recipe's converted ingredients and macros."""
    click.echo()
    click.echo("=" * 60)
    click.echo(f"RECIPE: {recipe.title}")
    click.echo("=" * 60)

    if recipe.source_url:
        click.echo(f"Source: {recipe.source_url}")
    if recipe.servings and portions:
        click.echo(f"Servings: {recipe.servings} → {format_portions(portions)}")
    elif recipe.servings:
        click.echo(f"Servings: {recipe.servings}")

    click.echo("\nIngredients:")
    for i, line in enumerate(lines, 1):
        if line.converted:
            click.echo(f"  {i}. {line.name}: {line.display}  [{line.original}]")
        elif line.display:
            click.echo(f"  {i}. {line.name}: {line.display}")
        else:
            click.echo(f"  {i}. {line.name}")

    macros = scale_macros(recipe, portions) if portions else None
    if macros:
        click.echo("\nMacros:")
        click.echo(f"  Proteins: {macros.proteins:.0f} g ({macros.protein_percent:.0f}%)")
        click.echo(f"  Carbs:    {macros.carbs:.0f} g ({macros.carb_percent:.0f}%)")
        click.echo(f"  Fats:     {macros.fats:.0f} g ({macros.fat_percent:.0f}%)")
        click.echo(f"  Calories: {macros.calories:.0f} kcal")

    converted = sum(1 for line in lines if line.converted)
    click.echo()
    click.echo("-" * 60)
    click.echo(f"Converted to spoons: {converted}/{len(lines)}")
    click.echo("-" * 60)


# ============================================================================
# Main CLI Group
# ============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="spoonify")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Spoonify - cook without a kitchen scale.

    Convert grams and milliliters from recipes into tablespoons and
    teaspoons, scaled to the number of portions you cook.
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


# ============================================================================
# Conversion Commands
# ============================================================================


@cli.command()
@click.argument("name")
@click.argument("quantity")
@click.argument("unit")
@language_option
def convert(name: str, quantity: str, unit: str, language: str | None):
    """Convert one ingredient quantity to spoons.

    Examples:

    \b
        spoonify convert "sucre" 50 g
        spoonify convert milk 30 ml --language en
        spoonify convert farine 1/2 kg
    """
    click.echo(convert_ingredient_to_string(name, quantity, unit, language or get_language()))


@cli.command()
@click.argument("name")
def category(name: str):
    """Show the category an ingredient is classified as."""
    click.echo(detect_category(name).value)


@cli.command()
@click.argument("unit")
def check(unit: str):
    """Check whether a unit can be converted to spoons."""
    normalized = normalize_unit(unit)
    if can_convert_ingredient(unit):
        click.echo(f"✓ {unit} ({normalized}) is convertible")
    else:
        click.echo(f"✗ {unit} ({normalized}) is not convertible")


@cli.command("recipe")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--portions",
    "-p",
    type=click.IntRange(MIN_PORTIONS, MAX_PORTIONS),
    help="Scale to a number of portions",
)
@language_option
@click.option("--export", "-e", "export_path", type=click.Path(), help="Export list (.json/.md)")
def recipe_cmd(
    file_path: str, portions: int | None, language: str | None, export_path: str | None
):
    """Convert every ingredient of a recipe JSON file.

    Examples:

    \b
        spoonify recipe crepes.json
        spoonify recipe crepes.json --portions 6 --language en
        spoonify recipe crepes.json -e crepes.md
    """
    language = language or get_language()

    try:
        recipe = load_recipe(file_path)
        servings = recipe.servings
        if portions is not None and not servings:
            click.echo("⚠️  Recipe has no serving count, quantities are not scaled", err=True)
            portions = None
        if portions is None and servings and MIN_PORTIONS <= servings <= MAX_PORTIONS:
            portions = servings
        ingredients = scale_ingredients(recipe, portions) if portions else recipe.ingredients
        lines = build_converted_lines(ingredients, language)
    except (RecipeError, ValueError) as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1) from None

    display_recipe(recipe, lines, portions)

    if export_path:
        try:
            fmt = export_ingredients(
                lines, export_path, recipe_title=recipe.title, portions=portions
            )
        except (OSError, ValueError) as e:
            click.echo(f"✗ Export failed: {e}", err=True)
            raise SystemExit(1) from None
        click.echo(f"✓ Exported {len(lines)} ingredients to {export_path} ({fmt})")


# ============================================================================
# Entry Point
# ============================================================================


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
