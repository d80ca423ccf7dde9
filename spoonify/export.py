"""Converted ingredient list export in various formats."""

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from .converter import DEFAULT_LANGUAGE, ConversionResult, format_conversion_result
from .recipe import Ingredient
from .scaler import format_portions


@dataclass
class ConvertedLine:
    """An ingredient next to its spoon conversion."""

    name: str
    original: str
    display: str
    result: ConversionResult

    @property
    def converted(self) -> bool:
        return self.result.is_converted


def build_converted_lines(
    ingredients: list[Ingredient], language: str = DEFAULT_LANGUAGE
) -> list[ConvertedLine]:
    """Convert each ingredient and pair it with its display string."""
    lines = []
    for ing in ingredients:
        result = ing.convert(language)
        lines.append(
            ConvertedLine(
                name=ing.name,
                original=ing.original,
                display=format_conversion_result(result),
                result=result,
            )
        )
    return lines


def export_to_json(
    lines: list[ConvertedLine],
    filepath: str | Path,
    *,
    recipe_title: str | None = None,
    portions: int | None = None,
) -> None:
    """
    Export converted ingredients to JSON format.

    Args:
        lines: Converted ingredient lines
        filepath: Output file path
        recipe_title: Optional recipe title
        portions: Optional portion count the quantities were scaled to
    """
    converted = sum(1 for line in lines if line.converted)
    data: dict[str, Any] = {
        "exported_at": datetime.now().isoformat(),
        "recipe_title": recipe_title,
        "portions": portions,
        "items": [
            {
                "ingredient": line.name,
                "original": line.original,
                "display": line.display,
                "conversion": line.result.to_dict(),
            }
            for line in lines
        ],
        "summary": {
            "total_items": len(lines),
            "converted": converted,
            "unconverted": len(lines) - converted,
        },
    }

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def export_to_markdown(
    lines: list[ConvertedLine],
    filepath: str | Path,
    *,
    recipe_title: str | None = None,
    portions: int | None = None,
) -> None:
    """
    Export converted ingredients to Markdown format.

    Args:
        lines: Converted ingredient lines
        filepath: Output file path
        recipe_title: Optional recipe title
        portions: Optional portion count the quantities were scaled to
    """
    out: list[str] = []

    title = recipe_title or "Ingredients"
    out.append(f"# {title}")
    out.append("")
    out.append(f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}*")
    out.append("")
    if portions:
        out.append(f"**For {format_portions(portions)}**")
        out.append("")

    out.append("## Ingredients")
    out.append("")
    for line in lines:
        if line.converted:
            out.append(f"- **{line.name}**: {line.display} *(was {line.original})*")
        elif line.display:
            out.append(f"- **{line.name}**: {line.display}")
        else:
            out.append(f"- **{line.name}**")
    out.append("")

    converted = sum(1 for line in lines if line.converted)
    if converted:
        out.append(f"*{converted} of {len(lines)} quantities converted to spoons.*")
        out.append("")

    with open(filepath, "w", encoding="utf-8") as f:
        f.write("\n".join(out))


def export_ingredients(
    lines: list[ConvertedLine],
    filepath: str | Path,
    *,
    recipe_title: str | None = None,
    portions: int | None = None,
    format: str | None = None,
) -> str:
    """
    Export converted ingredients to file.

    Format is auto-detected from file extension if not specified.

    Args:
        lines: Converted ingredient lines
        filepath: Output file path
        recipe_title: Optional recipe title
        portions: Optional portion count the quantities were scaled to
        format: Output format (json, md) - auto-detected if None

    Returns:
        The format used for export
    """
    path = Path(filepath)

    if format is None:
        format_map = {
            ".json": "json",
            ".md": "md",
            ".markdown": "md",
        }
        format = format_map.get(path.suffix.lower(), "md")

    if format == "json":
        export_to_json(lines, filepath, recipe_title=recipe_title, portions=portions)
    elif format in ("md", "markdown"):
        export_to_markdown(lines, filepath, recipe_title=recipe_title, portions=portions)
    else:
        raise ValueError(f"Unsupported format: {format}")

    return format
