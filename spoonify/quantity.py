"""Free-form quantity string parsing."""

import math
import re

# Unicode vulgar fractions found in recipe text
FRACTIONS: dict[str, float] = {
    "½": 0.5,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 0.25,
    "¾": 0.75,
    "⅕": 0.2,
    "⅖": 0.4,
    "⅗": 0.6,
    "⅘": 0.8,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
}

FRACTION_PATTERN = re.compile(r"^(\d+)/(\d+)$")
UNICODE_FRACTION_PATTERN = re.compile(rf"^(\d*)\s*([{''.join(FRACTIONS)}])$")
# Leading number, the way a browser's parseFloat reads "250g" or "1.5 kg"
LEADING_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_quantity(raw: str | None) -> float | None:
    """
    Parse a quantity string into a number.

    Handles "250", "1/2", "1.5", "2,5", "½", "1½" and leading numbers
    followed by text ("250g" -> 250).

    Returns:
        The parsed value, or None if the string holds no usable number
    """
    if not raw or not raw.strip():
        return None

    # Only the first comma is a decimal separator
    cleaned = raw.replace(",", ".", 1).strip()

    fraction_match = FRACTION_PATTERN.match(cleaned)
    if fraction_match:
        numerator = float(fraction_match.group(1))
        denominator = float(fraction_match.group(2))
        if denominator == 0:
            return None
        return numerator / denominator

    unicode_match = UNICODE_FRACTION_PATTERN.match(cleaned)
    if unicode_match:
        whole = float(unicode_match.group(1)) if unicode_match.group(1) else 0.0
        return whole + FRACTIONS[unicode_match.group(2)]

    number_match = LEADING_NUMBER_PATTERN.match(cleaned)
    if number_match is None:
        return None

    return float(number_match.group(0))


def format_quantity(value: float) -> str:
    """Format a number without a trailing ".0" and with at most two decimals."""
    if not math.isfinite(value):
        return str(value)
    if value == int(value):
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")
