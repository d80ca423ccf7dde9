"""Configuration for Spoonify."""

import os

from dotenv import load_dotenv

from .converter import DEFAULT_LANGUAGE, SPOON_LABELS

# Load environment variables from .env file
load_dotenv()

APP_NAME = "spoonify"

SUPPORTED_LANGUAGES = tuple(SPOON_LABELS)
LANGUAGE_ENV_VAR = "SPOONIFY_LANGUAGE"


def get_language() -> str:
    """Get the preferred label language from the environment, or the default."""
    language = (os.getenv(LANGUAGE_ENV_VAR) or "").strip().lower()

    if language in SUPPORTED_LANGUAGES:
        return language

    return DEFAULT_LANGUAGE
