from pathlib import Path

VERSION = "0.4.0"

# Settings / preference store
SETTINGS_DIR = Path.home() / ".stringedit"
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

DEFAULT_UI_LANGUAGE = "en"
SUPPORTED_UI_LANGUAGES = ("en", "tr")

# Partitions
SUPPORTED_PLATFORMS = ("ios", "android")
DEFAULT_PLATFORM = "ios"
DEFAULT_LANGUAGE = None

# Keys that exist in every strings file and are owned by the release tooling
IMMUTABLE_KEYS = frozenset({"content_version"})

DEFAULT_COMMIT_MESSAGE = "Update strings"

__all__ = [
    "VERSION", "SETTINGS_DIR", "SETTINGS_FILE_PATH",
    "DEFAULT_UI_LANGUAGE", "SUPPORTED_UI_LANGUAGES",
    "SUPPORTED_PLATFORMS", "DEFAULT_PLATFORM", "DEFAULT_LANGUAGE",
    "IMMUTABLE_KEYS", "DEFAULT_COMMIT_MESSAGE",
]

# Import logger at the end to avoid circular imports
from stringedit_logger import get_logger
_logger = get_logger("config")
_logger.debug("stringedit_config.py loaded")
