# -*- coding: utf-8 -*-
"""
StringEdit Settings Model

User preferences that survive restarts:
- The last selected partition (platform + language)
- UI language

Provides defaults, validation, JSON persistence and per-key change
notifications. Implements the IPreferenceStore protocol.
"""

from typing import Optional, Dict, Any, List, Callable
from pathlib import Path
import json

from stringedit_logger import get_logger
from stringedit_enums import Platform
from models.entry import PartitionTag
import stringedit_config as config

logger = get_logger("models.settings")


class SettingsModel:
    """
    Preference store backed by a JSON file.

    A process-wide instance is available through instance(); tests and
    embedders can construct their own with an explicit file path.
    """

    _instance: Optional['SettingsModel'] = None

    # Setting keys
    KEY_LAST_PLATFORM = "last_platform"
    KEY_LAST_LANGUAGE = "last_language"
    KEY_UI_LANGUAGE = "ui_language"

    def __init__(self, settings_file: Optional[Path] = None):
        self._settings_file = Path(settings_file) if settings_file else config.SETTINGS_FILE_PATH
        self._settings: Dict[str, Any] = {}
        self._observers: Dict[str, List[Callable]] = {}
        self._dirty = False

        self._load()
        logger.debug(f"SettingsModel initialized ({self._settings_file})")

    # =============================================================================
    # SINGLETON ACCESS
    # =============================================================================

    @classmethod
    def instance(cls) -> 'SettingsModel':
        """Get the shared instance backed by the default settings file."""
        if cls._instance is None:
            cls._instance = SettingsModel()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Reset shared instance (for testing)."""
        cls._instance = None

    # =============================================================================
    # PERSISTENCE
    # =============================================================================

    def _get_defaults(self) -> Dict[str, Any]:
        return {
            self.KEY_LAST_PLATFORM: config.DEFAULT_PLATFORM,
            self.KEY_LAST_LANGUAGE: config.DEFAULT_LANGUAGE,
            self.KEY_UI_LANGUAGE: config.DEFAULT_UI_LANGUAGE,
        }

    def _load(self):
        """Load settings from file."""
        self._settings = self._get_defaults()

        if not self._settings_file.is_file():
            logger.info("Settings file not found, using defaults")
            return

        try:
            with self._settings_file.open('r', encoding='utf-8') as f:
                loaded = json.load(f)

            if isinstance(loaded, dict):
                self._settings.update(loaded)
                self._validate_all()
                logger.debug("Settings loaded successfully")
            else:
                logger.warning("Settings file format invalid, using defaults")

        except json.JSONDecodeError:
            logger.error(f"Settings file corrupted ({self._settings_file}), using defaults")
        except OSError as e:
            logger.error(f"Error loading settings: {e}")

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._settings_file.parent.mkdir(parents=True, exist_ok=True)

            with self._settings_file.open('w', encoding='utf-8') as f:
                json.dump(self._settings, f, indent=4, ensure_ascii=False)

            self._dirty = False
            logger.info("Settings saved successfully")
            return True

        except (OSError, TypeError) as e:
            logger.error(f"Failed to save settings: {e}")
            return False

    def _validate_all(self):
        defaults = self._get_defaults()

        if self._settings.get(self.KEY_LAST_PLATFORM) not in config.SUPPORTED_PLATFORMS:
            logger.warning(f"Invalid '{self.KEY_LAST_PLATFORM}' value ({self._settings.get(self.KEY_LAST_PLATFORM)}). Using default.")
            self._settings[self.KEY_LAST_PLATFORM] = defaults[self.KEY_LAST_PLATFORM]
            self._settings[self.KEY_LAST_LANGUAGE] = defaults[self.KEY_LAST_LANGUAGE]

        language = self._settings.get(self.KEY_LAST_LANGUAGE)
        if language is not None and not (isinstance(language, str) and language.strip()):
            self._settings[self.KEY_LAST_LANGUAGE] = defaults[self.KEY_LAST_LANGUAGE]

        if self._settings.get(self.KEY_UI_LANGUAGE) not in config.SUPPORTED_UI_LANGUAGES:
            self._settings[self.KEY_UI_LANGUAGE] = defaults[self.KEY_UI_LANGUAGE]

    # =============================================================================
    # OBSERVER PATTERN
    # =============================================================================

    def subscribe(self, key: str, callback: Callable[[Any], None]):
        """
        Subscribe to changes on a specific setting.

        Args:
            key: Setting key to watch
            callback: Function called with new value when setting changes
        """
        self._observers.setdefault(key, []).append(callback)

    def unsubscribe(self, key: str, callback: Callable):
        if key in self._observers and callback in self._observers[key]:
            self._observers[key].remove(callback)

    def _notify(self, key: str, value: Any):
        for callback in self._observers.get(key, []):
            try:
                callback(value)
            except Exception as e:
                logger.error(f"Error in settings observer for '{key}': {e}")

    # =============================================================================
    # GENERIC ACCESS
    # =============================================================================

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    def set(self, key: str, value: Any, save: bool = False):
        """
        Set a setting value.

        Args:
            key: Setting key
            value: New value
            save: If True, immediately persist to disk
        """
        if self._settings.get(key) != value:
            self._settings[key] = value
            self._dirty = True
            self._notify(key, value)

            if save:
                self.save()

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    # =============================================================================
    # TYPED PROPERTIES
    # =============================================================================

    @property
    def last_partition(self) -> PartitionTag:
        """Partition that was active when the app last switched."""
        return PartitionTag(
            platform=Platform(self._settings.get(self.KEY_LAST_PLATFORM, config.DEFAULT_PLATFORM)),
            language=self._settings.get(self.KEY_LAST_LANGUAGE),
        )

    @last_partition.setter
    def last_partition(self, value: PartitionTag):
        self.set(self.KEY_LAST_PLATFORM, value.platform.value)
        self.set(self.KEY_LAST_LANGUAGE, value.language)

    @property
    def ui_language(self) -> str:
        return self._settings.get(self.KEY_UI_LANGUAGE, config.DEFAULT_UI_LANGUAGE)

    @ui_language.setter
    def ui_language(self, value: str):
        if value not in config.SUPPORTED_UI_LANGUAGES:
            raise ValueError(f"Invalid UI language: {value}")
        self.set(self.KEY_UI_LANGUAGE, value)

    def __repr__(self) -> str:
        return f"SettingsModel({self._settings_file.name}, partition={self.last_partition})"
