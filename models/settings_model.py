# -*- coding: utf-8 -*-
"""
I18nForge Settings Model

Abstracts application settings with:
- Type-safe access to settings
- Change notifications (observer callbacks)
- Validation and defaults
"""

from typing import Optional, Dict, Any, List, Callable
import json

from i18nforge_logger import get_logger
from i18nforge_exceptions import SettingsSaveError
import i18nforge_config as config

logger = get_logger("models.settings")


class SettingsModel:
    """
    Singleton model for application settings.

    Provides:
    - Type-safe property access
    - Change notifications (Observer pattern)
    - Persistence to settings.json
    - Validation
    """

    _instance: Optional['SettingsModel'] = None
    _initialized: bool = False

    # Setting keys
    KEY_KEY_TRANSFORM = "key_transform"
    KEY_KEY_RULES = "key_rules"  # List[{"pattern": str, "replace": str}]
    KEY_OUTPUT_PATH = "locales_output_path"
    KEY_FILENAME_PATTERN = "filename_pattern"
    KEY_ENABLED_LANGUAGES = "enabled_languages"
    KEY_SOURCE_LANG = "source_language"
    KEY_TRANSLATION_SERVICE = "translation_service"
    KEY_DEEPL_API_KEY = "deepl_api_key"
    KEY_DEBOUNCE_MS = "debounce_ms"

    def __new__(cls) -> 'SettingsModel':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if SettingsModel._initialized:
            return

        self._settings: Dict[str, Any] = {}
        self._observers: Dict[str, List[Callable]] = {}
        self._dirty = False

        self._load()

        SettingsModel._initialized = True
        logger.debug("SettingsModel initialized")

    # =============================================================================
    # SINGLETON ACCESS
    # =============================================================================

    @classmethod
    def instance(cls) -> 'SettingsModel':
        """Get the singleton instance."""
        if cls._instance is None:
            cls._instance = SettingsModel()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Reset singleton (for testing)."""
        cls._instance = None
        cls._initialized = False

    # =============================================================================
    # PERSISTENCE
    # =============================================================================

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default settings."""
        return {
            self.KEY_KEY_TRANSFORM: config.DEFAULT_KEY_TRANSFORM,
            self.KEY_KEY_RULES: [],
            self.KEY_OUTPUT_PATH: config.DEFAULT_LOCALES_OUTPUT_PATH,
            self.KEY_FILENAME_PATTERN: config.DEFAULT_FILENAME_PATTERN,
            self.KEY_ENABLED_LANGUAGES: list(config.DEFAULT_ENABLED_LANGUAGES),
            self.KEY_SOURCE_LANG: config.DEFAULT_SOURCE_LANG,
            self.KEY_TRANSLATION_SERVICE: config.DEFAULT_TRANSLATION_SERVICE,
            self.KEY_DEEPL_API_KEY: "",
            self.KEY_DEBOUNCE_MS: config.DEFAULT_DEBOUNCE_MS,
        }

    def _load(self):
        """Load settings from file."""
        self._settings = self._get_defaults()
        settings_file = config.SETTINGS_FILE_PATH

        if not settings_file.is_file():
            logger.info("Settings file not found, using defaults")
            return

        try:
            with settings_file.open('r', encoding='utf-8') as f:
                loaded = json.load(f)

            if isinstance(loaded, dict):
                self._settings.update(loaded)
                self._validate_all()
                logger.debug("Settings loaded successfully")
            else:
                logger.warning("Settings file format invalid, using defaults")

        except json.JSONDecodeError:
            logger.error("Settings file corrupted, using defaults")
        except OSError as e:
            logger.error(f"Error loading settings: {e}")

    def save(self):
        """Save settings to file."""
        settings_file = config.SETTINGS_FILE_PATH

        try:
            settings_file.parent.mkdir(parents=True, exist_ok=True)
            with settings_file.open('w', encoding='utf-8') as f:
                json.dump(self._settings, f, indent=4, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")
            raise SettingsSaveError(f"Failed to save settings: {e}", details=str(settings_file))

        self._dirty = False
        logger.info("Settings saved successfully")

    def _validate_all(self):
        """Replace invalid values with defaults."""
        defaults = self._get_defaults()

        for key in [self.KEY_KEY_TRANSFORM, self.KEY_OUTPUT_PATH, self.KEY_FILENAME_PATTERN,
                    self.KEY_SOURCE_LANG, self.KEY_DEEPL_API_KEY]:
            if not isinstance(self._settings.get(key), str):
                self._settings[key] = defaults[key]

        if self._settings.get(self.KEY_TRANSLATION_SERVICE) not in config.SUPPORTED_TRANSLATION_SERVICES:
            self._settings[self.KEY_TRANSLATION_SERVICE] = defaults[self.KEY_TRANSLATION_SERVICE]

        languages = self._settings.get(self.KEY_ENABLED_LANGUAGES)
        if not isinstance(languages, list) or not all(isinstance(l, str) for l in languages):
            self._settings[self.KEY_ENABLED_LANGUAGES] = defaults[self.KEY_ENABLED_LANGUAGES]

        rules = self._settings.get(self.KEY_KEY_RULES)
        if not isinstance(rules, list) or not all(isinstance(r, dict) for r in rules):
            logger.warning("Invalid key_rules in settings, ignoring them")
            self._settings[self.KEY_KEY_RULES] = defaults[self.KEY_KEY_RULES]

        debounce = self._settings.get(self.KEY_DEBOUNCE_MS)
        if not isinstance(debounce, int) or isinstance(debounce, bool) or debounce < 0:
            self._settings[self.KEY_DEBOUNCE_MS] = defaults[self.KEY_DEBOUNCE_MS]

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
        """Unsubscribe from setting changes."""
        if key in self._observers and callback in self._observers[key]:
            self._observers[key].remove(callback)

    def _notify(self, key: str, value: Any):
        """Notify observers of a setting change."""
        for callback in self._observers.get(key, []):
            try:
                callback(value)
            except Exception as e:
                logger.error(f"Error in settings observer for '{key}': {e}")

    # =============================================================================
    # GENERIC ACCESS
    # =============================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
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

    # =============================================================================
    # TYPED PROPERTIES
    # =============================================================================

    @property
    def key_transform(self) -> str:
        return self._settings.get(self.KEY_KEY_TRANSFORM, config.DEFAULT_KEY_TRANSFORM)

    @key_transform.setter
    def key_transform(self, value: str):
        self.set(self.KEY_KEY_TRANSFORM, value)

    @property
    def key_rules(self) -> List[Dict[str, str]]:
        return list(self._settings.get(self.KEY_KEY_RULES, []))

    @key_rules.setter
    def key_rules(self, value: List[Dict[str, str]]):
        self.set(self.KEY_KEY_RULES, list(value))

    @property
    def locales_output_path(self) -> str:
        return self._settings.get(self.KEY_OUTPUT_PATH, "")

    @locales_output_path.setter
    def locales_output_path(self, value: str):
        self.set(self.KEY_OUTPUT_PATH, value)

    @property
    def filename_pattern(self) -> str:
        return self._settings.get(self.KEY_FILENAME_PATTERN, config.DEFAULT_FILENAME_PATTERN)

    @filename_pattern.setter
    def filename_pattern(self, value: str):
        self.set(self.KEY_FILENAME_PATTERN, value)

    @property
    def enabled_languages(self) -> List[str]:
        return list(self._settings.get(self.KEY_ENABLED_LANGUAGES, config.DEFAULT_ENABLED_LANGUAGES))

    @enabled_languages.setter
    def enabled_languages(self, value: List[str]):
        unknown = [lang for lang in value if lang not in config.SUPPORTED_LANGUAGES]
        if unknown:
            raise ValueError(f"Unsupported languages: {unknown}")
        self.set(self.KEY_ENABLED_LANGUAGES, list(value))

    @property
    def source_language(self) -> str:
        return self._settings.get(self.KEY_SOURCE_LANG, config.DEFAULT_SOURCE_LANG)

    @source_language.setter
    def source_language(self, value: str):
        self.set(self.KEY_SOURCE_LANG, value)

    @property
    def translation_service(self) -> str:
        return self._settings.get(self.KEY_TRANSLATION_SERVICE, config.DEFAULT_TRANSLATION_SERVICE)

    @translation_service.setter
    def translation_service(self, value: str):
        if value not in config.SUPPORTED_TRANSLATION_SERVICES:
            raise ValueError(f"Invalid translation service: {value}")
        self.set(self.KEY_TRANSLATION_SERVICE, value)

    @property
    def deepl_api_key(self) -> str:
        return self._settings.get(self.KEY_DEEPL_API_KEY) or ""

    @deepl_api_key.setter
    def deepl_api_key(self, value: str):
        self.set(self.KEY_DEEPL_API_KEY, value or "")

    @property
    def debounce_ms(self) -> int:
        return self._settings.get(self.KEY_DEBOUNCE_MS, config.DEFAULT_DEBOUNCE_MS)

    @debounce_ms.setter
    def debounce_ms(self, value: int):
        self.set(self.KEY_DEBOUNCE_MS, int(value))

    @property
    def is_dirty(self) -> bool:
        return self._dirty
