import re
from pathlib import Path

VERSION = "0.4.0"

SETTINGS_DIR = Path.home() / ".i18nforge"
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

# Locale store naming
DEFAULT_FILENAME_PATTERN = "locales.{language}.json"
DEFAULT_LOCALES_OUTPUT_PATH = ""  # empty -> project root
LOCALE_JSON_INDENT = 2

# Languages
DEFAULT_SOURCE_LANG = "ko"
DEFAULT_ENABLED_LANGUAGES = ["ko", "en", "ja"]
SUPPORTED_LANGUAGES = {
    "ko": "Korean",
    "en": "English",
    "zh": "Chinese",
    "ja": "Japanese",
}
SHEET_LANGUAGE_ORDER = ["ko", "en", "zh", "ja"]

# Translation
DEFAULT_TRANSLATION_SERVICE = "deepl"
SUPPORTED_TRANSLATION_SERVICES = ("deepl", "google")

# Key generation
DEFAULT_KEY_TRANSFORM = "default"
TRANSLATION_FUNCTION_NAME = "t"

# Monitoring
DEFAULT_DEBOUNCE_MS = 500

# File extension -> syntax family value
FILE_TYPE_MAP = {
    ".vue": "brace",
    ".tsx": "expression",
    ".jsx": "expression",
    ".ts": "plain",
    ".js": "plain",
}

HANGUL_REGEX = re.compile(r'[가-힣]')

__all__ = [
    "VERSION", "SETTINGS_DIR", "SETTINGS_FILE_PATH",
    "DEFAULT_FILENAME_PATTERN", "DEFAULT_LOCALES_OUTPUT_PATH", "LOCALE_JSON_INDENT",
    "DEFAULT_SOURCE_LANG", "DEFAULT_ENABLED_LANGUAGES", "SUPPORTED_LANGUAGES",
    "SHEET_LANGUAGE_ORDER", "DEFAULT_TRANSLATION_SERVICE", "SUPPORTED_TRANSLATION_SERVICES",
    "DEFAULT_KEY_TRANSFORM", "TRANSLATION_FUNCTION_NAME", "DEFAULT_DEBOUNCE_MS",
    "FILE_TYPE_MAP", "HANGUL_REGEX", "Path",
]

# Import logger at the end to avoid circular imports
from i18nforge_logger import get_logger
_logger = get_logger("config")
_logger.debug("i18nforge_config.py loaded")
