# -*- coding: utf-8 -*-
"""
I18nForge Test Fixtures

Shared fixtures and fakes for all tests.
"""

import pytest
import sys
from pathlib import Path
from typing import List

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# FAKES
# =============================================================================

class FakeNotifier:
    """Collects notifications instead of showing them."""

    def __init__(self):
        self.infos: List[str] = []
        self.warnings: List[str] = []
        self.errors: List[str] = []

    def info(self, message):
        self.infos.append(message)

    def warning(self, message):
        self.warnings.append(message)

    def error(self, message):
        self.errors.append(message)


class FakePrompter:
    """Returns scripted answers; None means the prompt was dismissed."""

    def __init__(self, namespace="", languages=None, confirm="y"):
        self.namespace = namespace
        self.languages = languages
        self.confirm_answer = confirm
        self.namespace_prompts: List[str] = []

    def ask_namespace(self, current):
        self.namespace_prompts.append(current)
        return self.namespace

    def choose_languages(self, enabled, source_language):
        return self.languages

    def confirm(self, message, options):
        return self.confirm_answer


class FakeTranslator:
    """Prefixes every text with the target language."""

    def __init__(self, fail_for=(), results=None):
        self.fail_for = set(fail_for)
        self.results = results
        self.calls = []

    def translate(self, texts, target_language, service_name, api_key):
        from i18nforge_exceptions import TranslationError

        self.calls.append((list(texts), target_language, service_name, api_key))
        if target_language in self.fail_for:
            raise TranslationError("service unavailable", service=service_name, target_lang=target_language)
        if self.results is not None:
            return list(self.results)
        return [f"{target_language}:{t}" for t in texts]


class ManualTimer:
    """threading.Timer stand-in that only fires when told to."""

    created: List['ManualTimer'] = []

    def __init__(self, interval, function, args=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.started = False
        self.cancelled = False
        ManualTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function(*self.args)


# =============================================================================
# SAMPLE DOCUMENTS
# =============================================================================

@pytest.fixture
def vue_document() -> str:
    """Sample single-file component with Korean text."""
    return (
        '<template>\n'
        '  <div title="안녕">반가워요 {{ name }}</div>\n'
        "  <p>{{ t('common.hello') }}</p>\n"
        '</template>\n'
        '<script>\n'
        "const msg = '고마워';\n"
        '</script>\n'
    )


@pytest.fixture
def tsx_document() -> str:
    return '<p>안녕 ${name}</p>'


# =============================================================================
# SERVICE FIXTURES
# =============================================================================

@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def session():
    """Fresh SessionContext with no namespace."""
    from models.session import SessionContext
    return SessionContext()


@pytest.fixture
def key_generator(notifier):
    from core.key_generator import KeyGenerator
    return KeyGenerator(notifier=notifier)


@pytest.fixture
def planner(session, key_generator):
    from core.conversion_planner import ConversionPlanner
    return ConversionPlanner(session, key_generator)


@pytest.fixture
def engine(session, key_generator, tmp_path):
    """LocaleMergeEngine writing under tmp_path with default settings."""
    from core.locale_merge import LocaleMergeEngine
    return LocaleMergeEngine(session, key_generator, None, str(tmp_path))


@pytest.fixture
def settings_model(tmp_path, monkeypatch):
    """Fresh SettingsModel backed by a temp settings file."""
    import i18nforge_config as config
    from models.settings_model import SettingsModel

    monkeypatch.setattr(config, "SETTINGS_FILE_PATH", tmp_path / "settings" / "settings.json")
    SettingsModel.reset_instance()
    yield SettingsModel.instance()
    SettingsModel.reset_instance()


@pytest.fixture
def manual_timer():
    ManualTimer.created = []
    return ManualTimer


@pytest.fixture
def monitor(session, manual_timer):
    from core.hangul_extractor import HangulExtractor
    from core.text_monitor import TextMonitor
    return TextMonitor(HangulExtractor(), session, timer_factory=manual_timer)
