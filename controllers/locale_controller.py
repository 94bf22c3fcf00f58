# -*- coding: utf-8 -*-
"""
I18nForge Locale Controller

Handles locale store generation:
- Language selection (one language or all enabled languages)
- Namespace prompt
- API key check for languages that need translation
- Serial multi-language generation with progress and a summary
"""

from typing import List, Optional, Sequence

from core.locale_merge import LocaleMergeEngine, BatchReport, get_language_name
from core.text_monitor import TextMonitor
from core.text_utils import get_syntax_family
from i18nforge_enums import ResultStatus
from i18nforge_exceptions import UserCancelledError, UnsupportedFileError, APIKeyError
from i18nforge_logger import get_logger
from interfaces.i_translator import ITranslator
from interfaces.i_view import INotifier, IPrompter
from models.session import SessionContext
from models.settings_model import SettingsModel

logger = get_logger("controllers.locale")


class LocaleController:
    """Controller for writing pending texts into the locale stores."""

    def __init__(self, session: SessionContext, engine: LocaleMergeEngine,
                 monitor: TextMonitor, prompter: IPrompter, notifier: INotifier,
                 translator: Optional[ITranslator] = None,
                 settings: Optional[SettingsModel] = None):
        self.session = session
        self.engine = engine
        self.monitor = monitor
        self.prompter = prompter
        self.notifier = notifier
        self.translator = translator
        self._settings = settings or SettingsModel.instance()

        logger.debug("LocaleController initialized")

    # =========================================================================
    # PROMPTS
    # =========================================================================

    def _select_languages(self, languages: Optional[Sequence[str]]) -> List[str]:
        if languages is None:
            languages = self.prompter.choose_languages(self._settings.enabled_languages,
                                                       self._settings.source_language)
            if languages is None:
                raise UserCancelledError("languages")
        return list(languages)

    def _select_namespace(self, namespace: Optional[str]):
        if namespace is None:
            namespace = self.prompter.ask_namespace(self.session.namespace)
            if namespace is None:
                raise UserCancelledError("namespace")
        self.session.set_namespace(namespace)

    def _check_api_key(self, languages: Sequence[str]):
        needs_translation = any(lang != self._settings.source_language for lang in languages)
        if (needs_translation and self._settings.translation_service == "deepl"
                and not self._settings.deepl_api_key):
            raise APIKeyError("DeepL API key is not configured", service="deepl")

    # =========================================================================
    # GENERATION
    # =========================================================================

    def _progress(self, language: str, index: int, total: int, message: str):
        logger.info(message)

    def generate(self, languages: Optional[Sequence[str]] = None,
                 namespace: Optional[str] = None) -> Optional[BatchReport]:
        """
        Generate locale stores for the pending texts.

        Returns:
            BatchReport, or None when there was nothing to do or the
            operator cancelled.
        """
        texts = self.monitor.pending_texts
        if not texts:
            self.notifier.info("No Korean text to generate locales for.")
            return None

        family = get_syntax_family(self.monitor.file_identifier)
        if family is None:
            raise UnsupportedFileError("Unsupported file type", file_path=self.monitor.file_identifier)

        try:
            selected = self._select_languages(languages)
            self._select_namespace(namespace)
        except UserCancelledError:
            logger.debug("Locale generation cancelled")
            return None

        if not selected:
            return None

        try:
            self._check_api_key(selected)
        except APIKeyError as e:
            self.notifier.error(f"{e.message}. Set it in the settings first.")
            return None

        batch = self.engine.generate_all_languages(
            family, texts, selected,
            translator=self.translator,
            service_name=self._settings.translation_service,
            api_key=self._settings.deepl_api_key,
            progress=self._progress,
        )
        self._report(batch)
        return batch

    def _report(self, batch: BatchReport):
        for report in batch.reports:
            name = get_language_name(report.language)
            if report.status == ResultStatus.FAILED:
                self.notifier.error(f"{name}: generation failed: {report.error}")
            elif report.status == ResultStatus.ALL_SKIPPED:
                self.notifier.info(f"{name}: all {len(report.skipped_keys)} text(s) are already translated.")
            elif report.new_keys:
                message = f"{name}: {len(report.new_keys)} key(s) written to {report.path}"
                if report.skipped_keys:
                    message += f" ({len(report.skipped_keys)} skipped)"
                self.notifier.info(message)

        total = len(batch.reports)
        if total > 1:
            self.notifier.info(f"{batch.success_count}/{total} language(s) completed.")
