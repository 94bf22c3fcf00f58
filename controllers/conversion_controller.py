# -*- coding: utf-8 -*-
"""
I18nForge Conversion Controller

Handles the conversion commands:
- Preview conversions
- Clear preview
- Convert all pending texts
"""

from typing import List, Optional

from core.conversion_planner import ConversionPlanner, ConversionResult
from core.text_monitor import TextMonitor
from core.text_utils import get_syntax_family
from i18nforge_enums import ResultStatus
from i18nforge_exceptions import UserCancelledError, UnsupportedFileError
from i18nforge_logger import get_logger
from interfaces.i_view import INotifier, IPrompter
from models.session import SessionContext
from models.text_range import PreviewOverlay

logger = get_logger("controllers.conversion")


class ConversionController:
    """
    Controller for converting pending Korean text into translation calls.

    Pending texts and ranges come from the TextMonitor; excluded ranges
    are filtered out through the shared session.
    """

    def __init__(self, session: SessionContext, planner: ConversionPlanner,
                 monitor: TextMonitor, prompter: IPrompter, notifier: INotifier):
        self.session = session
        self.planner = planner
        self.monitor = monitor
        self.prompter = prompter
        self.notifier = notifier

        logger.debug("ConversionController initialized")

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _family(self):
        family = get_syntax_family(self.monitor.file_identifier)
        if family is None:
            raise UnsupportedFileError("Unsupported file type", file_path=self.monitor.file_identifier)
        return family

    def _ask_namespace(self, namespace: Optional[str]):
        """Prompt for a namespace unless one was given; None means cancelled."""
        if namespace is None:
            namespace = self.prompter.ask_namespace(self.session.namespace)
            if namespace is None:
                raise UserCancelledError("namespace")
        self.session.set_namespace(namespace)

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def preview(self, namespace: Optional[str] = None) -> List[PreviewOverlay]:
        texts = self.monitor.pending_texts
        if not texts:
            self.notifier.info("No Korean text to convert.")
            return []

        try:
            self._ask_namespace(namespace)
        except UserCancelledError:
            logger.debug("Preview cancelled")
            return []

        overlays = self.planner.preview(self._family(), texts, self.monitor.pending_ranges)
        self.notifier.info(f"{len(overlays)} conversion(s) previewed.")
        return overlays

    def clear_preview(self):
        self.planner.clear_preview()

    def convert_all(self, namespace: Optional[str] = None) -> ConversionResult:
        """
        Convert every pending range of the monitored document.

        Returns:
            ConversionResult; the caller persists result.document_text.
        """
        document_text = self.monitor.document_text
        texts = self.monitor.pending_texts
        if not texts:
            self.notifier.info("No Korean text to convert.")
            return ConversionResult(ResultStatus.NO_WORK, document_text)

        try:
            self._ask_namespace(namespace)
        except UserCancelledError:
            logger.debug("Conversion cancelled")
            return ConversionResult(ResultStatus.CANCELLED, document_text)

        result = self.planner.commit(self._family(), document_text, texts, self.monitor.pending_ranges)
        if result.status == ResultStatus.DONE:
            self.notifier.info(f"Converted {result.applied_count} text(s).")
            self.monitor.on_document_changed(result.document_text)
        else:
            self.notifier.info("Nothing to convert.")
        return result
