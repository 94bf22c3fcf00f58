# -*- coding: utf-8 -*-
"""
I18nForge Monitor Controller

Thin command layer over TextMonitor: start/stop, refresh, exclusion
toggles and adding a selected span.
"""

from typing import List

from core.text_monitor import TextMonitor
from core.text_utils import get_syntax_family
from i18nforge_exceptions import UnsupportedFileError
from i18nforge_logger import get_logger
from interfaces.i_view import INotifier
from models.text_range import TextRange

logger = get_logger("controllers.monitor")


class MonitorController:
    """Controller for the monitoring commands."""

    def __init__(self, monitor: TextMonitor, notifier: INotifier):
        self.monitor = monitor
        self.notifier = notifier

    def start(self, document_text: str, file_identifier: str):
        if get_syntax_family(file_identifier) is None:
            raise UnsupportedFileError("Unsupported file type", file_path=file_identifier)
        self.monitor.start(document_text, file_identifier)
        self.notifier.info(f"Monitoring {file_identifier}: "
                           f"{len(self.monitor.pending_ranges)} Korean text(s) found.")

    def stop(self):
        self.monitor.stop()
        self.notifier.info("Monitoring stopped.")

    def refresh(self):
        self.monitor.refresh()

    def exclude(self, text_range: TextRange):
        self.monitor.exclude(text_range)

    def include(self, text_range: TextRange):
        self.monitor.include(text_range)

    def add_selected(self, text_range: TextRange) -> bool:
        if not text_range.text:
            self.notifier.warning("No text selected.")
            return False
        if not self.monitor.add_selected(text_range):
            self.notifier.warning("The selected text contains no Korean.")
            return False
        self.notifier.info(f"Added '{text_range.text}' to the pending list.")
        return True

    def pending(self) -> List[TextRange]:
        return self.monitor.pending_ranges

    def excluded(self) -> List[TextRange]:
        return self.monitor.excluded_ranges

    def applied(self) -> List[TextRange]:
        return self.monitor.applied_ranges
