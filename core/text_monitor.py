# -*- coding: utf-8 -*-
"""
I18nForge Text Monitor

Keeps the pending/applied range lists of one monitored document up to
date. Re-extraction after edits is debounced: every change cancels the
pending timer and restarts it.
"""

import threading
from typing import Callable, List, Optional

import i18nforge_config as config
from core.text_utils import has_hangul
from i18nforge_logger import get_logger
from interfaces.i_extractor import ITextExtractor
from models.session import SessionContext
from models.text_range import TextRange

logger = get_logger("core.text_monitor")


class Debouncer:
    """
    Runs callback once, delay_ms after the last trigger().

    timer_factory must build objects shaped like threading.Timer
    (start/cancel); tests pass a manual timer.
    """

    def __init__(self, delay_ms: int, callback: Callable, timer_factory=threading.Timer):
        self.delay_ms = delay_ms
        self.callback = callback
        self.timer_factory = timer_factory
        self._timer = None
        self._lock = threading.RLock()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def trigger(self, *args):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = self.timer_factory(self.delay_ms / 1000.0, self._fire, args)
            self._timer.start()

    def _fire(self, *args):
        with self._lock:
            self._timer = None
        self.callback(*args)

    def cancel(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


class TextMonitor:
    """
    Monitoring state for one document.

    Exclusions live in the shared SessionContext so the conversion
    controller sees the same set.
    """

    def __init__(self, extractor: ITextExtractor, session: SessionContext,
                 debounce_ms: int = config.DEFAULT_DEBOUNCE_MS,
                 timer_factory=threading.Timer,
                 on_update: Optional[Callable[['TextMonitor'], None]] = None):
        self.extractor = extractor
        self.session = session
        self.on_update = on_update
        self._debouncer = Debouncer(debounce_ms, self._rescan, timer_factory)
        self._lock = threading.RLock()

        self._active = False
        self._file_identifier = ""
        self._document_text = ""
        self._korean_ranges: List[TextRange] = []
        self._reference_ranges: List[TextRange] = []

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def file_identifier(self) -> str:
        return self._file_identifier

    @property
    def document_text(self) -> str:
        return self._document_text

    def start(self, document_text: str, file_identifier: str):
        with self._lock:
            self._active = True
            self._file_identifier = file_identifier
        logger.info(f"Monitoring started: {file_identifier}")
        self._rescan(document_text)

    def stop(self):
        self._debouncer.cancel()
        with self._lock:
            self._active = False
            self._korean_ranges = []
            self._reference_ranges = []
        logger.info(f"Monitoring stopped: {self._file_identifier}")

    def on_document_changed(self, document_text: str):
        if not self._active:
            return
        self._debouncer.trigger(document_text)

    def refresh(self, document_text: Optional[str] = None):
        """Clear exclusions and re-scan immediately."""
        self._debouncer.cancel()
        self.session.clear_exclusions()
        self._rescan(self._document_text if document_text is None else document_text)

    def _rescan(self, document_text: str):
        if not self._active:
            return
        korean, references = self.extractor.extract(document_text, self._file_identifier)
        with self._lock:
            self._document_text = document_text
            self._korean_ranges = list(korean)
            self._reference_ranges = list(references)
        logger.debug(f"Re-extracted {len(korean)} pending, {len(references)} applied")
        if self.on_update:
            self.on_update(self)

    # =========================================================================
    # SELECTION
    # =========================================================================

    def exclude(self, text_range: TextRange):
        self.session.exclude(text_range)

    def include(self, text_range: TextRange):
        self.session.include(text_range)

    def add_selected(self, text_range: TextRange) -> bool:
        """
        Add a selected span to the pending list.

        Returns False when the span contains no Hangul. A previously
        excluded span is re-included instead of added twice.
        """
        if not has_hangul(text_range.text):
            return False
        if self.session.is_excluded(text_range):
            self.session.include(text_range)
            return True
        with self._lock:
            if text_range not in self._korean_ranges:
                self._korean_ranges.append(text_range)
                self._korean_ranges.sort(key=lambda r: r.start)
        return True

    # =========================================================================
    # LISTINGS
    # =========================================================================

    @property
    def all_ranges(self) -> List[TextRange]:
        with self._lock:
            return list(self._korean_ranges)

    @property
    def pending_ranges(self) -> List[TextRange]:
        """Korean ranges minus excluded ones."""
        return self.session.filter_ranges(self.all_ranges)

    @property
    def excluded_ranges(self) -> List[TextRange]:
        return [r for r in self.all_ranges if self.session.is_excluded(r)]

    @property
    def pending_texts(self) -> List[str]:
        """Distinct pending texts in document order."""
        seen = []
        for r in self.pending_ranges:
            if r.text not in seen:
                seen.append(r.text)
        return seen

    @property
    def applied_ranges(self) -> List[TextRange]:
        with self._lock:
            return list(self._reference_ranges)
