# -*- coding: utf-8 -*-
"""
I18nForge Session Context

Holds the state that used to be process-wide: the current namespace and
the exclusion set of the active extraction snapshot.
"""

from typing import Iterable, List, Set

from models.text_range import TextRange
from i18nforge_logger import get_logger

logger = get_logger("models.session")


class SessionContext:
    """
    Explicit session state owned by the caller.

    The namespace is only changed by set_namespace() and only cleared by
    reset(). Planner and merge engine read it live at the point of use.
    """

    def __init__(self, namespace: str = ""):
        self._namespace = namespace or ""
        self._excluded_ids: Set[str] = set()

    # =========================================================================
    # NAMESPACE
    # =========================================================================

    @property
    def namespace(self) -> str:
        return self._namespace

    def set_namespace(self, namespace: str):
        self._namespace = (namespace or "").strip()
        logger.debug(f"Namespace set to '{self._namespace}'")

    # =========================================================================
    # EXCLUSIONS
    # =========================================================================

    @property
    def excluded_ids(self) -> Set[str]:
        return self._excluded_ids

    def exclude(self, text_range: TextRange):
        self._excluded_ids.add(text_range.unique_id)

    def include(self, text_range: TextRange):
        self._excluded_ids.discard(text_range.unique_id)

    def is_excluded(self, text_range: TextRange) -> bool:
        return text_range.unique_id in self._excluded_ids

    def clear_exclusions(self):
        self._excluded_ids.clear()

    def filter_ranges(self, ranges: Iterable[TextRange]) -> List[TextRange]:
        """Drop excluded ranges, keeping caller order."""
        return [r for r in ranges if r.unique_id not in self._excluded_ids]

    def reset(self):
        """Clear namespace and exclusions."""
        self._namespace = ""
        self._excluded_ids.clear()
        logger.debug("Session reset")
