# -*- coding: utf-8 -*-
"""
I18nForge Range Models

Plain data carriers shared by the planner, fixup pass and merge engine.
All offsets are half-open character offsets into one document snapshot.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class TextRange:
    """
    A span of a document plus the text it covers.

    Attributes:
        start (int): Inclusive start offset.
        end (int): Exclusive end offset.
        text (str): Text covered by the span.
    """
    start: int
    end: int
    text: str

    @property
    def unique_id(self) -> str:
        """Exclusion identity, valid only within the snapshot it came from."""
        return f"{self.text}:{self.start}:{self.end}"

    def overlaps(self, start: int, end: int) -> bool:
        return self.start < end and self.end > start


@dataclass
class VariableInfo:
    """Result of variable extraction for one text span."""
    original_text: str
    template: str
    variables: List[str] = field(default_factory=list)

    @property
    def has_variables(self) -> bool:
        return bool(self.variables)


@dataclass(frozen=True)
class Modification:
    """A planned or applied edit over one document snapshot."""
    start: int
    end: int
    replacement: str

    def overlaps(self, other: 'Modification') -> bool:
        return self.start < other.end and self.end > other.start


@dataclass
class LocaleEntry:
    """One entry destined for the persisted store."""
    key: str
    value: str
    variables: Optional[List[str]] = None


@dataclass
class PreviewOverlay:
    """Annotation produced by preview mode; nothing is mutated."""
    start: int
    end: int
    text: str
    replacement: str

    @property
    def hover_message(self) -> str:
        return f'Will convert: "{self.text}" -> {self.replacement}'
