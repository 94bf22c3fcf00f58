# -*- coding: utf-8 -*-
"""
I18nForge Extractor Interface

Contract of the raw text-range extractor that finds candidate text and
existing translation references in a document.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from models.text_range import TextRange


class ITextExtractor(ABC):
    """
    Finds translatable ranges in one document snapshot.

    Both returned lists are ascending by start offset; offsets are
    half-open over document_text.
    """

    @abstractmethod
    def extract(self, document_text: str, file_identifier: str) -> Tuple[List[TextRange], List[TextRange]]:
        """
        Returns:
            (korean_ranges, existing_ref_ranges)
        """
        pass
