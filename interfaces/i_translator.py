# -*- coding: utf-8 -*-
"""
I18nForge Translator Interface
"""

from abc import ABC, abstractmethod
from typing import List


class ITranslator(ABC):
    """
    Translation backend contract.
    """

    @abstractmethod
    def translate(self, texts: List[str], target_language: str,
                  service_name: str, api_key: str) -> List[str]:
        """
        Translate texts into target_language.

        Returns:
            Translations with the same length and order as texts.

        Raises:
            TranslationError: with a human-readable message on failure.
        """
        pass
