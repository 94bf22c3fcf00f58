# -*- coding: utf-8 -*-
"""
I18nForge Translation Service

Backend adapter over deep_translator. Placeholders are masked by the
caller before texts reach this layer; texts come back in input order.
"""

from typing import List, Optional

import i18nforge_config as config
from i18nforge_exceptions import TranslationError, APIKeyError
from i18nforge_logger import get_logger
from interfaces.i_translator import ITranslator

logger = get_logger("core.translation_service")

# Google uses region-qualified codes for some languages
_GOOGLE_LANGUAGE_CODES = {
    "zh": "zh-CN",
}


class DeepTranslatorBackend(ITranslator):
    """
    Translator backed by deep_translator's DeepL and Google clients.
    """

    def __init__(self, source_language: str = config.DEFAULT_SOURCE_LANG, use_free_api: bool = True):
        self.source_language = source_language
        self.use_free_api = use_free_api

    def _create_client(self, service_name: str, target_language: str, api_key: Optional[str]):
        if service_name == "deepl":
            if not api_key:
                raise APIKeyError("DeepL API key is required", service=service_name,
                                  target_lang=target_language)
            from deep_translator import DeeplTranslator
            return DeeplTranslator(api_key=api_key, source=self.source_language,
                                   target=target_language, use_free_api=self.use_free_api)

        if service_name == "google":
            from deep_translator import GoogleTranslator
            return GoogleTranslator(source=_GOOGLE_LANGUAGE_CODES.get(self.source_language, self.source_language),
                                    target=_GOOGLE_LANGUAGE_CODES.get(target_language, target_language))

        raise TranslationError(f"Unsupported translation service '{service_name}'",
                               service=service_name, target_lang=target_language)

    def translate(self, texts: List[str], target_language: str,
                  service_name: str = config.DEFAULT_TRANSLATION_SERVICE,
                  api_key: str = "") -> List[str]:
        if not texts:
            return []

        client = self._create_client(service_name, target_language, api_key)
        logger.debug(f"Sending {len(texts)} text(s) to {service_name} ({self.source_language} -> {target_language})")

        try:
            results = client.translate_batch(list(texts))
        except Exception as e:
            logger.error(f"{service_name} translation to {target_language} failed: {e}")
            raise TranslationError(f"Translation failed: {e}", service=service_name,
                                   target_lang=target_language) from e

        if results is None or len(results) != len(texts):
            raise TranslationError("Translation service returned an unexpected number of results",
                                   service=service_name, target_lang=target_language)

        # Empty translations keep the source text
        return [r if r else src for r, src in zip(results, texts)]
