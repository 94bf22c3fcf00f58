# -*- coding: utf-8 -*-
"""
I18nForge Key Generator

Maps cleaned text (or a variable template) to a stable, namespace-qualified
locale key.

Key shapes are configured declaratively: one named built-in transform plus
an optional list of regex find/replace rules applied after it. Any failure
falls back to the default transform with a warning.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple

from core.text_utils import remove_quotes
from core.variable_extractor import extract_variables
from i18nforge_enums import KeyTransform, SyntaxFamily
from i18nforge_exceptions import KeyGenerationError
from i18nforge_logger import get_logger
from models.text_range import VariableInfo

logger = get_logger("core.key_generator")

_BACKSLASH_RUN_RE = re.compile(r'\\{2,}')


def default_transform(text: str) -> str:
    """Whitespace to '_', reserved characters to named tokens."""
    text = re.sub(r'\s+', '_', text)
    text = text.replace('.', '#dot#')
    text = re.sub(r'\\(.)', r'\\\\\1', text)
    text = text.replace('[', '#lb#')
    text = text.replace(']', '#rb#')
    text = text.replace("'", '#sq#')
    text = text.replace('"', '#dq#')
    return text


def _identity_transform(text: str) -> str:
    return text


def _lowercase_transform(text: str) -> str:
    return default_transform(text).lower()


def _snake_case_transform(text: str) -> str:
    return default_transform(re.sub(r'[\s\-]+', ' ', text.strip()).lower())


BUILTIN_TRANSFORMS: Dict[str, Callable[[str], str]] = {
    KeyTransform.DEFAULT.value: default_transform,
    KeyTransform.IDENTITY.value: _identity_transform,
    KeyTransform.LOWERCASE.value: _lowercase_transform,
    KeyTransform.SNAKE_CASE.value: _snake_case_transform,
}


class KeyGenerator:
    """
    Deterministic key derivation.

    The same (text, namespace, transform, rules) always yields the same key.
    """

    def __init__(self, transform: str = KeyTransform.DEFAULT.value,
                 rules: Optional[List[Dict[str, str]]] = None,
                 notifier=None):
        self.transform = transform
        self.rules = list(rules or [])
        self.notifier = notifier
        self._notified = set()
        self._settings = None

    @classmethod
    def from_settings(cls, settings, notifier=None) -> 'KeyGenerator':
        """Build from settings and follow later key_transform / key_rules changes."""
        generator = cls(settings.key_transform, settings.key_rules, notifier)
        settings.subscribe(settings.KEY_KEY_TRANSFORM, generator._on_transform_changed)
        settings.subscribe(settings.KEY_KEY_RULES, generator._on_rules_changed)
        generator._settings = settings
        return generator

    def detach(self):
        """Stop following settings changes."""
        if self._settings is not None:
            self._settings.unsubscribe(self._settings.KEY_KEY_TRANSFORM, self._on_transform_changed)
            self._settings.unsubscribe(self._settings.KEY_KEY_RULES, self._on_rules_changed)
            self._settings = None

    def _on_transform_changed(self, value: str):
        logger.debug(f"Key transform changed to '{value}'")
        self.transform = value
        self._notified.clear()

    def _on_rules_changed(self, value: List[Dict[str, str]]):
        logger.debug(f"Key rules changed ({len(value)} rule(s))")
        self.rules = list(value)
        self._notified.clear()

    def _apply_configured(self, text: str) -> str:
        transform = BUILTIN_TRANSFORMS.get(self.transform)
        if transform is None:
            raise KeyGenerationError(f"Unknown key transform '{self.transform}'",
                                     transform=self.transform, text=text)
        result = transform(text)

        for rule in self.rules:
            try:
                result = re.sub(rule["pattern"], rule.get("replace", ""), result)
            except (KeyError, TypeError, re.error) as e:
                raise KeyGenerationError(f"Invalid key rule {rule!r}: {e}",
                                         transform=self.transform, text=text) from e

        if not isinstance(result, str):
            raise KeyGenerationError("Key transform must return a string",
                                     transform=self.transform, text=text)
        return result

    def _warn(self, error: KeyGenerationError):
        logger.warning(f"Key generation failed, using default transform: {error.message}")
        if self.notifier and error.message not in self._notified:
            self._notified.add(error.message)
            self.notifier.warning(f"Key generation error: {error.message}. Using the default transform.")

    def convert_to_key(self, text: str) -> str:
        """Key body for text, without namespace."""
        clean_text = remove_quotes(text)
        try:
            key = self._apply_configured(clean_text)
        except KeyGenerationError as e:
            self._warn(e)
            key = default_transform(clean_text)
        return _BACKSLASH_RUN_RE.sub(r'\\', key)

    def generate_key(self, text: str, namespace: str = "") -> str:
        key = self.convert_to_key(text)
        return f"{namespace}.{key}" if namespace else key

    def key_for_text(self, family: SyntaxFamily, text: str,
                     namespace: str = "") -> Tuple[str, VariableInfo]:
        """
        Key for a source text, using its template when it has variables.

        Shared by the conversion planner and the locale merge engine so
        in-source keys and stored keys never diverge.
        """
        info = extract_variables(family, text)
        source = info.template if info.variables else text
        return self.generate_key(source, namespace), info
