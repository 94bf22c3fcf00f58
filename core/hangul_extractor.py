# -*- coding: utf-8 -*-
"""
I18nForge Hangul Extractor

Small reference extractor. It is regex based and does not parse the host
grammar; it finds:

- quoted string literals containing Hangul
- Hangul text between markup tags (brace and expression files only)
- existing translation calls, e.g. t('key')

A literal assigned directly to a markup attribute (title="...") is
reported without its quotes, so the planner's wrapped call lands inside
the attribute value and the fixup pass can turn it into a binding.
"""

import re
from typing import List, Tuple

import i18nforge_config as config
from core.text_utils import get_syntax_family, has_hangul
from i18nforge_enums import SyntaxFamily
from i18nforge_logger import get_logger
from interfaces.i_extractor import ITextExtractor
from models.text_range import TextRange

logger = get_logger("core.hangul_extractor")

_STRING_LITERAL_RE = re.compile(r"""(['"`])((?:\\.|(?!\1)[^\\\n])*)\1""")
_MARKUP_TEXT_RE = re.compile(r'>([^<>]+)<')
_ATTRIBUTE_PREFIX_RE = re.compile(r'[\w-]=$')


def _reference_pattern() -> re.Pattern:
    fn = re.escape(config.TRANSLATION_FUNCTION_NAME)
    return re.compile(r'(?<![\w$.])' + fn + r"""\(\s*(['"`])((?:\\.|(?!\1)[^\\\n])*)\1[^)]*\)""")


class HangulExtractor(ITextExtractor):
    """Regex extractor for Korean text and existing references."""

    def extract(self, document_text: str, file_identifier: str) -> Tuple[List[TextRange], List[TextRange]]:
        family = get_syntax_family(file_identifier) or SyntaxFamily.PLAIN

        references = self.find_references(document_text)
        korean = self.find_literals(document_text, family, references)
        if family != SyntaxFamily.PLAIN:
            taken = references + korean
            korean.extend(r for r in self.find_markup_text(document_text)
                          if not any(r.overlaps(t.start, t.end) for t in taken))

        korean.sort(key=lambda r: r.start)
        logger.debug(f"{file_identifier}: {len(korean)} Korean range(s), {len(references)} reference(s)")
        return korean, references

    def find_references(self, document_text: str) -> List[TextRange]:
        """Existing calls; the range covers the call and its text is the key."""
        return [TextRange(m.start(), m.end(), m.group(2))
                for m in _reference_pattern().finditer(document_text)]

    def find_literals(self, document_text: str, family: SyntaxFamily,
                      references: List[TextRange]) -> List[TextRange]:
        ranges = []
        for match in _STRING_LITERAL_RE.finditer(document_text):
            inner = match.group(2)
            if not has_hangul(inner):
                continue
            if any(r.overlaps(match.start(), match.end()) for r in references):
                continue

            prefix = document_text[max(0, match.start() - 2):match.start()]
            if family != SyntaxFamily.PLAIN and _ATTRIBUTE_PREFIX_RE.search(prefix):
                ranges.append(TextRange(match.start(2), match.end(2), inner))
            else:
                ranges.append(TextRange(match.start(), match.end(), match.group(0)))
        return ranges

    def find_markup_text(self, document_text: str) -> List[TextRange]:
        """Text nodes between tags, trimmed of surrounding whitespace."""
        ranges = []
        for match in _MARKUP_TEXT_RE.finditer(document_text):
            raw = match.group(1)
            text = raw.strip()
            if not has_hangul(text):
                continue
            start = match.start(1) + (len(raw) - len(raw.lstrip()))
            ranges.append(TextRange(start, start + len(text), text))
        return ranges
