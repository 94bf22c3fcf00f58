# -*- coding: utf-8 -*-
"""
I18nForge Variable Extractor

Turns a text span into a positional placeholder template plus the ordered
list of interpolated expressions.

Recognised interpolations:
- ${ expr }      every syntax family
- {{ expr }}     brace family (vue)
- { expr }       expression family (tsx/jsx), not preceded by '$'

A single forward scan finds every interpolation; ${expr} matches are
numbered first, then the family form continues the counter.
Matching is non-greedy up to the first '}' (no nested braces). A bare
positional placeholder such as {0} is never treated as an expression, so
extracting from a template yields no variables.
"""

import re
from typing import List, Optional, Tuple

from i18nforge_enums import SyntaxFamily
from models.text_range import VariableInfo

_POSITIONAL_RE = re.compile(r'\d+')
PLACEHOLDER_RE = re.compile(r'\{(\d+)\}')


def _match_at(family: SyntaxFamily, text: str, pos: int) -> Optional[Tuple[int, str, bool]]:
    """
    Try to match one interpolation starting at pos.

    Returns:
        (end_offset, trimmed_expression, is_dollar_form) or None.
    """
    if text.startswith("${", pos):
        close = text.find("}", pos + 2)
        if close > pos + 2:
            return close + 1, text[pos + 2:close].strip(), True
        return None

    if family == SyntaxFamily.BRACE:
        if text.startswith("{{", pos):
            close = text.find("}", pos + 2)
            if close > pos + 2 and text.startswith("}}", close):
                return close + 2, text[pos + 2:close].strip(), False
        return None

    if family == SyntaxFamily.EXPRESSION:
        if text[pos] == "{" and (pos == 0 or text[pos - 1] != "$"):
            close = text.find("}", pos + 1)
            if close > pos + 1:
                inner = text[pos + 1:close]
                if _POSITIONAL_RE.fullmatch(inner):
                    return None
                return close + 1, inner.strip(), False
        return None

    return None


def scan_interpolations(family: SyntaxFamily, text: str) -> Tuple[str, List[str]]:
    """
    Replace every interpolation in text with {N}.

    ${expr} matches take indices 0..k-1 in textual order, the family's own
    form continues the counter from k.

    Returns:
        (template, variables) with variables in placeholder order.
    """
    family = SyntaxFamily(family)
    spans: List[Tuple[int, int, str, bool]] = []
    pos = 0
    length = len(text)

    while pos < length:
        match = _match_at(family, text, pos)
        if match is None:
            pos += 1
            continue
        end, expression, is_dollar = match
        spans.append((pos, end, expression, is_dollar))
        pos = end

    order = [i for i, span in enumerate(spans) if span[3]]
    order += [i for i, span in enumerate(spans) if not span[3]]
    number = {span_index: n for n, span_index in enumerate(order)}
    variables = [spans[i][2] for i in order]

    parts: List[str] = []
    last = 0
    for i, (start, end, _, _) in enumerate(spans):
        parts.append(text[last:start])
        parts.append(f"{{{number[i]}}}")
        last = end
    parts.append(text[last:])
    return "".join(parts), variables


def extract_variables(family: SyntaxFamily, text: str) -> VariableInfo:
    """Build the VariableInfo for one text span."""
    template, variables = scan_interpolations(family, text)
    return VariableInfo(original_text=text, template=template, variables=variables)


def to_placeholder_value(family: SyntaxFamily, text: str) -> str:
    """Rewrite interpolations in a (possibly translated) value to {N} placeholders."""
    return scan_interpolations(family, text)[0]


def count_placeholders(template: str) -> int:
    return len(PLACEHOLDER_RE.findall(template))
