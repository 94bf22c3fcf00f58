# -*- coding: utf-8 -*-
"""
I18nForge Context Fixup Pass

Repairs planned modifications whose wrapped call lands in a syntactically
awkward spot, using only bounded lookaround in the original document.

(a) Prop-binding unwrap
    vue:  title="{{t('x')}}"      ->  :title="t('x')"
    tsx:  title="{t('x')}"        ->  title={t('x')}
          title={`{t('x')}`}      ->  title={t('x')}
(b) Redundant-stringification unwrap
    vue:  "{{t('x')}}"            ->  "t('x')"
    tsx:  '{t('x')}'              ->  't('x')'

Both passes leave the modification untouched for plain files or when the
surrounding text does not match.
"""

import re
from typing import Optional

import i18nforge_config as config
from core.text_utils import QUOTE_CHARS
from i18nforge_enums import SyntaxFamily
from i18nforge_logger import get_logger
from models.text_range import Modification

logger = get_logger("core.context_fixup")

_ATTR_NAME = r'(?<![:@\w-])(\w+(?:-\w+)*)'


def _unwrap_call(family: SyntaxFamily, replacement: str) -> Optional[str]:
    """Return the bare call if replacement carries the family's brace wrapper."""
    if family == SyntaxFamily.BRACE:
        if replacement.startswith("{{") and replacement.endswith("}}"):
            inner = replacement[2:-2]
        else:
            return None
    elif family == SyntaxFamily.EXPRESSION:
        if replacement.startswith("{") and replacement.endswith("}"):
            inner = replacement[1:-1]
        else:
            return None
    else:
        return None

    if inner.startswith(f"{config.TRANSLATION_FUNCTION_NAME}(") and inner.endswith(")"):
        return inner
    return None


def fix_props_binding(family: SyntaxFamily, mod: Modification, content: str) -> Modification:
    """
    Pass (a): turn an attribute assigned a wrapped call into a real binding.

    Lookback extends to the nearest whitespace, lookahead to the nearest
    whitespace or '>'. The modification widens to the matched attribute.
    """
    call = _unwrap_call(family, mod.replacement)
    if call is None:
        return mod

    context_start = mod.start
    while context_start > 0 and not content[context_start - 1].isspace():
        context_start -= 1

    context_end = mod.end
    while context_end < len(content) and not content[context_end].isspace() and content[context_end] != '>':
        context_end += 1

    before = content[context_start:mod.start]
    after = content[mod.end:context_end]
    full_context = before + mod.replacement + after
    repl_start = len(before)
    repl_end = repl_start + len(mod.replacement)

    escaped = re.escape(call)
    if family == SyntaxFamily.BRACE:
        candidates = [
            (re.compile(_ATTR_NAME + r'="\{\{' + escaped + r'\}\}"'),
             lambda name: f':{name}="{call}"'),
        ]
    else:
        candidates = [
            (re.compile(_ATTR_NAME + r'="\{' + escaped + r'\}"'),
             lambda name: f'{name}={{{call}}}'),
            (re.compile(_ATTR_NAME + r'=\{`\{' + escaped + r'\}`\}'),
             lambda name: f'{name}={{{call}}}'),
        ]

    for pattern, build in candidates:
        for match in pattern.finditer(full_context):
            # The attribute must enclose exactly this replacement
            if match.start() < repl_start and match.end() > repl_end:
                new_start = context_start + match.start()
                new_end = mod.end + (match.end() - repl_end)
                fixed = Modification(new_start, new_end, build(match.group(1)))
                logger.debug(f"Props binding fixup: {mod} -> {fixed}")
                return fixed

    return mod


def fix_unnecessary_stringification(family: SyntaxFamily, mod: Modification, content: str) -> Modification:
    """
    Pass (b): strip the brace wrapper of a call that already sits in quotes.

    Looks exactly one character to each side. The quotes are kept and the
    modification widens by one character on each side.
    """
    call = _unwrap_call(family, mod.replacement)
    if call is None:
        return mod

    context_start = max(0, mod.start - 1)
    context_end = min(len(content), mod.end + 1)
    before = content[context_start:mod.start]
    after = content[mod.end:context_end]

    if len(before) != 1 or len(after) != 1:
        return mod
    if before not in QUOTE_CHARS or before != after:
        return mod

    fixed = Modification(context_start, context_end, f"{before}{call}{after}")
    logger.debug(f"Stringification fixup: {mod} -> {fixed}")
    return fixed


def apply_fixups(family: SyntaxFamily, mod: Modification, content: str) -> Modification:
    """Run pass (a) then pass (b)."""
    family = SyntaxFamily(family)
    if family == SyntaxFamily.PLAIN:
        return mod
    mod = fix_props_binding(family, mod, content)
    return fix_unnecessary_stringification(family, mod, content)
