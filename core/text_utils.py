import os
from typing import Optional

import i18nforge_config as config
from i18nforge_enums import SyntaxFamily

QUOTE_CHARS = ("'", '"', '`')


def is_quoted_text(text: str) -> bool:
    """True if text is a string literal wrapped in one matching pair of quotes."""
    if not text or len(text) < 2:
        return False
    return text[0] in QUOTE_CHARS and text[0] == text[-1]


def remove_quotes(text: str) -> str:
    """Strip one pair of matching outer quote marks, if present."""
    if is_quoted_text(text):
        return text[1:-1]
    return text


def get_syntax_family(file_name: str) -> Optional[SyntaxFamily]:
    """
    Derive the interpolation syntax family from a file name.

    Returns:
        SyntaxFamily, or None when the extension is not supported.
    """
    if not file_name:
        return None
    ext = os.path.splitext(file_name)[1].lower()
    family = config.FILE_TYPE_MAP.get(ext)
    return SyntaxFamily(family) if family else None


def has_hangul(text: str) -> bool:
    return bool(text) and bool(config.HANGUL_REGEX.search(text))
