"""
I18nForge Enum Definitions

Type-safe enums for syntax families, key transforms and result states.
"""

from enum import Enum


class SyntaxFamily(str, Enum):
    """Interpolation syntax of a source file."""
    PLAIN = 'plain'            # ts / js
    BRACE = 'brace'            # vue: {{ expr }}
    EXPRESSION = 'expression'  # tsx / jsx: { expr }


class KeyTransform(str, Enum):
    """Built-in key generation transforms."""
    DEFAULT = 'default'
    IDENTITY = 'identity'
    LOWERCASE = 'lowercase'
    SNAKE_CASE = 'snake_case'


class ResultStatus(str, Enum):
    """Outcome of a conversion or generation run."""
    DONE = 'done'
    NO_WORK = 'no_work'
    ALL_SKIPPED = 'all_skipped'
    FAILED = 'failed'
    CANCELLED = 'cancelled'
