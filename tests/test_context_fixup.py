# -*- coding: utf-8 -*-
"""
Unit Tests for the Context Fixup Pass
"""

from core.context_fixup import apply_fixups, fix_props_binding, fix_unnecessary_stringification
from i18nforge_enums import SyntaxFamily
from models.text_range import Modification


def _mod_for(content, text, replacement):
    start = content.index(text)
    return Modification(start, start + len(text), replacement)


class TestPropsBinding:
    """Pass (a)."""

    def test_example_e_brace_attribute(self):
        """title="{{t('x')}}" becomes :title="t('x')"."""
        content = '<div title="안녕"></div>'
        mod = _mod_for(content, "안녕", "{{t('x')}}")

        fixed = apply_fixups(SyntaxFamily.BRACE, mod, content)

        assert fixed.replacement == ":title=\"t('x')\""
        assert content[fixed.start:fixed.end] == 'title="안녕"'

    def test_expression_quoted_attribute(self):
        content = '<Button label="저장" />'
        mod = _mod_for(content, "저장", "{t('x')}")

        fixed = apply_fixups(SyntaxFamily.EXPRESSION, mod, content)

        assert fixed.replacement == "label={t('x')}"
        assert content[fixed.start:fixed.end] == 'label="저장"'

    def test_expression_template_attribute(self):
        content = '<Button label={`저장`} />'
        mod = _mod_for(content, "저장", "{t('x')}")

        fixed = fix_props_binding(SyntaxFamily.EXPRESSION, mod, content)

        assert fixed.replacement == "label={t('x')}"
        assert content[fixed.start:fixed.end] == 'label={`저장`}'

    def test_dashed_attribute_name(self):
        content = '<input aria-label="이름">'
        mod = _mod_for(content, "이름", "{{t('name')}}")

        fixed = fix_props_binding(SyntaxFamily.BRACE, mod, content)

        assert fixed.replacement == ":aria-label=\"t('name')\""

    def test_already_bound_attribute_not_rebound(self):
        """:title is left to the stringification pass."""
        content = '<div :title="안녕">'
        mod = _mod_for(content, "안녕", "{{t('x')}}")

        assert fix_props_binding(SyntaxFamily.BRACE, mod, content) == mod

        fixed = apply_fixups(SyntaxFamily.BRACE, mod, content)
        assert fixed.replacement == "\"t('x')\""
        assert content[:fixed.start] + fixed.replacement + content[fixed.end:] == '<div :title="t(\'x\')">'

    def test_markup_text_untouched(self):
        content = '<p>안녕</p>'
        mod = _mod_for(content, "안녕", "{{t('x')}}")
        assert apply_fixups(SyntaxFamily.BRACE, mod, content) == mod


class TestStringification:
    """Pass (b)."""

    def test_brace_call_inside_quotes(self):
        content = 'const a = "안녕";'
        mod = _mod_for(content, "안녕", "{{t('x')}}")

        fixed = fix_unnecessary_stringification(SyntaxFamily.BRACE, mod, content)

        assert fixed == Modification(mod.start - 1, mod.end + 1, "\"t('x')\"")

    def test_expression_call_inside_backticks(self):
        content = 'x = `안녕`'
        mod = _mod_for(content, "안녕", "{t('x')}")

        fixed = fix_unnecessary_stringification(SyntaxFamily.EXPRESSION, mod, content)

        assert fixed.replacement == "`t('x')`"

    def test_mismatched_quotes_untouched(self):
        content = '"안녕\''
        mod = _mod_for(content, "안녕", "{{t('x')}}")
        assert fix_unnecessary_stringification(SyntaxFamily.BRACE, mod, content) == mod

    def test_unwrapped_call_untouched(self):
        content = '"안녕"'
        mod = _mod_for(content, "안녕", "t('x')")
        assert fix_unnecessary_stringification(SyntaxFamily.BRACE, mod, content) == mod


class TestPlainFamily:

    def test_plain_is_noop(self):
        content = '<div title="안녕">'
        mod = _mod_for(content, "안녕", "{{t('x')}}")
        assert apply_fixups(SyntaxFamily.PLAIN, mod, content) == mod
