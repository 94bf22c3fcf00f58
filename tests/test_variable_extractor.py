# -*- coding: utf-8 -*-
"""
Unit Tests for the Variable Extractor
"""

import pytest

from core.variable_extractor import (
    extract_variables, scan_interpolations, to_placeholder_value, count_placeholders
)
from i18nforge_enums import SyntaxFamily


class TestScanInterpolations:
    """Tests for the forward scanner."""

    def test_dollar_form_in_every_family(self):
        """${expr} is recognised regardless of family."""
        for family in SyntaxFamily:
            template, variables = scan_interpolations(family, "안녕 ${ name }")
            assert template == "안녕 {0}"
            assert variables == ["name"]

    def test_brace_family_double_braces(self):
        """{{ expr }} is an interpolation in brace files."""
        template, variables = scan_interpolations(SyntaxFamily.BRACE, "안녕 {{ user.name }}님")
        assert template == "안녕 {0}님"
        assert variables == ["user.name"]

    def test_dollar_form_numbered_before_family_form(self):
        """${expr} takes the low indices, the family form continues the counter."""
        template, variables = scan_interpolations(SyntaxFamily.BRACE, "{{ a }} 그리고 ${b}")
        assert template == "{1} 그리고 {0}"
        assert variables == ["b", "a"]

    def test_textual_order_within_each_form(self):
        template, variables = scan_interpolations(
            SyntaxFamily.BRACE, "{{ a }} ${b} {{ c }} ${d}"
        )
        assert template == "{2} {0} {3} {1}"
        assert variables == ["b", "d", "a", "c"]

    def test_expression_family_single_braces(self):
        template, variables = scan_interpolations(SyntaxFamily.EXPRESSION, "{count}개 ${unit}")
        assert template == "{1}개 {0}"
        assert variables == ["unit", "count"]

    def test_plain_family_ignores_braces(self):
        """Plain files only know ${expr}."""
        template, variables = scan_interpolations(SyntaxFamily.PLAIN, "{{ a }} {b}")
        assert template == "{{ a }} {b}"
        assert variables == []

    def test_empty_dollar_is_not_a_variable(self):
        template, variables = scan_interpolations(SyntaxFamily.EXPRESSION, "값 ${}")
        assert variables == []
        assert template == "값 ${}"

    def test_first_closing_brace_ends_match(self):
        """No nested-brace support: matching stops at the first '}'."""
        template, variables = scan_interpolations(SyntaxFamily.PLAIN, "${ a{b} }")
        assert variables == ["a{b"]
        assert template == "{0} }"


class TestExtractVariables:
    """Tests for VariableInfo construction and idempotence."""

    @pytest.mark.parametrize("family,text", [
        (SyntaxFamily.BRACE, "안녕 {{ name }} ${age}"),
        (SyntaxFamily.EXPRESSION, "안녕 {name} ${age}"),
        (SyntaxFamily.PLAIN, "안녕 ${name}"),
    ])
    def test_template_has_no_variables(self, family, text):
        """Extracting again from the template yields zero variables."""
        info = extract_variables(family, text)
        assert info.has_variables
        again = extract_variables(family, info.template)
        assert again.variables == []
        assert again.template == info.template

    def test_placeholder_count_matches_variables(self):
        info = extract_variables(SyntaxFamily.BRACE, "{{ a }}, {{ b }}, ${c}")
        assert count_placeholders(info.template) == len(info.variables) == 3

    def test_original_text_kept(self):
        info = extract_variables(SyntaxFamily.PLAIN, "안녕")
        assert info.original_text == "안녕"
        assert not info.has_variables


class TestToPlaceholderValue:

    def test_translated_text_rewritten(self):
        """A translated value gets the same placeholders as its source."""
        assert to_placeholder_value(SyntaxFamily.EXPRESSION, "Hello ${name}") == "Hello {0}"

    def test_existing_placeholders_untouched(self):
        assert to_placeholder_value(SyntaxFamily.EXPRESSION, "Hello {0}") == "Hello {0}"
