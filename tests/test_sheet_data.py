# -*- coding: utf-8 -*-
"""
Unit Tests for spreadsheet row conversion
"""

import csv
import json

from core.sheet_data import (
    SHEET_HEADER, convert_json_to_sheet_data, merge_sheet_data,
    combine_multiple_locales, language_from_file_name, write_sheet_csv
)


class TestConvert:

    def test_header_and_language_column(self):
        rows = convert_json_to_sheet_data({"common": {"hi": "hello"}}, "en")
        assert rows[0] == ["Key", "Korean", "English", "Chinese", "Japanese"]
        assert rows[1] == ["common.hi", "", "hello", "", ""]

    def test_japanese_column(self):
        rows = convert_json_to_sheet_data({"a": "あ"}, "ja")
        assert rows[1] == ["a", "", "", "", "あ"]


class TestMerge:

    def test_existing_key_updates_column_only(self):
        existing = [list(SHEET_HEADER), ["a", "가", "", "", ""]]
        new = convert_json_to_sheet_data({"a": "A"}, "en")

        merged = merge_sheet_data(existing, new, "en")

        assert merged[1] == ["a", "가", "A", "", ""]
        assert len(merged) == 2

    def test_new_key_appended(self):
        existing = [list(SHEET_HEADER), ["a", "가", "", "", ""]]
        new = convert_json_to_sheet_data({"b": "B"}, "en")

        merged = merge_sheet_data(existing, new, "en")

        assert merged[2] == ["b", "", "B", "", ""]

    def test_existing_rows_not_mutated(self):
        existing = [list(SHEET_HEADER), ["a", "가", "", "", ""]]
        merge_sheet_data(existing, convert_json_to_sheet_data({"a": "A"}, "en"), "en")
        assert existing[1] == ["a", "가", "", "", ""]


class TestCombine:

    def test_language_from_file_name(self):
        assert language_from_file_name("/x/locales.ja.json") == "ja"
        assert language_from_file_name("/x/messages.json") == "ko"

    def test_columns_follow_fixed_order(self, tmp_path):
        ja = tmp_path / "locales.ja.json"
        ko = tmp_path / "locales.ko.json"
        ja.write_text(json.dumps({"a": "あ"}, ensure_ascii=False), encoding="utf-8")
        ko.write_text(json.dumps({"a": "가", "b": "나"}, ensure_ascii=False), encoding="utf-8")

        rows = combine_multiple_locales([str(ja), str(ko)])

        assert rows[0] == ["Key", "Korean", "Japanese"]
        assert ["a", "가", "あ"] in rows
        assert ["b", "나", ""] in rows

    def test_unreadable_file_skipped(self, tmp_path):
        ko = tmp_path / "locales.ko.json"
        en = tmp_path / "locales.en.json"
        ko.write_text('{"a": "가"}', encoding="utf-8")
        en.write_text("{broken", encoding="utf-8")

        rows = combine_multiple_locales([str(ko), str(en)])

        assert rows[0] == ["Key", "Korean", "English"]
        assert rows[1] == ["a", "가", ""]

    def test_write_csv(self, tmp_path):
        out = tmp_path / "sheet.csv"
        write_sheet_csv([["Key", "Korean"], ["a", "가"]], str(out))
        with open(out, encoding="utf-8", newline="") as f:
            assert list(csv.reader(f)) == [["Key", "Korean"], ["a", "가"]]
