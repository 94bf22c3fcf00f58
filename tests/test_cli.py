# -*- coding: utf-8 -*-
"""
Smoke tests for the command line entry point.
"""

import json

import pytest

import main


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "App.vue"
    path.write_text('<template>\n  <p title="안녕">반가워요</p>\n</template>\n', encoding="utf-8")
    return path


class TestCli:

    def test_scan(self, settings_model, source_file, capsys):
        assert main.main(["scan", str(source_file)]) == 0
        out = capsys.readouterr().out
        assert "안녕" in out
        assert "반가워요" in out

    def test_convert_in_place(self, settings_model, source_file):
        code = main.main(["convert", str(source_file), "--namespace", "home", "-y"])

        assert code == 0
        assert source_file.read_text(encoding="utf-8") == (
            "<template>\n  <p :title=\"t('home.안녕')\">{{t('home.반가워요')}}</p>\n</template>\n"
        )

    def test_convert_to_output(self, settings_model, source_file, tmp_path):
        out = tmp_path / "out.vue"
        main.main(["convert", str(source_file), "--namespace", "", "-y", "-o", str(out)])
        assert "t('안녕')" in out.read_text(encoding="utf-8")
        assert "t(" not in source_file.read_text(encoding="utf-8")

    def test_generate_source_language(self, settings_model, source_file, tmp_path):
        code = main.main(["--project-root", str(tmp_path), "generate", str(source_file),
                          "--lang", "ko", "--namespace", "home"])

        assert code == 0
        data = json.loads((tmp_path / "locales.ko.json").read_text(encoding="utf-8"))
        assert data == {"home": {"안녕": "안녕", "반가워요": "반가워요"}}

    def test_sheet(self, settings_model, tmp_path, capsys):
        ko = tmp_path / "locales.ko.json"
        ko.write_text('{"a": "가"}', encoding="utf-8")

        assert main.main(["sheet", str(ko)]) == 0
        assert capsys.readouterr().out.splitlines() == ["Key\tKorean", "a\t가"]
