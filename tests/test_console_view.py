# -*- coding: utf-8 -*-
"""
Unit Tests for the console notifier and prompter
"""

import io
import logging

from views import LogNotifier, ConsoleNotifier, ConsolePrompter


def _scripted(*answers):
    queue = list(answers)

    def _input(prompt):
        answer = queue.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer
    return _input


class TestNotifiers:

    def test_console_notifier_streams(self):
        out, err = io.StringIO(), io.StringIO()
        notifier = ConsoleNotifier(out, err)

        notifier.info("done")
        notifier.warning("careful")
        notifier.error("broken")

        assert out.getvalue() == "done\n"
        assert err.getvalue() == "Warning: careful\nError: broken\n"

    def test_log_notifier(self, caplog):
        logger = logging.getLogger("i18nforge")
        logger.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.INFO, logger="i18nforge"):
                LogNotifier().warning("careful")
        finally:
            logger.removeHandler(caplog.handler)
        assert "careful" in caplog.text


class TestConsolePrompter:

    def test_namespace_keeps_current_on_empty_answer(self):
        assert ConsolePrompter(_scripted("")).ask_namespace("home") == "home"
        assert ConsolePrompter(_scripted(" shop ")).ask_namespace("home") == "shop"

    def test_eof_and_interrupt_cancel(self):
        assert ConsolePrompter(_scripted(EOFError())).ask_namespace("") is None
        assert ConsolePrompter(_scripted(KeyboardInterrupt())).confirm("ok?", ("y", "n")) is None

    def test_choose_languages(self, capsys):
        enabled = ["ko", "en", "ja"]
        assert ConsolePrompter(_scripted("2")).choose_languages(enabled, "ko") == ["en"]
        assert ConsolePrompter(_scripted("4")).choose_languages(enabled, "ko") == enabled
        assert ConsolePrompter(_scripted("ja")).choose_languages(enabled, "ko") == ["ja"]
        assert ConsolePrompter(_scripted("9")).choose_languages(enabled, "ko") is None

    def test_confirm(self):
        assert ConsolePrompter(_scripted("y")).confirm("write?", ("y", "n")) == "y"
        assert ConsolePrompter(_scripted("maybe")).confirm("write?", ("y", "n")) is None
