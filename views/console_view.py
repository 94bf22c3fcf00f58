# -*- coding: utf-8 -*-
"""
I18nForge Console View

Console implementations of the notifier and prompter interfaces, plus a
notifier that only logs (for non-interactive runs and tests).
"""

import sys
from typing import List, Optional, Sequence

from i18nforge_logger import get_logger
from core.locale_merge import get_language_name

logger = get_logger("views.console")


class LogNotifier:
    """Forwards notifications to the logger."""

    def info(self, message: str) -> None:
        logger.info(message)

    def warning(self, message: str) -> None:
        logger.warning(message)

    def error(self, message: str) -> None:
        logger.error(message)


class ConsoleNotifier:
    """Prints notifications; warnings and errors go to stderr."""

    def __init__(self, stream=None, error_stream=None):
        self.stream = stream or sys.stdout
        self.error_stream = error_stream or sys.stderr

    def info(self, message: str) -> None:
        print(message, file=self.stream)

    def warning(self, message: str) -> None:
        print(f"Warning: {message}", file=self.error_stream)

    def error(self, message: str) -> None:
        print(f"Error: {message}", file=self.error_stream)


class ConsolePrompter:
    """Prompts on stdin. EOF or Ctrl+C count as cancel."""

    def __init__(self, input_func=input):
        self._input = input_func

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    def ask_namespace(self, current: str) -> Optional[str]:
        suffix = f" [{current}]" if current else ""
        answer = self._ask(f"Namespace (optional, e.g. common){suffix}: ")
        if answer is None:
            return None
        return answer.strip() or current

    def choose_languages(self, enabled: Sequence[str], source_language: str) -> Optional[List[str]]:
        options = list(enabled)
        for i, lang in enumerate(options, 1):
            note = "source text" if lang == source_language else "translated"
            print(f"  {i}) {get_language_name(lang)} ({lang}) - {note}")
        if len(options) > 1:
            print(f"  {len(options) + 1}) All enabled languages")

        answer = self._ask("Select language: ")
        if answer is None:
            return None
        answer = answer.strip()

        if answer in options:
            return [answer]
        if not answer.isdigit():
            return None
        choice = int(answer)
        if 1 <= choice <= len(options):
            return [options[choice - 1]]
        if choice == len(options) + 1 and len(options) > 1:
            return options
        return None

    def confirm(self, message: str, options: Sequence[str]) -> Optional[str]:
        answer = self._ask(f"{message} ({'/'.join(options)}): ")
        if answer is None:
            return None
        answer = answer.strip()
        return answer if answer in options else None
