# -*- coding: utf-8 -*-
"""
I18nForge View Interfaces

Protocol definitions for operator-facing components.
Core services and controllers depend on these protocols, never on a
concrete UI.
"""

from typing import Protocol, Optional, List, Sequence, runtime_checkable


@runtime_checkable
class INotifier(Protocol):
    """Non-blocking messages to the operator."""

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


@runtime_checkable
class IPrompter(Protocol):
    """
    Blocking questions to the operator.

    Every method returns None when the operator dismisses the prompt.
    """

    def ask_namespace(self, current: str) -> Optional[str]:
        """Ask for a namespace, pre-filled with the current one."""
        ...

    def choose_languages(self, enabled: Sequence[str], source_language: str) -> Optional[List[str]]:
        """Pick one language or all enabled languages."""
        ...

    def confirm(self, message: str, options: Sequence[str]) -> Optional[str]:
        """Pick one of the given options."""
        ...
