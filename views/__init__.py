# -*- coding: utf-8 -*-
"""
I18nForge Views Package

Operator-facing notifier and prompter implementations.
"""

from views.console_view import LogNotifier, ConsoleNotifier, ConsolePrompter

__all__ = ['LogNotifier', 'ConsoleNotifier', 'ConsolePrompter']
