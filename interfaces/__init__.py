# -*- coding: utf-8 -*-
"""
I18nForge Interfaces Package

Contracts between the core services and their external collaborators:
operator views, the text extractor and the translation backend.
"""

from interfaces.i_view import INotifier, IPrompter
from interfaces.i_extractor import ITextExtractor
from interfaces.i_translator import ITranslator

__all__ = [
    'INotifier',
    'IPrompter',
    'ITextExtractor',
    'ITranslator',
]
