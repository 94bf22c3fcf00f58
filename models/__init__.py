# -*- coding: utf-8 -*-
"""
I18nForge Models Package

Data models shared by the core services and controllers.
"""

from models.text_range import TextRange, VariableInfo, Modification, LocaleEntry, PreviewOverlay
from models.session import SessionContext
from models.settings_model import SettingsModel

__all__ = [
    'TextRange', 'VariableInfo', 'Modification', 'LocaleEntry', 'PreviewOverlay',
    'SessionContext', 'SettingsModel',
]
