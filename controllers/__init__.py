# -*- coding: utf-8 -*-
"""
I18nForge Controllers Package

Command layer between the operator-facing views and the core services.
"""

from controllers.conversion_controller import ConversionController
from controllers.locale_controller import LocaleController
from controllers.monitor_controller import MonitorController

__all__ = [
    'ConversionController',
    'LocaleController',
    'MonitorController',
]
