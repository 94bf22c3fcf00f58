# -*- coding: utf-8 -*-
"""
I18nForge Core Package

Extraction, conversion, translation and locale services.
"""
