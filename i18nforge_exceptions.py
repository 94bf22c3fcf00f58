# -*- coding: utf-8 -*-
"""
I18nForge Exceptions Module
Custom exception classes for structured error handling across the application.
"""


class I18nForgeError(Exception):
    """
    Base exception class for all I18nForge-related errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Interaction Exceptions
# =============================================================================

class UserCancelledError(I18nForgeError):
    """Raised when the operator dismisses a prompt. Callers abort silently."""

    def __init__(self, prompt: str = None):
        super().__init__("Operation cancelled by user", details={'prompt': prompt} if prompt else None)
        self.prompt = prompt


# =============================================================================
# Key Generation Exceptions
# =============================================================================

class KeyGenerationError(I18nForgeError):
    """Raised when the configured key transform fails or returns a non-string."""

    def __init__(self, message: str, transform: str = None, text: str = None):
        super().__init__(message, details={'transform': transform, 'text': text})
        self.transform = transform
        self.text = text


# =============================================================================
# Translation Exceptions
# =============================================================================

class TranslationError(I18nForgeError):
    """Raised when the translation backend fails."""

    def __init__(self, message: str, service: str = None, target_lang: str = None):
        super().__init__(message, details={'service': service, 'target_lang': target_lang})
        self.service = service
        self.target_lang = target_lang


class APIKeyError(TranslationError):
    """Raised when an API key is required but missing."""
    pass


# =============================================================================
# Store / File Exceptions
# =============================================================================

class FileOperationError(I18nForgeError):
    """Raised when a file operation (read/write) fails."""

    def __init__(self, message: str, file_path: str = None, operation: str = None):
        super().__init__(message, details={'file_path': file_path, 'operation': operation})
        self.file_path = file_path
        self.operation = operation


class StoreReadError(FileOperationError):
    """Raised when a locale store cannot be read or parsed."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, file_path=file_path, operation='read')


class WriteError(FileOperationError):
    """Raised when writing a locale store or source file fails."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, file_path=file_path, operation='write')


class UnsupportedFileError(I18nForgeError):
    """Raised when no syntax family can be derived from a file name."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path})
        self.file_path = file_path


# =============================================================================
# Settings Exceptions
# =============================================================================

class SettingsError(I18nForgeError):
    """Base exception for settings-related errors."""
    pass


class SettingsSaveError(SettingsError):
    """Raised when saving settings fails."""
    pass
