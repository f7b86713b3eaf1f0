"""Errors raised by topology translation."""


class TranslationError(RuntimeError):
    """Base class for topology translation failures."""


class InvalidInputError(TranslationError):
    """Zone values are missing, blank, or not in the expected format."""


class UnsupportedKeyError(TranslationError):
    """A topology key is outside the translation table."""

    def __init__(self, key: str):
        super().__init__(f"unknown topology key: {key}")
        self.key = key
