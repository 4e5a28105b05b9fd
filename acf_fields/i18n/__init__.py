"""
i18n (Internationalization) package

Provides the translator hook used for builder default labels.
"""

from .translate import reset_translator, set_translator, translate

__all__ = [
    "reset_translator",
    "set_translator",
    "translate",
]
