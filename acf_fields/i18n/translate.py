"""
Translation hook

Default labels seeded by builders (e.g. the "Submit" button value) go through
translate(). The host application installs its own lookup with
set_translator(); without one, text is returned unchanged.
"""

from __future__ import annotations

from collections.abc import Callable

from acf_fields.config import settings

Translator = Callable[[str, str], str]


def _identity(text: str, domain: str) -> str:
    return text


_translator: Translator = _identity


def set_translator(translator: Translator) -> None:
    """Install a ``(text, domain) -> str`` lookup used for default labels."""
    global _translator
    _translator = translator


def reset_translator() -> None:
    """Restore the identity translator."""
    global _translator
    _translator = _identity


def translate(text: str, domain: str | None = None) -> str:
    """Translate ``text`` in ``domain`` (defaults to settings.text_domain).

    Args:
        text:   Source string, e.g. "Submit".
        domain: Text domain the string belongs to.

    Returns:
        The translated string.
    """
    return _translator(text, domain or settings.text_domain)
