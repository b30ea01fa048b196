"""Localisation des messages (bundles JSON)."""

from moviebuddy.adapters.i18n.message_source import MessageSourceLocalizer, default_locale

__all__ = [
    "MessageSourceLocalizer",
    "default_locale",
]
