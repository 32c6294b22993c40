"""Local persistent storage."""

from .preferences import PreferencesStore

__all__ = ["PreferencesStore"]
