"""Preference management services."""

from recommender.services.preferences.manager import PreferenceManager

__all__ = ["PreferenceManager"]
