"""Preferences store - local application state kept between runs."""

from minik.state_store.exceptions import NoBoardSelectedError, StateStoreError
from minik.state_store.models import AppState, BoardPreference
from minik.state_store.store import PreferenceStore

__all__ = [
    "AppState",
    "BoardPreference",
    "NoBoardSelectedError",
    "PreferenceStore",
    "StateStoreError",
]
