"""Custom exceptions for the preferences store."""


class StateStoreError(Exception):
    """Base exception for preferences store errors."""


class NoBoardSelectedError(StateStoreError):
    """An operation needed a selected board but none is selected."""
