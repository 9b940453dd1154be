"""Minik - a compact kanban view over GitHub Projects v2 boards."""

__version__ = "0.1.0"
