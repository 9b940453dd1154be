"""Centralized logging configuration for Minik.

Provides rotating file logs with consistent formatting across all components.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Default configuration
DEFAULT_LOG_FILE = "minik.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_TOKEN_PATTERNS = [
    (re.compile(r"ghp_[a-zA-Z0-9]{36}"), "[GITHUB_TOKEN]"),  # classic PAT
    (re.compile(r"gho_[a-zA-Z0-9]{36}"), "[GITHUB_TOKEN]"),  # OAuth (gh CLI)
    (re.compile(r"github_pat_[a-zA-Z0-9_]{82}"), "[GITHUB_TOKEN]"),  # fine-grained PAT
    (re.compile(r"Bearer [a-zA-Z0-9._-]+"), "Bearer [REDACTED]"),
    (re.compile(r"token=[a-zA-Z0-9._-]+"), "token=[REDACTED]"),
]


def default_log_dir() -> Path:
    """Platform log directory for Minik.

    Returns:
        ~/Library/Logs/Minik on macOS, %LOCALAPPDATA%/Minik/logs on Windows,
        ~/.local/share/minik/logs elsewhere.
    """
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Logs" / "Minik"
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA")
        return (Path(base) if base else home / "AppData" / "Local") / "Minik" / "logs"
    base = os.environ.get("XDG_DATA_HOME")
    return (Path(base) if base else home / ".local" / "share") / "minik" / "logs"


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Set up logging with rotating file handler.

    Args:
        log_dir: Directory for log files. Defaults to the platform log
                 directory. Can be overridden with MINIK_LOG_DIR.
        log_file: Log file name. Defaults to 'minik.log'.
        max_bytes: Maximum size per log file before rotation. Defaults to 10MB.
        backup_count: Number of backup files to keep. Defaults to 5.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
               Can be overridden with MINIK_LOG_LEVEL.
        console: Whether to also log to stderr. Defaults to True.

    Returns:
        The root minik logger.
    """
    if log_dir is None:
        env_dir = os.environ.get("MINIK_LOG_DIR")
        log_dir = Path(env_dir) if env_dir else default_log_dir()
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    if level is None:
        level = os.environ.get("MINIK_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("minik")
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = log_dir / log_file
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.info("Minik logging initialized (level=%s, file=%s)", level, log_path)
    logger.info("Platform: %s", sys.platform)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'github.transport', 'state_store').
              Will be prefixed with 'minik.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith("minik."):
        name = f"minik.{name}"
    return logging.getLogger(name)


def truncate_output(output: str, max_length: int = 5000) -> str:
    """Truncate long output for logging.

    Args:
        output: The output string to truncate.
        max_length: Maximum length before truncation.

    Returns:
        Truncated string with indicator if truncated.
    """
    if len(output) <= max_length:
        return output
    return output[:max_length] + f"\n... [truncated, {len(output) - max_length} more chars]"


def sanitize_for_log(text: str) -> str:
    """Remove GitHub tokens and bearer credentials from log output."""
    result = text
    for pattern, replacement in _TOKEN_PATTERNS:
        result = pattern.sub(replacement, result)
    return result
