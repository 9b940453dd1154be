"""GitHub token acquisition.

Tokens come from the environment or from the locally installed and
authenticated GitHub CLI (`gh auth token`).
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping

from minik.github.exceptions import AuthenticationError
from minik.logging import get_logger

logger = get_logger("auth")

# Checked in order; Homebrew locations first because GUI launches on macOS
# do not inherit the shell PATH.
GH_CANDIDATES = (
    "/opt/homebrew/bin/gh",
    "/usr/local/bin/gh",
    "gh",
)

TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")


def find_gh_command() -> str:
    """Locate a working gh executable.

    Returns:
        Path (or bare name) of the first candidate answering `--version`.

    Raises:
        AuthenticationError: If gh is not installed anywhere we look.
    """
    for candidate in GH_CANDIDATES:
        try:
            result = subprocess.run(
                [candidate, "--version"],
                capture_output=True,
                text=True,
                check=False,
            )
        except (FileNotFoundError, PermissionError):
            continue
        if result.returncode == 0:
            logger.debug("Found gh at: %s", candidate)
            return candidate

    logger.error("Could not find gh CLI in any common location")
    raise AuthenticationError(
        "GitHub CLI (gh) not found. Please install it with 'brew install gh' "
        "and authenticate with 'gh auth login'"
    )


def get_token(env: Mapping[str, str] | None = None) -> str:
    """Get a GitHub bearer token.

    Args:
        env: Environment mapping. Defaults to os.environ.

    Returns:
        A non-empty token.

    Raises:
        AuthenticationError: If no token is configured and gh cannot supply one.
    """
    env = os.environ if env is None else env
    for var in TOKEN_ENV_VARS:
        token = env.get(var, "").strip()
        if token:
            logger.debug("Using token from %s", var)
            return token

    gh = find_gh_command()
    try:
        result = subprocess.run(
            [gh, "auth", "token"],
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        logger.error("gh auth token failed with status %s: %s", e.returncode, e.stderr)
        raise AuthenticationError(
            "Failed to get GitHub token. Please ensure 'gh' is authenticated."
        ) from e

    token = result.stdout.strip()
    if not token:
        raise AuthenticationError("gh returned an empty token. Run 'gh auth login' first.")

    logger.info("GitHub token obtained from gh CLI (token length: %d)", len(token))
    return token
