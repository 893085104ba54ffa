"""GitHub token resolution.

Resolution order (stops at first success):
  1. GITHUB_TOKEN environment variable (injected in GitHub Actions)
  2. GH_TOKEN environment variable (the name the gh CLI itself reads)
  3. `gh auth token` (local GitHub CLI session)
"""

from __future__ import annotations

import logging
import os
import subprocess

logger = logging.getLogger(__name__)

_TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")


def resolve_github_token() -> str | None:
    """Return a GitHub token or None if no source is available.

    Never raises; callers turn None into a UsageError.
    """
    for name in _TOKEN_ENV_VARS:
        token = os.environ.get(name)
        if token:
            return token

    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        logger.debug("gh CLI unavailable; no GitHub token resolved.")
        return None

    if result.returncode == 0 and result.stdout.strip():
        logger.debug("Resolved GitHub token via gh CLI session.")
        return result.stdout.strip()
    return None


def connect_repo(config: dict):
    """Resolve a token and repository name from ``config`` and open the GitHub repo.

    Raises click.UsageError when either is missing.
    """
    import click

    from prremind_core.gh.pull_request import get_repo

    token = resolve_github_token()
    if not token:
        raise click.UsageError(
            "No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.\n"
            "Create a token at https://github.com/settings/tokens"
        )
    config["github_token"] = token

    if not config.get("repo"):
        raise click.UsageError("No repository given. Pass --repo owner/name or set GITHUB_REPOSITORY.")

    return get_repo(config["repo"], token=token, base_url=config.get("github_api_url"))
