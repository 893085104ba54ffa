import os
from pathlib import Path
from typing import Optional

import yaml

from prremind_core.errors import ConfigFormatError

DEFAULT_CONFIG: dict = {
    "repo": None,  # owner/name; falls back to GITHUB_REPOSITORY
    "provider": "slack",
    "channel": "",
    "webhook_url": None,
    "github_provider_map": "",  # "login1:chatId1,login2:chatId2"
    "ignore_label": "",  # comma-separated label names
}


def _as_csv(key: str, value):
    """Accept YAML lists (and a mapping for the provider map) for the comma-separated settings."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    if key == "github_provider_map" and isinstance(value, dict):
        return ",".join(f"{login}:{chat_id}" for login, chat_id in value.items())
    raise ConfigFormatError(f"{key} must be a comma-separated string or a list, got {type(value).__name__}.")


def load_config(config_path: str = ".prremind.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .prremind.yml in the current directory
      3. CLI argument overrides
      4. Environment: GITHUB_REPOSITORY when no repo is set by 1-3, plus
         GITHUB_API_URL and GITHUB_TOKEN

    ``ignore_label`` and ``github_provider_map`` may be YAML lists (the map
    also a mapping); they are joined into their comma-separated form.
    Raises ConfigFormatError for any other non-string value.
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    for key in ("ignore_label", "github_provider_map"):
        config[key] = _as_csv(key, config.get(key))

    # GitHub Actions exports these for every job.
    if not config.get("repo"):
        config["repo"] = os.environ.get("GITHUB_REPOSITORY")
    config["github_api_url"] = os.environ.get("GITHUB_API_URL")
    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config
