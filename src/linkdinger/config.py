"""Configuration loading and saving.

Config file location: ~/.config/linkdinger/config.toml

Schema:
    [linkding]
    url = "https://links.example.com"
    api_token = "..."

    [access]
    allowed_users = [12345, 67890]  # empty = anyone may use the relay

    [http]
    timeout = 30.0

Environment variables take precedence over the file:
    LINKDING_URL
    LINKDING_API_TOKEN
    LINKDING_ALLOWED_USERS  (comma-separated user IDs)
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

CONFIG_DIR = Path.home() / ".config" / "linkdinger"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_TIMEOUT = 30.0


@dataclass
class LinkdingConfig:
    url: str
    api_token: str


@dataclass
class AppConfig:
    linkding: LinkdingConfig
    allowed_users: list[int] = field(default_factory=list)
    timeout: float = DEFAULT_TIMEOUT


def parse_allowed_users(raw: str) -> list[int]:
    """Parse "1, 2,abc" into [1, 2]; entries that aren't integers are dropped."""
    users = []
    for part in raw.split(","):
        part = part.strip()
        try:
            users.append(int(part))
        except ValueError:
            continue
    return users


def load_config(
    config_path: Path = CONFIG_FILE, env: Mapping[str, str] | None = None
) -> AppConfig:
    """Load config from TOML file, overlaid with environment variables."""
    env = os.environ if env is None else env

    data: dict = {}
    if config_path.exists():
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    elif not env.get("LINKDING_URL"):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    linkding_data = data.get("linkding", {})
    access_data = data.get("access", {})
    http_data = data.get("http", {})

    url = env.get("LINKDING_URL") or linkding_data.get("url", "")
    api_token = env.get("LINKDING_API_TOKEN") or linkding_data.get("api_token", "")

    if not url or not api_token:
        raise ValueError("Config missing required linkding.url and linkding.api_token")

    if env.get("LINKDING_ALLOWED_USERS"):
        allowed_users = parse_allowed_users(env["LINKDING_ALLOWED_USERS"])
    else:
        allowed_users = [int(u) for u in access_data.get("allowed_users", [])]

    return AppConfig(
        linkding=LinkdingConfig(url=url.rstrip("/"), api_token=api_token),
        allowed_users=allowed_users,
        timeout=float(http_data.get("timeout", DEFAULT_TIMEOUT)),
    )


def save_config(config: AppConfig, config_path: Path = CONFIG_FILE) -> None:
    """Write config to TOML file with restricted permissions."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "linkding": {
            "url": config.linkding.url,
            "api_token": config.linkding.api_token,
        },
        "access": {
            "allowed_users": list(config.allowed_users),
        },
        "http": {
            "timeout": config.timeout,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)

    # API token lives in here
    os.chmod(config_path, 0o600)


def config_exists(config_path: Path = CONFIG_FILE) -> bool:
    return config_path.exists()
