"""Project root discovery, config loading, and environment setup."""

from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

DEFAULT_OUTPUT = {"max_rows": 50, "show_unchanged_count": True}


def get_project_root() -> Path:
    """Find project root by walking up to pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    raise FileNotFoundError("Could not find project root (no pyproject.toml found)")


def load_config() -> dict[str, Any]:
    """Load config.yaml from project root."""
    root = get_project_root()
    config_path = root / "config.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def get_output_settings(config: dict[str, Any] | None = None) -> dict[str, Any]:
    """Output section of the config, with defaults filled in."""
    if config is None:
        config = load_config()
    return {**DEFAULT_OUTPUT, **(config.get("output") or {})}


def load_env():
    """Load .env file from project root."""
    env_path = get_project_root() / ".env"
    load_dotenv(env_path)
