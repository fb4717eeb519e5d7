# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env
#   file. Provides typed config objects to the shell, the
#   snapshot store and the CLI.
#
# CLASSES:
# --------
# - SnapshotConfig (dataclass)
#     path: str          (default "db.json")
#     indent: int        (default 2)
#
# - ShellConfig (dataclass)
#     prompt: str        (default "tableshell> ")
#     load_on_start: bool (default True)
#
# - AppConfig (dataclass)
#     snapshot: SnapshotConfig
#     shell: ShellConfig
#     log_level: str     (default "WARNING")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the singleton so the next get_config() re-reads
#     the environment.
#
# USAGE:
# ------
#   from tableshell.config import get_config
#   config = get_config()
#   print(config.snapshot.path)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class SnapshotConfig:
    """Where and how the store snapshot is written."""
    path: str = "db.json"
    indent: int = 2


@dataclass
class ShellConfig:
    """Interactive loop settings."""
    prompt: str = "tableshell> "
    load_on_start: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    snapshot: SnapshotConfig = field(default_factory=SnapshotConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    snapshot_config = SnapshotConfig(
        path=os.getenv("TABLESHELL_SNAPSHOT_PATH", "db.json"),
        indent=int(os.getenv("TABLESHELL_SNAPSHOT_INDENT", "2"))
    )

    shell_config = ShellConfig(
        prompt=os.getenv("TABLESHELL_PROMPT", "tableshell> "),
        load_on_start=_env_bool("TABLESHELL_LOAD_ON_START", True)
    )

    _config_instance = AppConfig(
        snapshot=snapshot_config,
        shell=shell_config,
        log_level=os.getenv("TABLESHELL_LOG_LEVEL", "WARNING").upper()
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment (used by tests)."""
    global _config_instance
    _config_instance = None
