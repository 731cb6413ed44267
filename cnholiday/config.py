"""Configuration management."""

import configparser
import os
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "cnholiday" / "config.ini"
DEFAULT_REMOTE_BASE_URL = "https://cdn.jsdelivr.net/npm/chinese-days/dist/years"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class Config:
    """Data source configuration."""

    local_data_dir: Path | None = None
    disable_remote: bool = False
    remote_base_url: str = DEFAULT_REMOTE_BASE_URL
    timeout: float | None = None

    def __post_init__(self) -> None:
        self.local_data_dir = Path(self.local_data_dir) if self.local_data_dir else None
        if not self.remote_base_url:
            self.remote_base_url = DEFAULT_REMOTE_BASE_URL

    def replace(self, **changes) -> "Config":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        local_data_dir = os.environ.get("CNHOLIDAY_LOCAL_DATA_DIR")
        disable_remote = os.environ.get("CNHOLIDAY_DISABLE_REMOTE")
        remote_base_url = os.environ.get("CNHOLIDAY_REMOTE_BASE_URL")
        timeout = os.environ.get("CNHOLIDAY_TIMEOUT")
        if not any((local_data_dir, disable_remote, remote_base_url, timeout)):
            return None

        return cls(
            local_data_dir=Path(local_data_dir) if local_data_dir else None,
            disable_remote=(disable_remote or "").lower() in _TRUE_VALUES,
            remote_base_url=remote_base_url or DEFAULT_REMOTE_BASE_URL,
            timeout=float(timeout) if timeout else None,
        )

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path)
        if not config.has_section("cnholiday"):
            return None
        section = config["cnholiday"]
        local_data_dir = section.get("localDataDir")
        timeout = section.get("timeout")
        return cls(
            local_data_dir=Path(local_data_dir) if local_data_dir else None,
            disable_remote=section.getboolean("disableRemote", fallback=False),
            remote_base_url=section.get("remoteBaseUrl", DEFAULT_REMOTE_BASE_URL),
            timeout=float(timeout) if timeout else None,
        )

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["cnholiday"] = {
            "localDataDir": str(self.local_data_dir) if self.local_data_dir else "",
            "disableRemote": "true" if self.disable_remote else "false",
            "remoteBaseUrl": self.remote_base_url,
            "timeout": "" if self.timeout is None else str(self.timeout),
        }
        with path.open("w") as config_file:
            config.write(config_file)
