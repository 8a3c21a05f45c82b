"""Configuration management for modsync."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_SERVER_URL = "MODSYNC_SERVER_URL"
ENV_INSTALL_DIR = "MODSYNC_INSTALL_DIR"


class Config:
    """Configuration manager.

    Values are read from environment variables first, then from a JSON
    config file in the user's config directory.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration.

        Args:
            config_path: Path to the config file. Defaults to
                ~/.config/modsync/config.json
        """
        self._config_path = config_path

    def get_config_path(self) -> Path:
        """Get the path to the configuration file.

        Raises:
            ConfigurationError: If the default path has no home directory
        """
        if self._config_path is None:
            try:
                home = Path.home()
            except RuntimeError as e:
                raise ConfigurationError(
                    f"Cannot locate the config file: {e}"
                ) from e
            self._config_path = home / ".config" / "modsync" / "config.json"
        return self._config_path

    def _load_file(self) -> dict[str, Any]:
        """Load the config file.

        Returns:
            Dictionary of stored values (empty if the file does not exist)

        Raises:
            ConfigurationError: If the file exists but cannot be parsed
        """
        config_path = self.get_config_path()
        if not config_path.exists():
            return {}
        try:
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Cannot read config file {config_path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_path} must contain a JSON object"
            )
        return data

    def _get(self, env_name: str, key: str) -> Optional[str]:
        value = os.environ.get(env_name)
        if value:
            return value
        stored = self._load_file().get(key)
        return str(stored) if stored else None

    @property
    def server_url(self) -> Optional[str]:
        """URL of the mod server to sync from."""
        return self._get(ENV_SERVER_URL, "server_url")

    @property
    def install_dir(self) -> Optional[Path]:
        """Minecraft installation directory override."""
        value = self._get(ENV_INSTALL_DIR, "install_dir")
        return Path(value).expanduser() if value else None

    def save(
        self,
        server_url: Optional[str] = None,
        install_dir: Optional[Path] = None,
    ) -> None:
        """Save values to the config file, keeping values not given.

        Args:
            server_url: Mod server URL
            install_dir: Minecraft installation directory

        Raises:
            ConfigurationError: If the file cannot be written
        """
        config_path = self.get_config_path()
        data = self._load_file()
        if server_url is not None:
            data["server_url"] = server_url
        if install_dir is not None:
            data["install_dir"] = str(install_dir)

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write config file {config_path}: {e}"
            ) from e
        logger.debug("Saved configuration to %s", config_path)


config = Config()
