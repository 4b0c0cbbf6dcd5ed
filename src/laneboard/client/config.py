"""Client configuration.

Loads from ~/.laneboard/client.yaml with environment variable overrides.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ClientConfig:
    """Configuration for talking to a laneboard server."""

    server_url: str = "http://localhost:8000"
    timeout: float = 30.0  # seconds per HTTP request
    default_board: str = ""

    CONFIG_FILE: Path = field(
        default_factory=lambda: Path.home() / ".laneboard" / "client.yaml",
        repr=False,
    )

    @classmethod
    def load(cls, config_path: Path | None = None) -> ClientConfig:
        """Load client config from file and environment variables.

        Priority (highest wins):
          1. Environment variables (LANEBOARD_SERVER_URL, LANEBOARD_TIMEOUT,
             LANEBOARD_BOARD)
          2. Config file (~/.laneboard/client.yaml or custom path)
          3. Defaults
        """
        config = cls()
        file_path = config_path or config.CONFIG_FILE

        if file_path.exists():
            try:
                with open(file_path) as f:
                    data = yaml.safe_load(f) or {}

                config.server_url = data.get("server_url", config.server_url)
                config.timeout = float(data.get("timeout", config.timeout))
                config.default_board = str(data.get("default_board", config.default_board))
            except (yaml.YAMLError, OSError, ValueError) as e:
                logger.warning("Ignoring unreadable config %s: %s", file_path, e)

        config.server_url = os.environ.get("LANEBOARD_SERVER_URL", config.server_url)
        config.default_board = os.environ.get("LANEBOARD_BOARD", config.default_board)
        if env_timeout := os.environ.get("LANEBOARD_TIMEOUT"):
            config.timeout = float(env_timeout)

        return config

    def save(self, config_path: Path | None = None) -> None:
        file_path = config_path or self.CONFIG_FILE
        file_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "server_url": self.server_url,
            "timeout": self.timeout,
            "default_board": self.default_board,
        }

        with open(file_path, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False)
