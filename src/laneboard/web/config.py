"""Web server configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class WebConfig:
    """Configuration for the web server.

    ``host`` and ``port`` are the bind address for the ASGI runner that serves
    ``create_app``; the app itself only reads the remaining fields.
    """

    host: str = "0.0.0.0"
    port: int = 8000
    db_path: str = ".laneboard/board.db"
    cors_origins: list[str] | None = None
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> WebConfig:
        config = cls()
        config.host = os.environ.get("LANEBOARD_HOST", config.host)
        config.port = int(os.environ.get("LANEBOARD_PORT", config.port))
        config.db_path = os.environ.get("LANEBOARD_DB_PATH", config.db_path)
        config.debug = os.environ.get("LANEBOARD_DEBUG", "").lower() in ("1", "true")
        origins = os.environ.get("LANEBOARD_CORS_ORIGINS")
        if origins:
            config.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
        config.log_level = os.environ.get("LANEBOARD_LOG_LEVEL", config.log_level).upper()
        if config.debug:
            config.log_level = "DEBUG"
        if config.log_level not in logging.getLevelNamesMapping():
            logger.warning("Unknown LANEBOARD_LOG_LEVEL %r, using INFO", config.log_level)
            config.log_level = "INFO"
        return config
