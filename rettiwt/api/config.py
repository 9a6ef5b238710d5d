"""Client configuration.

``RettiwtConfig`` is read-only once built. The core never reads the process
environment; ``RettiwtConfig.from_env`` is there for launchers (a CLI, a
server) that want to translate their environment into a config.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .auth import AuthCredential

LOGGER_NAME = "rettiwt"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Environment variable -> config field
ENV_FIELDS = {
    "API_KEY": "api_key",
    "PROXY_URL": "proxy_url",
    "USE_CACHE": "use_cache",
    "STORE_LOGS": "store_logs",
    "CACHE_DB_URL": "cache_db_url",
    "DATA_DB_URL": "data_db_url",
    "APP_PORT": "app_port",
}


class RettiwtConfig(BaseModel):
    """Options for a ``Rettiwt`` client.

    ``use_cache``, ``cache_db_url``, ``data_db_url`` and ``app_port`` are
    carried for the caching layer and server that may wrap the client; the
    client itself does not act on them.
    """

    api_key: str | None = None
    guest_key: str | None = None
    proxy_url: str | None = None
    timeout: float = Field(30.0, gt=0)
    logging: bool = False
    store_logs: bool = False
    log_file: str = "rettiwt.log"
    use_cache: bool = False
    cache_db_url: str | None = None
    data_db_url: str | None = None
    app_port: int | None = Field(None, ge=1, le=65535)

    model_config = ConfigDict(frozen=True)

    @property
    def credential(self) -> AuthCredential:
        """User credential when ``api_key`` is set, else guest."""
        if self.api_key:
            return AuthCredential.user(self.api_key)
        return AuthCredential.guest(self.guest_key)

    @classmethod
    def from_env(cls, env: Mapping[str, str], **overrides: Any) -> RettiwtConfig:
        """Build a config from environment-style variables.

        Args:
            env: Variables (e.g. ``os.environ``); unset or empty ones are ignored
            **overrides: Fields taking precedence over the environment
        """
        values: dict[str, Any] = {
            field: env[name] for name, field in ENV_FIELDS.items() if env.get(name)
        }
        values.update(overrides)
        return cls.model_validate(values)


def configure_logging(config: RettiwtConfig) -> logging.Logger:
    """Attach handlers to the ``rettiwt`` logger as the config asks.

    Nothing is attached unless ``logging`` or ``store_logs`` is set. Calling
    it again with the same config does not duplicate handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not (config.logging or config.store_logs):
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)
    if config.logging and not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if config.store_logs:
        existing = {
            h.baseFilename for h in logger.handlers if isinstance(h, logging.FileHandler)
        }
        file_handler = logging.FileHandler(config.log_file, delay=True)
        if file_handler.baseFilename in existing:
            file_handler.close()
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger
