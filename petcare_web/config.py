import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from typing_extensions import Self

from .server.constants import (
    DEFAULT_ASSETS_DIR,
    DEFAULT_HOST,
    DEFAULT_PORT,
    FALLBACK_DOCUMENT,
)

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the environment holds an unusable configuration value."""


def parse_port(value: str | int) -> int:
    """Parse a TCP port, rejecting anything outside 0-65535."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid port {value!r}: not an integer") from None
    if not 0 <= port <= 65535:
        raise ConfigError(f"Invalid port {port}: must be between 0 and 65535")
    return port


@dataclass(frozen=True)
class ServerConfig:
    """Startup configuration for the asset server.

    Resolved once when the process starts and passed by value into the app,
    nothing reads the environment after that.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    assets_dir: Path = Path(DEFAULT_ASSETS_DIR)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Create a ServerConfig from environment variables.

        Only ``PORT`` is read; the assets dir is ``build/web`` under the
        current working directory.
        """
        if environ is None:
            environ = os.environ

        port = DEFAULT_PORT
        # treat `PORT=` the same as unset
        if env_port := environ.get("PORT"):
            port = parse_port(env_port)
            logger.debug(f"Using port {port} from PORT environment variable")

        return cls(port=port, assets_dir=Path.cwd() / DEFAULT_ASSETS_DIR)

    def with_overrides(
        self,
        host: str | None = None,
        port: int | None = None,
        assets_dir: str | Path | None = None,
    ) -> Self:
        """Return a copy with the given values replaced, skipping ``None``."""
        changes: dict = {}
        if host is not None:
            changes["host"] = host
        if port is not None:
            changes["port"] = parse_port(port)
        if assets_dir is not None:
            changes["assets_dir"] = Path(assets_dir)
        return replace(self, **changes)

    @property
    def fallback_document(self) -> Path:
        return self.assets_dir / FALLBACK_DOCUMENT
