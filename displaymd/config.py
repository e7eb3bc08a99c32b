"""Startup settings for the markdown server."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_HOME = "README.md"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


class ConfigurationError(ValueError):
    """The server cannot start with the given settings."""


@dataclass(frozen=True)
class Settings:
    root: Path
    home: str = DEFAULT_HOME
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def load_settings(
    root: str | Path,
    home: str = DEFAULT_HOME,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Settings:
    """Canonicalize the root directory and validate the rest.

    Raises ConfigurationError if the root is missing, not a directory, or
    the port is out of range.
    """
    try:
        resolved = Path(root).expanduser().resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        raise ConfigurationError(f"invalid path: {root}") from exc
    if not resolved.is_dir():
        raise ConfigurationError(f"not a directory: {resolved}")
    if not 0 < port < 65536:
        raise ConfigurationError(f"port out of range: {port}")
    return Settings(root=resolved, home=home, host=host, port=port)
