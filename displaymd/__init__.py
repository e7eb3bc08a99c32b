"""displaymd: serve a directory of markdown files with a navigation sidebar."""

from displaymd.app import create_app
from displaymd.config import ConfigurationError, Settings, load_settings

__all__ = ["create_app", "ConfigurationError", "Settings", "load_settings"]
__version__ = "0.1.0"
