"""
Tool settings for the bundler.

Settings are layered from defaults, user and project YAML files, an explicit
settings file, environment variables and CLI arguments.
"""

from bundler.config.manager import ConfigurationManager
from bundler.config.schema import BundlerSettings, LogLevel

__all__ = [
    "BundlerSettings",
    "ConfigurationManager",
    "LogLevel",
]
