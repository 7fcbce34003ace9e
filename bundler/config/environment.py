"""
Environment variable integration for the bundler settings.

Centralizes the environment variable names the settings layer reads.
"""

import os
from typing import Dict, List


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""
    
    ENCODING = "AMD_BUNDLER_ENCODING"
    ENTRY_POINT = "AMD_BUNDLER_ENTRY_POINT"
    PACKAGE_PATH = "AMD_BUNDLER_PACKAGE_PATH"
    SCRIPT_DIRECTORY = "AMD_BUNDLER_SCRIPT_DIRECTORY"
    LOG_LEVEL = "AMD_BUNDLER_LOG_LEVEL"
    LOG_FILE = "AMD_BUNDLER_LOG_FILE"
    
    # settings key for each variable
    SETTINGS_KEYS = {
        ENCODING: "encoding",
        ENTRY_POINT: "entry_point",
        PACKAGE_PATH: "package_path",
        SCRIPT_DIRECTORY: "script_directory",
        LOG_LEVEL: "log_level",
        LOG_FILE: "log_file",
    }
    
    @classmethod
    def get_all_variables(cls) -> List[str]:
        """Get list of all supported environment variables."""
        return list(cls.SETTINGS_KEYS)
    
    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.ENCODING: "Encoding for reading scripts and writing bundles (default: utf-8)",
            cls.ENTRY_POINT: "Entry point directory relative to the project",
            cls.PACKAGE_PATH: "Root directory for bundle output",
            cls.SCRIPT_DIRECTORY: "Script directory below the project root (default: Scripts)",
            cls.LOG_LEVEL: "Default logging level (debug, info, warning, error)",
            cls.LOG_FILE: "Optional log file path",
        }
    
    @classmethod
    def get_current_values(cls) -> Dict[str, str]:
        """Environment variables that are currently set."""
        return {name: os.environ[name] for name in cls.get_all_variables() if name in os.environ}
