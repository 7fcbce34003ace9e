"""
Settings schema for the bundler.

Defines the tool settings that are not part of the RequireJS config documents
themselves: encodings, directory conventions and logging.
"""

import codecs
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from bundler.paths import CONFIG_FILE_NAME, DEFAULT_BUNDLE_DIRECTORY, DEFAULT_SCRIPT_DIRECTORY


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class BundlerSettings:
    """Complete bundler settings.
    
    Attributes:
        encoding: Encoding for reading scripts and writing bundles
        entry_point: Entry point directory relative to the project (optional)
        package_path: Root for bundle output (optional, defaults to the project)
        script_directory: Script directory below the project root (base url)
        bundle_directory: Default bundle directory below the script directory
        config_file_name: RequireJS config looked up in the project root
        separator: Text placed between concatenated files
        log_level: Logging level
        log_file: Optional log file path
    """
    encoding: str = "utf-8"
    entry_point: Optional[str] = None
    package_path: Optional[str] = None
    script_directory: str = DEFAULT_SCRIPT_DIRECTORY
    bundle_directory: str = DEFAULT_BUNDLE_DIRECTORY
    config_file_name: str = CONFIG_FILE_NAME
    separator: str = "\n"
    log_level: str = LogLevel.INFO.value
    log_file: Optional[str] = None
    
    def validate(self) -> List[str]:
        """Validate settings and return list of errors."""
        errors = []
        
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            errors.append(f"Unknown encoding '{self.encoding}'")
        
        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")
        
        if not self.script_directory:
            errors.append("script_directory must not be empty")
        if not self.bundle_directory:
            errors.append("bundle_directory must not be empty")
        if not self.config_file_name:
            errors.append("config_file_name must not be empty")
        
        return errors
