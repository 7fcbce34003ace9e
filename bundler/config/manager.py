"""
Settings Manager for the bundler.

Loads, validates and merges settings from multiple sources:
- System defaults
- User settings (~/.amd-bundler/config.yaml)
- Project settings (./.amd-bundler/config.yaml)
- Explicit settings (--settings file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
import os
import re
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Dict, Any

from bundler.errors import BundlerError

from .schema import BundlerSettings
from .environment import EnvironmentVariables
from .yaml_parser import SettingsYAMLParser, YAMLParsingError

logger = logging.getLogger(__name__)


class SettingsError(BundlerError):
    """Settings files or values are invalid."""
    pass


class ConfigurationManager:
    """Manages settings loading, validation, and environment variable integration."""
    
    def __init__(self,
                 user_config_path: Optional[Path] = None,
                 project_config_path: Optional[Path] = None):
        self.user_config_path = user_config_path or Path.home() / ".amd-bundler" / "config.yaml"
        self.project_config_path = project_config_path or Path.cwd() / ".amd-bundler" / "config.yaml"
        self.yaml_parser = SettingsYAMLParser()
    
    def load_configuration(self, 
                           config_file: Optional[str] = None,
                           cli_overrides: Optional[Dict[str, Any]] = None) -> BundlerSettings:
        """
        Load settings from all sources with proper precedence.
        
        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides, None values are ignored)
        2. Environment variables
        3. Explicit settings file
        4. Project settings
        5. User settings
        6. System defaults
        
        Raises:
            SettingsError: If a settings file is invalid or the result fails validation
        """
        settings_dict = asdict(BundlerSettings())
        
        if self.user_config_path.exists():
            settings_dict.update(self._load_yaml_file(self.user_config_path))
        
        if self.project_config_path.exists():
            settings_dict.update(self._load_yaml_file(self.project_config_path))
        
        if config_file:
            settings_dict.update(self._load_yaml_file(Path(config_file)))
        
        settings_dict.update(self._load_environment_variables())
        
        if cli_overrides:
            settings_dict.update({k: v for k, v in cli_overrides.items() if v is not None})
        
        settings_dict = self.substitute_environment_variables(settings_dict)
        if isinstance(settings_dict.get('log_level'), str):
            settings_dict['log_level'] = settings_dict['log_level'].lower()
        
        try:
            settings = BundlerSettings(**settings_dict)
        except TypeError as e:
            raise SettingsError(f"Failed to create settings object: {e}")
        
        errors = settings.validate()
        if errors:
            raise SettingsError("Invalid settings:\n" + "\n".join(f"  - {error}" for error in errors))
        
        return settings
    
    def substitute_environment_variables(self, settings_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Substitute ${VAR} and ${VAR:-default} syntax with environment variable values.
        
        Raises:
            SettingsError: If a required environment variable is missing
        """
        pattern = r'\$\{([^}]+)\}'
        
        def replace_var(match):
            var_expr = match.group(1)
            if ':-' in var_expr:
                var_name, default_value = var_expr.split(':-', 1)
                return os.environ.get(var_name, default_value)
            if var_expr not in os.environ:
                raise SettingsError(f"Required environment variable '{var_expr}' is not set")
            return os.environ[var_expr]
        
        return {
            key: re.sub(pattern, replace_var, value) if isinstance(value, str) else value
            for key, value in settings_dict.items()
        }
    
    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load and validate one settings file."""
        try:
            settings_dict, validation_errors = self.yaml_parser.validate_and_parse_file(file_path)
        except YAMLParsingError as e:
            raise SettingsError(str(e))
        
        if validation_errors:
            raise SettingsError(
                f"Settings validation errors in {file_path}:\n"
                + "\n".join(f"  - {error}" for error in validation_errors)
            )
        
        logger.debug(f"Loaded settings from {file_path}")
        return settings_dict
    
    def _load_environment_variables(self) -> Dict[str, Any]:
        """Load settings from environment variables."""
        return {
            EnvironmentVariables.SETTINGS_KEYS[name]: value
            for name, value in EnvironmentVariables.get_current_values().items()
        }
