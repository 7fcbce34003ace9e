"""
YAML parser for bundler settings files.

Provides YAML parsing with detailed error reporting (file, line and column)
and structural validation of settings files.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple
from dataclasses import fields

from .schema import BundlerSettings


class YAMLParsingError(Exception):
    """Custom exception for YAML parsing errors with enhanced context."""
    
    def __init__(self, message: str, file_path: Optional[Path] = None, 
                 line_number: Optional[int] = None, column: Optional[int] = None):
        self.file_path = file_path
        self.line_number = line_number
        self.column = column
        
        error_parts = [message]
        
        if file_path:
            error_parts.append(f"File: {file_path}")
        
        if line_number is not None:
            if column is not None:
                error_parts.append(f"Line {line_number}, Column {column}")
            else:
                error_parts.append(f"Line {line_number}")
        
        super().__init__(" | ".join(error_parts))


class SettingsYAMLParser:
    """YAML parser for settings files with validation and error reporting."""
    
    def parse_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Parse YAML settings file with enhanced error reporting.
        
        Args:
            file_path: Path to YAML settings file
            
        Returns:
            Dictionary containing parsed settings
            
        Raises:
            YAMLParsingError: If YAML is invalid or file cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise self._parsing_error(e, file_path)
        except FileNotFoundError:
            raise YAMLParsingError("Settings file not found", file_path)
        except PermissionError:
            raise YAMLParsingError("Permission denied reading settings file", file_path)
        except UnicodeDecodeError as e:
            raise YAMLParsingError(f"File encoding error: {e}", file_path)
        
        return self._ensure_mapping(content, file_path)
    
    def parse_string(self, yaml_content: str) -> Dict[str, Any]:
        """
        Parse YAML settings from string with enhanced error reporting.
        
        Raises:
            YAMLParsingError: If YAML is invalid
        """
        try:
            content = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise self._parsing_error(e, None)
        
        return self._ensure_mapping(content, None)
    
    def validate_settings_structure(self, settings_dict: Dict[str, Any]) -> List[str]:
        """
        Validate settings dictionary structure against the settings schema.
        
        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        
        expected_keys = {f.name for f in fields(BundlerSettings)}
        unknown_keys = set(settings_dict.keys()) - expected_keys
        if unknown_keys:
            errors.append(f"Unknown settings keys: {', '.join(sorted(unknown_keys))}")
        
        for key in ('encoding', 'script_directory', 'bundle_directory', 'config_file_name', 'separator', 'log_level'):
            if key in settings_dict and not isinstance(settings_dict[key], str):
                errors.append(f"{key} must be a string")
        
        for key in ('entry_point', 'package_path', 'log_file'):
            value = settings_dict.get(key)
            if value is not None and not isinstance(value, str):
                errors.append(f"{key} must be a string or null")
        
        return errors
    
    def validate_and_parse_file(self, file_path: Path) -> Tuple[Dict[str, Any], List[str]]:
        """
        Parse and validate YAML settings file in one step.
        
        Returns:
            Tuple of (parsed_settings, validation_errors)
            
        Raises:
            YAMLParsingError: If YAML parsing fails
        """
        settings_dict = self.parse_file(file_path)
        validation_errors = self.validate_settings_structure(settings_dict)
        return settings_dict, validation_errors
    
    def _parsing_error(self, error: yaml.YAMLError, file_path: Optional[Path]) -> YAMLParsingError:
        line_number = None
        column = None
        
        if hasattr(error, 'problem_mark') and error.problem_mark:
            line_number = error.problem_mark.line + 1  # YAML uses 0-based line numbers
            column = error.problem_mark.column + 1
        
        if hasattr(error, 'problem') and error.problem:
            message = f"YAML parsing error: {error.problem}"
        else:
            message = f"YAML parsing error: {str(error)}"
        
        return YAMLParsingError(message, file_path, line_number, column)
    
    def _ensure_mapping(self, content: Any, file_path: Optional[Path]) -> Dict[str, Any]:
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise YAMLParsingError("Settings must be a mapping at the top level", file_path)
        return content
