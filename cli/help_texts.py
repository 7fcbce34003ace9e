"""
Centralized Help Text Constants

This module provides all CLI help text constants for commands and options,
ensuring consistency across subcommands and enabling easy maintenance.
"""

# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    MISSING_REQUIRED_OPTION = 2
    INVALID_CONFIGURATION = 3
    PROJECT_NOT_FOUND = 6

# Command help texts
BUNDLE_HELP = (
    "Build every auto-bundle declared in the project's RequireJS configs and write "
    "the bundle files plus one override config per source config."
)
SHOW_HELP = (
    "Resolve and order every auto-bundle without writing anything, and print each "
    "bundle's files in emission order together with any diagnostics."
)

# Option help texts
PROJECT_HELP = "Project root directory containing RequireJS.json and the Scripts directory."

PACKAGE_HELP = (
    "Root directory for bundle output. Configured output paths are relative to it. "
    "Defaults to the project directory."
)

ENTRY_POINT_HELP = (
    "Entry point directory relative to the project. Module ids in override configs "
    "are relative to it. Defaults to Scripts."
)

CONFIG_HELP = (
    "RequireJS config document to load (repeatable). Defaults to RequireJS.json "
    "in the project root."
)

ENCODING_HELP = "Encoding for reading scripts and writing bundles (default: utf-8)."

SETTINGS_HELP = "Path to a YAML settings file for the bundler itself."

LOG_FILE_HELP = "Also write log output to this file (rotated at 10MB)."

DRY_RUN_HELP = "Build bundles but do not write bundle files or override configs."

JSON_HELP = "Print the result as JSON."
