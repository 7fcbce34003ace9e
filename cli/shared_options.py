"""
Shared CLI Option Decorators

This module provides reusable Click decorators for the options every
subcommand shares, ensuring consistency across subcommands.
"""

import click

from .help_texts import (
    CONFIG_HELP,
    ENCODING_HELP,
    ENTRY_POINT_HELP,
    LOG_FILE_HELP,
    PACKAGE_HELP,
    PROJECT_HELP,
    SETTINGS_HELP,
)


def project_option(help=None):
    """Decorator for the project root option."""
    def decorator(f):
        return click.option(
            '--project', '-p',
            'project_path',
            required=True,
            type=click.Path(file_okay=False),
            help=help or PROJECT_HELP
        )(f)
    return decorator

def package_option(help=None):
    """Decorator for the output root option."""
    def decorator(f):
        return click.option(
            '--package',
            'package_path',
            default=None,
            type=click.Path(file_okay=False),
            help=help or PACKAGE_HELP
        )(f)
    return decorator

def entry_point_option(help=None):
    """Decorator for the entry point override option."""
    def decorator(f):
        return click.option(
            '--entry-point', '-e',
            default=None,
            help=help or ENTRY_POINT_HELP
        )(f)
    return decorator

def config_option(help=None):
    """Decorator for RequireJS config document options."""
    def decorator(f):
        return click.option(
            '--config', '-c',
            'config_files',
            multiple=True,
            type=click.Path(dir_okay=False),
            help=help or CONFIG_HELP
        )(f)
    return decorator

def encoding_option(help=None):
    """Decorator for the encoding option."""
    def decorator(f):
        return click.option(
            '--encoding',
            default=None,
            help=help or ENCODING_HELP
        )(f)
    return decorator

def settings_option(help=None):
    """Decorator for the settings file option."""
    def decorator(f):
        return click.option(
            '--settings',
            'settings_file',
            default=None,
            type=click.Path(dir_okay=False),
            help=help or SETTINGS_HELP
        )(f)
    return decorator

def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default=None,
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or 'Logging level (default: INFO)'
        )(f)
    return decorator

def log_file_option(help=None):
    """Decorator for log file options."""
    def decorator(f):
        return click.option(
            '--log-file',
            default=None,
            type=click.Path(dir_okay=False),
            help=help or LOG_FILE_HELP
        )(f)
    return decorator

def bundler_options(f):
    """All options shared by the bundle and show subcommands."""
    for option in (
        log_file_option(),
        log_level_option(),
        settings_option(),
        encoding_option(),
        config_option(),
        entry_point_option(),
        package_option(),
        project_option(),
    ):
        f = option(f)
    return f
