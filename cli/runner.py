"""
Shared plumbing for the bundler subcommands.

Loads settings, configures logging, builds the AutoBundleProcessor and maps
bundler errors to exit codes.
"""

import logging
import sys
from dataclasses import asdict
from typing import Callable, Optional, Sequence

import click

from bundler.config.manager import ConfigurationManager
from bundler.errors import BundlerError, ConfigurationError, ProjectNotFoundError
from bundler.processor import AutoBundleProcessor
from bundler.utils.logging_config import configure_logging, logging_config
from .help_texts import ExitCodes

logger = logging.getLogger(__name__)


def build_processor(
    project_path: str,
    package_path: Optional[str],
    entry_point: Optional[str],
    config_files: Sequence[str],
    encoding: Optional[str],
    settings_file: Optional[str],
    log_level: Optional[str],
    log_file: Optional[str],
) -> AutoBundleProcessor:
    """Resolve settings and create the processor for one invocation."""
    settings = ConfigurationManager().load_configuration(
        config_file=settings_file,
        cli_overrides={
            'encoding': encoding,
            'entry_point': entry_point,
            'package_path': package_path,
            'log_level': log_level,
            'log_file': log_file,
        },
    )
    configure_logging(level=settings.log_level, log_file=settings.log_file, force=True)
    logging_config.log_configuration_details(asdict(settings))
    
    return AutoBundleProcessor(
        project_path,
        package_path=settings.package_path,
        entry_point_override=settings.entry_point,
        file_paths=list(config_files),
        encoding=settings.encoding,
        settings=settings,
    )


def run_guarded(action: Callable[[], None]) -> None:
    """Run a subcommand body, turning bundler errors into exit codes."""
    try:
        action()
    except ProjectNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.PROJECT_NOT_FOUND)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)
    except BundlerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.GENERAL_ERROR)
