"""
CLI Package for the AMD auto-bundler

This package provides a modular CLI architecture using Click groups and subcommands.
Each subcommand is implemented in its own module for better maintainability and testing.

The main entry point is the main() function which creates a Click group and registers
all available subcommands. The cli() function serves as the console script entry point
for setup.py.
"""

import os
import click
from dotenv import load_dotenv
from bundler.utils.logging_config import configure_logging

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')
from .bundle import bundle
from .show import show

# Configure logging when CLI package is imported
configure_logging()

@click.group()
@click.version_option(version='1.0.0', prog_name='amd-bundler')
def main():
    """AMD auto-bundler - Package RequireJS modules into dependency-ordered bundles.
    
    Discovers the dependency closure of each auto-bundle declared in the
    project's RequireJS configs, orders it so every module follows its
    dependencies, writes the bundles and an override config per source config.
    """
    pass

# Register subcommands
main.add_command(bundle)
main.add_command(show)

# Entry point for setup.py console script
def cli():
    """Console script entry point.
    
    This function is called when the amd-bundler command is executed
    from the command line after installation via pip.
    """
    main()
