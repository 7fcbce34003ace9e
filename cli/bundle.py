"""
Bundle Subcommand Module

Builds every auto-bundle of a project, writes the bundle files and the
override configs that redirect the module loader to them.
"""

import click

from .help_texts import BUNDLE_HELP, DRY_RUN_HELP
from .runner import build_processor, run_guarded
from .shared_options import bundler_options


@click.command(help=BUNDLE_HELP)
@bundler_options
@click.option('--dry-run', is_flag=True, help=DRY_RUN_HELP)
def bundle(project_path, package_path, entry_point, config_files, encoding,
           settings_file, log_level, log_file, dry_run):
    """Build the auto-bundles of a project.

    Examples:
        # Bundle using RequireJS.json in the project root
        amd-bundler bundle --project ./site

        # Explicit configs and a separate output root
        amd-bundler bundle -p ./site -c ./site/RequireJS.json --package ./dist

        # Resolve everything but write nothing
        amd-bundler bundle -p ./site --dry-run
    """
    def run():
        processor = build_processor(
            project_path, package_path, entry_point, config_files,
            encoding, settings_file, log_level, log_file,
        )
        bundles = processor.parse_configs(write=not dry_run)
        
        for result in bundles:
            verb = "Would write" if dry_run else "Wrote"
            click.echo(f"✅ {result.bundle_id}: {verb} {len(result.files)} file(s) to {result.output}")
            for line in result.diagnostics.format_human():
                click.echo(line)
        
        click.echo(f"\n{len(bundles)} bundle(s) built.")
    
    run_guarded(run)
