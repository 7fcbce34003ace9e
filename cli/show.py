"""
Show Subcommand Module

Resolves and orders every auto-bundle without writing anything and prints
the result, either human-readable or as JSON.
"""

import json

import click

from bundler.overrides import OverrideComposer
from .help_texts import JSON_HELP, SHOW_HELP
from .runner import build_processor, run_guarded
from .shared_options import bundler_options


@click.command(help=SHOW_HELP)
@bundler_options
@click.option('--json', 'as_json', is_flag=True, help=JSON_HELP)
def show(project_path, package_path, entry_point, config_files, encoding,
         settings_file, log_level, log_file, as_json):
    """Print the planned bundles and override configs."""
    def run():
        processor = build_processor(
            project_path, package_path, entry_point, config_files,
            encoding, settings_file, log_level, log_file,
        )
        bundles = processor.parse_configs(write=False)
        documents = OverrideComposer(processor.entry_point).compose(bundles)
        
        if as_json:
            click.echo(json.dumps({
                "bundles": [
                    {
                        "bundle_id": b.bundle_id,
                        "output": b.output,
                        "containing_config": b.containing_config,
                        "files": b.file_names,
                        "diagnostics": b.diagnostics.to_dict(),
                    }
                    for b in bundles
                ],
                "overrides": {
                    path: document.to_require_config()
                    for path, document in documents.items()
                },
            }, indent=2))
            return
        
        for b in bundles:
            click.echo(f"{b.bundle_id} -> {b.output}")
            for index, name in enumerate(b.file_names, start=1):
                click.echo(f"  {index:3d}. {name}")
            for line in b.diagnostics.format_human():
                click.echo(line)
    
    run_guarded(run)
