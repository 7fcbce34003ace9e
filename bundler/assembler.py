"""
Bundle Assembler

Wraps an ordered file list and its auto-bundle metadata into a Bundle.
No I/O happens here; see bundler.writer for writing bundle files.
"""

import logging
from typing import List, Optional

from bundler.diagnostics import Diagnostics
from bundler.models import Bundle, BundleSpec, FileSpec
from bundler.paths import DEFAULT_BUNDLE_DIRECTORY, DEFAULT_SCRIPT_DIRECTORY, get_output_path

logger = logging.getLogger(__name__)


class BundleAssembler:
    """Builds Bundle artifacts.
    
    Args:
        output_root: Directory configured output paths are relative to
            (the package path when set, else the project path)
        script_directory: Script directory used for the default output path
        bundle_directory: Bundle directory used for the default output path
    """
    
    def __init__(
        self,
        output_root: str,
        script_directory: str = DEFAULT_SCRIPT_DIRECTORY,
        bundle_directory: str = DEFAULT_BUNDLE_DIRECTORY,
    ):
        self.output_root = output_root
        self.script_directory = script_directory
        self.bundle_directory = bundle_directory
    
    def output_path_for(self, spec: BundleSpec) -> str:
        return get_output_path(
            self.output_root,
            spec.output_path,
            spec.id,
            script_directory=self.script_directory,
            bundle_directory=self.bundle_directory,
        )
    
    def assemble(
        self,
        spec: BundleSpec,
        ordered_files: List[FileSpec],
        diagnostics: Optional[Diagnostics] = None,
    ) -> Bundle:
        bundle = Bundle(
            bundle_id=spec.id,
            files=list(ordered_files),
            output=self.output_path_for(spec),
            containing_config=spec.config_path,
            diagnostics=diagnostics if diagnostics is not None else Diagnostics(),
        )
        logger.debug(f" - Assembled bundle {bundle.bundle_id} with {len(bundle.files)} file(s) -> {bundle.output}")
        return bundle
