"""
Auto-bundle processor.

Drives a complete run: loads the RequireJS configs of a project, builds every
declared auto-bundle (resolve includes/excludes, discover the closure, pack,
assemble), writes the bundle files and one override document per config.
"""

import logging
import os
import time
from typing import List, Optional, Sequence, Tuple

from bundler.assembler import BundleAssembler
from bundler.config.schema import BundlerSettings
from bundler.diagnostics import Diagnostics
from bundler.errors import ConfigurationError, ProjectNotFoundError
from bundler.graph.closure import ClosureBuilder, DependencyResolver
from bundler.graph.packer import TopologicalPacker
from bundler.loader import RequireConfigLoader, find_configs
from bundler.models import Bundle, BundleItem, BundleSpec, Configuration, DirectoryRef, FileRef, UrlRef
from bundler.overrides import OverrideComposer, OverrideWriter
from bundler.paths import PathSet, enumerate_scripts, get_absolute_directory, resolve_physical_path
from bundler.scripts import expand_paths
from bundler.utils.logging_config import logging_config
from bundler.writer import BundleWriter

logger = logging.getLogger(__name__)


class AutoBundleProcessor:
    """Builds the auto-bundles of one project.
    
    Args:
        project_path: Project root (holds ``RequireJS.json`` and ``Scripts/``)
        package_path: Optional root for bundle output, defaults to project_path
        entry_point_override: Optional entry point directory relative to the
            project; module ids in override documents are relative to it
        file_paths: Config documents to load; found in the project when empty
        encoding: Encoding for reading scripts and writing bundles
        settings: Tool settings; defaults are used when omitted
    """
    
    def __init__(
        self,
        project_path: str,
        package_path: Optional[str] = None,
        entry_point_override: Optional[str] = None,
        file_paths: Optional[Sequence[str]] = None,
        encoding: Optional[str] = None,
        settings: Optional[BundlerSettings] = None,
    ):
        self.settings = settings or BundlerSettings()
        self.project_path = os.path.abspath(project_path)
        self.file_paths = list(file_paths or [])
        self.encoding = encoding or self.settings.encoding
        
        package_path = package_path or self.settings.package_path
        self.output_path = os.path.abspath(package_path) if package_path else self.project_path
        
        self.entry_override = entry_point_override or self.settings.entry_point
        self.entry_point = self.get_entry_point_path()
        self.base_url = os.path.join(self.project_path, self.settings.script_directory)
        self.configuration: Optional[Configuration] = None
        
        logger.debug("Autobundler initialized")
        logger.debug(f" - Project path: {self.project_path}")
        logger.debug(f" - Package path: {package_path}")
        logger.debug(f" - EP Override : {self.entry_override}")
        logger.debug(f" - Encoding    : {self.encoding}")
        logger.debug(f" - Entrypoint  : {self.entry_point}")
        logger.debug(f" - Output path : {self.output_path}")
    
    def get_entry_point_path(self) -> str:
        if self.entry_override:
            return os.path.normpath(os.path.join(self.project_path, self.entry_override))
        return os.path.join(self.project_path, self.settings.script_directory)
    
    def parse_configs(self, write: bool = True) -> List[Bundle]:
        """Build every auto-bundle of the project.
        
        Args:
            write: Write bundle files and override documents when True
            
        Returns:
            The built bundles, in declaration order
            
        Raises:
            ProjectNotFoundError: If the project directory does not exist
            ConfigurationError: If configs are missing or invalid, or a bundle is empty
        """
        if not os.path.isdir(self.project_path):
            raise ProjectNotFoundError(self.project_path)
        
        self.find_configs()
        self.configuration = RequireConfigLoader(encoding=self.encoding).load(self.file_paths)
        
        start = time.time()
        bundles = [self.create_bundle(spec) for spec in self.configuration.auto_bundles]
        logging_config.log_operation_timing(f"Building {len(bundles)} bundle(s)", time.time() - start)
        
        if write:
            BundleWriter(encoding=self.encoding, separator=self.settings.separator).write_all(bundles)
            self.write_override_configs(bundles)
        
        return bundles
    
    def find_configs(self) -> List[str]:
        if not self.file_paths:
            self.file_paths = find_configs(self.project_path, self.settings.config_file_name)
        return self.file_paths
    
    def create_bundle(self, spec: BundleSpec) -> Bundle:
        """Build one bundle without writing anything."""
        logger.info(f"Creating bundle {spec.id} for {len(spec.includes)} includes at {spec.output_path}")
        diagnostics = Diagnostics()
        
        excluded_files = PathSet(self.physical_paths_of(spec.excludes))
        logger.debug(f" - Identified {len(excluded_files)} excluded files.")
        
        files, unresolved = self.resolve_includes(spec.includes, excluded_files)
        for identifier in unresolved:
            diagnostics.record_unresolved(identifier)
        logger.debug(f" - Looked up physical paths of {len(files)} files.")
        
        if not files:
            raise ConfigurationError.empty_bundle(
                spec.id,
                spec.raw_includes(),
                spec.raw_excludes(),
                config_path=spec.config_path,
            )
        
        resolver = DependencyResolver(
            self.configuration,
            entry_point=self.entry_point,
            base_url=self.base_url,
            fallback_root=self.project_path,
            encoding=self.encoding,
            diagnostics=diagnostics,
        )
        required_files = ClosureBuilder(resolver).build(files, excluded_files)
        logger.debug(f" - Enumerated {len(required_files)} dependencies.")
        
        packer = TopologicalPacker(compression_type=spec.compression_type, diagnostics=diagnostics)
        file_specs = packer.order(required_files, excluded_files)
        logger.debug(f" - Created {len(file_specs)} fileSpecs in {packer.passes} pass(es).")
        for file_spec in file_specs:
            logger.debug(f"    - {file_spec.file_name}: {len(file_spec.file_content)} chars")
        
        assembler = BundleAssembler(
            self.output_path,
            script_directory=self.settings.script_directory,
            bundle_directory=self.settings.bundle_directory,
        )
        return assembler.assemble(spec, file_specs, diagnostics)
    
    def physical_paths_of(self, items: Sequence[BundleItem]) -> List[str]:
        """Physical paths selected by exclude items; unresolvable files are ignored."""
        paths = []
        for item in items:
            if isinstance(item, FileRef):
                physical = self._resolve_file(item)
                if physical:
                    paths.append(physical)
            elif isinstance(item, DirectoryRef):
                paths.extend(self._expand_directory(item))
        return paths
    
    def resolve_includes(
        self,
        items: Sequence[BundleItem],
        excluded_files: PathSet,
    ) -> Tuple[List[str], List[str]]:
        """Physical include paths minus excludes, deduplicated.
        
        Returns:
            Tuple of (include paths, unresolved file ids)
        """
        files = PathSet()
        unresolved = []
        
        for item in items:
            if isinstance(item, UrlRef):
                logger.debug(f"    - Skipping URL {item.url}")
                continue
            
            if isinstance(item, FileRef):
                physical = self._resolve_file(item)
                if physical is None:
                    logger.error(
                        f"Could not resolve path for {item.path}. File does not exist in {self.base_url}! "
                        "Did you forget to include it in the project?"
                    )
                    unresolved.append(item.path)
                    continue
                candidates = [physical]
            else:
                candidates = self._expand_directory(item)
            
            for path in candidates:
                if path in excluded_files:
                    logger.debug(f"    - EXCLUDING {path}")
                    continue
                files.add(path)
        
        return list(files), unresolved
    
    def write_override_configs(self, bundles: List[Bundle]) -> List[str]:
        documents = OverrideComposer(self.entry_point).compose(bundles)
        return OverrideWriter(encoding=self.encoding).write_all(documents)
    
    def _resolve_file(self, item: FileRef) -> Optional[str]:
        logical = expand_paths(item.path, self.configuration)
        return resolve_physical_path(logical, self.base_url, self.project_path)
    
    def _expand_directory(self, item: DirectoryRef) -> List[str]:
        directory = expand_paths(item.path, self.configuration)
        absolute = get_absolute_directory(self.entry_point, directory)
        logger.debug(f"    - Directory '{item.path}' -> {absolute}")
        return enumerate_scripts(absolute)
