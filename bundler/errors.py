"""
Bundler Error Hierarchy

Defines the exceptions raised while loading configuration and building
bundles. Conditions that still allow a useful bundle (an unresolvable
dependency, a forced cycle flush) are not exceptions; they are recorded as
diagnostics, see bundler.diagnostics.

Error Categories:
- Configuration Errors: missing or invalid config documents, empty bundles
- Project Errors: the project root does not exist
"""

from typing import Optional, Sequence


class BundlerError(Exception):
    """Base exception for all bundler errors.
    
    Catch this to handle every fatal bundling failure in one place,
    as the CLI does.
    """
    pass


class ConfigurationError(BundlerError):
    """Invalid configuration or a bundle that cannot be built.
    
    Raised when:
    - No RequireJS config file was provided and none was found
    - A config document cannot be parsed or fails validation
    - The include/exclude rules of an auto-bundle leave no files to bundle
    
    Attributes:
        bundle_id: Id of the offending auto-bundle (if applicable)
        includes: Raw include items of the bundle
        excludes: Raw exclude items of the bundle
        config_path: Config document the error originates from
    """
    
    def __init__(
        self,
        message: str,
        bundle_id: Optional[str] = None,
        includes: Optional[Sequence[str]] = None,
        excludes: Optional[Sequence[str]] = None,
        config_path: Optional[str] = None,
    ):
        super().__init__(message)
        self.bundle_id = bundle_id
        self.includes = list(includes or [])
        self.excludes = list(excludes or [])
        self.config_path = config_path

    @classmethod
    def empty_bundle(
        cls,
        bundle_id: str,
        includes: Sequence[str],
        excludes: Sequence[str],
        config_path: Optional[str] = None,
    ) -> "ConfigurationError":
        """Build the error for an auto-bundle whose includes resolve to nothing."""
        message = (
            f"Error for autoBundle {bundle_id}: "
            f"Provided list of includes: \"{';'.join(includes)}\""
        )
        if excludes:
            message += f" without excludes: \"{';'.join(excludes)}\""
        message += " results in empty autoBundle."
        return cls(
            message,
            bundle_id=bundle_id,
            includes=includes,
            excludes=excludes,
            config_path=config_path,
        )


class ProjectNotFoundError(BundlerError):
    """The declared project directory does not exist.
    
    Attributes:
        project_path: The path that was looked up
    """
    
    def __init__(self, project_path: str):
        super().__init__(f"Could not find project directory '{project_path}'.")
        self.project_path = project_path
