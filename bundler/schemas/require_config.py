"""
RequireJS Config Document Schema

Schema for the ``RequireJS.json`` documents that declare module path aliases
and auto-bundles. Only the sections the bundler consumes are modelled; any
other RequireJS settings (shim, map, ...) are accepted and ignored.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from bundler.models import BundleItem, BundleSpec, classify_item


class AutoBundleItemDocument(BaseModel):
    """One include or exclude entry: either a file or a directory."""
    file: Optional[str] = Field(None, description="Logical module path or URL")
    directory: Optional[str] = Field(None, description="Directory relative to the entry point")
    
    @model_validator(mode="after")
    def check_exactly_one(self):
        """Validate that exactly one of file/directory is set."""
        if bool(self.file) == bool(self.directory):
            raise ValueError("Bundle item must define exactly one of 'file' or 'directory'")
        return self
    
    def to_item(self) -> BundleItem:
        return classify_item(file=self.file, directory=self.directory)


class AutoBundleDocument(BaseModel):
    """An entry of the ``autoBundles`` section.
    
    Attributes:
        output_path: Output file or directory (``outputPath``)
        compression_type: Compression hint (``compressionType``)
        include: Include entries
        exclude: Exclude entries
    """
    output_path: Optional[str] = Field(None, alias="outputPath")
    compression_type: str = Field("none", alias="compressionType")
    include: List[AutoBundleItemDocument] = Field(default_factory=list)
    exclude: List[AutoBundleItemDocument] = Field(default_factory=list)
    
    class Config:
        populate_by_name = True
        extra = "ignore"
    
    def to_spec(self, bundle_id: str, config_path: str) -> BundleSpec:
        return BundleSpec(
            id=bundle_id,
            includes=tuple(item.to_item() for item in self.include),
            excludes=tuple(item.to_item() for item in self.exclude),
            compression_type=self.compression_type or "none",
            output_path=self.output_path,
            config_path=config_path,
        )


class RequireConfigDocument(BaseModel):
    """A RequireJS config document.
    
    Attributes:
        paths: Module path aliases
        auto_bundles: Auto-bundle declarations keyed by bundle id (``autoBundles``)
    """
    paths: Dict[str, str] = Field(default_factory=dict)
    auto_bundles: Dict[str, AutoBundleDocument] = Field(default_factory=dict, alias="autoBundles")
    
    class Config:
        populate_by_name = True
        extra = "allow"
        json_schema_extra = {
            "example": {
                "paths": {"jquery": "lib/jquery-2.1.4"},
                "autoBundles": {
                    "main-app": {
                        "outputPath": "Scripts/bundles/",
                        "include": [
                            {"file": "app/main"},
                            {"directory": "Controllers/Root"},
                        ],
                        "exclude": [{"file": "jquery"}],
                    }
                },
            }
        }
