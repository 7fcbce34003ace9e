"""
Bundle writer.

Writes bundle files to disk. Every write goes to a temporary file in the
destination directory first and then replaces the destination, so readers
never observe a partially written bundle or override document.
"""

import logging
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import List

from bundler.errors import BundlerError
from bundler.models import Bundle

logger = logging.getLogger(__name__)


def atomic_write_text(path: str, text: str, encoding: str = "utf-8") -> None:
    """Write ``text`` to ``path`` through a temporary file and an atomic replace.
    
    Raises:
        BundlerError: If the file cannot be written
    """
    target = Path(path)
    temp_output = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            temp_output = Path(tmp.name)
            tmp.write(text)
        temp_output.replace(target)
    except (OSError, UnicodeEncodeError) as e:
        raise BundlerError(f"Could not write {path}: {e}")
    finally:
        if temp_output is not None:
            temp_output.unlink(missing_ok=True)


class BundleWriter:
    """Concatenates bundle files into their output path.
    
    Example:
        >>> writer = BundleWriter(encoding="utf-8")
        >>> writer.write(bundle)
        '/site/Scripts/bundles/main-app.js'
    """
    
    def __init__(self, encoding: str = "utf-8", separator: str = "\n"):
        self.encoding = encoding
        self.separator = separator
    
    def write(self, bundle: Bundle) -> str:
        """Write one bundle and return its output path."""
        content = bundle.render(self.separator)
        atomic_write_text(bundle.output, content, encoding=self.encoding)
        logger.info(f"Wrote bundle {bundle.bundle_id} ({len(bundle.files)} files) to: {bundle.output}")
        return bundle.output
    
    def write_all(self, bundles: List[Bundle]) -> List[str]:
        return [self.write(bundle) for bundle in bundles]
