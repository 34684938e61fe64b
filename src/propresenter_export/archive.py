"""
Archive Bundle

Append-only collection of generated files that is passed explicitly through
the builders and finally serialized into one zip.
"""

import io
import zipfile
from typing import Dict, Iterator, List, Tuple, Union

from loguru import logger

from .exceptions import ArchiveAssemblyError, DuplicateArchiveEntryError


class ArchiveBundle:
    """Ordered mapping of unique file name -> file bytes."""

    def __init__(self):
        self._files: Dict[str, bytes] = {}

    def add(self, name: str, content: Union[str, bytes]) -> "ArchiveBundle":
        """Register a file; text is stored as UTF-8. Names must be unique."""
        if name in self._files:
            raise DuplicateArchiveEntryError(name)
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._files[name] = content
        logger.debug(f"🗂️ Added {name} ({len(content)} bytes)")
        return self

    def __contains__(self, name: str) -> bool:
        return name in self._files

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[Tuple[str, bytes]]:
        return iter(self._files.items())

    def __getitem__(self, name: str) -> bytes:
        return self._files[name]

    @property
    def names(self) -> List[str]:
        return list(self._files)

    def to_zip(self) -> bytes:
        """
        Serialize every file, in insertion order, into a DEFLATE zip.

        Raises:
            ArchiveAssemblyError: if the zip cannot be written
        """
        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
                for name, content in self._files.items():
                    zf.writestr(name, content)
        except Exception as e:
            logger.error(f"Archive assembly failed: {e}")
            raise ArchiveAssemblyError(f"Could not assemble archive: {e}") from e

        data = buffer.getvalue()
        logger.info(f"📦 Archive ready: {len(self._files)} files, {len(data)} bytes")
        return data
