"""
Export Errors

Only ArchiveAssemblyError is expected to reach callers of generate_archive;
the others are raised by the individual builders and contained there.
"""


class ExportError(Exception):
    """Base class for every error raised while building an export."""


class UnsupportedEntryError(ExportError):
    """An entry was handed to a builder that cannot render it (e.g. an event)."""


class DuplicateArchiveEntryError(ExportError):
    """A file name was registered twice in the same archive."""

    def __init__(self, name: str):
        super().__init__(f"Archive already contains a file named '{name}'")
        self.name = name


class ArchiveAssemblyError(ExportError):
    """The archive writer could not produce the final zip."""
