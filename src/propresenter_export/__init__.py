"""
ProPresenter Export Module

Serialize a classified service schedule into a ProPresenter 6 import bundle:
- one .pro6 presentation per song or scripture passage
- one .pro6plx playlist with header items for every other event
- everything packaged as a single zip

Usage:
    from propresenter_export import PlaylistEntry, generate_archive

    entries = [
        PlaylistEntry(type="event", title="Begrüßung"),
        PlaylistEntry(type="song", title="Größer", content="Strophe 1\\n---\\nRefrain"),
        PlaylistEntry(type="scripture", title="Psalm 23", content="1 Der HERR ist mein Hirte"),
    ]
    result = generate_archive(entries, translation="Lutherbibel 2017")
    # result.content holds the zip bytes, result.filename its download name
"""

from .models import (
    ItemType,
    ScheduleEntry,
    PlaylistEntry,
    Slide,
    SlideGroup,
    PresentationDocument,
    HeaderItem,
    PresentationItem,
    PlaylistDocument,
)
from .config import (
    OutputProfile,
    ExportConfig,
    PROFILES,
    BIBLE_TRANSLATIONS,
    get_profile,
)
from .exceptions import (
    ExportError,
    UnsupportedEntryError,
    DuplicateArchiveEntryError,
    ArchiveAssemblyError,
)
from .archive import ArchiveBundle
from .presentation import PresentationBuilder
from .playlist import PlaylistBuilder
from .exporter import ExportResult, generate_archive, deliver_archive


__all__ = [
    # Export
    "generate_archive",
    "deliver_archive",
    "ExportResult",

    # Builders
    "PresentationBuilder",
    "PlaylistBuilder",
    "ArchiveBundle",

    # Configuration
    "OutputProfile",
    "ExportConfig",
    "PROFILES",
    "BIBLE_TRANSLATIONS",
    "get_profile",

    # Errors
    "ExportError",
    "UnsupportedEntryError",
    "DuplicateArchiveEntryError",
    "ArchiveAssemblyError",

    # Models
    "ItemType",
    "ScheduleEntry",
    "PlaylistEntry",
    "Slide",
    "SlideGroup",
    "PresentationDocument",
    "HeaderItem",
    "PresentationItem",
    "PlaylistDocument",
]
