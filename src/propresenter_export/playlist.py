"""
Playlist Document Builder

Walks the schedule in order and produces the .pro6plx playlist:

- events become header items and produce no file
- songs and scripture passages become presentation items whose documents
  are registered in the archive bundle under a numbered file name
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple

from loguru import logger

from .archive import ArchiveBundle
from .config import ExportConfig
from .identifiers import generate_uuid
from .models import (
    HeaderItem,
    PlaylistDocument,
    PlaylistEntry,
    PlaylistItem,
    PresentationDocument,
    PresentationItem,
)
from .presentation import PresentationBuilder, clean_entry, display_name
from .text import clean_text, escape_xml, sanitize_file_name

HEADER_TEMPLATE = """
            <RVPlaylistItem type="RVPlaylistItemTypeHeader" UUID="{item_id}" displayName="{display_name}">
            </RVPlaylistItem>"""

PRESENTATION_TEMPLATE = """
            <RVPlaylistItem type="RVPlaylistItemTypePresentation" slideShowDuration="0" slideShowTransitionDuration="1" slideShowTransition="RVSlideTransitionRandom" UUID="{item_id}" displayName="{display_name}">
                <NSString name="filePath">{file_path}</NSString>
            </RVPlaylistItem>"""

FALLBACK_TITLE = "Untitled"

PLAYLIST_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<RVPlaylistDocument versionNumber="{version_number}" creatorCode="{creator_code}" category="Default" playlistName="{playlist_name}">
    <array name="items">
        {items}
    </array>
</RVPlaylistDocument>"""


def presentation_file_name(index: int, name: str, extension: str) -> str:
    """``01 - Name.pro6``: two-digit rank among presentable entries."""
    return f"{index:02d} - {sanitize_file_name(name)}.{extension}"


class PlaylistBuilder:
    """
    Builds the playlist document and every presentation it references.

    Presentation documents are independent of each other, so with
    ``config.max_workers > 1`` they are rendered in a thread pool. Results
    are always consumed in input order.
    """

    def __init__(
        self,
        config: Optional[ExportConfig] = None,
        progress_callback: Optional[Callable[[str], None]] = None,
    ):
        self.config = config or ExportConfig()
        self.profile = self.config.profile
        self.presentations = PresentationBuilder(self.profile, progress_callback)
        self.progress_callback = progress_callback

    def _emit(self, message: str):
        """Emit progress update."""
        logger.info(f"🎵 Playlist: {message}")
        if self.progress_callback:
            self.progress_callback(message)

    def _build_document(
        self, entry: PlaylistEntry, translation: str, now: datetime
    ) -> PresentationDocument:
        try:
            return self.presentations.build(entry, translation, now=now)
        except Exception as e:
            logger.exception(f"Failed to build '{entry.title}', falling back to title slide: {e}")

        try:
            return self.presentations.build_title_only(entry, translation, now=now)
        except Exception as e:
            logger.exception(f"Title slide for '{entry.title}' failed, using '{FALLBACK_TITLE}': {e}")
            placeholder = entry.model_copy(update={"title": FALLBACK_TITLE})
            return self.presentations.build_title_only(placeholder, translation, now=now)

    def _build_documents(
        self, entries: Sequence[PlaylistEntry], translation: str, now: datetime
    ) -> List[PresentationDocument]:
        if self.config.max_workers <= 1 or len(entries) <= 1:
            return [self._build_document(entry, translation, now) for entry in entries]

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            return list(
                pool.map(lambda entry: self._build_document(entry, translation, now), entries)
            )

    def build(
        self,
        entries: Sequence[PlaylistEntry],
        translation: str,
        bundle: ArchiveBundle,
        now: Optional[datetime] = None,
    ) -> Tuple[PlaylistDocument, ArchiveBundle]:
        """
        Build the playlist and register all generated files in ``bundle``.

        Returns:
            (playlist document, the same bundle with every file added)
        """
        now = now or datetime.now(timezone.utc)
        entries = [clean_entry(entry) for entry in entries]
        translation = clean_text(translation)
        presentable = [entry for entry in entries if entry.is_presentable]
        self._emit(f"{len(entries)} entries, {len(presentable)} presentations")

        documents = iter(self._build_documents(presentable, translation, now))

        items: List[PlaylistItem] = []
        item_xml: List[str] = []
        index = 0

        for entry in entries:
            if not entry.is_presentable:
                header = HeaderItem(id=generate_uuid(), display_name=escape_xml(entry.title))
                items.append(header)
                item_xml.append(
                    HEADER_TEMPLATE.format(item_id=header.id, display_name=header.display_name)
                )
                continue

            index += 1
            name = display_name(entry, translation)
            file_name = presentation_file_name(
                index, name, self.profile.presentation_extension
            )
            document = next(documents)
            bundle.add(file_name, document.xml)

            item = PresentationItem(
                id=generate_uuid(),
                display_name=escape_xml(name),
                file_name=file_name,
                file_path=f"./{file_name}",
            )
            items.append(item)
            item_xml.append(
                PRESENTATION_TEMPLATE.format(
                    item_id=item.id,
                    display_name=item.display_name,
                    file_path=escape_xml(item.file_path),
                )
            )

        date_str = now.date().isoformat()
        playlist_name = f"{self.config.playlist_prefix}_{date_str}"
        file_name = f"{playlist_name}.{self.profile.playlist_extension}"
        xml = PLAYLIST_TEMPLATE.format(
            version_number=self.profile.version_number,
            creator_code=self.profile.creator_code,
            playlist_name=escape_xml(file_name),
            items="\n        ".join(item_xml),
        )
        bundle.add(file_name, xml)

        self._emit(f"{file_name}: {len(items)} items")
        return PlaylistDocument(name=playlist_name, file_name=file_name, items=items, xml=xml), bundle
