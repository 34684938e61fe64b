"""
Presentation Document Builder

Turns one song or scripture entry into a complete RVPresentationDocument:

- a generated title slide showing the entry's display name
- one slide per '---'-separated section of the entry's content
- exactly one slide group referencing every slide in order
"""

import re
from datetime import datetime, timezone
from typing import Callable, List, Optional

from loguru import logger

from .config import OutputProfile, PRO6
from .exceptions import UnsupportedEntryError
from .identifiers import generate_uuid
from .models import ItemType, PlaylistEntry, PresentationDocument, SlideGroup
from .slides import SlideBuilder
from .text import clean_text, escape_xml

SONG_GROUP_COLOR = "0 0 1 1"
SCRIPTURE_GROUP_COLOR = "1 0.75 0 1"

LAST_USED_FORMAT = "%Y-%m-%dT%H:%M:%S"

_SECTION_SEPARATOR = re.compile(r"^---\r?$", re.MULTILINE)

GROUP_TEMPLATE = """
    <RVSlideGrouping name="{name}" color="{color}" uuid="{group_id}">
      <array name="slides">
        {slide_refs}
      </array>
    </RVSlideGrouping>
  """

DOCUMENT_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<RVPresentationDocument backgroundColor="0 0 0 1" height="1080" width="1920" versionNumber="{version_number}" docType="0" creatorCode="{creator_code}" lastDateUsed="{last_date_used}" usedCount="0" category="Default" resourcesDirectory="" notes="" os="2" buildNumber="{build_number}" UUID="{document_id}" drawingBackgroundColor="0 0 0 0" CCLIDisplay="0" CCLIsongTitle="{ccli_song_title}" CCLIPublisher="" CCLICopyrightYear="" CCLIAuthor="" CCLISongNumber="">
  <timeline timeOffSet="0" selectedMediaTrackIndex="0" loop="0" duration="0" unitOfMeasure="30"/>
  <bibleReference location="1001001" name="NIV"/>
  <array name="slides">{slides}</array>
  <array name="groups">{groups}</array>
</RVPresentationDocument>"""


def display_name(entry: PlaylistEntry, translation: str) -> str:
    """Scripture names carry the translation, everything else uses the title."""
    if entry.type is ItemType.SCRIPTURE:
        return f"{entry.title} ({translation})"
    return entry.title


def split_sections(content: str) -> List[str]:
    """Split on lines that are exactly '---', dropping blank sections."""
    sections = (section.strip() for section in _SECTION_SEPARATOR.split(content))
    return [section for section in sections if section]


def clean_entry(entry: PlaylistEntry) -> PlaylistEntry:
    """Copy of ``entry`` whose title and content are safe to serialize."""
    title = clean_text(entry.title)
    content = clean_text(entry.content)
    if title == entry.title and content == entry.content:
        return entry
    return entry.model_copy(update={"title": title, "content": content})


def group_color(entry_type: ItemType) -> str:
    return SONG_GROUP_COLOR if entry_type is ItemType.SONG else SCRIPTURE_GROUP_COLOR


class PresentationBuilder:
    """Builds presentation documents for one output profile."""

    def __init__(
        self,
        profile: Optional[OutputProfile] = None,
        progress_callback: Optional[Callable[[str], None]] = None,
    ):
        self.profile = profile or PRO6
        self.slide_builder = SlideBuilder(self.profile)
        self.progress_callback = progress_callback

    def _emit(self, message: str):
        """Emit progress update."""
        logger.info(f"📄 Presentation: {message}")
        if self.progress_callback:
            self.progress_callback(message)

    def build(
        self,
        entry: PlaylistEntry,
        translation: str,
        now: Optional[datetime] = None,
        sections: Optional[List[str]] = None,
    ) -> PresentationDocument:
        """
        Build the presentation document for a song or scripture entry.

        Args:
            entry: Entry to render; events are rejected
            translation: Bible translation appended to scripture names
            now: Timestamp recorded as lastDateUsed (defaults to UTC now)
            sections: Override for the entry's content sections
        """
        if not entry.is_presentable:
            raise UnsupportedEntryError(f"Event '{entry.title}' has no presentation")

        entry = clean_entry(entry)
        translation = clean_text(translation)
        now = now or datetime.now(timezone.utc)
        name = display_name(entry, translation)
        if sections is None:
            sections = split_sections(entry.content)

        slides = [self.slide_builder.build(name, is_title=True)]
        slides.extend(self.slide_builder.build(section) for section in sections)

        group = SlideGroup(
            id=generate_uuid(),
            name=name,
            color=group_color(entry.type),
            slide_ids=[slide.id for slide in slides],
        )
        document_id = generate_uuid()
        ccli_song_title = escape_xml(entry.title) if entry.type is ItemType.SONG else ""
        last_date_used = now.strftime(LAST_USED_FORMAT)

        groups_xml = GROUP_TEMPLATE.format(
            name=escape_xml(group.name),
            color=group.color,
            group_id=group.id,
            slide_refs="\n        ".join(
                f"<NSString>{slide_id}</NSString>" for slide_id in group.slide_ids
            ),
        )
        xml = DOCUMENT_TEMPLATE.format(
            version_number=self.profile.version_number,
            creator_code=self.profile.creator_code,
            build_number=self.profile.build_number,
            last_date_used=last_date_used,
            document_id=document_id,
            ccli_song_title=ccli_song_title,
            slides="".join(slide.xml for slide in slides),
            groups=groups_xml,
        )

        self._emit(f"{name} ({len(slides)} slides)")
        return PresentationDocument(
            id=document_id,
            name=name,
            entry_type=entry.type,
            slides=slides,
            group=group,
            ccli_song_title=ccli_song_title,
            last_date_used=last_date_used,
            xml=xml,
        )

    def build_title_only(
        self,
        entry: PlaylistEntry,
        translation: str,
        now: Optional[datetime] = None,
    ) -> PresentationDocument:
        """Fallback document holding just the generated title slide."""
        return self.build(entry, translation, now=now, sections=[])
