"""
Export Models

Pydantic schemas for schedule entries and the documents generated from them.
"""

from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# INPUT MODELS
# =============================================================================


class ItemType(str, Enum):
    """Classification of a service-schedule entry."""

    SONG = "song"
    SCRIPTURE = "scripture"
    EVENT = "event"


class ScheduleEntry(BaseModel):
    """One classified line of a service schedule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ItemType
    title: str


class PlaylistEntry(ScheduleEntry):
    """A schedule entry together with the text fetched for it."""

    id: str = Field(default="", description="Stable key derived from type and title")
    content: str = Field(
        default="",
        description="Slide text, sections separated by a line containing only '---'",
    )
    is_loading: bool = Field(default=False, alias="isLoading")
    error: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _derive_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("id"):
            entry_type = data.get("type")
            if isinstance(entry_type, ItemType):
                entry_type = entry_type.value
            data = {**data, "id": f"{entry_type}-{data.get('title', '')}"}
        return data

    @property
    def is_presentable(self) -> bool:
        return self.type is not ItemType.EVENT


# =============================================================================
# PRESENTATION MODELS
# =============================================================================


class Slide(BaseModel):
    """One rendered slide of a presentation document."""

    id: str
    text: str
    is_title_slide: bool = False
    label: str = ""
    xml: str = Field(default="", description="Serialized RVDisplaySlide element")


class SlideGroup(BaseModel):
    """Named, colored group referencing every slide of one document."""

    id: str
    name: str
    color: str
    slide_ids: List[str] = Field(default_factory=list)


class PresentationDocument(BaseModel):
    """A complete .pro6 presentation for one song or scripture entry."""

    id: str
    name: str
    entry_type: ItemType
    slides: List[Slide]
    group: SlideGroup
    ccli_song_title: str = ""
    last_date_used: str
    xml: str = Field(default="", description="Serialized RVPresentationDocument")

    @property
    def slide_count(self) -> int:
        return len(self.slides)


# =============================================================================
# PLAYLIST MODELS
# =============================================================================


class HeaderItem(BaseModel):
    """Playlist header for a non-presentable event."""

    kind: Literal["header"] = "header"
    id: str
    display_name: str


class PresentationItem(BaseModel):
    """Playlist item pointing at a presentation file in the same archive."""

    kind: Literal["presentation"] = "presentation"
    id: str
    display_name: str
    file_name: str
    file_path: str


PlaylistItem = Annotated[Union[HeaderItem, PresentationItem], Field(discriminator="kind")]


class PlaylistDocument(BaseModel):
    """The single .pro6plx playlist produced per export."""

    name: str
    file_name: str
    items: List[PlaylistItem]
    xml: str = ""
