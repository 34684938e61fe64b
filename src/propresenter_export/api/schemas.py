"""
API Schemas - Pydantic models for request/response validation.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import PlaylistEntry


# =============================================================================
# EXPORT SCHEMAS
# =============================================================================


class ExportRequest(BaseModel):
    """Request to build a ProPresenter archive."""

    entries: List[PlaylistEntry] = Field(..., description="Ordered schedule entries")
    translation: Optional[str] = Field(
        default=None, description="Bible translation for scripture entries"
    )
    profile: Optional[str] = Field(default=None, description="Output profile name")

    model_config = {
        "json_schema_extra": {
            "example": {
                "entries": [
                    {"type": "event", "title": "Begrüßung"},
                    {"type": "song", "title": "Größer", "content": "Strophe 1\n---\nRefrain"},
                    {"type": "scripture", "title": "Psalm 23", "content": "1 Der HERR ist mein Hirte"},
                ],
                "translation": "Lutherbibel 2017",
                "profile": "pro6",
            }
        }
    }


class TranslationsResponse(BaseModel):
    """Selectable Bible translations."""

    translations: List[str]
    default: str


class ProfilesResponse(BaseModel):
    """Available output profiles."""

    profiles: List[str]
    default: str


# =============================================================================
# HEALTH SCHEMAS
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str
    error_type: Optional[str] = None
