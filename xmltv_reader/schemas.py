from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Immutable record returned to callers"""
    model_config = ConfigDict(frozen=True)


class CreditType(str, Enum):
    """Roles recognised inside <credits>"""
    DIRECTOR = "director"
    ACTOR = "actor"
    WRITER = "writer"
    ADAPTER = "adapter"
    PRODUCER = "producer"
    COMPOSER = "composer"
    EDITOR = "editor"
    PRESENTER = "presenter"
    COMMENTATOR = "commentator"
    GUEST = "guest"


class Icon(_Record):
    """Channel or programme image"""
    source: str | None = Field(None, description="Image URL (src attribute)")
    width: int | None = Field(None, description="Image width in pixels")
    height: int | None = Field(None, description="Image height in pixels")


class Rating(_Record):
    """Certification rating"""
    value: str = Field(..., description="Rating value (e.g., 'TV-G')")
    system: str | None = Field(None, description="Rating system (e.g., 'MPAA')")


class Premiere(_Record):
    """Premiere marker"""
    details: str = Field(..., description="Free text describing the premiere")


class Credit(_Record):
    """Single person credited on a programme"""
    type: CreditType = Field(..., description="Credited role")
    name: str = Field(..., description="Person name")


class Episode(_Record):
    """Normalized episode numbering (1-based)"""
    series: int | None = Field(None, description="Season number")
    series_count: int | None = Field(None, description="Number of seasons")
    episode: int | None = Field(None, description="Episode number within the season")
    episode_count: int | None = Field(None, description="Number of episodes in the season")
    part: int | None = Field(None, description="Part number within the episode")
    part_count: int | None = Field(None, description="Number of parts in the episode")
    title: str | None = Field(None, description="Episode title (sub-title)")


class Channel(_Record):
    """Channel data model"""
    id: str = Field(..., description="XMLTV channel ID")
    display_name: str = Field(..., description="Display name resolved for the requested language")
    number: str | None = Field(None, description="Channel number detected from the display names")
    url: str | None = Field(None, description="Channel URL")
    icon: Icon | None = Field(None, description="Channel icon")


class Programme(_Record):
    """Programme data model"""
    channel_id: str = Field(..., description="XMLTV channel ID this programme belongs to")
    start: datetime = Field(..., description="Start instant")
    end: datetime = Field(..., description="Stop instant")
    title: str | None = None
    sub_title: str | None = None
    description: str | None = None
    categories: list[str] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)
    icon: Icon | None = None
    premiere: Premiere | None = None
    is_new: bool = False
    is_live: bool = False
    is_previously_shown: bool = False
    previously_shown: datetime | None = None
    quality: str | None = None
    copyright_date: datetime | None = None
    star_rating: float | None = None
    rating: Rating | None = None
    provider_ids: dict[str, str] = Field(default_factory=dict, description="Episode-level external IDs by provider")
    series_provider_ids: dict[str, str] = Field(default_factory=dict, description="Series-level external IDs by provider")
    program_id: str | None = Field(None, description="Opaque program identifier (dd_progid)")
    credits: list[Credit] = Field(default_factory=list)
    episode: Episode | None = None


class Language(_Record):
    """Language code found in the document and how often it occurs"""
    name: str
    relevance: int
