"""
Mutable builders used while a single channel or programme is being decoded.

Builders never escape a decode pass: they are frozen into the immutable
records in xmltv_reader.schemas once the element has been fully read.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from xmltv_reader.schemas import (
    Channel,
    Credit,
    Episode,
    Icon,
    Premiere,
    Programme,
    Rating,
)
from xmltv_reader.utils.dates import MIN_DATE


@dataclass(slots=True)
class EpisodeBuilder:
    series: int | None = None
    series_count: int | None = None
    episode: int | None = None
    episode_count: int | None = None
    part: int | None = None
    part_count: int | None = None
    title: str | None = None

    def build(self) -> Episode:
        return Episode(
            series=self.series,
            series_count=self.series_count,
            episode=self.episode,
            episode_count=self.episode_count,
            part=self.part,
            part_count=self.part_count,
            title=self.title,
        )


@dataclass(slots=True)
class ChannelBuilder:
    """In-memory state of a <channel> element being read."""
    id: str
    display_name: str | None = None
    number: str | None = None
    url: str | None = None
    icon: Icon | None = None

    def build(self) -> Channel:
        return Channel(
            id=self.id,
            display_name=self.display_name or "",
            number=self.number,
            url=self.url,
            icon=self.icon,
        )


@dataclass(slots=True)
class ProgrammeBuilder:
    """In-memory state of a <programme> element being read."""
    channel_id: str
    start: datetime = MIN_DATE
    end: datetime = MIN_DATE
    title: str | None = None
    description: str | None = None
    categories: list[str] = field(default_factory=list)
    countries: list[str] = field(default_factory=list)
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
    provider_ids: dict[str, str] = field(default_factory=dict)
    series_provider_ids: dict[str, str] = field(default_factory=dict)
    program_id: str | None = None
    credits: list[Credit] = field(default_factory=list)
    episode: EpisodeBuilder | None = None

    def ensure_episode(self) -> EpisodeBuilder:
        """Create the episode on first use"""
        if self.episode is None:
            self.episode = EpisodeBuilder()
        return self.episode

    def overlaps(self, window_start: datetime, window_end: datetime) -> bool:
        return not (self.end < window_start or self.start >= window_end)

    def build(self) -> Programme:
        episode = self.episode.build() if self.episode is not None else None
        return Programme(
            channel_id=self.channel_id,
            start=self.start,
            end=self.end,
            title=self.title,
            sub_title=episode.title if episode is not None else None,
            description=self.description,
            categories=list(self.categories),
            countries=list(self.countries),
            icon=self.icon,
            premiere=self.premiere,
            is_new=self.is_new,
            is_live=self.is_live,
            is_previously_shown=self.is_previously_shown,
            previously_shown=self.previously_shown,
            quality=self.quality,
            copyright_date=self.copyright_date,
            star_rating=self.star_rating,
            rating=self.rating,
            provider_ids=dict(self.provider_ids),
            series_provider_ids=dict(self.series_provider_ids),
            program_id=self.program_id,
            credits=list(self.credits),
            episode=episode,
        )


__all__ = ["EpisodeBuilder", "ChannelBuilder", "ProgrammeBuilder"]
