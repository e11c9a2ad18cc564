"""
Episode numbering decoders

Each <episode-num> element names the numbering system its text follows:

    <episode-num system="dd_progid">EP00003026.0666</episode-num>
    <episode-num system="onscreen">2706</episode-num>
    <episode-num system="xmltv_ns">.26/0.</episode-num>

One decoder per system, selected through DECODERS. Decoders never raise on
malformed text; whatever can't be read is left unset.
"""
from collections.abc import Callable
from typing import Optional
import logging
import re

from xmltv_reader.services.builder_types import EpisodeBuilder, ProgrammeBuilder

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
_SXXEXX_PATTERN = re.compile(r"s([0-9]+)e([0-9]+)", re.IGNORECASE)

_INT_MIN = -2**31
_INT_MAX = 2**31 - 1


def parse_int(value: str) -> Optional[int]:
    """Parse a 32-bit integer (optional sign, surrounding whitespace), None on failure"""
    if not _INTEGER_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        return None
    return number


def _split_slash(value: str) -> list[str]:
    return [part for part in value.split("/") if part]


def _parse_numbered_segment(segment: str) -> tuple[Optional[int], Optional[int]]:
    """
    Parse one xmltv_ns segment, either '5' or '5/12'

    Returns:
        (1-based number, count); count is only read when the number is valid
    """
    if not segment:
        return None, None

    components = segment.split("/")
    number = parse_int(components[0])
    if number is None:
        return None, None

    count = parse_int(components[1]) if len(components) == 2 else None
    return number + 1, count


def decode_xmltv_ns(programme: ProgrammeBuilder, value: str) -> None:
    """Zero-based 'season[/count].episode[/count].part[/count]'"""
    episode: EpisodeBuilder = programme.ensure_episode()
    components = value.replace(" ", "").split(".")

    series, series_count = _parse_numbered_segment(components[0])
    if series is not None:
        episode.series = series
        if series_count is not None:
            episode.series_count = series_count

    if len(components) >= 2:
        number, count = _parse_numbered_segment(components[1])
        if number is not None:
            episode.episode = number
            if count is not None:
                episode.episode_count = count

    if len(components) >= 3:
        number, count = _parse_numbered_segment(components[2])
        if number is not None:
            episode.part = number
            if count is not None:
                episode.part_count = count


def decode_dd_progid(programme: ProgrammeBuilder, value: str) -> None:
    if value.strip():
        programme.program_id = value


def decode_icetv(programme: ProgrammeBuilder, value: str) -> None:
    programme.provider_ids["icetv"] = value


def decode_onscreen(programme: ProgrammeBuilder, value: str) -> None:
    # 'Episode #FFEE' is free text, there is no reliable number in it
    logger.debug(f"Discarding onscreen episode number: {value!r}")


def _decode_provider_path(programme: ProgrammeBuilder, value: str, provider: str) -> None:
    """'series/<id>' or 'episode/<id>' for a given provider key"""
    if not value.strip():
        return

    parts = _split_slash(value)
    if len(parts) != 2:
        return

    kind = parts[0].casefold()
    if kind == "series":
        programme.series_provider_ids[provider] = parts[1]
    elif kind == "episode":
        programme.provider_ids[provider] = parts[1]


def decode_thetvdb(programme: ProgrammeBuilder, value: str) -> None:
    _decode_provider_path(programme, value, "tvdb")


def decode_imdb(programme: ProgrammeBuilder, value: str) -> None:
    _decode_provider_path(programme, value, "imdb")


def decode_themoviedb(programme: ProgrammeBuilder, value: str) -> None:
    """'series/<id>', 'episode/<id>' or a bare '<id>'"""
    parts = _split_slash(value)
    if not parts:
        return

    kind = parts[0].casefold()
    if kind == "series":
        if len(parts) >= 2:
            programme.series_provider_ids["tmdb"] = parts[1]
    elif len(parts) == 1 or kind == "episode":
        programme.provider_ids["tmdb"] = parts[-1]


def decode_sxxexx(programme: ProgrammeBuilder, value: str) -> None:
    """'S012E32' anywhere in the text"""
    episode = programme.ensure_episode()
    match = _SXXEXX_PATTERN.search(value)
    if match is None:
        return

    series = parse_int(match.group(1))
    if series is not None:
        episode.series = series

    number = parse_int(match.group(2))
    if number is not None:
        episode.episode = number


DECODERS: dict[str, Callable[[ProgrammeBuilder, str], None]] = {
    "xmltv_ns": decode_xmltv_ns,
    "dd_progid": decode_dd_progid,
    "icetv": decode_icetv,
    "onscreen": decode_onscreen,
    "thetvdb.com": decode_thetvdb,
    "imdb.com": decode_imdb,
    "themoviedb.org": decode_themoviedb,
    "SxxExx": decode_sxxexx,
}


def decode_episode_num(programme: ProgrammeBuilder, system: Optional[str], value: str) -> None:
    """
    Apply one <episode-num> to the programme being built

    Any episode-num element creates the programme's episode, even when its
    system is unknown; unknown systems are otherwise ignored.
    """
    programme.ensure_episode()

    decoder = DECODERS.get(system or "")
    if decoder is None:
        logger.debug(f"Skipping episode-num with unsupported system: {system!r}")
        return

    decoder(programme, value)
