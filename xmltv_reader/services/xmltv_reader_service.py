from datetime import datetime
from typing import Optional, Protocol
import logging

from lxml import etree # type: ignore

from xmltv_reader.config import settings
from xmltv_reader.schemas import Channel, Language, Programme
from xmltv_reader.services.builder_types import ProgrammeBuilder
from xmltv_reader.services.channel_parser import ChannelParser
from xmltv_reader.services.programme_parser import ProgrammeParser, parse_programme_header
from xmltv_reader.utils.dates import ensure_utc
from xmltv_reader.utils.logging_helpers import log_parse_summary, log_section_end, log_section_start
from xmltv_reader.utils.xml_cursor import XmlSource, XmlTvCursor

logger = logging.getLogger(__name__)


class CancellationSignal(Protocol):
    """Anything exposing is_set(), e.g. threading.Event"""

    def is_set(self) -> bool: ...


def _is_cancelled(cancel: Optional[CancellationSignal]) -> bool:
    return cancel is not None and cancel.is_set()


class XmlTvReader:
    """
    Reads channels, programmes and languages from an XMLTV document

    Every public call opens a fresh streaming cursor over the source and
    closes it before returning, so results never depend on earlier calls.

    Raises (from every list_* call):
        etree.XMLSyntaxError: If XML is malformed
        FileNotFoundError: If file doesn't exist
        OSError: If file can't be read
    """

    def __init__(self, source: XmlSource, language: Optional[str] = None, huge_tree: Optional[bool] = None):
        """
        Args:
            source: Path to the XMLTV file, or a binary file object
            language: Preferred language for every language-resolved field
            huge_tree: Lift lxml's size limits (defaults to settings.huge_tree)
        """
        self.source = source
        self.language = language
        self.huge_tree = settings.huge_tree if huge_tree is None else huge_tree
        self._channel_parser = ChannelParser(language)
        self._programme_parser = ProgrammeParser(language)

    def _open(self) -> XmlTvCursor:
        return XmlTvCursor(self.source, huge_tree=self.huge_tree)

    def list_channels(self) -> list[Channel]:
        """Return every channel with a display name, in document order"""
        log_section_start(logger, f"channel listing of {self.source}")
        channels = []

        with self._open() as cursor:
            for element in cursor.complete_elements("channel"):
                channel = self._channel_parser.parse(element)
                if channel is not None:
                    channels.append(channel)

        log_parse_summary(logger, "channels", len(channels))
        log_section_end(logger, f"channel listing of {self.source}")
        return channels

    def list_programmes(
        self,
        channel_id: str,
        start: datetime,
        end: datetime,
        cancel: Optional[CancellationSignal] = None
    ) -> list[Programme]:
        """
        Return the programmes of one channel overlapping [start, end)

        Args:
            channel_id: XMLTV channel ID (compared case-insensitively)
            start: Start of the time window (naive values are UTC)
            end: End of the time window (naive values are UTC)
            cancel: Once set, remaining programmes are skipped

        Returns:
            Programmes in document order
        """
        window_start = ensure_utc(start)
        window_end = ensure_utc(end)
        wanted = channel_id.casefold()

        log_section_start(logger, f"programme listing of {self.source}")
        logger.debug(f"Listing programmes for {channel_id}: {window_start.isoformat()} to {window_end.isoformat()}")
        programmes = []

        with self._open() as cursor:
            for element in cursor.complete_elements("programme"):
                # Cancellation skips the remaining programmes but the scan
                # still runs to the end of the document
                if _is_cancelled(cancel):
                    continue

                programme = self._parse_programme(element, wanted, window_start, window_end)
                if programme is not None:
                    programmes.append(programme)

        log_parse_summary(logger, f"programmes for {channel_id}", len(programmes))
        log_section_end(logger, f"programme listing of {self.source}")
        return programmes

    def _parse_programme(
        self,
        element: etree._Element,
        wanted: str,
        window_start: datetime,
        window_end: datetime
    ) -> Optional[Programme]:
        """Decode a single <programme>, None if it belongs elsewhere"""
        channel_id = element.get("channel")
        if channel_id is None or channel_id.casefold() != wanted:
            return None

        builder = ProgrammeBuilder(channel_id=channel_id)
        parse_programme_header(element, builder)
        if not builder.overlaps(window_start, window_end):
            return None

        return self._programme_parser.parse_body(element, builder).build()

    def list_languages(self, cancel: Optional[CancellationSignal] = None) -> list[Language]:
        """
        Count the lang attributes used in the document

        Returns:
            Languages ordered by descending occurrence count, ties in the
            order they were first seen
        """
        log_section_start(logger, f"language listing of {self.source}")
        counts: dict[str, int] = {}

        with self._open() as cursor:
            for element in cursor.opening_elements():
                if _is_cancelled(cancel):
                    continue

                language = element.get("lang")
                if language:
                    counts[language] = counts.get(language, 0) + 1

        languages = [Language(name=name, relevance=count) for name, count in counts.items()]
        languages.sort(key=lambda language: language.relevance, reverse=True)

        log_parse_summary(logger, "languages", len(languages))
        log_section_end(logger, f"language listing of {self.source}")
        return languages
