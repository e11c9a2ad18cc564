"""
Programme decoding

Walks the children of a single <programme> element and accumulates them into
a ProgrammeBuilder. Children are grouped into runs of consecutive siblings
sharing a tag name; language-aware fields consume a whole run, every other
field is applied to each element of the run in turn.
"""
from collections.abc import Callable
from itertools import groupby
from typing import Optional
import logging

from lxml import etree # type: ignore

from xmltv_reader.schemas import Credit, CreditType, Premiere, Rating
from xmltv_reader.services.builder_types import ProgrammeBuilder
from xmltv_reader.services.episode_numbering import decode_episode_num
from xmltv_reader.services.icons import parse_icon
from xmltv_reader.services.language_resolution import collect_pairs, resolve_many, resolve_one
from xmltv_reader.utils.dates import MIN_DATE, parse_date
from xmltv_reader.utils.xml_cursor import child_elements, element_text

logger = logging.getLogger(__name__)

RunHandler = Callable[[ProgrammeBuilder, list[etree._Element]], None]
ElementHandler = Callable[[ProgrammeBuilder, etree._Element], None]


def parse_programme_header(element: etree._Element, builder: ProgrammeBuilder) -> None:
    """Read start/stop attributes, unparsable or missing values become MIN_DATE"""
    builder.start = parse_date(element.get("start")) or MIN_DATE
    builder.end = parse_date(element.get("stop")) or MIN_DATE


class ProgrammeParser:
    """Decodes <programme> elements for one requested language"""

    def __init__(self, language: Optional[str] = None):
        self.language = language
        self._run_handlers: dict[str, RunHandler] = {
            "title": self._parse_title,
            "sub-title": self._parse_sub_title,
            "desc": self._parse_description,
            "category": self._parse_category,
            "country": self._parse_country,
            "premiere": self._parse_premiere,
        }
        self._element_handlers: dict[str, ElementHandler] = {
            "new": self._parse_new,
            "live": self._parse_live,
            "previously-shown": self._parse_previously_shown,
            "quality": self._parse_quality,
            "episode-num": self._parse_episode_num,
            "date": self._parse_copyright_date,
            "star-rating": self._parse_star_rating,
            "rating": self._parse_rating,
            "credits": self._parse_credits,
            "icon": self._parse_icon,
        }

    def parse_body(self, element: etree._Element, builder: ProgrammeBuilder) -> ProgrammeBuilder:
        """Decode every child of a <programme> element into the builder"""
        for tag, run in groupby(child_elements(element), key=lambda child: child.tag):
            siblings = list(run)

            run_handler = self._run_handlers.get(tag)
            if run_handler is not None:
                run_handler(builder, siblings)
                continue

            element_handler = self._element_handlers.get(tag)
            if element_handler is None:
                # unknown, skip entire node
                continue

            for sibling in siblings:
                element_handler(builder, sibling)

        return builder

    def _resolve(self, run: list[etree._Element]) -> Optional[str]:
        return resolve_one(collect_pairs(run), self.language)

    def _parse_title(self, builder: ProgrammeBuilder, run: list[etree._Element]) -> None:
        # <title lang="en">Gino&apos;s Italian Escape</title>
        builder.title = self._resolve(run)

    def _parse_sub_title(self, builder: ProgrammeBuilder, run: list[etree._Element]) -> None:
        # <sub-title lang="en">Islands in the Sun: Southern Sardinia</sub-title>
        builder.ensure_episode().title = self._resolve(run)

    def _parse_description(self, builder: ProgrammeBuilder, run: list[etree._Element]) -> None:
        builder.description = self._resolve(run)

    def _parse_category(self, builder: ProgrammeBuilder, run: list[etree._Element]) -> None:
        # <category lang="en">News</category>
        builder.categories.extend(resolve_many(collect_pairs(run), self.language))

    def _parse_country(self, builder: ProgrammeBuilder, run: list[etree._Element]) -> None:
        value = self._resolve(run)
        if value is not None:
            builder.countries.append(value)

    def _parse_premiere(self, builder: ProgrammeBuilder, run: list[etree._Element]) -> None:
        value = self._resolve(run)
        if value is not None:
            builder.premiere = Premiere(details=value)

    def _parse_new(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        builder.is_new = True

    def _parse_live(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        builder.is_live = True

    def _parse_previously_shown(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        # <previously-shown start="20070708000000" />
        value = element.get("start")
        if not value:
            builder.is_previously_shown = True
            return

        builder.previously_shown = parse_date(value)
        if builder.previously_shown != builder.start:
            builder.is_previously_shown = True

    def _parse_quality(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        builder.quality = element_text(element)

    def _parse_episode_num(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        decode_episode_num(builder, element.get("system"), element_text(element))

    def _parse_copyright_date(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        value = element_text(element)
        if not value:
            builder.copyright_date = None
            return

        copyright_date = parse_date(value)
        if copyright_date is not None:
            builder.copyright_date = copyright_date

    def _parse_star_rating(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        """
        <star-rating>
          <value>3/3</value>
        </star-rating>

        The parsed text starts at the slash, so '3/3' is read as '/3',
        which float() rejects and the rating is left unset.
        """
        value = element.find(".//value")
        if value is None:
            return

        text = element_text(value)
        index = text.find("/")
        if index == -1:
            return

        try:
            builder.star_rating = float(text[index:])
        except ValueError:
            logger.debug(f"Ignoring unparsable star rating: {text!r}")

    def _parse_rating(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        """
        <rating system="MPAA">
            <value>TV-G</value>
        </rating>
        """
        value = element.find(".//value")
        if value is None:
            return
        builder.rating = Rating(value=element_text(value), system=element.get("system"))

    def _parse_credits(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        for child in child_elements(element):
            try:
                credit_type = CreditType(child.tag)
            except ValueError:
                continue
            builder.credits.append(Credit(type=credit_type, name=element_text(child)))

    def _parse_icon(self, builder: ProgrammeBuilder, element: etree._Element) -> None:
        icon = parse_icon(element)
        if builder.icon is None:
            # Nothing kept yet
            builder.icon = icon
        elif icon is not None and (icon.width or 0) > (icon.height or 0):
            # Prefer a banner over a poster
            builder.icon = icon
