from itertools import groupby
from typing import Optional
import logging
import re

from lxml import etree # type: ignore

from xmltv_reader.schemas import Channel
from xmltv_reader.services.builder_types import ChannelBuilder
from xmltv_reader.services.language_resolution import collect_pairs, resolve_one
from xmltv_reader.services.icons import parse_icon
from xmltv_reader.utils.xml_cursor import child_elements, element_text

logger = logging.getLogger(__name__)

# Invariant real number: sign, thousands separators, fraction, exponent
_NUMBER_PATTERN = re.compile(r"\s*[+-]?([0-9][0-9,]*(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")


def normalize_channel_number(value: str) -> Optional[str]:
    """
    Turn a display name such as '5-1' or '5_1' into a channel number

    Returns:
        '5.1', or None if the normalized value isn't a number
    """
    value = value.replace("-", ".").replace("_", ".")
    if _NUMBER_PATTERN.fullmatch(value):
        return value
    return None


class ChannelParser:
    """Decodes <channel> elements for one requested language"""

    def __init__(self, language: Optional[str] = None):
        self.language = language

    def parse(self, element: etree._Element) -> Optional[Channel]:
        """
        Decode a <channel> element

        Returns:
            Channel, or None if it has no id or no display name
        """
        channel_id = element.get("id")
        if not channel_id:
            logger.debug("Skipping channel with missing ID attribute")
            return None

        builder = ChannelBuilder(id=channel_id)

        for tag, run in groupby(child_elements(element), key=lambda child: child.tag):
            siblings = list(run)
            if tag == "display-name":
                builder.display_name = resolve_one(
                    collect_pairs(siblings),
                    self.language,
                    on_each=lambda value: self._set_number(builder, value),
                )
            elif tag == "url":
                builder.url = element_text(siblings[-1])
            elif tag == "icon":
                builder.icon = parse_icon(siblings[-1])

        if not builder.display_name:
            logger.debug(f"Skipping channel {channel_id} without a display name")
            return None

        return builder.build()

    @staticmethod
    def _set_number(builder: ChannelBuilder, value: str) -> None:
        number = normalize_channel_number(value)
        if number is not None:
            builder.number = number
