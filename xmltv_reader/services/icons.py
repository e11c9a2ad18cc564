from typing import Optional

from lxml import etree # type: ignore

from xmltv_reader.schemas import Icon
from xmltv_reader.services.episode_numbering import parse_int


def parse_icon(element: etree._Element) -> Optional[Icon]:
    """
    Read an <icon> element

    Returns:
        Icon, or None when none of src/width/height is usable
    """
    source = element.get("src") or None
    width = parse_int(element.get("width") or "")
    height = parse_int(element.get("height") or "")

    if source is None and width is None and height is None:
        return None
    return Icon(source=source, width=width, height=height)
