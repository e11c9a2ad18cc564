"""
XMLTV reader

Streams XMLTV television-guide documents into channel and programme records.
"""
from xmltv_reader.schemas import (
    Channel,
    Credit,
    CreditType,
    Episode,
    Icon,
    Language,
    Premiere,
    Programme,
    Rating,
)
from xmltv_reader.services import XmlTvReader
from xmltv_reader.utils.dates import parse_date, standardise_date

__version__ = "0.1.0"

__all__ = [
    'XmlTvReader',
    'parse_date',
    'standardise_date',
    'Channel',
    'Credit',
    'CreditType',
    'Episode',
    'Icon',
    'Language',
    'Premiere',
    'Programme',
    'Rating',
]
