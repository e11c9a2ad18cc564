"""
Services package for the XMLTV reader

This package contains the streaming extraction engine: the document driver
and the channel, programme, language and episode decoders it relies on.
"""
from xmltv_reader.services.xmltv_reader_service import XmlTvReader

__all__ = [
    'XmlTvReader',
]
