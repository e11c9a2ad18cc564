"""
Language resolution for multi-language sibling elements.

XMLTV repeats elements such as <title> or <category> once per language:

    <title lang="es">Homes Under the Hammer - Spanish</title>
    <title lang="en">Homes Under the Hammer - English</title>
    <title>Homes Under the Hammer - No Language</title>

A run is the sequence of consecutive siblings sharing one tag name. These
helpers pick the value(s) to keep from a run for the requested language.
"""
from collections.abc import Callable, Iterable
from typing import Optional

from lxml import etree # type: ignore

from xmltv_reader.utils.xml_cursor import element_text

LanguagePair = tuple[str, Optional[str]]


def collect_pairs(run: Iterable[etree._Element]) -> list[LanguagePair]:
    """Read (text, lang) pairs from a run of sibling elements, in document order"""
    return [(element_text(element), element.get("lang")) for element in run]


def _same_language(requested: Optional[str], language: Optional[str]) -> bool:
    if requested is None or language is None:
        return requested is None and language is None
    return requested.casefold() == language.casefold()


def resolve_one(
    pairs: list[LanguagePair],
    language: Optional[str],
    on_each: Optional[Callable[[str], None]] = None
) -> Optional[str]:
    """
    Pick a single value from a run

    Precedence:
        1. first value whose language matches the requested one (case-insensitive)
        2. first value with no (or a blank) language
        3. first value

    Args:
        pairs: (text, lang) pairs of the run
        language: Requested language; None only matches values without a language
        on_each: Called with every value of the run regardless of language

    Returns:
        The selected value, or None for an empty run
    """
    if on_each is not None:
        for value, _ in pairs:
            on_each(value)

    for value, lang in pairs:
        if _same_language(language, lang):
            return value

    for value, lang in pairs:
        if lang is None or not lang.strip():
            return value

    return pairs[0][0] if pairs else None


def resolve_many(pairs: list[LanguagePair], language: Optional[str]) -> list[str]:
    """
    Keep every value of a run in the requested language

    When no value carries exactly the requested language all values are kept.
    """
    if any(lang == language for _, lang in pairs):
        return [value for value, lang in pairs if lang == language]
    return [value for value, _ in pairs]
