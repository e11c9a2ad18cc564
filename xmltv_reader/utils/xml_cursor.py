"""
Streaming XML cursor

Forward-only access to an XMLTV document built on lxml's iterparse. Only one
top-level subtree is held in memory at a time: once a child of the document
root closes it is cleared and detached from the tree.
"""
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import IO, Union
import logging

from lxml import etree # type: ignore

logger = logging.getLogger(__name__)

XmlSource = Union[str, Path, IO[bytes]]


def element_text(element: etree._Element) -> str:
    """Text content of an element, stripped ('' when empty)"""
    return (element.text or "").strip()


def child_elements(element: etree._Element) -> list[etree._Element]:
    """Element children only (entity references and the like are dropped)"""
    return [child for child in element if isinstance(child.tag, str)]


class XmlTvCursor:
    """
    Scoped streaming reader over one XMLTV document.

    Use as a context manager; the underlying file is closed on every exit
    path when the cursor opened it. A cursor can be iterated only once.
    """

    def __init__(self, source: XmlSource, root_tag: str = "tv", huge_tree: bool = False):
        self.source = source
        self.root_tag = root_tag
        self.huge_tree = huge_tree
        self._stream: IO[bytes] | None = None
        self._owns_stream = False

    @property
    def stream(self) -> IO[bytes] | None:
        """The binary stream being read, None outside the with block"""
        return self._stream

    def __enter__(self) -> "XmlTvCursor":
        if isinstance(self.source, (str, Path)):
            logger.debug(f"Opening XMLTV document: {self.source}")
            self._stream = open(self.source, "rb")
            self._owns_stream = True
        else:
            self._stream = self.source
            # Every read starts from the top of the document
            if self._stream.seekable():
                self._stream.seek(0)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._owns_stream and self._stream is not None:
            self._stream.close()
            logger.debug(f"Closed XMLTV document: {self.source}")
        self._stream = None
        self._owns_stream = False

    def _events(self) -> Iterator[tuple[str, etree._Element]]:
        if self._stream is None:
            raise RuntimeError("XmlTvCursor must be entered before reading")

        context = etree.iterparse(
            self._stream,
            events=("start", "end"),
            load_dtd=False,
            no_network=True,
            resolve_entities=False,
            remove_comments=True,
            remove_pis=True,
            huge_tree=self.huge_tree,
        )
        for event, element in context:
            yield event, element
            if event == "end":
                self._release(element)

    @staticmethod
    def _release(element: etree._Element) -> None:
        parent = element.getparent()
        # Only children of the document root are released, nested
        # elements go away with their top-level ancestor
        if parent is None or parent.getparent() is not None:
            return
        element.clear(keep_tail=True)
        while element.getprevious() is not None:
            del parent[0]

    def _inside_root(self, element: etree._Element) -> bool:
        return next(element.iterancestors(self.root_tag), None) is not None

    def complete_elements(self, tag: str) -> Iterator[etree._Element]:
        """
        Yield every fully-read element named `tag` found inside the root element

        The element (and its subtree) is only valid until the next item is
        requested.
        """
        for event, element in self._events():
            if event == "end" and element.tag == tag and self._inside_root(element):
                yield element

    def opening_elements(self) -> Iterator[etree._Element]:
        """Yield every element as its start tag is read (attributes only)"""
        for event, element in self._events():
            if event == "start":
                yield element
