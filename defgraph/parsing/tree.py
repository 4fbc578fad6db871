"""Streaming element tree builder.

Walks start/end events of one definition file, keeping an explicit stack of
open DefElements. Only elements inside the ``Defs`` container are kept; every
direct child of the container becomes one record root, which is handed to
the profiler and the reference extractor as soon as its end tag is seen.

Self-closing tags (``<li Class="X"/>``) are skipped entirely: they produce no
element, no record and no references. lxml reports them as ordinary start/end
pairs, so they are told apart by scanning the raw start tags once.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from lxml import etree

from ..errors import MarkupError
from ..extraction import extract_references
from .model import DefElement, DefRecord
from .profile import profile_record
from .provenance import detect_extension, relative_source_path

CONTAINER_TAG = "Defs"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# Comments, CDATA, processing instructions and declarations are matched first
# so that tag-like text inside them is never counted as a start tag.
MARKUP_TOKEN_RE = re.compile(
    rb"<!--.*?-->"
    rb"|<!\[CDATA\[.*?\]\]>"
    rb"|<\?.*?\?>"
    rb"|<!(?:[^>\[]|\[[^\]]*\])*>"
    rb"|<(?P<close>/?)(?P<tag>[^\s/>!?][^\s/>]*)(?:[^>\"']|\"[^\"]*\"|'[^']*')*?(?P<empty>/?)>",
    re.DOTALL,
)

logger = logging.getLogger(__name__)


def scan_empty_tags(data: bytes) -> list[bool]:
    """One flag per start tag in document order: True for ``<tag/>``."""
    flags: list[bool] = []
    for match in MARKUP_TOKEN_RE.finditer(data):
        if match.group("tag") is None or match.group("close"):
            continue
        flags.append(bool(match.group("empty")))
    return flags


def _node_name(node: etree._Element) -> str:
    local = etree.QName(node).localname
    return f"{node.prefix}:{local}" if node.prefix else local


def _attribute_name(node: etree._Element, key: str) -> str:
    if not key.startswith("{"):
        return key
    qname = etree.QName(key)
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in node.nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _last_text_run(node: etree._Element) -> str | None:
    """Last non-empty trimmed text run directly inside ``node``.

    Runs are the text before the first child and the tail after each child
    (comments and skipped self-closing children included). Later runs
    replace earlier ones; nothing is merged.
    """
    content: str | None = None
    runs = [node.text, *(child.tail for child in node)]
    for run in runs:
        if run is None:
            continue
        text = run.strip()
        if text:
            content = text
    return content


class DefTreeBuilder:
    """Builds DefRecords from the markup of a single file.

    ``empty_tags`` holds one flag per start event (see ``scan_empty_tags``);
    without it every element is treated as an ordinary open/close pair.
    """

    def __init__(
        self,
        *,
        source: Path | None = None,
        root: Path | None = None,
        empty_tags: Iterable[bool] = (),
    ) -> None:
        self.source = source
        self.source_file = relative_source_path(source, root) if source is not None else "<markup>"
        self.extension = detect_extension(source) if source is not None else detect_extension("")
        self.records: list[DefRecord] = []
        self._stack: list[DefElement] = []
        self._in_container = False
        self._empty_tags = iter(empty_tags)
        self._skip_end = False

    def feed_events(self, events: Iterable[tuple[str, etree._Element]]) -> None:
        for event, node in events:
            if event == "start":
                self._start(node)
            elif event == "end":
                self._end(node)

    def _start(self, node: etree._Element) -> None:
        # An empty element's end event always follows its start directly.
        if next(self._empty_tags, False):
            self._skip_end = True
            return
        name = _node_name(node)
        if name == CONTAINER_TAG:
            self._in_container = True
            return
        if not self._in_container:
            return
        self._stack.append(
            DefElement(
                name=name,
                attributes={_attribute_name(node, k): v for k, v in node.attrib.items()},
                depth=len(self._stack),
            )
        )

    def _end(self, node: etree._Element) -> None:
        if self._skip_end:
            self._skip_end = False
            return
        name = _node_name(node)
        if name == CONTAINER_TAG:
            self._in_container = False
            return
        if not self._in_container or not self._stack:
            return

        element = self._stack.pop()
        element.content = _last_text_run(node)
        if self._stack:
            self._stack[-1].children.append(element)
            return

        self.records.append(self._finish_record(element))
        node.clear(keep_tail=True)

    def _finish_record(self, root: DefElement) -> DefRecord:
        record = profile_record(root, source_file=self.source_file, extension=self.extension)
        record.candidate_refs = extract_references(root.children)
        return record


def parse_defs_markup(
    data: bytes | str,
    *,
    source: Path | None = None,
    root: Path | None = None,
) -> list[DefRecord]:
    """Parse the markup of one file into DefRecords.

    Tag-syntax and encoding errors met while streaming raise MarkupError.
    Running out of input with tags still open is not an error: records
    closed before the end of the stream are returned and any record left
    open is dropped.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    builder = DefTreeBuilder(source=source, root=root, empty_tags=scan_empty_tags(data))
    parser = etree.XMLPullParser(events=("start", "end"), huge_tree=True)
    try:
        parser.feed(data)
        builder.feed_events(parser.read_events())
    except etree.XMLSyntaxError as exc:
        raise MarkupError(exc.msg or str(exc), path=source, line=exc.lineno) from exc

    try:
        parser.close()
    except etree.XMLSyntaxError as exc:
        logger.debug("End of stream in %s with open tags: %s", builder.source_file, exc.msg)
    else:
        builder.feed_events(parser.read_events())
    return builder.records
