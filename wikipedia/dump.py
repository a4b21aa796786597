"""
wikipedia/dump.py

Streaming reader for Wikipedia XML dumps ("XXwiki-YYYYMMDD-pages-articles.xml[.bz2]",
see https://dumps.wikimedia.org/).

The dumps are several gigabytes, so the reader uses lxml's iterparse and
drops every <page> element as soon as it has been turned into a DumpPage.
Element names are matched without their namespace; the export schema
version changes the namespace URI between dumps.
"""
import bz2
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterator, List, Union

from lxml import etree

from .links import MAX_LINKS_PER_PAGE, extract_links

logger = logging.getLogger(__name__)


class DumpError(Exception):
    """The dump is not well-formed XML, or its compressed stream is broken."""


@dataclass
class DumpPage:
    page_id: int
    title: str
    links: List[str] = field(default_factory=list)


def open_dump(path: Union[str, Path]) -> IO[bytes]:
    """Open a dump for reading; .bz2 files are decompressed on the fly."""
    path = Path(path)
    if path.suffix == ".bz2":
        return bz2.open(path, "rb")
    return path.open("rb")


def _localname(elem) -> str:
    return etree.QName(elem).localname


def iter_pages(stream: IO[bytes], max_links: int = MAX_LINKS_PER_PAGE) -> Iterator[DumpPage]:
    """
    Yield one DumpPage per <page>, numbered 1.. in document order.

    The links come from the page's <text> (the last one wins when a page
    carries several revisions).
    """
    page_id = 0
    title = None
    links: List[str] = []

    context = etree.iterparse(
        stream,
        events=("end",),
        huge_tree=True,
        resolve_entities=False,
        no_network=True,
    )
    try:
        for _, elem in context:
            name = _localname(elem)
            if name == "title":
                title = (elem.text or "").strip()
            elif name == "text":
                links = extract_links(elem.text or "", max_links=max_links)
            elif name == "page":
                page_id += 1
                yield DumpPage(page_id=page_id, title=title or "", links=links)
                title, links = None, []
                # free what has been processed so far
                elem.clear()
                while elem.getprevious() is not None:
                    del elem.getparent()[0]
                if page_id % 100000 == 0:
                    logger.info("read %d pages", page_id)
    except etree.XMLSyntaxError as exc:
        raise DumpError(f"Malformed dump after page {page_id}: {exc}") from exc
    except (EOFError, OSError) as exc:
        # truncated or corrupt .bz2 stream
        raise DumpError(f"Unreadable dump after page {page_id}: {exc}") from exc
