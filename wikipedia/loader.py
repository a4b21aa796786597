"""
wikipedia/loader.py

Load dump pages straight into the Django tables (the alternative to piping
the SQL script into mysql). The old rows are replaced in one transaction, so
readers see either the previous import or the new one.
"""
import logging
from typing import Iterable, Tuple

from django.db import transaction

from .dump import DumpPage
from .models import WikipediaLink, WikipediaPage

logger = logging.getLogger(__name__)

TITLE_MAX = WikipediaPage._meta.get_field("title").max_length
LINK_MAX = WikipediaLink._meta.get_field("link").max_length


def _flush(pages, links):
    WikipediaPage.objects.bulk_create(pages)
    WikipediaLink.objects.bulk_create(links)
    pages.clear()
    links.clear()


@transaction.atomic
def load_pages(pages: Iterable[DumpPage], batch_size: int = 1000) -> Tuple[int, int]:
    """Replace all pages and links. Returns (pages loaded, links loaded)."""
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")

    WikipediaLink.objects.all().delete()
    WikipediaPage.objects.all().delete()

    page_rows, link_rows = [], []
    n_pages = n_links = 0
    for page in pages:
        page_rows.append(WikipediaPage(page_id=page.page_id, title=page.title[:TITLE_MAX]))
        link_rows.extend(
            WikipediaLink(page_id=page.page_id, link=link[:LINK_MAX]) for link in page.links
        )
        n_pages += 1
        n_links += len(page.links)
        if len(page_rows) >= batch_size:
            _flush(page_rows, link_rows)
    _flush(page_rows, link_rows)

    logger.info("loaded %d wikipedia pages with %d links", n_pages, n_links)
    return n_pages, n_links
