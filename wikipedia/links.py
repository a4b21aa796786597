"""
wikipedia/links.py

Pull article links out of MediaWiki markup.

Only plain article links are kept. The filters are tuned for the German
Wikipedia ("Bild:", "Kategorie:"), which is the dump the site imports.
"""
import re
from typing import List

MAX_LINKS_PER_PAGE = 15

_NUMBER = re.compile(r"[0-9]+")
_SKIPPED_PREFIXES = ("Bild:", "Kategorie:", "Image:")


def extract_links(wiki_text: str, max_links: int = MAX_LINKS_PER_PAGE) -> List[str]:
    """
    Return the targets of the [[...]] links in wiki_text, in order.

    - [[Ziel|Text]] keeps "Ziel"
    - [[Flugzeug#Flugsteuerung]] keeps "Flugzeug"
    - underscores become spaces
    - numbers (years like [[1972]]), images, categories, pure anchors and
      anything with a namespace or language prefix ("en:...") are skipped
    - at most max_links links are returned
    """
    links: List[str] = []
    if max_links <= 0:
        return links

    pos = 0
    while True:
        pos = wiki_text.find("[[", pos)
        if pos == -1:
            break
        end = wiki_text.find("]]", pos + 1)
        if end == -1:
            break
        target = wiki_text[pos + 2:end]
        pos = end

        parts = target.split("|")
        if len(parts) == 2:
            target = parts[0]
        if _NUMBER.fullmatch(target):
            continue
        if target.startswith(_SKIPPED_PREFIXES):
            continue
        if target.startswith("#"):
            continue
        parts = target.split("#")
        if len(parts) == 2:
            target = parts[0]
        target = target.replace("_", " ")
        if ":" in target:
            continue
        if not target.strip():
            continue

        links.append(target)
        if len(links) >= max_links:
            break
    return links
