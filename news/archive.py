"""
news/archive.py

Read model for the news archive page.

- NewsEntry: one dated announcement (display date + trusted HTML body)
- YearGroup: the entries of one calendar year, in authored order

Notes & design choices
----------------------
- The content is static (news/entries.py); there is no database table.
- Display dates are strings. Most are ISO (YYYY-MM-DD); free text such as
  "März 2003" is understood as "<month name> <year>" and sorts before any
  day of that month.
- Grouping keeps the authored order. check_ordering() is what guarantees the
  archive reads newest first, and the tests run it over the shipped entries.
- Bodies are trusted markup and are marked safe. The configured taxonomy
  root values are not; they are escaped through format_html().
"""
import re
from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, Tuple

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from thesaurus.config import TaxonomyRoot

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_MONTH_YEAR = re.compile(r"^(\w+)\s+(\d{4})$")

MONTHS = {
    "januar": 1, "january": 1, "jänner": 1,
    "februar": 2, "february": 2,
    "märz": 3, "maerz": 3, "march": 3,
    "april": 4,
    "mai": 5, "may": 5,
    "juni": 6, "june": 6,
    "juli": 7, "july": 7,
    "august": 8,
    "september": 9,
    "oktober": 10, "october": 10,
    "november": 11,
    "dezember": 12, "december": 12,
}


def parse_display_date(value: str) -> Tuple[int, int, int]:
    """
    Turn a display date into a sortable (year, month, day) tuple.

    "2008-12-22" -> (2008, 12, 22); "März 2003" -> (2003, 3, 0).
    Raises ValueError for anything else.
    """
    text = (value or "").strip()
    m = _ISO_DATE.match(text)
    if m:
        year, month, day = (int(g) for g in m.groups())
        if not (1 <= month <= 12 and 1 <= day <= 31):
            raise ValueError(f"Invalid date: {value!r}")
        return year, month, day

    m = _MONTH_YEAR.match(text)
    if m:
        month = MONTHS.get(m.group(1).lower())
        if month is None:
            raise ValueError(f"Unknown month name in date: {value!r}")
        return int(m.group(2)), month, 0

    raise ValueError(f"Unparseable date: {value!r}")


@dataclass(frozen=True)
class NewsEntry:
    date: str
    body: str
    interpolated: bool = False

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        return parse_display_date(self.date)

    @property
    def year(self) -> int:
        return self.sort_key[0]

    def render_body(self, root: TaxonomyRoot) -> SafeString:
        if self.interpolated:
            return format_html(self.body, top_synset_id=root.synset_id, top_synset_name=root.name)
        return mark_safe(self.body)


@dataclass(frozen=True)
class YearGroup:
    year: int
    entries: Tuple[NewsEntry, ...]


def group_by_year(entries: Iterable[NewsEntry]) -> Tuple[YearGroup, ...]:
    """Split entries into consecutive runs of the same year (authored order)."""
    return tuple(
        YearGroup(year=year, entries=tuple(run))
        for year, run in groupby(entries, key=lambda e: e.year)
    )


def check_ordering(entries: Iterable[NewsEntry]) -> None:
    """
    Raise ValueError unless entries read newest first:
    dates are non-increasing and every year forms exactly one group.
    """
    previous = None
    seen_years = set()
    for group in group_by_year(entries):
        if group.year in seen_years:
            raise ValueError(f"Year {group.year} appears in more than one group")
        seen_years.add(group.year)
        for entry in group.entries:
            if previous is not None and entry.sort_key > previous.sort_key:
                raise ValueError(
                    f"Entry {entry.date!r} is newer than the entry before it ({previous.date!r})"
                )
            previous = entry
