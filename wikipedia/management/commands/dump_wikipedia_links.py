"""
Management command: dump_wikipedia_links
----------------------------------------

Purpose:
    Read a Wikipedia XML dump and extract, for every article, the first
    links to other articles. These are shown on the search result page.

Behavior:
    - Default: write a MySQL script (drop/create/insert/index) to stdout
      or to --output. The output file only appears once the whole dump
      has been read.
    - --load: replace the rows of the Django tables instead.
    - .bz2 dumps are read without unpacking them first.

Usage:
    python manage.py dump_wikipedia_links dewiki-20081206-pages-articles.xml.bz2 > result.sql
    python manage.py dump_wikipedia_links dewiki-20081206-pages-articles.xml --load
"""
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from wikipedia.dump import DumpError, iter_pages, open_dump
from wikipedia.loader import load_pages
from wikipedia.sql import write_sql_dump


class Command(BaseCommand):
    help = "Extract article links from a Wikipedia XML dump (SQL script or direct load)."

    def add_arguments(self, parser):
        parser.add_argument("dump_path", type=str, help="Path to the XML dump (.xml or .xml.bz2)")
        parser.add_argument("--output", "-o", type=str, default=None, help="Write the SQL script to this file")
        parser.add_argument("--load", action="store_true", help="Load into the database instead of writing SQL")
        parser.add_argument(
            "--max-links", type=int, default=settings.WIKIPEDIA_MAX_LINKS_PER_PAGE,
            help="Links kept per page (default %(default)s)",
        )
        parser.add_argument("--batch-size", type=int, default=1000, help="Rows per bulk insert with --load")

    def handle(self, *args, **opts):
        path = Path(opts["dump_path"])
        if not path.exists():
            raise CommandError(f"File not found: {path}")
        if opts["load"] and opts["output"]:
            raise CommandError("--output and --load cannot be combined")
        if opts["max_links"] < 1:
            raise CommandError("--max-links must be at least 1")
        if opts["batch_size"] < 1:
            raise CommandError("--batch-size must be at least 1")

        try:
            with open_dump(path) as stream:
                pages = iter_pages(stream, max_links=opts["max_links"])
                if opts["load"]:
                    n_pages, n_links = load_pages(pages, batch_size=opts["batch_size"])
                    self.stderr.write(self.style.SUCCESS(f"Loaded {n_pages} page(s) with {n_links} link(s)."))
                elif opts["output"]:
                    n_pages = self._write_file(pages, Path(opts["output"]))
                    self.stderr.write(self.style.SUCCESS(f"Wrote {n_pages} page(s) to {opts['output']}."))
                else:
                    write_sql_dump(pages, self.stdout)
        except DumpError as exc:
            raise CommandError(str(exc)) from exc

    def _write_file(self, pages, target: Path) -> int:
        """Write the script next to target and move it into place once complete."""
        part = target.with_name(target.name + ".part")
        try:
            with part.open("w", encoding="utf-8") as out:
                n_pages = write_sql_dump(pages, out)
        except Exception:
            part.unlink(missing_ok=True)
            raise
        part.replace(target)
        return n_pages
