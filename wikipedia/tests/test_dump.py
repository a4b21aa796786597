"""
Tests for reading dumps (wikipedia.dump) and writing the MySQL script
(wikipedia.sql).
"""
import bz2
import io
import tempfile
from pathlib import Path

from django.test import SimpleTestCase

from wikipedia.dump import DumpError, DumpPage, iter_pages, open_dump
from wikipedia.sql import FOOTER, HEADER, escape, write_sql_dump

from .samples import DUMP_XML


class IterPagesTests(SimpleTestCase):
    def test_pages_are_numbered_in_document_order(self):
        pages = list(iter_pages(io.BytesIO(DUMP_XML)))
        self.assertEqual([p.page_id for p in pages], [1, 2, 3])
        self.assertEqual([p.title for p in pages], ["Demokratie", "Wald", "Leer"])

    def test_links_are_extracted_per_page(self):
        pages = list(iter_pages(io.BytesIO(DUMP_XML)))
        self.assertEqual(pages[0].links, ["Staatsform", "Herrschaft", "O'Reilly"])
        self.assertEqual(pages[1].links, ["Wald", "Baum", "Forst"])
        self.assertEqual(pages[2].links, [])

    def test_max_links_is_passed_through(self):
        pages = list(iter_pages(io.BytesIO(DUMP_XML), max_links=1))
        self.assertEqual(pages[0].links, ["Staatsform"])

    def test_dump_without_namespace(self):
        xml = b"<mediawiki><page><title>A</title><revision><text>[[B]]</text></revision></page></mediawiki>"
        self.assertEqual(list(iter_pages(io.BytesIO(xml))), [DumpPage(page_id=1, title="A", links=["B"])])

    def test_malformed_dump_raises_dump_error(self):
        xml = b"<mediawiki><page><title>A</title></page><page><title>B</mediawiki>"
        with self.assertRaises(DumpError):
            list(iter_pages(io.BytesIO(xml)))

    def test_open_dump_reads_bz2_and_plain_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            plain = Path(tmp) / "dewiki.xml"
            packed = Path(tmp) / "dewiki.xml.bz2"
            plain.write_bytes(DUMP_XML)
            packed.write_bytes(bz2.compress(DUMP_XML))
            for path in (plain, packed):
                with open_dump(path) as stream:
                    self.assertEqual(len(list(iter_pages(stream))), 3)

    def test_broken_bz2_stream_raises_dump_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            truncated = Path(tmp) / "truncated.xml.bz2"
            not_packed = Path(tmp) / "plain.xml.bz2"
            truncated.write_bytes(bz2.compress(DUMP_XML)[:-40])
            not_packed.write_bytes(DUMP_XML)
            for path in (truncated, not_packed):
                with open_dump(path) as stream, self.assertRaises(DumpError):
                    list(iter_pages(stream))


class SqlDumpTests(SimpleTestCase):
    def test_escape_doubles_quotes_and_drops_backslashes(self):
        self.assertEqual(escape("O'Reilly"), "O''Reilly")
        self.assertEqual(escape("C:\\Programme"), "C:Programme")

    def test_script_layout(self):
        out = io.StringIO()
        count = write_sql_dump(iter_pages(io.BytesIO(DUMP_XML)), out)
        lines = out.getvalue().splitlines()

        self.assertEqual(count, 3)
        self.assertEqual(tuple(lines[:len(HEADER)]), HEADER)
        self.assertEqual(tuple(lines[-len(FOOTER):]), FOOTER)
        body = lines[len(HEADER):-len(FOOTER)]
        self.assertEqual(body[0], "INSERT INTO wikipedia_pages VALUES (1, 'Demokratie');")
        self.assertIn("INSERT INTO wikipedia_links (page_id, link) VALUES (1, 'O''Reilly');", body)
        self.assertIn("INSERT INTO wikipedia_pages VALUES (2, 'Wald');", body)
        self.assertIn("INSERT INTO wikipedia_links (page_id, link) VALUES (2, 'Baum');", body)
        self.assertEqual(sum(1 for line in body if line.startswith("INSERT INTO wikipedia_links")), 6)

    def test_empty_input_still_creates_the_tables(self):
        out = io.StringIO()
        self.assertEqual(write_sql_dump([], out), 0)
        self.assertEqual(out.getvalue().splitlines(), list(HEADER) + list(FOOTER))
