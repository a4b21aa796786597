"""
Integration tests for the server-rendered news archive page.

We keep these tests in the news app; the page lifecycle itself is unit
tested in thesaurus/tests/.
"""
# news/tests/test_news_archive_page.py
import copy
import os
import re
import shutil
import tempfile
from unittest import mock

from django.conf import settings
from django.template import TemplateDoesNotExist
from django.test import RequestFactory, TestCase, override_settings

from news.archive import parse_display_date
from news.views import render_archive
from thesaurus.config import TaxonomyRoot
from thesaurus.page import PageContext

YEAR_ROW = re.compile(r'<tr class="newsYearDelimiter">\s*<td>(\d{4})</td>')
DATE_CELL = re.compile(r'<span class="newsdate">([^<]+)</span>')


def _rows(html):
    """(year heading, [dates...]) pairs in document order."""
    parts = YEAR_ROW.split(html)
    # parts: [before, year, chunk, year, chunk, ...]
    return [(int(parts[i]), DATE_CELL.findall(parts[i + 1])) for i in range(1, len(parts), 2)]


@override_settings(TOP_SYNSET_ID=4711, TOP_SYNSET_NAME="Entität")
class NewsArchivePageTests(TestCase):
    def get_page(self, url="/news_archive/"):
        r = self.client.get(url)
        self.assertEqual(r.status_code, 200)
        return r.content.decode("utf-8")

    def test_renders_title_header_and_footer(self):
        html = self.get_page()
        self.assertIn("<title>OpenThesaurus - News Archiv</title>", html)
        self.assertIn("<h1>OpenThesaurus - News Archiv</h1>", html)
        self.assertIn('id="footer"', html)

    def test_legacy_php_address_serves_the_same_page(self):
        self.assertEqual(self.get_page("/news_archive.php"), self.get_page())

    def test_one_heading_per_year_in_descending_order(self):
        years = [year for year, _ in _rows(self.get_page())]
        self.assertEqual(years, sorted(set(years), reverse=True))
        self.assertEqual(years[0], 2009)
        self.assertEqual(years[-1], 2003)

    def test_entries_in_non_increasing_date_order_within_each_year(self):
        for year, dates in _rows(self.get_page()):
            keys = [parse_display_date(d) for d in dates]
            self.assertTrue(dates, f"year {year} has no entries")
            self.assertTrue(all(k[0] == year for k in keys))
            self.assertEqual(keys, sorted(keys, reverse=True))

    def test_taxonomy_root_is_interpolated(self):
        html = self.get_page()
        self.assertIn('<a href="synset.php?id=4711">Entität</a>', html)
        self.assertNotIn("{top_synset", html)

    @override_settings(TOP_SYNSET_ID=12, TOP_SYNSET_NAME="Ding & Sache")
    def test_taxonomy_root_name_is_escaped(self):
        self.assertIn('<a href="synset.php?id=12">Ding &amp; Sache</a>', self.get_page())

    def test_rendering_twice_gives_identical_output(self):
        self.assertEqual(self.get_page(), self.get_page())

    def test_response_varies_on_the_session_cookie(self):
        r = self.client.get("/news_archive/")
        self.assertIn("Cookie", r["Vary"])

    def test_post_is_not_allowed(self):
        self.assertEqual(self.client.post("/news_archive/").status_code, 405)

    @override_settings(THESAURUS_AUTH_MODES={"thesaurus_default_auth": False})
    def test_anonymous_users_are_sent_to_login_when_login_cannot_be_cancelled(self):
        r = self.client.get("/news_archive/")
        self.assertEqual(r.status_code, 302)
        self.assertEqual(r["Location"], "/admin/login/?next=/news_archive/")

    def test_page_context_opened_and_closed_once(self):
        with mock.patch.object(PageContext, "open", autospec=True, side_effect=PageContext.open) as opened, \
             mock.patch.object(PageContext, "close", autospec=True, side_effect=PageContext.close) as closed:
            self.get_page()
        self.assertEqual(opened.call_count, 1)
        self.assertEqual(closed.call_count, 1)

    def test_page_context_closed_when_an_include_fails(self):
        # a bottom.html earlier on the template path whose own include is missing
        tmpdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, tmpdir, True)
        os.makedirs(os.path.join(tmpdir, "include"))
        with open(os.path.join(tmpdir, "include", "bottom.html"), "w", encoding="utf-8") as fh:
            fh.write('{% include "include/no_such_fragment.html" %}\n')
        templates = copy.deepcopy(settings.TEMPLATES)
        templates[0]["DIRS"] = [tmpdir, *templates[0]["DIRS"]]

        with self.settings(TEMPLATES=templates), \
             mock.patch.object(PageContext, "open", autospec=True, side_effect=PageContext.open) as opened, \
             mock.patch.object(PageContext, "close", autospec=True, side_effect=PageContext.close) as closed:
            with self.assertRaises(TemplateDoesNotExist) as cm:
                self.client.get("/news_archive/")
        self.assertIn("include/no_such_fragment.html", str(cm.exception))
        self.assertEqual(opened.call_count, 1)
        self.assertEqual(closed.call_count, 1)
        self.assertTrue(closed.call_args.args[0].is_closed)

    def test_text_ads_hidden_by_default(self):
        self.assertNotIn("adsbygoogle", self.get_page())

    @override_settings(THESAURUS_TEXTADS_ENABLED=True, THESAURUS_TEXTADS_CLIENT="pub-123")
    def test_text_ads_rendered_when_enabled(self):
        html = self.get_page()
        self.assertIn('data-ad-slot="news_archive"', html)
        self.assertIn('data-ad-client="pub-123"', html)


class RenderArchiveTests(TestCase):
    def test_output_depends_on_the_root_passed_in(self):
        request = RequestFactory().get("/news_archive/")
        a = render_archive(request, TaxonomyRoot(synset_id=1, name="Entität"))
        b = render_archive(request, TaxonomyRoot(synset_id=2, name="Objekt"))
        self.assertIn('<a href="synset.php?id=1">Entität</a>', a)
        self.assertIn('<a href="synset.php?id=2">Objekt</a>', b)
        self.assertEqual(a, render_archive(request, TaxonomyRoot(synset_id=1, name="Entität")))
