"""
Integration tests for the Wikipedia links API.
"""
# wikipedia/tests/test_links_api.py
from rest_framework import status
from rest_framework.test import APITestCase

from wikipedia.models import WikipediaLink, WikipediaPage


class WikipediaLinksApiTests(APITestCase):
    def setUp(self):
        demokratie = WikipediaPage.objects.create(page_id=1, title="Demokratie")
        wald = WikipediaPage.objects.create(page_id=2, title="Wald")
        WikipediaLink.objects.create(page=demokratie, link="Staatsform")
        WikipediaLink.objects.create(page=demokratie, link="Herrschaft")
        WikipediaLink.objects.create(page=wald, link="Baum")

    def _items(self, response_data):
        # handle both paginated and non-paginated responses
        return response_data if isinstance(response_data, list) else response_data.get("results", [])

    def test_list_is_public(self):
        r = self.client.get("/api/wikipedia/links/")
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(len(self._items(r.data)), 3)

    def test_filter_by_title_is_case_insensitive(self):
        r = self.client.get("/api/wikipedia/links/?title=demokratie")
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        items = self._items(r.data)
        self.assertEqual([i["link"] for i in items], ["Staatsform", "Herrschaft"])
        self.assertTrue(all(i["title"] == "Demokratie" and i["page_id"] == 1 for i in items))

    def test_filter_by_page_id(self):
        r = self.client.get("/api/wikipedia/links/?page_id=2")
        self.assertEqual([i["link"] for i in self._items(r.data)], ["Baum"])

    def test_unknown_title_is_empty(self):
        r = self.client.get("/api/wikipedia/links/?title=Mond")
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(self._items(r.data), [])


class ApiDocsTests(APITestCase):
    def test_docs_and_schema_available(self):
        docs = self.client.get("/api/docs/")
        schema = self.client.get("/api/schema/")
        self.assertEqual(docs.status_code, status.HTTP_200_OK)
        self.assertEqual(schema.status_code, status.HTTP_200_OK)
        self.assertIn(b"wikipedia/links", schema.content)
        self.assertIn(b"/news/", schema.content)
