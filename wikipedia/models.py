"""
wikipedia/models.py

Data model for:
- WikipediaPage: one article of the dump, numbered in dump order
- WikipediaLink: one outgoing article link of a page (at most 15 per page)

Notes & design choices
----------------------
- page_id is assigned by the dump tool (1.. in document order), not by the
  database, so the SQL script and a direct load produce the same ids.
- Both tables are replaced wholesale on every import; rows are never edited.
- Titles and links are capped at 100 characters like the MySQL tables the
  SQL script creates.
"""
from django.db import models


class WikipediaPage(models.Model):
    page_id = models.PositiveIntegerField(primary_key=True)
    title = models.CharField(max_length=100, db_index=True, help_text="Article title as in the dump.")

    class Meta:
        ordering = ["page_id"]
        db_table = "wikipedia_pages"

    def __str__(self) -> str:
        return self.title


class WikipediaLink(models.Model):
    page = models.ForeignKey(WikipediaPage, on_delete=models.CASCADE, related_name="links", db_column="page_id")
    link = models.CharField(max_length=100, help_text="Title of the linked article.")

    class Meta:
        ordering = ["page", "id"]
        db_table = "wikipedia_links"

    def __str__(self) -> str:
        return f"{self.page_id} -> {self.link}"
