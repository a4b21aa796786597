"""
wikipedia/apps.py

AppConfig for the Wikipedia app.

Why this app exists
-------------------
The search result page shows, next to the synonyms, the words that the
Wikipedia article about the search term links to. This app builds that data
from a Wikipedia XML dump and serves it:

1) manage.py dump_wikipedia_links  — dump -> SQL script, or straight into the DB
2) /api/wikipedia/links/?title=... — links of one article (public, read-only)
"""
from django.apps import AppConfig


class WikipediaConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "wikipedia"
    verbose_name = "Wikipedia links"
