"""
news/apps.py

AppConfig for the News app.

Why this app exists
-------------------
This app serves the project news in two shapes:

1) /news_archive/   — the server-rendered archive page (year-grouped table)
2) /api/news/       — the same entries as JSON, optionally for one year

The entries are static content (news/entries.py); there are no models.
"""
from django.apps import AppConfig


class NewsConfig(AppConfig):
    name = "news"
    verbose_name = "News"
