"""
thesaurus/apps.py

AppConfig for the site-wide "thesaurus" app.

Why this app exists
-------------------
Every page of the website shares the same plumbing:

1) a page lifecycle (open the session/auth context, render, close it again)
2) the configured taxonomy root (top synset id + name)
3) template context shared by the top/bottom fragments

The app owns no models; it only adapts Django's sessions, auth and templates
to the way the pages expect to use them.
"""
from django.apps import AppConfig


class ThesaurusConfig(AppConfig):
    name = "thesaurus"
    verbose_name = "OpenThesaurus site"
