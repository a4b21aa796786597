"""
wikipedia/urls.py

Include this under the global /api/ prefix.
"""
from django.urls import path

from .views import WikipediaLinkListView


app_name = "wikipedia"

urlpatterns = [
    path("wikipedia/links/", WikipediaLinkListView.as_view(), name="links-list"),
]
