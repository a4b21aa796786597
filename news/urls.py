"""
news/urls.py

JSON endpoints of the news app. Include this under the global /api/ prefix;
the HTML page itself is wired in the root urls.py.
"""
from django.urls import path

from .views import NewsListView


app_name = "news"

urlpatterns = [
    path("news/", NewsListView.as_view(), name="news-list"),
]
