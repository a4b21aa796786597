"""
urls.py — Root URL configuration for the OpenThesaurus website

Purpose
===============================================================================
- Wire Django admin, the server-rendered pages and the JSON APIs.
- Provide interactive API docs:
    * /api/docs/   → Swagger UI
    * /api/schema/ → OpenAPI JSON (machine-readable)

Notes
- The news archive keeps its historical address (/news_archive.php) next to
  the clean one (/news_archive/) so old links and bookmarks still work.
- All JSON endpoints are public and read-only.
"""

from django.contrib import admin
from django.urls import path, include
from rest_framework import permissions

from news.views import news_archive

# ----------------------------------------------------------------------------- #
# API Docs (Swagger/OpenAPI via drf-yasg)                                       #
# ----------------------------------------------------------------------------- #
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

schema_view = get_schema_view(
    openapi.Info(
        title="OpenThesaurus API",
        default_version="v1",
        description=(
            "Read-only JSON endpoints of the OpenThesaurus website. "
            "Key endpoints: "
            "/api/news/ (news archive grouped by year), "
            "/api/wikipedia/links/ (Wikipedia links for a page title)."
        ),
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)

# ----------------------------------------------------------------------------- #
# URL Patterns                                                                  #
# ----------------------------------------------------------------------------- #
urlpatterns = [
    path("admin/", admin.site.urls),

    # Pages
    path("news_archive/",    news_archive, name="news-archive"),
    path("news_archive.php", news_archive, name="news-archive-legacy"),

    # API docs
    path("api/docs/",   schema_view.with_ui("swagger", cache_timeout=0), name="api-docs-swagger"),
    path("api/schema/", schema_view.without_ui(cache_timeout=0),         name="openapi-schema"),

    path("api/", include("news.urls", namespace="news")),
    path("api/", include("wikipedia.urls", namespace="wikipedia")),
]
