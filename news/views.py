"""
news/views.py

Endpoints:
- /news_archive/      (GET; HTML page, public) — also served at /news_archive.php
- /api/news/          (GET; JSON, public) with an optional ?year=YYYY filter

The page opens the thesaurus page context (session + auth) before it
renders and closes it afterwards, also when rendering fails. Its login
requirement is cancelled: the archive is readable without an account.
"""
import logging

from django.contrib.auth.views import redirect_to_login
from django.http import HttpResponse
from django.template.loader import render_to_string
from django.utils.translation import gettext as _
from django.views.decorators.http import require_safe
from rest_framework import permissions, serializers
from rest_framework.response import Response
from rest_framework.views import APIView

from thesaurus.config import TaxonomyRoot, get_taxonomy_root
from thesaurus.page import LoginRequired, page_open

from .archive import group_by_year
from .entries import ENTRIES
from .serializers import YearGroupSerializer

# Swagger / OpenAPI
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

logger = logging.getLogger(__name__)

ARCHIVE_TEMPLATE = "news/news_archive.html"


# ----------------------------------------------------------------------------- #
# HTML page                                                                     #
# ----------------------------------------------------------------------------- #
def render_archive(request, root: TaxonomyRoot) -> str:
    """Render the archive document. Output depends only on the entries and root."""
    context = {
        "title": _("OpenThesaurus - News Archiv"),
        "year_groups": [
            {
                "year": group.year,
                "entries": [
                    {"date": entry.date, "body": entry.render_body(root)}
                    for entry in group.entries
                ],
            }
            for group in group_by_year(ENTRIES)
        ],
    }
    return render_to_string(ARCHIVE_TEMPLATE, context, request=request)


@require_safe
def news_archive(request):
    root = get_taxonomy_root()
    try:
        with page_open(request, sess="thesaurus_session", auth="thesaurus_default_auth",
                       cancel_login=True):
            html = render_archive(request, root)
    except LoginRequired:
        return redirect_to_login(request.get_full_path())
    return HttpResponse(html)


# ----------------------------------------------------------------------------- #
# JSON                                                                          #
# ----------------------------------------------------------------------------- #
class NewsListView(APIView):
    """
    GET /api/news/?year=2008
    Returns the archive grouped by year, newest first.

    Keep it public: the HTML page is public too.
    """
    permission_classes = [permissions.AllowAny]

    @swagger_auto_schema(
        tags=["News"],
        operation_description=(
            "Return the news archive grouped by year (newest first).\n\n"
            "Query params:\n"
            "- `year`: only return the group for this year (empty list when there is none)\n\n"
            "Entry bodies are HTML."
        ),
        manual_parameters=[
            openapi.Parameter("year", openapi.IN_QUERY, description="Four-digit year, e.g. 2008", type=openapi.TYPE_INTEGER),
        ],
        responses={200: openapi.Response("OK", YearGroupSerializer(many=True)), 400: "Bad Request"},
    )
    def get(self, request):
        raw_year = (request.query_params.get("year") or "").strip()
        groups = group_by_year(ENTRIES)
        if raw_year:
            try:
                year = int(raw_year)
            except ValueError:
                raise serializers.ValidationError({"year": "year must be an integer, e.g. 2008"})
            groups = [g for g in groups if g.year == year]

        root = get_taxonomy_root()
        data = YearGroupSerializer(groups, many=True, context={"root": root}).data
        logger.debug("news list year=%s groups=%d", raw_year or "*", len(data))
        return Response({"years": data})
