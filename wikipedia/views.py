"""
wikipedia/views.py

Endpoints:
- /api/wikipedia/links/  (GET list; public)

Filtering:
- title=Demokratie (iexact) — links of the article with that title
- page_id=123

Ordering: dump order (page, then link position).
"""
from django_filters import rest_framework as dj_filters
from rest_framework import generics, permissions

from .models import WikipediaLink
from .serializers import WikipediaLinkSerializer

# Swagger / OpenAPI
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi


# ----------------------------------------------------------------------------- #
# Filters                                                                       #
# ----------------------------------------------------------------------------- #
class WikipediaLinkFilter(dj_filters.FilterSet):
    title = dj_filters.CharFilter(field_name="page__title", lookup_expr="iexact")
    page_id = dj_filters.NumberFilter(field_name="page")

    class Meta:
        model = WikipediaLink
        fields = ["title", "page_id"]


# ----------------------------------------------------------------------------- #
# Links (Read-only, public)                                                     #
# ----------------------------------------------------------------------------- #
class WikipediaLinkListView(generics.ListAPIView):
    """
    Links of Wikipedia articles, as imported by dump_wikipedia_links.

    Public: the search result page shows them to anonymous visitors.
    """
    queryset = WikipediaLink.objects.select_related("page").order_by("page_id", "id")
    serializer_class = WikipediaLinkSerializer
    permission_classes = [permissions.AllowAny]

    filter_backends = [dj_filters.DjangoFilterBackend]
    filterset_class = WikipediaLinkFilter

    @swagger_auto_schema(
        tags=["Wikipedia"],
        operation_description=(
            "List article links from the imported Wikipedia dump.\n\n"
            "Filtering:\n"
            "- `?title=<article>` (case-insensitive exact), e.g. Demokratie\n"
            "- `?page_id=<id>`\n\n"
            "Results are paginated (`?page=N`)."
        ),
        responses={200: openapi.Response("OK", WikipediaLinkSerializer(many=True))},
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)
