"""
thesaurus/context_processors.py

Values every page template can use (the top/bottom fragments and the ad
blocks read these).
"""
from django.conf import settings


def site(request):
    return {
        "site_name": "OpenThesaurus",
        "textads_enabled": settings.THESAURUS_TEXTADS_ENABLED,
        "textads_client": settings.THESAURUS_TEXTADS_CLIENT,
    }
