"""
WSGI config for the OpenThesaurus website.

Exposes the WSGI callable as a module-level variable named ``application``
(gunicorn openthesaurus.wsgi:application).
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "openthesaurus.settings")

application = get_wsgi_application()
