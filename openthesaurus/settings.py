"""
settings.py — Django project configuration for the OpenThesaurus website

What this file configures
===============================================================================
- Core Django wiring (INSTALLED_APPS, MIDDLEWARE, TEMPLATES, DB)
- Sessions + auth middleware used by the page lifecycle (thesaurus.page)
- REST Framework defaults (public read-only APIs, filtering, pagination)
- CORS for API consumers
- Static handling via WhiteNoise
- Swagger (drf-yasg) for the JSON endpoints
- CSP (django-csp v4)
- Thesaurus constants (taxonomy root synset, session/auth tags, text ads)

How environment variables drive behavior (deployment-safe)
===============================================================================
DJANGO_DEBUG               -> Enables dev mode when true. Defaults to True locally.
DJANGO_SECRET_KEY          -> Required when DJANGO_DEBUG=False (production).
DJANGO_ALLOWED_HOSTS       -> Comma-separated list of allowed hostnames in prod.
DJANGO_LOG_LEVEL           -> Level for the project loggers (default INFO).
DATABASE_URL               -> Any URL dj-database-url understands; SQLite otherwise.
CORS_ALLOW_ALL_ORIGINS     -> Dev toggle to allow any origin (default True in dev).
CORS_ALLOWED_ORIGINS       -> Comma-separated list of exact origins (prod).
THESAURUS_TOP_SYNSET_ID    -> Id of the synset at the top of the noun hierarchy.
THESAURUS_TOP_SYNSET_NAME  -> Display name of that synset.
THESAURUS_TEXTADS_ENABLED  -> Render the text ad blocks (default False).
THESAURUS_TEXTADS_CLIENT   -> Ad client id used by the ad blocks.

Why some ordering matters
===============================================================================
- We compute DEBUG first so SECRET_KEY can enforce “prod requires a key.”
- SECRET_KEY only falls back to a dev key when DEBUG=True.
- The taxonomy root is read here but validated lazily in
  thesaurus.config.get_taxonomy_root(), so a bad value fails the page that
  uses it with ImproperlyConfigured instead of breaking every command.

Deployment notes
===============================================================================
- Build command example:
    pip install . && python manage.py collectstatic --noinput && python manage.py migrate --noinput
- Start command example:
    gunicorn openthesaurus.wsgi:application --log-file -
"""

from pathlib import Path
import os
import sys


# ---------------------------
# Helpers for env parsing
# ---------------------------
def _get_bool(env_key: str, default: bool = False) -> bool:
    """Parse booleans from env like '1', 'true', 'yes'."""
    raw = os.environ.get(env_key, str(default))
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}

def _get_list(env_key: str, default=None):
    """Parse comma-separated lists from env (e.g., 'a.com,b.com')."""
    if default is None:
        default = []
    raw = os.environ.get(env_key)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]

def _get_int(env_key: str, default: int) -> int:
    """Parse integers from env; garbage falls back to the default."""
    raw = (os.environ.get(env_key) or "").strip()
    try:
        return int(raw)
    except ValueError:
        return default


BASE_DIR = Path(__file__).resolve().parent.parent

# Reads DJANGO_DEBUG from env. Defaults to True for dev.
DEBUG = _get_bool("DJANGO_DEBUG", True)


# --- CORS (dev-friendly defaults) ---
# In prod set CORS_ALLOW_ALL_ORIGINS=False and specify CORS_ALLOWED_ORIGINS explicitly.
CORS_ALLOW_ALL_ORIGINS = _get_bool("CORS_ALLOW_ALL_ORIGINS", DEBUG)
CORS_ALLOWED_ORIGINS = _get_list("CORS_ALLOWED_ORIGINS", [])
CSRF_TRUSTED_ORIGINS = _get_list("CSRF_TRUSTED_ORIGINS", [])

# The site is plain server-rendered HTML; nobody needs to frame it.
X_FRAME_OPTIONS = "DENY"

# django-csp v4+ format:
CONTENT_SECURITY_POLICY = {
    "DIRECTIVES": {
        "frame-ancestors": ["'self'"],
    }
}


# SECRET_KEY with safe production enforcement
#    - In dev (DEBUG=True): fallback to a dev key if none provided
#    - In prod (DEBUG=False): require DJANGO_SECRET_KEY
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY") or (
    "django-insecure-openthesaurus-dev-key-7c1f0e2b9a4d" if DEBUG else None
)
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY must be set when DJANGO_DEBUG=False")


# Hosts from env (defaults depend on DEBUG)
ALLOWED_HOSTS = _get_list("DJANGO_ALLOWED_HOSTS", [] if DEBUG else ["127.0.0.1"])


INSTALLED_APPS = [
    # Django core
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party
    'rest_framework',
    'corsheaders',
    'django_filters',                             # filtering backend for DRF
    'drf_yasg',                                   # Swagger/OpenAPI docs

    # Local apps
    'thesaurus',
    'news',
    'wikipedia',
    'csp',
]

SWAGGER_SETTINGS = {
    "USE_SESSION_AUTH": False,  # the documented endpoints are all public
    "SECURITY_DEFINITIONS": {},
}

MIDDLEWARE = [
    # CORS should be as high as possible
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',

    'django.middleware.security.SecurityMiddleware',
    "csp.middleware.CSPMiddleware",
    'whitenoise.middleware.WhiteNoiseMiddleware',  # Serves static in prod
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.locale.LocaleMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.SessionAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.AllowAny",
    ),
    "DEFAULT_FILTER_BACKENDS": (
        "django_filters.rest_framework.DjangoFilterBackend",
        "rest_framework.filters.OrderingFilter",
    ),
    "DEFAULT_PAGINATION_CLASS": "rest_framework.pagination.PageNumberPagination",
    "PAGE_SIZE": 15,
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_THROTTLE_CLASSES": [ "rest_framework.throttling.AnonRateThrottle" ],
    "DEFAULT_THROTTLE_RATES": {"anon": "60/min"},
}

# Disable throttling when running tests (manage.py test, or under pytest)
if "test" in sys.argv or "pytest" in sys.modules:
    REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []
    REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {}

ROOT_URLCONF = 'openthesaurus.urls'
WSGI_APPLICATION = 'openthesaurus.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        # Site-wide fragments (include/top.html, include/bottom.html) live here
        'DIRS': [BASE_DIR / "templates"],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'thesaurus.context_processors.site',
            ],
        },
    },
]


# --- Database (DATABASE_URL when set; SQLite otherwise) ---
import dj_database_url

DB_URL = os.environ.get("DATABASE_URL", "").strip()
IS_POSTGRES = DB_URL.startswith("postgres://") or DB_URL.startswith("postgresql://")

if DB_URL:
    DATABASES = {
        "default": dj_database_url.parse(
            DB_URL,
            conn_max_age=600,
            ssl_require=IS_POSTGRES,  # only apply SSL flag for Postgres URLs
        )
    }
else:
    # Default to SQLite for local dev/CI
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }


AUTHENTICATION_BACKENDS = [
    "django.contrib.auth.backends.ModelBackend",
]

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

# Pages that require a login send anonymous users here (see thesaurus.page).
LOGIN_URL = "/admin/login/"

LANGUAGE_CODE = 'de'
TIME_ZONE = 'Europe/Berlin'
USE_I18N = True
USE_TZ = True

# Static files
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# --- Thesaurus ---------------------------------------------------------------
# Top node of the noun hierarchy; linked from the news archive (2004-01-06).
TOP_SYNSET_ID = _get_int("THESAURUS_TOP_SYNSET_ID", 1)
TOP_SYNSET_NAME = os.environ.get("THESAURUS_TOP_SYNSET_NAME", "Entität")

# Tags a page may pass to thesaurus.page.page_open().
THESAURUS_SESSION_TYPES = ["thesaurus_session"]
# auth mode -> whether a page may cancel the login requirement (cancel_login)
THESAURUS_AUTH_MODES = {
    "thesaurus_default_auth": True,
    "thesaurus_auth": False,
}

THESAURUS_TEXTADS_ENABLED = _get_bool("THESAURUS_TEXTADS_ENABLED", False)
THESAURUS_TEXTADS_CLIENT = os.environ.get("THESAURUS_TEXTADS_CLIENT", "")

# Upper bound of links kept per Wikipedia page by dump_wikipedia_links.
WIKIPEDIA_MAX_LINKS_PER_PAGE = 15


LOG_LEVEL = os.environ.get("DJANGO_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django.request": {  # 500s, 404s with exceptions
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": True,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "thesaurus": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "news": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "wikipedia": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
