"""
thesaurus/page.py

Page lifecycle shared by the server-rendered pages.

A page opens a session/auth context before it renders anything and closes it
when it is done:

    with page_open(request, sess="thesaurus_session",
                   auth="thesaurus_default_auth", cancel_login=True) as page:
        html = render_something(request, page)

Notes & design choices
----------------------
- Django's SessionMiddleware and AuthenticationMiddleware do the real work;
  PageContext only checks the tags a page declares and enforces the login
  rule of the declared auth mode.
- Session/auth tags must be registered in settings
  (THESAURUS_SESSION_TYPES / THESAURUS_AUTH_MODES). A typo in a view is a
  configuration error, not a silent fallback.
- cancel_login only has an effect for auth modes that allow it
  (THESAURUS_AUTH_MODES[auth] is True).
- page_open() closes the context on every path, including when rendering
  raises. If open() itself fails nothing was opened and nothing is closed.
"""
import logging
from contextlib import contextmanager

from django.conf import settings
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

DEFAULT_SESSION = "thesaurus_session"
DEFAULT_AUTH = "thesaurus_default_auth"


class PageLifecycleError(RuntimeError):
    """A page context was opened twice, or closed without being open."""


class LoginRequired(Exception):
    """The declared auth mode needs a logged-in user and there is none."""

    def __init__(self, auth: str):
        super().__init__(f"Login required for auth mode {auth!r}")
        self.auth = auth


class PageContext:
    """Request-scoped session/auth handle for one page render."""

    def __init__(self, request, sess: str = DEFAULT_SESSION, auth: str = DEFAULT_AUTH,
                 cancel_login: bool = False):
        self.request = request
        self.sess = sess
        self.auth = auth
        self.cancel_login = cancel_login
        self._state = "new"

    # ------------------------------------------------------------------ #
    # Introspection                                                      #
    # ------------------------------------------------------------------ #
    @property
    def is_open(self) -> bool:
        return self._state == "open"

    @property
    def is_closed(self) -> bool:
        return self._state == "closed"

    @property
    def user(self):
        return getattr(self.request, "user", None) or AnonymousUser()

    @property
    def session_key(self):
        return self.request.session.session_key

    @property
    def login_required(self) -> bool:
        may_cancel = settings.THESAURUS_AUTH_MODES[self.auth]
        return not (self.cancel_login and may_cancel)

    # ------------------------------------------------------------------ #
    # Lifecycle                                                          #
    # ------------------------------------------------------------------ #
    def open(self):
        if self._state != "new":
            raise PageLifecycleError(f"Page context already {self._state}")

        if self.sess not in settings.THESAURUS_SESSION_TYPES:
            raise ImproperlyConfigured(f"Unknown session type {self.sess!r}")
        if self.auth not in settings.THESAURUS_AUTH_MODES:
            raise ImproperlyConfigured(f"Unknown auth mode {self.auth!r}")
        if not hasattr(self.request, "session"):
            raise ImproperlyConfigured(
                "page_open() needs django.contrib.sessions.middleware.SessionMiddleware"
            )
        # load the stored session; the response then varies on the cookie
        self.request.session.keys()

        if self.login_required and not self.user.is_authenticated:
            raise LoginRequired(self.auth)

        self._state = "open"
        logger.debug(
            "page opened path=%s sess=%s auth=%s user=%s",
            self.request.path, self.sess, self.auth, self.user.get_username() or "anonymous",
        )
        return self

    def close(self):
        if self._state != "open":
            raise PageLifecycleError(f"Cannot close a page context that is {self._state}")

        session = self.request.session
        if session.modified:
            session.save()
        self._state = "closed"
        logger.debug("page closed path=%s", self.request.path)


@contextmanager
def page_open(request, sess: str = DEFAULT_SESSION, auth: str = DEFAULT_AUTH, cancel_login: bool = False):
    page = PageContext(request, sess=sess, auth=auth, cancel_login=cancel_login)
    page.open()
    try:
        yield page
    finally:
        page.close()
