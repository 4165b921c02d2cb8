"""
Home page assembly: the Page record for a locale plus the ordered links.
"""

from markupsafe import Markup

from .config import Config
from .errors import NotFound, StoreError
from .models import Link, Page

DEFAULT_MESSAGE = "go configure your page with `flask set-page`"


class PageResolver:
    """Read (and, for administrators, lazily create) the page for a locale."""

    def __init__(self, store, is_admin=False, default_key=Config.PAGE_DEFAULT_KEY):
        self.store = store
        self.is_admin = is_admin
        self.default_key = default_key

    def key_for(self, locale):
        return locale or self.default_key

    def resolve(self, locale):
        """Return ``(page, links)`` for ``locale``, links ordered by name."""
        key = self.key_for(locale)
        try:
            page = self.store.get(Page, key)
        except NotFound:
            if not self.is_admin:
                raise
            page = self._create_placeholder(key, locale)
        except StoreError as e:
            raise StoreError("fetching page", e) from e

        try:
            links = self.store.query_all(Link, "name")
        except StoreError as e:
            raise StoreError("listing links", e) from e

        return page, links

    def _create_placeholder(self, key, locale):
        if locale:
            message = Markup("page for %s is not defined.") % locale
        else:
            message = DEFAULT_MESSAGE
        page = Page(key=key, brand="", title="", message=str(message))
        try:
            return self.store.put(page)
        except StoreError as e:
            raise StoreError("creating page", e) from e


def locale_from_request(req):
    """Locale hint: the ``l`` query parameter, else the Accept-Language
    header cut at its first hyphen ("en-US,en;q=0.9" gives "en")."""
    lang = req.args.get("l", "")
    if not lang:
        lang = req.headers.get("Accept-Language", "")
        lang = lang.split("-", 1)[0]
    return lang
