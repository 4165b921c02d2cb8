"""
Identity collaborator: who is asking, and where to sign in or out.

Backed by Flask-Login and the ``auth`` blueprint's sign-in pages.
"""

from flask import url_for
from flask_login import current_user as _current_user
from werkzeug.routing import BuildError

from ..errors import IdentityError


def current_user():
    """The signed-in user, or None for anonymous requests."""
    if _current_user.is_authenticated:
        return _current_user
    return None


def is_admin() -> bool:
    user = current_user()
    return user is not None and bool(user.is_admin)


def login_url(dest: str) -> str:
    """URL of the sign-in page, returning to ``dest`` afterwards."""
    return _build("auth.sign_in", dest)


def logout_url(dest: str) -> str:
    """URL of the sign-out page, returning to ``dest`` afterwards."""
    return _build("auth.sign_out", dest)


def is_safe_next(target) -> bool:
    """Only local absolute paths are followed after signing in or out."""
    return bool(target) and target.startswith("/") and not target.startswith("//") and "\\" not in target


def _build(endpoint, dest):
    try:
        return url_for(endpoint, next=dest)
    except BuildError as e:
        raise IdentityError(f"building {endpoint} url: {e}") from e
