"""
Error taxonomy and the error-to-response adapter.

Views wrapped with ``error_handler`` raise ``SiteError`` subclasses; the
adapter logs the failure once with the request path and answers with the
policy chosen at startup (see ``ERROR_POLICY`` in the config).
"""

from functools import wraps

from flask import current_app, redirect, request

APOLOGY = "Ooops! something bad happened"
HOME_PATH = "/"


class SiteError(Exception):
    """Base class for failures a request handler reports."""


class NotFound(SiteError):
    """The requested record does not exist."""


class StoreError(SiteError):
    """A persistence failure, tagged with the operation that failed."""

    def __init__(self, operation, cause=None):
        self.operation = operation
        self.cause = cause
        super().__init__(operation if cause is None else f"{operation}: {cause}")


class RenderError(SiteError):
    """A template failed to render."""


class IdentityError(SiteError):
    """The identity provider could not produce a URL or user."""


class StrictPolicy:
    """Answer every failure with a 500 and a fixed apology."""
    name = "strict"

    def respond(self, err):
        return APOLOGY, 500, {"Content-Type": "text/plain; charset=utf-8"}


class LenientPolicy:
    """Bounce failed requests back to the home page."""
    name = "lenient"

    def respond(self, err):
        # The home page itself failed; redirecting would loop
        if request.path == HOME_PATH:
            return StrictPolicy().respond(err)
        return redirect(HOME_PATH, code=302)


POLICIES = {
    StrictPolicy.name: StrictPolicy,
    LenientPolicy.name: LenientPolicy,
}


def policy_for(name):
    """Build the policy registered under ``name``."""
    try:
        return POLICIES[name]()
    except KeyError:
        raise ValueError(
            f"unknown error policy {name!r}, expected one of {sorted(POLICIES)}"
        ) from None


def error_handler(view):
    """Convert a ``SiteError`` raised by ``view`` into the active policy's response."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except SiteError as err:
            current_app.logger.error("handling %r: %s", request.path, err)
            return current_app.extensions["error_policy"].respond(err)
    return wrapper
