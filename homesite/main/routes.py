"""
Public routes: the home page, login/logout hand-offs and short links.
"""

from flask import Blueprint, current_app, redirect, render_template, request
from jinja2 import TemplateError

from ..auth import identity
from ..errors import HOME_PATH, RenderError, StoreError, error_handler
from ..links import LinkRedirector
from ..pages import PageResolver, locale_from_request
from ..store import Store

bp = Blueprint('main', __name__)


@bp.route('/')
@error_handler
def home():
    resolver = PageResolver(
        Store(),
        is_admin=identity.is_admin(),
        default_key=current_app.config['PAGE_DEFAULT_KEY'],
    )
    try:
        page, links = resolver.resolve(locale_from_request(request))
    except StoreError as e:
        raise StoreError("getting page", e) from e

    try:
        return render_template(
            'home.html',
            page=page,
            links=links,
            link_prefix=current_app.config['LINK_PREFIX'],
            user=identity.current_user(),
        )
    except TemplateError as e:
        raise RenderError(f"rendering page: {e}") from e


@bp.route('/login')
@error_handler
def login():
    return redirect(identity.login_url(HOME_PATH), code=301)


@bp.route('/logout')
@error_handler
def logout():
    return redirect(identity.logout_url(HOME_PATH), code=301)


@bp.route('/<path:path>')
@error_handler
def short_link(path):
    redirector = LinkRedirector(Store(), prefix=current_app.config['LINK_PREFIX'])
    # request.path keeps any trailing slash the route variable may not
    url = redirector.resolve(request.path[1:])
    return redirect(url, code=301)
