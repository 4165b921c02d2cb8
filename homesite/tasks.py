"""
Flask CLI commands for maintaining the site's data out-of-band.

Commands:
    flask init-db                       # Create missing tables
    flask create-admin USERNAME         # Add (or promote) an administrator
    flask set-page [LOCALE] --title ... # Create or update a page record
    flask add-link PATH URL --name ...  # Create or update a short link
    flask remove-link PATH              # Delete short links for a path
    flask list-links                    # Show every short link by name

Usage:
    flask --app wsgi add-link docs https://example.com/docs --name Docs
"""

import click
from flask import current_app
from flask.cli import with_appcontext

from .errors import NotFound, SiteError
from .models import Link, Page, User, db
from .store import Store


def log_message(message: str, level: str = "INFO"):
    """Echo a status line and mirror it to the app logger."""
    if level == "ERROR":
        click.echo(click.style(message, fg='red'), err=True)
        current_app.logger.error(message)
    elif level == "WARNING":
        click.echo(click.style(message, fg='yellow'))
        current_app.logger.warning(message)
    elif level == "SUCCESS":
        click.echo(click.style(message, fg='green'))
        current_app.logger.info(message)
    else:
        click.echo(message)


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create any missing tables."""
    db.create_all()
    log_message("Database tables ready", "SUCCESS")


@click.command('create-admin')
@click.argument('username')
@click.password_option()
@with_appcontext
def create_admin_command(username, password):
    """Create an administrator, or promote and reset an existing user."""
    user = User.query.filter_by(username=username).first()
    if user is None:
        user = User(username=username)
    user.is_admin = True
    user.set_password(password)
    try:
        Store().put(user)
    except SiteError as e:
        log_message(f"Could not save {username}: {e}", "ERROR")
        raise click.exceptions.Exit(1)
    log_message(f"Administrator {username} saved", "SUCCESS")


@click.command('set-page')
@click.argument('locale', default='')
@click.option('--title', default=None, help='Page title')
@click.option('--brand', default=None, help='Brand shown in the navigation bar')
@click.option('--message', default=None, help='Welcome message (HTML allowed)')
@with_appcontext
def set_page_command(locale, title, brand, message):
    """Create or update the page for LOCALE (the default page when omitted)."""
    store = Store()
    key = locale or current_app.config['PAGE_DEFAULT_KEY']
    try:
        page = store.get(Page, key)
    except NotFound:
        page = Page(key=key, brand='', title='', message='')

    if title is not None:
        page.title = title
    if brand is not None:
        page.brand = brand
    if message is not None:
        page.message = message

    try:
        store.put(page)
    except SiteError as e:
        log_message(f"Could not save page {key!r}: {e}", "ERROR")
        raise click.exceptions.Exit(1)
    log_message(f"Page {key!r} saved", "SUCCESS")


@click.command('add-link')
@click.argument('path')
@click.argument('url')
@click.option('--name', default=None, help='Display label (defaults to PATH)')
@with_appcontext
def add_link_command(path, url, name):
    """Point the short link PATH at URL."""
    store = Store()
    try:
        existing = store.query_equal(Link, 'path', path)
    except SiteError as e:
        log_message(f"Could not look up /{path}: {e}", "ERROR")
        raise click.exceptions.Exit(1)
    if len(existing) > 1:
        log_message(f"{len(existing)} links share path {path!r}; updating the first", "WARNING")
    link = existing[0] if existing else Link(path=path)
    link.url = url
    link.name = name if name is not None else (link.name or path)
    try:
        store.put(link)
    except SiteError as e:
        log_message(f"Could not save /{path}: {e}", "ERROR")
        raise click.exceptions.Exit(1)
    log_message(f"Saved /{path} -> {url}", "SUCCESS")


@click.command('remove-link')
@click.argument('path')
@with_appcontext
def remove_link_command(path):
    """Delete every short link stored for PATH."""
    store = Store()
    try:
        links = store.query_equal(Link, 'path', path)
        if links:
            store.delete(*links)
    except SiteError as e:
        log_message(f"Could not delete /{path}: {e}", "ERROR")
        raise click.exceptions.Exit(1)
    if not links:
        log_message(f"No link for /{path}", "WARNING")
        return
    log_message(f"Deleted {len(links)} link(s) for /{path}", "SUCCESS")


@click.command('list-links')
@with_appcontext
def list_links_command():
    """Show every short link ordered by name."""
    try:
        links = Store().query_all(Link, 'name')
    except SiteError as e:
        log_message(f"Could not list links: {e}", "ERROR")
        raise click.exceptions.Exit(1)
    if not links:
        log_message("No links yet.")
        return
    for link in links:
        log_message(f"{link.name:<20} /{link.path:<20} {link.url}")


def register_cli_commands(app):
    """Register CLI commands with the Flask app."""
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_admin_command)
    app.cli.add_command(set_page_command)
    app.cli.add_command(add_link_command)
    app.cli.add_command(remove_link_command)
    app.cli.add_command(list_links_command)
