import pytest
from sqlalchemy.exc import OperationalError

from homesite import create_app
from homesite.config import TestConfig
from homesite.errors import NotFound, StoreError
from homesite.models import Link, Page, User, db


class LenientConfig(TestConfig):
    ERROR_POLICY = "lenient"


class PrefixedConfig(TestConfig):
    LINK_PREFIX = "l/"


def _build(config_class):
    app = create_app(config_class)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app():
    yield from _build(TestConfig)


@pytest.fixture
def lenient_app():
    yield from _build(LenientConfig)


@pytest.fixture
def prefixed_app():
    yield from _build(PrefixedConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_page():
    def _add(key="page", title="Home", message="Welcome", brand="homesite"):
        page = Page(key=key, title=title, message=message, brand=brand)
        db.session.add(page)
        db.session.commit()
        return page
    return _add


@pytest.fixture
def add_link():
    def _add(path, url, name=None):
        link = Link(path=path, url=url, name=name if name is not None else path)
        db.session.add(link)
        db.session.commit()
        return link
    return _add


@pytest.fixture
def admin():
    user = User(username="admin", is_admin=True)
    user.set_password("s3cret-pass")
    db.session.add(user)
    db.session.commit()
    return user


def sign_in_as(client, user):
    """Mark the test client's session as signed in as ``user``."""
    with client.session_transaction() as sess:
        sess["_user_id"] = str(user.id)
        sess["_fresh"] = True


class FailingStore:
    """Store whose every call fails, or only the named ones."""

    def __init__(self, fail=("get", "put", "delete", "query_equal", "query_all"), missing=False):
        self.fail = fail
        self.missing = missing

    def _boom(self, name):
        raise StoreError(f"{name} failed", RuntimeError("connection lost"))

    def get(self, model, key):
        if self.missing:
            raise NotFound(key)
        if "get" in self.fail:
            self._boom("get")
        return Page(key=key, title="t", message="m", brand="b")

    def put(self, record):
        if "put" in self.fail:
            self._boom("put")
        return record

    def delete(self, *records):
        if "delete" in self.fail:
            self._boom("delete")

    def query_equal(self, model, field, value, limit=None):
        if "query_equal" in self.fail:
            self._boom("query_equal")
        return []

    def query_all(self, model, order_by):
        if "query_all" in self.fail:
            self._boom("query_all")
        return []


class BrokenCommitSession:
    """Session stand-in whose commit fails, recording rollbacks."""

    def __init__(self):
        self.deleted = []
        self.rolled_back = False

    def delete(self, record):
        self.deleted.append(record)

    def add(self, record):
        pass

    def commit(self):
        raise OperationalError("COMMIT", {}, RuntimeError("disk I/O error"))

    def rollback(self):
        self.rolled_back = True
