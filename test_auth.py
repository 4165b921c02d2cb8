"""
Sign-in pages and the identity helpers
"""

import pytest

from conftest import sign_in_as
from homesite.auth import identity


def test_sign_in_page_renders(client):
    response = client.get("/auth/sign-in?next=/")
    assert response.status_code == 200
    assert "Sign in" in response.get_data(as_text=True)


def test_sign_in_with_valid_credentials(client, admin):
    response = client.post("/auth/sign-in", data={
        "username": "admin", "password": "s3cret-pass", "next": "/",
    })
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/")
    with client.session_transaction() as sess:
        assert sess["_user_id"] == str(admin.id)


def test_sign_in_with_wrong_password(client, admin):
    response = client.post("/auth/sign-in", data={
        "username": "admin", "password": "nope",
    })
    assert response.status_code == 401
    with client.session_transaction() as sess:
        assert "_user_id" not in sess


def test_sign_in_requires_both_fields(client):
    assert client.post("/auth/sign-in", data={"username": "admin"}).status_code == 400


def test_sign_in_ignores_offsite_next(client, admin):
    response = client.post("/auth/sign-in", data={
        "username": "admin", "password": "s3cret-pass", "next": "//evil.example/",
    })
    assert "evil.example" not in response.headers["Location"]


def test_sign_out_clears_session(client, admin):
    sign_in_as(client, admin)
    response = client.get("/auth/sign-out?next=/")
    assert response.status_code == 302
    with client.session_transaction() as sess:
        assert "_user_id" not in sess


@pytest.mark.parametrize("target, safe", [
    ("/", True),
    ("/blog/post", True),
    ("", False),
    ("//evil.example", False),
    ("https://evil.example/", False),
    ("/\\evil.example", False),
])
def test_is_safe_next(target, safe):
    assert identity.is_safe_next(target) is safe


def test_is_admin_for_anonymous(app):
    with app.test_request_context("/"):
        assert identity.current_user() is None
        assert identity.is_admin() is False


def test_login_and_logout_urls(app):
    with app.test_request_context("/"):
        assert identity.login_url("/").startswith("/auth/sign-in?next=")
        assert identity.logout_url("/").startswith("/auth/sign-out?next=")
