from learning_portal.application.dto import Notice
from learning_portal.config import settings
from learning_portal.interfaces.http.flash import encode_notice, decode_notice, redirect


def test_notice_cookie_value_is_cookie_safe():
    value = encode_notice(Notice.info("You're already enrolled in this course!"))
    assert "=" not in value
    assert ";" not in value
    assert decode_notice(value) == Notice.info("You're already enrolled in this course!")


def test_decode_garbage():
    """Испорченная cookie просто игнорируется"""
    assert decode_notice("%%%") is None
    assert decode_notice("bm90IGpzb24") is None
    assert decode_notice("") is None


def test_redirect_sets_notice_cookie():
    response = redirect("/home", Notice.error("Course not found"))
    assert response.status_code == 303
    assert response.headers["location"] == "/home"
    assert settings.NOTICE_COOKIE_NAME in response.headers["set-cookie"]


def test_redirect_without_notice():
    response = redirect("/auth")
    assert "set-cookie" not in response.headers
