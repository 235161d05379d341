"""Уведомления, переживающие редирект.

Хранятся как base64(JSON) в короткоживущей cookie и забираются
следующим отрисованным представлением.
"""
import base64
import binascii
import json

from fastapi import Request, Response, status
from fastapi.responses import RedirectResponse

from ...application.dto import Notice
from ...config import settings

NOTICE_MAX_AGE = 60


def encode_notice(notice: Notice) -> str:
    raw = json.dumps({"level": notice.level, "message": notice.message}).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_notice(value: str) -> Notice | None:
    try:
        raw = base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
        data = json.loads(raw)
        return Notice(level=str(data["level"]), message=str(data["message"]))
    except (binascii.Error, ValueError, KeyError, TypeError):
        return None


def redirect(url: str, notice: Notice | None = None) -> RedirectResponse:
    resp = RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)
    if notice is not None:
        resp.set_cookie(
            settings.NOTICE_COOKIE_NAME,
            encode_notice(notice),
            max_age=NOTICE_MAX_AGE,
            httponly=True,
            samesite="lax",
        )
    return resp


def pop_notice(request: Request, response: Response) -> Notice | None:
    value = request.cookies.get(settings.NOTICE_COOKIE_NAME)
    if not value:
        return None
    response.delete_cookie(settings.NOTICE_COOKIE_NAME)
    return decode_notice(value)
