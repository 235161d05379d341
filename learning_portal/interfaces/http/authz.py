from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ...application.backend import IBackend
from ...application.use_cases.authenticate import resolve_session
from ...config import settings
from ...domain.entities import Session
from ...infrastructure.repositories import get_backend

bearer = HTTPBearer(auto_error=False)


class LoginRequired(Exception):
    """Нет действующей сессии: обработчик в main редиректит на /auth."""


def get_access_token(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> str | None:
    # браузер шлёт cookie, API-клиенты могут прислать Bearer
    if creds is not None:
        return creds.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def require_session(
    token: str | None = Depends(get_access_token),
    backend: IBackend = Depends(get_backend),
) -> Session:
    session = resolve_session(backend, token)
    if session is None:
        raise LoginRequired()
    return session
