from dataclasses import dataclass

import structlog

from ...domain.entities import Session
from ..backend import IAuthBackend, BackendError
from ..dto import Notice

WELCOME_BACK = "Welcome back!"
ACCOUNT_CREATED = "Account created! Redirecting..."
SIGNED_OUT = "Signed out successfully"
GENERIC_AUTH_ERROR = "An error occurred"

logger = structlog.get_logger()


@dataclass
class AuthOutcome:
    notice: Notice
    session: Session | None = None
    status: int = 200

    @property
    def ok(self) -> bool:
        return self.session is not None


def _failure(action: str, email: str, e: BackendError) -> AuthOutcome:
    logger.info(f"{action}_failed", email=email, code=e.code)
    return AuthOutcome(notice=Notice.error(e.message or GENERIC_AUTH_ERROR), status=e.status)


class SignInUser:
    def __init__(self, auth: IAuthBackend):
        self.auth = auth

    def execute(self, email: str, password: str) -> AuthOutcome:
        try:
            session = self.auth.sign_in_with_password(email, password)
        except BackendError as e:
            return _failure("sign_in", email, e)
        return AuthOutcome(notice=Notice.success(WELCOME_BACK), session=session)


class SignUpUser:
    def __init__(self, auth: IAuthBackend):
        self.auth = auth

    def execute(self, email: str, password: str, full_name: str) -> AuthOutcome:
        try:
            session = self.auth.sign_up(email, password, full_name=full_name)
        except BackendError as e:
            return _failure("sign_up", email, e)
        return AuthOutcome(notice=Notice.success(ACCOUNT_CREATED), session=session, status=201)


class SignOutUser:
    def __init__(self, auth: IAuthBackend):
        self.auth = auth

    def execute(self, access_token: str | None) -> Notice:
        if access_token:
            try:
                self.auth.sign_out(access_token)
            except BackendError as e:
                # cookie всё равно стираем, сессия просто истечёт
                logger.warning("sign_out_failed", code=e.code)
        return Notice.success(SIGNED_OUT)


def resolve_session(auth: IAuthBackend, access_token: str | None) -> Session | None:
    """Сессия по токену; ошибка поиска считается отсутствием сессии."""
    if not access_token:
        return None
    try:
        return auth.get_session(access_token)
    except BackendError as e:
        logger.warning("session_lookup_failed", code=e.code)
        return None
