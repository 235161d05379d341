"""Интерфейс бэкенда портала: аутентификация и реляционное хранилище.

Любая ошибка бэкенда приходит как ``BackendError`` с читаемым сообщением,
кодом и HTTP статусом. Нарушение уникальности имеет код SQLSTATE ``23505``.
"""
from typing import Callable

from ..domain.entities import Session, Profile, Course, Enrollment, EnrolledCourse

UNIQUE_VIOLATION = "23505"
INTEGRITY_VIOLATION = "23000"
INVALID_CREDENTIALS = "invalid_credentials"
USER_ALREADY_EXISTS = "user_already_exists"
UNAVAILABLE = "backend_unavailable"

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"

AuthListener = Callable[[str, Session | None], None]


class BackendError(Exception):
    def __init__(self, message: str, code: str | None = None, status: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status

    def __repr__(self) -> str:
        return f"BackendError(code={self.code!r}, message={self.message!r})"


class IAuthBackend:
    def sign_in_with_password(self, email: str, password: str) -> Session: ...
    def sign_up(self, email: str, password: str, full_name: str | None = None) -> Session: ...
    def get_session(self, access_token: str) -> Session | None: ...
    def sign_out(self, access_token: str) -> None: ...
    def on_auth_state_change(self, listener: AuthListener) -> Callable[[], None]: ...


class IDataBackend:
    def get_profile(self, user_id: str) -> Profile | None: ...
    def list_courses(self) -> list[Course]: ...
    def get_course_by_slug(self, slug: str) -> Course | None: ...
    def insert_enrollment(self, user_id: str, course_id: str) -> Enrollment: ...
    def list_enrollments(self, user_id: str) -> list[EnrolledCourse]: ...


class IBackend(IAuthBackend, IDataBackend):
    pass
