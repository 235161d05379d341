import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator

import structlog
from jose import JWTError, ExpiredSignatureError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session as DbSession, sessionmaker, joinedload

from .db import SessionLocal
from .models import UserORM, AuthSessionORM, ProfileORM, CourseORM, EnrollmentORM
from .security import PasswordHasher, create_access_token, decode_token, token_expiry
from ..application.backend import (
    IBackend, BackendError, AuthListener,
    UNIQUE_VIOLATION, INTEGRITY_VIOLATION, INVALID_CREDENTIALS, USER_ALREADY_EXISTS, UNAVAILABLE,
    SIGNED_IN, SIGNED_OUT,
)
from ..domain.entities import Session, Profile, Course, Enrollment, EnrolledCourse

logger = structlog.get_logger()


def profile_to_domain(p: ProfileORM) -> Profile:
    return Profile(id=p.id, email=p.email, full_name=p.full_name, created_at=p.created_at)

def course_to_domain(c: CourseORM) -> Course:
    return Course(id=c.id, name=c.name, slug=c.slug, description=c.description, icon=c.icon, color=c.color)

def enrollment_to_domain(e: EnrollmentORM) -> Enrollment:
    return Enrollment(id=e.id, user_id=e.user_id, course_id=e.course_id, enrolled_at=e.enrolled_at)


def sqlstate(exc: IntegrityError) -> str:
    """SQLSTATE нарушения ограничения; для SQLite сводим UNIQUE к 23505."""
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code:
        return code
    name = getattr(orig, "sqlite_errorname", "") or ""
    if name in ("SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY") \
            or "UNIQUE constraint failed" in str(orig):
        return UNIQUE_VIOLATION
    return INTEGRITY_VIOLATION


class SqlBackend(IBackend):
    """Auth + данные поверх SQLAlchemy.

    Каждая операция открывает собственную сессию БД, поэтому методы можно
    вызывать параллельно из разных потоков.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal,
                 hasher: PasswordHasher | None = None,
                 token_minutes: int | None = None):
        self._sessions = session_factory
        self._hasher = hasher or PasswordHasher()
        self._token_minutes = token_minutes
        self._listeners: list[AuthListener] = []
        self._listeners_lock = threading.Lock()

    @contextmanager
    def _db(self) -> Iterator[DbSession]:
        db = self._sessions()
        try:
            yield db
        except IntegrityError as e:
            db.rollback()
            raise BackendError(str(e.orig), code=sqlstate(e), status=409) from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("database_error", error=str(e))
            raise BackendError("Database request failed", code=UNAVAILABLE, status=503) from e
        finally:
            db.close()

    # --- Аутентификация ----------------------------------------------------

    def _issue(self, db: DbSession, user: UserORM) -> Session:
        expires_at = token_expiry(self._token_minutes)
        row = AuthSessionORM(user_id=user.id, expires_at=expires_at)
        db.add(row); db.flush()
        token = create_access_token(sub=user.id, email=user.email, sid=row.id, expires_at=expires_at)
        return Session(user_id=user.id, email=user.email, session_id=row.id,
                       access_token=token, expires_at=expires_at)

    def sign_in_with_password(self, email: str, password: str) -> Session:
        with self._db() as db:
            user = db.scalars(select(UserORM).where(UserORM.email == email.lower())).first()
            if not user or not self._hasher.verify(password, user.password_hash):
                raise BackendError("Invalid login credentials", code=INVALID_CREDENTIALS, status=400)
            session = self._issue(db, user)
            db.commit()
        self._emit(SIGNED_IN, session)
        return session

    def sign_up(self, email: str, password: str, full_name: str | None = None) -> Session:
        email = email.lower()
        try:
            with self._db() as db:
                if db.scalars(select(UserORM.id).where(UserORM.email == email)).first():
                    raise BackendError("User already registered", code=USER_ALREADY_EXISTS, status=400)
                user = UserORM(email=email, password_hash=self._hasher.hash(password))
                db.add(user); db.flush()
                db.add(ProfileORM(id=user.id, email=email, full_name=full_name or None))
                session = self._issue(db, user)
                db.commit()
        except BackendError as e:
            # параллельная регистрация с тем же email
            if e.code == UNIQUE_VIOLATION:
                raise BackendError("User already registered", code=USER_ALREADY_EXISTS, status=400) from e
            raise
        self._emit(SIGNED_IN, session)
        return session

    def get_session(self, access_token: str) -> Session | None:
        try:
            claims = decode_token(access_token)
        except ExpiredSignatureError:
            self._emit(SIGNED_OUT, None)
            return None
        except JWTError:
            return None
        with self._db() as db:
            row = db.get(AuthSessionORM, claims["sid"])
            if row is None or row.user_id != claims["sub"]:
                return None
        return Session(
            user_id=claims["sub"],
            email=claims.get("email", ""),
            session_id=claims["sid"],
            access_token=access_token,
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        )

    def sign_out(self, access_token: str) -> None:
        try:
            claims = decode_token(access_token, verify_exp=False)
        except JWTError:
            return
        with self._db() as db:
            row = db.get(AuthSessionORM, claims["sid"])
            if row is not None:
                db.delete(row); db.commit()
        self._emit(SIGNED_OUT, None)

    def on_auth_state_change(self, listener: AuthListener) -> Callable[[], None]:
        with self._listeners_lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._listeners_lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)
        return unsubscribe

    def _emit(self, event: str, session: Session | None) -> None:
        with self._listeners_lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(event, session)

    # --- Данные -------------------------------------------------------------

    def get_profile(self, user_id: str) -> Profile | None:
        with self._db() as db:
            row = db.get(ProfileORM, user_id)
            return profile_to_domain(row) if row else None

    def list_courses(self) -> list[Course]:
        with self._db() as db:
            rows = db.scalars(select(CourseORM).order_by(CourseORM.created_at)).all()
            return [course_to_domain(r) for r in rows]

    def get_course_by_slug(self, slug: str) -> Course | None:
        with self._db() as db:
            row = db.scalars(select(CourseORM).where(CourseORM.slug == slug)).first()
            return course_to_domain(row) if row else None

    def insert_enrollment(self, user_id: str, course_id: str) -> Enrollment:
        with self._db() as db:
            row = EnrollmentORM(user_id=user_id, course_id=course_id)
            db.add(row); db.commit(); db.refresh(row)
            return enrollment_to_domain(row)

    def list_enrollments(self, user_id: str) -> list[EnrolledCourse]:
        with self._db() as db:
            rows = db.scalars(
                select(EnrollmentORM)
                .options(joinedload(EnrollmentORM.course))
                .where(EnrollmentORM.user_id == user_id)
                .order_by(EnrollmentORM.enrolled_at.desc())
            ).all()
            return [EnrolledCourse(id=r.id, enrolled_at=r.enrolled_at, course=course_to_domain(r.course))
                    for r in rows]


backend = SqlBackend()

def get_backend() -> IBackend:
    return backend
