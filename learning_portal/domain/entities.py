from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Session:
    """Сессия вошедшего пользователя, выданная бэкендом"""
    user_id: str
    email: str
    session_id: str
    access_token: str
    expires_at: datetime


@dataclass(frozen=True)
class Profile:
    id: str
    email: str
    full_name: str | None
    created_at: datetime


@dataclass(frozen=True)
class Course:
    id: str
    name: str
    slug: str
    description: str | None = None
    icon: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class Enrollment:
    id: str
    user_id: str
    course_id: str
    enrolled_at: datetime


@dataclass(frozen=True)
class EnrolledCourse:
    """Запись на курс вместе с самим курсом"""
    id: str
    enrolled_at: datetime
    course: Course


@dataclass(frozen=True)
class Resource:
    title: str
    url: str
    description: str
