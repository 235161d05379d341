from dataclasses import dataclass, field
from datetime import datetime

SUCCESS = "success"
INFO = "info"
ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """Уведомление, которое показываем после действия"""
    level: str
    message: str

    @classmethod
    def success(cls, message: str) -> "Notice":
        return cls(SUCCESS, message)

    @classmethod
    def info(cls, message: str) -> "Notice":
        return cls(INFO, message)

    @classmethod
    def error(cls, message: str) -> "Notice":
        return cls(ERROR, message)


@dataclass
class ProfileSummary:
    display_name: str
    email: str
    initials: str | None
    avatar_icon: str | None
    member_since: str | None = None


@dataclass
class CourseCard:
    id: str
    name: str
    slug: str
    description: str
    icon: str
    gradient: str
    href: str


@dataclass
class ResourceCard:
    title: str
    url: str
    description: str
    target: str = "_blank"
    rel: str = "noopener noreferrer"


@dataclass
class CourseDetail:
    course: CourseCard
    heading: str
    description: str
    resources: list[ResourceCard]
    enroll_href: str
    dashboard_href: str = "/dashboard"


@dataclass
class EnrollmentCard:
    id: str
    enrolled_at: datetime
    enrolled_on: str
    course: CourseCard


@dataclass
class CallToAction:
    message: str
    label: str
    href: str


@dataclass
class Dashboard:
    profile: ProfileSummary
    heading: str
    enrollments: list[EnrollmentCard] = field(default_factory=list)
    empty_state: CallToAction | None = None
