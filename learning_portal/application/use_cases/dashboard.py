import structlog

from ...domain.display import format_date
from ...domain.entities import Profile, EnrolledCourse
from ..backend import IDataBackend, BackendError
from ..dto import Dashboard, EnrollmentCard, CallToAction, Notice
from .catalog import course_card
from .profiles import profile_summary

ENROLLMENTS_LOAD_FAILED = "Failed to load your enrollments"
DEFAULT_DESCRIPTION = "Continue your learning journey"

logger = structlog.get_logger()


def load_enrollments(data: IDataBackend, user_id: str) -> tuple[list[EnrolledCourse], Notice | None]:
    try:
        return data.list_enrollments(user_id), None
    except BackendError as e:
        logger.error("enrollments_load_failed", user_id=user_id, code=e.code, error=e.message)
        return [], Notice.error(ENROLLMENTS_LOAD_FAILED)


def enrollment_card(enrolled: EnrolledCourse) -> EnrollmentCard:
    return EnrollmentCard(
        id=enrolled.id,
        enrolled_at=enrolled.enrolled_at,
        enrolled_on=f"Enrolled on {format_date(enrolled.enrolled_at)}",
        course=course_card(enrolled.course, fallback_description=DEFAULT_DESCRIPTION),
    )


def build_dashboard(profile: Profile | None, email: str, enrollments: list[EnrolledCourse]) -> Dashboard:
    # новые сверху, в каком бы порядке ни пришли строки
    ordered = sorted(enrollments, key=lambda e: e.enrolled_at, reverse=True)
    dashboard = Dashboard(
        profile=profile_summary(profile, email),
        heading=f"Enrolled Courses ({len(ordered)})",
        enrollments=[enrollment_card(e) for e in ordered],
    )
    if not ordered:
        dashboard.empty_state = CallToAction(
            message="Start your learning journey by enrolling in a course",
            label="Browse Courses",
            href="/home",
        )
    return dashboard
