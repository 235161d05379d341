import structlog

from ...domain.entities import Course
from ...domain.resources import resources_for
from ..backend import IDataBackend, BackendError
from ..dto import CourseDetail, ResourceCard
from .catalog import course_card

COURSE_NOT_FOUND = "Course not found"
DEFAULT_DESCRIPTION = "Curated learning resources to master this course"

logger = structlog.get_logger()


def find_course(data: IDataBackend, slug: str) -> Course | None:
    """Курс по slug или None (нет такого курса или запрос упал)."""
    try:
        return data.get_course_by_slug(slug)
    except BackendError as e:
        logger.warning("course_lookup_failed", slug=slug, code=e.code)
        return None


def course_detail(course: Course) -> CourseDetail:
    card = course_card(course, fallback_description=DEFAULT_DESCRIPTION)
    return CourseDetail(
        course=card,
        heading=f"{course.name} Resources",
        description=card.description,
        resources=[ResourceCard(r.title, r.url, r.description) for r in resources_for(course.slug)],
        enroll_href=f"/course/{course.slug}/enroll",
    )
