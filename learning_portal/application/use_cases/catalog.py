import structlog

from ...domain.display import resolve_icon, resolve_gradient
from ...domain.entities import Course
from ..backend import IDataBackend, BackendError
from ..dto import CourseCard, Notice

LOAD_FAILED = "Failed to load courses"
DEFAULT_DESCRIPTION = "Learn the fundamentals and advanced concepts"

logger = structlog.get_logger()


class ICourseCache:
    def get(self) -> list[Course] | None: ...
    def put(self, courses: list[Course]) -> None: ...


def course_card(course: Course, fallback_description: str = DEFAULT_DESCRIPTION) -> CourseCard:
    return CourseCard(
        id=course.id,
        name=course.name,
        slug=course.slug,
        description=course.description or fallback_description,
        icon=resolve_icon(course.icon).value,
        gradient=resolve_gradient(course.color),
        href=f"/course/{course.slug}",
    )


class BrowseCatalog:
    """Все курсы в порядке создания в виде карточек.

    Если загрузка упала, карточек нет совсем, есть только уведомление.
    Кэш (если передан) проверяется первым.
    """

    def __init__(self, data: IDataBackend, cache: ICourseCache | None = None):
        self.data = data
        self.cache = cache

    def execute(self) -> tuple[list[CourseCard], Notice | None]:
        courses = self.cache.get() if self.cache else None
        if courses is None:
            try:
                courses = self.data.list_courses()
            except BackendError as e:
                logger.error("courses_load_failed", code=e.code, error=e.message)
                return [], Notice.error(LOAD_FAILED)
            if self.cache:
                self.cache.put(courses)
        return [course_card(c) for c in courses], None
