from dataclasses import dataclass

import structlog

from ...domain.entities import Session, Course
from ..backend import IDataBackend, BackendError, UNIQUE_VIOLATION
from ..dto import Notice

ALREADY_ENROLLED = "You're already enrolled in this course!"
ENROLL_FAILED = "Failed to enroll in course"

CREATED = "created"
DUPLICATE = "duplicate"
FAILED = "failed"

logger = structlog.get_logger()


@dataclass
class EnrollOutcome:
    result: str
    notice: Notice


class EnrollInCourse:
    """Одна вставка записи (user, course), без предварительной проверки.

    Дубликат определяет уникальный индекс в БД: проигравшая параллельная
    вставка приходит как 23505 и показывается как info, без повтора.
    """

    def __init__(self, data: IDataBackend):
        self.data = data

    def execute(self, session: Session, course: Course) -> EnrollOutcome:
        try:
            self.data.insert_enrollment(session.user_id, course.id)
        except BackendError as e:
            if e.code == UNIQUE_VIOLATION:
                logger.info("enrollment_duplicate", user_id=session.user_id, course=course.slug)
                return EnrollOutcome(DUPLICATE, Notice.info(ALREADY_ENROLLED))
            logger.error("enrollment_failed", user_id=session.user_id, course=course.slug,
                         code=e.code, error=e.message)
            return EnrollOutcome(FAILED, Notice.error(ENROLL_FAILED))
        logger.info("enrollment_created", user_id=session.user_id, course=course.slug)
        return EnrollOutcome(CREATED, Notice.success(f"Enrolled in {course.name}!"))
