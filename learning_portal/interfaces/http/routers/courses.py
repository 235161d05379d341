from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from ....application.backend import IBackend
from ....application.dto import Notice
from ....application.use_cases.course_detail import find_course, course_detail, COURSE_NOT_FOUND
from ....application.use_cases.enroll_in_course import EnrollInCourse, CREATED, DUPLICATE
from ....domain.entities import Session
from ....infrastructure.metrics import enrollments_total
from ....infrastructure.repositories import get_backend
from ..authz import require_session
from ..flash import redirect, pop_notice
from ..schemas import CourseView, EnrollResp

router = APIRouter(prefix="/course", tags=["courses"])

ENROLL_STATUS = {
    CREATED: status.HTTP_201_CREATED,
    DUPLICATE: status.HTTP_200_OK,
}


@router.get("/{slug}", response_model=CourseView)
def course_page(
    slug: str,
    request: Request,
    response: Response,
    session: Session = Depends(require_session),
    backend: IBackend = Depends(get_backend),
):
    course = find_course(backend, slug)
    if course is None:
        return redirect("/home", Notice.error(COURSE_NOT_FOUND))
    notice = pop_notice(request, response)
    return CourseView(**asdict(course_detail(course)), notice=asdict(notice) if notice else None)


@router.post("/{slug}/enroll", response_model=EnrollResp)
def enroll(
    slug: str,
    session: Session = Depends(require_session),
    backend: IBackend = Depends(get_backend),
):
    course = find_course(backend, slug)
    if course is None:
        body = EnrollResp(result="not_found", notice=asdict(Notice.error(COURSE_NOT_FOUND)))
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())

    outcome = EnrollInCourse(backend).execute(session, course)
    enrollments_total.labels(result=outcome.result).inc()
    body = EnrollResp(result=outcome.result, notice=asdict(outcome.notice))
    return JSONResponse(
        status_code=ENROLL_STATUS.get(outcome.result, status.HTTP_502_BAD_GATEWAY),
        content=body.model_dump(),
    )
