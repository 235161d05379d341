import asyncio
from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from ....application.backend import IBackend
from ....application.use_cases.dashboard import load_enrollments, build_dashboard
from ....application.use_cases.profiles import resolve_profile
from ....domain.entities import Session
from ....infrastructure.repositories import get_backend
from ..authz import require_session
from ..flash import pop_notice
from ..schemas import DashboardView

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardView)
async def dashboard(
    request: Request,
    response: Response,
    session: Session = Depends(require_session),
    backend: IBackend = Depends(get_backend),
):
    # два независимых запроса, каждый заполняет свою часть страницы
    profile, (enrollments, notice) = await asyncio.gather(
        run_in_threadpool(resolve_profile, backend, session.user_id),
        run_in_threadpool(load_enrollments, backend, session.user_id),
    )
    flashed = pop_notice(request, response)
    notice = notice or flashed
    view = build_dashboard(profile, session.email, enrollments)
    return DashboardView(**asdict(view), notice=asdict(notice) if notice else None)
