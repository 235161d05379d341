import asyncio
from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from ....application.backend import IBackend
from ....application.use_cases.catalog import BrowseCatalog
from ....application.use_cases.profiles import resolve_profile, profile_summary
from ....domain.entities import Session
from ....infrastructure.cache import CourseCatalogCache
from ....infrastructure.repositories import get_backend
from ..authz import require_session
from ..flash import pop_notice
from ..schemas import CatalogView

router = APIRouter(tags=["catalog"])


@router.get("/home", response_model=CatalogView)
async def home(
    request: Request,
    response: Response,
    session: Session = Depends(require_session),
    backend: IBackend = Depends(get_backend),
):
    catalog = BrowseCatalog(backend, cache=CourseCatalogCache())
    # профиль и каталог не зависят друг от друга: грузим параллельно
    profile, (cards, notice) = await asyncio.gather(
        run_in_threadpool(resolve_profile, backend, session.user_id),
        run_in_threadpool(catalog.execute),
    )
    flashed = pop_notice(request, response)
    notice = notice or flashed
    return CatalogView(
        profile=asdict(profile_summary(profile, session.email)),
        courses=[asdict(c) for c in cards],
        notice=asdict(notice) if notice else None,
    )
