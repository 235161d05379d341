import time
import logging
import structlog
from fastapi import FastAPI, Request
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text

from .config import settings
from .domain.entities import Session
from .infrastructure.cache import delete_cache, CATALOG_KEY
from .infrastructure.db import engine
from .infrastructure.models import Base
from .infrastructure.metrics import (
    metrics_endpoint,
    http_requests_total,
    http_request_duration_seconds,
    auth_events_total,
)
from .infrastructure.rate_limit import limiter
from .infrastructure.repositories import get_backend
from .infrastructure.seed import seed_courses
from .interfaces.http.authz import LoginRequired
from .interfaces.http.flash import redirect
from .interfaces.http.routers import auth as auth_router
from .interfaces.http.routers import catalog as catalog_router
from .interfaces.http.routers import courses as courses_router
from .interfaces.http.routers import dashboard as dashboard_router

# Настройка структурированного логирования
log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(log_level),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

app = FastAPI(title="Learning Portal", version="0.1.0")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

_unsubscribe_auth_events = None


@app.middleware("http")
async def add_charset_header(request: Request, call_next):
    start_time = time.time()
    method = request.method
    path = request.url.path

    response = await call_next(request)

    if response.headers.get("content-type", "").startswith("application/json"):
        response.headers["content-type"] = "application/json; charset=utf-8"

    # Метрики
    duration = time.time() - start_time
    status_code = response.status_code
    http_requests_total.labels(method=method, endpoint=path, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=path).observe(duration)

    # Логирование
    logger.info(
        "http_request",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=round(duration * 1000, 2)
    )

    return response


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    # Нет сессии: на страницу входа, старую cookie стираем
    resp = redirect("/auth")
    if settings.SESSION_COOKIE_NAME in request.cookies:
        resp.delete_cookie(settings.SESSION_COOKIE_NAME)
    return resp


def log_auth_event(event: str, session: Session | None) -> None:
    auth_events_total.labels(event=event).inc()
    logger.info("auth_state_changed", event=event, user_id=session.user_id if session else None)


@app.on_event("startup")
def on_startup():
    global _unsubscribe_auth_events
    logger.info("Starting learning portal", version="0.1.0")
    Base.metadata.create_all(bind=engine)

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Database connection established")

    _unsubscribe_auth_events = get_backend().on_auth_state_change(log_auth_event)

    if settings.SEED_COURSES and seed_courses():
        delete_cache(CATALOG_KEY)


@app.on_event("shutdown")
def on_shutdown():
    if _unsubscribe_auth_events is not None:
        _unsubscribe_auth_events()


@app.get("/")
def index():
    return redirect("/home")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/metrics")
def metrics():
    """Prometheus metrics endpoint"""
    return metrics_endpoint()


app.include_router(auth_router.router)
app.include_router(catalog_router.router)
app.include_router(courses_router.router)
app.include_router(dashboard_router.router)
