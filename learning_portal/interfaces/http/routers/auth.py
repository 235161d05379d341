from dataclasses import asdict

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, Response

from ....application.backend import IBackend
from ....application.dto import Notice
from ....application.use_cases.authenticate import SignInUser, SignUpUser, SignOutUser, AuthOutcome
from ....config import settings
from ....domain.entities import Session
from ....infrastructure.metrics import auth_attempts_total
from ....infrastructure.rate_limit import limiter, SIGN_IN_LIMIT, SIGN_UP_LIMIT
from ....infrastructure.repositories import get_backend
from ..authz import get_access_token
from ..flash import redirect, pop_notice
from ..schemas import SignInReq, SignUpReq, CredentialView, FormField, FormState, NoticeOut

router = APIRouter(tags=["auth"])

SIGN_IN = "sign_in"
SIGN_UP = "sign_up"

EMAIL_FIELD = FormField(name="email", label="Email", type="email", placeholder="you@example.com")
PASSWORD_FIELD = FormField(name="password", label="Password", type="password",
                           placeholder="••••••••", min_length=6)
FULL_NAME_FIELD = FormField(name="full_name", label="Full Name", type="text", placeholder="John Doe")


def credential_view(mode: str, form: FormState | None = None, notice: Notice | None = None) -> CredentialView:
    if mode == SIGN_UP:
        view = CredentialView(
            mode=SIGN_UP,
            title="Create Account",
            description="Start your learning journey today",
            fields=[FULL_NAME_FIELD, EMAIL_FIELD, PASSWORD_FIELD],
            submit_label="Sign Up",
            action="/auth/sign-up",
            toggle_label="Already have an account? Sign in",
            toggle_href=f"/auth?mode={SIGN_IN}",
        )
    else:
        view = CredentialView(
            mode=SIGN_IN,
            title="Welcome Back",
            description="Please login to continue",
            fields=[EMAIL_FIELD, PASSWORD_FIELD],
            submit_label="Sign In",
            action="/auth/sign-in",
            toggle_label="New user? Create an account",
            toggle_href=f"/auth?mode={SIGN_UP}",
        )
    if form is not None:
        view.form = form
    if notice is not None:
        view.notice = NoticeOut(**asdict(notice))
    return view


def set_session_cookie(response: Response, session: Session) -> None:
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        session.access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def finish(action: str, mode: str, outcome: AuthOutcome, form: FormState) -> Response:
    if not outcome.ok:
        auth_attempts_total.labels(action=action, result="failed").inc()
        # поля формы возвращаем как были, пароль не эхоим
        view = credential_view(mode, form=form, notice=outcome.notice)
        return JSONResponse(status_code=outcome.status, content=view.model_dump(mode="json"))
    auth_attempts_total.labels(action=action, result="ok").inc()
    resp = redirect("/home", outcome.notice)
    set_session_cookie(resp, outcome.session)
    return resp


@router.get("/auth", response_model=CredentialView)
def auth_page(request: Request, response: Response,
              mode: str = Query(SIGN_IN, pattern=f"^({SIGN_IN}|{SIGN_UP})$")):
    return credential_view(mode, notice=pop_notice(request, response))


@router.post("/auth/sign-in")
@limiter.limit(SIGN_IN_LIMIT)
def sign_in(request: Request, payload: SignInReq, backend: IBackend = Depends(get_backend)):
    outcome = SignInUser(backend).execute(payload.email, payload.password)
    return finish("sign_in", SIGN_IN, outcome, FormState(email=payload.email))


@router.post("/auth/sign-up")
@limiter.limit(SIGN_UP_LIMIT)
def sign_up(request: Request, payload: SignUpReq, backend: IBackend = Depends(get_backend)):
    outcome = SignUpUser(backend).execute(payload.email, payload.password, payload.full_name)
    return finish("sign_up", SIGN_UP, outcome,
                  FormState(email=payload.email, full_name=payload.full_name))


@router.post("/auth/sign-out")
def sign_out(token: str | None = Depends(get_access_token), backend: IBackend = Depends(get_backend)):
    notice = SignOutUser(backend).execute(token)
    resp = redirect("/auth", notice)
    resp.delete_cookie(settings.SESSION_COOKIE_NAME)
    return resp
