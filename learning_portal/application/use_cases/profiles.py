import structlog

from ...domain.display import initials, format_date, PROFILE_FALLBACK_ICON
from ...domain.entities import Profile
from ..backend import IDataBackend, BackendError
from ..dto import ProfileSummary

DEFAULT_DISPLAY_NAME = "Student"

logger = structlog.get_logger()


def resolve_profile(data: IDataBackend, user_id: str) -> Profile | None:
    try:
        return data.get_profile(user_id)
    except BackendError as e:
        logger.warning("profile_load_failed", user_id=user_id, code=e.code)
        return None


def profile_summary(profile: Profile | None, fallback_email: str) -> ProfileSummary:
    if profile is None:
        return ProfileSummary(
            display_name=DEFAULT_DISPLAY_NAME,
            email=fallback_email,
            initials=None,
            avatar_icon=PROFILE_FALLBACK_ICON.value,
        )
    letters = initials(profile.full_name)
    return ProfileSummary(
        display_name=profile.full_name or DEFAULT_DISPLAY_NAME,
        email=profile.email,
        initials=letters,
        avatar_icon=None if letters else PROFILE_FALLBACK_ICON.value,
        member_since=f"Member since {format_date(profile.created_at)}",
    )
