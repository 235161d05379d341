from datetime import datetime
from enum import Enum


class Icon(str, Enum):
    """Иконки, которые умеет рисовать фронтенд"""
    BOOK_OPEN = "BookOpen"
    CODE = "Code"
    CODE_XML = "CodeXml"
    TERMINAL = "Terminal"
    COFFEE = "Coffee"
    FILE_CODE = "FileCode"
    PALETTE = "Palette"
    BRACES = "Braces"
    NETWORK = "Network"
    CPU = "Cpu"
    ATOM = "Atom"
    DATABASE = "Database"
    GLOBE = "Globe"
    GRADUATION_CAP = "GraduationCap"
    USER = "User"


DEFAULT_ICON = Icon.BOOK_OPEN
PROFILE_FALLBACK_ICON = Icon.USER
DEFAULT_GRADIENT = "from-primary to-primary-dark"

_ICONS_BY_NAME = {icon.value: icon for icon in Icon}


def resolve_icon(name: str | None) -> Icon:
    if not name:
        return DEFAULT_ICON
    return _ICONS_BY_NAME.get(name, DEFAULT_ICON)


def resolve_gradient(color: str | None) -> str:
    return color or DEFAULT_GRADIENT


def initials(full_name: str | None) -> str | None:
    """Первые буквы слов в верхнем регистре, не больше двух.

    None, если имени нет: тогда вместо инициалов показывается иконка.
    """
    if not full_name:
        return None
    letters = "".join(word[0] for word in full_name.split(" ") if word)
    return letters.upper()[:2] or None


def format_date(value: datetime) -> str:
    # "October 19, 2026"
    return f"{value:%B} {value.day}, {value.year}"
