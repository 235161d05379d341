from datetime import datetime

import pytest

from learning_portal.domain.display import (
    Icon, DEFAULT_GRADIENT, resolve_icon, resolve_gradient, initials, format_date,
)
from learning_portal.domain.resources import resources_for, COURSE_RESOURCES


@pytest.mark.parametrize("name, expected", [
    ("Jane Doe", "JD"),
    ("Madonna", "M"),
    ("ada lovelace byron", "AL"),
    ("Jean  Luc", "JL"),
])
def test_initials(name, expected):
    """Инициалы: первые буквы слов, верхний регистр, не больше двух"""
    assert initials(name) == expected


@pytest.mark.parametrize("name", [None, "", "   "])
def test_initials_missing_name(name):
    """Без имени инициалов нет (показываем иконку)"""
    assert initials(name) is None


def test_resolve_icon_known_name():
    assert resolve_icon("Coffee") is Icon.COFFEE
    assert resolve_icon("Atom").value == "Atom"


@pytest.mark.parametrize("name", [None, "", "NoSuchIcon", "coffee"])
def test_resolve_icon_falls_back_to_book(name):
    """Неизвестное или пустое имя -> иконка по умолчанию"""
    assert resolve_icon(name) is Icon.BOOK_OPEN


def test_resolve_gradient():
    assert resolve_gradient(None) == DEFAULT_GRADIENT
    assert resolve_gradient("") == DEFAULT_GRADIENT
    assert resolve_gradient("from-cyan-400 to-sky-500") == "from-cyan-400 to-sky-500"


def test_format_date():
    assert format_date(datetime(2026, 1, 5, 13, 30)) == "January 5, 2026"


def test_resources_for_known_slug():
    resources = resources_for("python")
    assert len(resources) == 3
    assert resources[0].title == "Python.org Official Tutorial"
    assert resources[0].url == "https://docs.python.org/3/tutorial/"


def test_resources_for_unknown_slug_is_empty():
    """Курс без подборки ресурсов - это не ошибка"""
    assert resources_for("rust") == []


def test_resources_table_covers_seed_courses():
    from learning_portal.infrastructure.seed import COURSES
    assert {slug for slug, *_ in COURSES} == set(COURSE_RESOURCES)
