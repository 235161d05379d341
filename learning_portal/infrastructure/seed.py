from datetime import timedelta

import structlog
from sqlalchemy import select, func
from sqlalchemy.orm import sessionmaker

from .db import SessionLocal
from .models import CourseORM, utcnow

logger = structlog.get_logger()

# (slug, name, description, icon, color)
COURSES = [
    ("python", "Python", "Master Python from basics to advanced concepts", "Code",
     "from-blue-500 to-yellow-400"),
    ("c", "C Programming", "Learn the foundations of systems programming", "Terminal",
     "from-slate-600 to-slate-800"),
    ("java", "Java", "Object-oriented programming with Java", "Coffee",
     "from-orange-500 to-red-600"),
    ("html", "HTML", "Structure the web with semantic markup", "FileCode",
     "from-orange-400 to-orange-600"),
    ("css", "CSS", "Style beautiful and responsive layouts", "Palette",
     "from-blue-400 to-indigo-600"),
    ("javascript", "JavaScript", "Bring web pages to life", "Braces",
     "from-yellow-400 to-amber-500"),
    ("dsa", "Data Structures & Algorithms", "Solve problems efficiently", "Network",
     "from-emerald-500 to-teal-600"),
    ("cpp", "C++", "High-performance programming with C++", "Cpu",
     "from-sky-500 to-blue-700"),
    ("react", "React", "Build modern user interfaces", "Atom",
     "from-cyan-400 to-sky-500"),
]


def seed_courses(session_factory: sessionmaker = SessionLocal) -> int:
    """Заполняет каталог, если таблица курсов пуста. Возвращает число добавленных."""
    db = session_factory()
    try:
        if db.scalar(select(func.count(CourseORM.id))):
            return 0
        base = utcnow()
        # разные created_at, чтобы порядок каталога был стабильным
        for i, (slug, name, description, icon, color) in enumerate(COURSES):
            db.add(CourseORM(slug=slug, name=name, description=description, icon=icon, color=color,
                             created_at=base + timedelta(seconds=i)))
        db.commit()
        logger.info("courses_seeded", count=len(COURSES))
        return len(COURSES)
    finally:
        db.close()
