from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from ..config import settings


def make_engine(url: str) -> Engine:
    kwargs = {"pool_pre_ping": True, "echo": False}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs.update(pool_size=10, max_overflow=20, pool_recycle=3600)
        # Добавляем параметры кодировки для PostgreSQL
        if url.startswith("postgresql"):
            kwargs["connect_args"] = {"client_encoding": "utf8"}
    eng = create_engine(url, **kwargs)

    if url.startswith("sqlite"):
        # SQLite проверяет внешние ключи только если включить явно
        @event.listens_for(eng, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return eng


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

class Base(DeclarativeBase): pass
