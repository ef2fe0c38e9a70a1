import pytest
from sqlalchemy import create_engine, inspect

from course_portal.core import config
from course_portal.database import connect, get_db


def test_connect_creates_tables() -> None:
    engine = create_engine('sqlite://')

    assert connect(bind=engine) is True
    assert {'users', 'classes', 'class_students', 'orders'} <= set(inspect(engine).get_table_names())


def test_connect_logs_instead_of_raising(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'portal.db'}")

    assert connect(bind=engine) is False
    assert 'Database connection failed' in caplog.text


def test_get_db_closes_session() -> None:
    generator = get_db()
    session = next(generator)
    closed = []
    session.close = lambda: closed.append(True)

    with pytest.raises(StopIteration):
        next(generator)

    assert closed == [True]


def test_validate_runtime_config_requires_secret_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'production')
    monkeypatch.setattr(config, 'ACCESS_TOKEN_SECRET', 'change-me')

    with pytest.raises(RuntimeError):
        config.validate_runtime_config()

    monkeypatch.setattr(config, 'ACCESS_TOKEN_SECRET', 'a-real-secret')
    config.validate_runtime_config()
