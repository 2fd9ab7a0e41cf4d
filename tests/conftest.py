import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from heimdall import configs, database
from heimdall.members import Member


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    database.create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def member():
    return Member(uid=42, can_manage_users=False, max_auto_inactive=1800)


@pytest.fixture
def clean_state(monkeypatch, tmp_path):
    """Изолирует тест от .env в рабочей папке и сбрасывает глобальное состояние после него."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    database.stop()
    configs.settings = None
