import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from spinwin.api.deps import get_mirror
from spinwin.core.database import Base, get_db
from spinwin.main import app
from spinwin.models import spin  # noqa: F401 ensure models imported
from spinwin.services.sheets import SheetsMirror

TEST_DB_URL = 'sqlite+pysqlite:///:memory:'


class RecordingMirror(SheetsMirror):
    def __init__(self):
        super().__init__(client=object(), spreadsheet_id='test-sheet')
        self.rows = []

    def append_row(self, name, contact, prize, timestamp):
        self.rows.append((name, contact, prize, timestamp))
        return True


@pytest.fixture()
def engine():
    engine = create_engine(
        TEST_DB_URL,
        future=True,
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture()
def db_session(engine):
    session_maker = sessionmaker(
        bind=engine, autoflush=False, autocommit=False, future=True
    )
    session = session_maker()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def mirror():
    return RecordingMirror()


@pytest.fixture()
def make_client(db_session, mirror):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mirror] = lambda: mirror

    def _make(cookies=None):
        return TestClient(app, cookies=cookies)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture()
def client(make_client):
    return make_client()


@pytest.fixture()
def admin_client(make_client):
    return make_client(cookies={'admin': 'true'})
