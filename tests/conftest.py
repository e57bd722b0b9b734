import pytest
from sqlalchemy import create_engine


@pytest.fixture
def db_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'max_average.db'}"
    monkeypatch.setenv("MAX_AVERAGE_DB_URL", url)
    return url


@pytest.fixture
def engine(db_url):
    eng = create_engine(db_url)
    yield eng
    eng.dispose()
