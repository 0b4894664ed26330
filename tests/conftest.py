import pytest
from textdb import TextDB


@pytest.fixture
def db_path(tmp_path):
    """Path to a log file that does not exist yet."""
    return str(tmp_path / 'test.txt.db')


@pytest.fixture
def temp_db(db_path):
    """Temporary TextDB instance over a fresh log file."""
    db = TextDB(db_path)
    yield db
    db.close()
