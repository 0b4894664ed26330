"""Tests for the command-line interface."""
import sys

import pytest

from textdb import TextDB
from textdb.cli.db_cli import main
from textdb.utils.config import Config


@pytest.fixture
def run(db_path, capsys):
    """Run the CLI against the test log file."""
    def _run(*args):
        code = main(['--db', db_path, *args])
        out, err = capsys.readouterr()
        return code, out, err
    return _run


class TestCLI:
    """Test CLI commands."""

    def test_put_and_get(self, run):
        assert run('put', 'a', 'x') == (0, "OK\n", "")
        assert run('get', 'a') == (0, "-> b'x'\n", "")

    def test_get_missing(self, run):
        assert run('get', 'missing') == (0, "-> None\n", "")

    def test_find_missing(self, run):
        code, out, err = run('find', 'missing')
        assert code == 1
        assert "key not found" in err

    def test_find_existing(self, run):
        run('put', 'k', 'value with spaces')
        assert run('find', 'k') == (0, "-> b'value with spaces'\n", "")

    def test_set_and_exists(self, run):
        assert run('exists', 'a') == (0, "-> exists 'a': False\n", "")
        assert run('set', 'a')[0] == 0
        assert run('exists', 'a') == (0, "-> exists 'a': True\n", "")

    def test_get_valueless_key(self, run):
        run('set', 'a')
        code, out, err = run('get', 'a')
        assert code == 1
        assert "key has no value" in err

    def test_delete(self, run):
        run('put', 'a', 'x')
        assert run('delete', 'a') == (0, "OK\n", "")
        assert run('exists', 'a') == (0, "-> exists 'a': False\n", "")

    def test_put_requires_value(self, run):
        code, out, err = run('put', 'a')
        assert code == 1
        assert "requires a value" in err

    def test_empty_key(self, run):
        code, out, err = run('set', '')
        assert code == 1
        assert "key is empty" in err

    def test_corrupt_log(self, run, db_path):
        with open(db_path, 'wb') as f:
            f.write(b"garbage")
        code, out, err = run('get', 'a')
        assert code == 1
        assert "Error opening" in err

    def test_verbose(self, run):
        run('put', 'a', 'x')
        code, out, err = run('--verbose', 'get', 'a')
        assert code == 0
        assert "[TextDB] Opened" in out
        assert "1 keys, 9 bytes" in out
        assert "-> b'x'" in out

    def test_fsync_flag(self, run, monkeypatch):
        monkeypatch.setattr(Config, 'FSYNC_WRITES', False)
        assert run('--fsync', 'put', 'a', 'x') == (0, "OK\n", "")
        assert Config.FSYNC_WRITES is True
        assert run('get', 'a') == (0, "-> b'x'\n", "")

    def test_put_non_ascii_value(self, run, db_path):
        assert run('put', 'k', 'héllo')[0] == 0
        with TextDB(db_path) as db:
            assert db.get('k') == 'héllo'.encode(sys.getfilesystemencoding(), 'surrogateescape')
