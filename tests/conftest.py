import builtins
import logging

import pandas as pd
import pytest

from partsdb.catalog import build_catalog
from partsdb.errors import ExecutionError


class FakeDatabase:
    """DatabaseManager palsu: catat semua statement, return hasil yang disiapkan"""

    def __init__(self):
        self.calls = []
        self.frames = []
        self.returning_ids = []
        self.rowcount = 1
        self.fail_on = None
        self.disconnected = False

    def _record(self, kind, sql, params):
        self.calls.append((kind, sql, list(params or [])))
        if self.fail_on and self.fail_on in sql:
            raise ExecutionError(sql, RuntimeError('duplicate key value violates unique constraint'))

    def query(self, sql, params=None):
        self._record('query', sql, params)
        return self.frames.pop(0)

    def query_row(self, sql, params=None):
        self._record('query_row', sql, params)
        return (self.returning_ids.pop(0),)

    def execute(self, sql, params=None):
        self._record('execute', sql, params)
        return self.rowcount

    def disconnect(self):
        self.disconnected = True


@pytest.fixture(autouse=True)
def reset_partsdb_logger():
    """setup_logging memasang handler global; kembalikan logger ke kondisi awal"""
    yield
    logger = logging.getLogger('partsdb')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def frame():
    def make(columns, rows=()):
        return pd.DataFrame(list(rows), columns=columns, dtype=object)
    return make


@pytest.fixture
def feed_input(monkeypatch):
    """Ganti input() dengan daftar jawaban; EOFError jika habis. Return list prompt."""
    def feed(*answers):
        remaining = list(answers)
        prompts = []

        def fake_input(prompt=''):
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr(builtins, 'input', fake_input)
        return prompts
    return feed
