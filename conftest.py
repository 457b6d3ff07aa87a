"""
Shared fixtures: a throwaway SQLite review database per test.
"""

import pytest

from palace import sm2


@pytest.fixture
def review_db(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'review.db'}")
    monkeypatch.setenv("TEST_MODE", "false")
    sm2.init_db()
    yield
