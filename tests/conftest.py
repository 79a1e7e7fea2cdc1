import logging

import pytest

from problemlog import config
from problemlog.models import Problem
from problemlog.storage import open_store


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    for name in ("PROBLEMLOG_DB", "PROBLEMLOG_LOG_LEVEL", "PROBLEMLOG_FILE_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PROBLEMLOG_LOG_DIR", str(tmp_path / "logs"))
    config.reload()
    yield
    config.reload()
    app_logger = logging.getLogger("problemlog")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "problems.db"


@pytest.fixture
def store(db_path):
    with open_store(db_path) as opened:
        yield opened


@pytest.fixture
def two_sum() -> Problem:
    return Problem(description="Two Sum", category="Arrays", difficulty="Easy")
