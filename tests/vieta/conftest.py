import logging

import pytest

from vieta.logging import LOG_DIR_ENV


@pytest.fixture(autouse=True)
def log_check():
    logger = logging.getLogger()
    logger.setLevel(logging.WARNING)
    yield
    logger_after = logging.getLogger()
    level_after = logger_after.getEffectiveLevel()
    assert (
        level_after == logging.WARNING
    ), f"Detected differences in log environment: Changed to {level_after}"


@pytest.fixture()
def use_tmpdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def no_log_dir_env(monkeypatch):
    monkeypatch.delenv(LOG_DIR_ENV, raising=False)
