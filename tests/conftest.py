"""
Pytest configuration for plagiarism checker tests.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest


@pytest.fixture
def write_text(tmp_path):
    """Write ``content`` to a file under tmp_path and return its path."""
    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def restore_root_logging():
    """Undo handler and level changes made by setup_logging()."""
    root = logging.getLogger()
    level = root.level
    yield
    # pytest's own capture handlers are subclasses and are left alone
    for handler in root.handlers[:]:
        if isinstance(handler, RotatingFileHandler) or type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings variables so defaults apply."""
    for name in ("PLAGIARISM_THRESHOLD", "LOG_LEVEL", "LOG_DIR", "STRUCTURED_LOGGING",
                 "LOG_TO_FILE", "MAX_FILE_SIZE_MB"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
