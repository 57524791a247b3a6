import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


class LoggerSpy:
    """Stand-in logger that records (level, message) pairs."""

    def __init__(self):
        self.messages = []

    def _record(self, level, msg, *args, **kwargs):
        self.messages.append((level, msg % args if args else msg))

    def debug(self, msg, *args, **kwargs):
        self._record("debug", msg, *args)

    def info(self, msg, *args, **kwargs):
        self._record("info", msg, *args)

    def warning(self, msg, *args, **kwargs):
        self._record("warning", msg, *args)

    def error(self, msg, *args, **kwargs):
        self._record("error", msg, *args)

    def get_all(self, level=None):
        return [m for lvl, m in self.messages if level is None or lvl == level]


@pytest.fixture
def logger_spy():
    return LoggerSpy()


@pytest.fixture
def copy_fixture(tmp_path):
    """Copy a fixture guide into tmp_path, optionally moving pagecontent to pages."""

    def _copy(name, move_to_pages=False):
        guide_dir = tmp_path / name
        shutil.copytree(FIXTURES / name, guide_dir)
        if move_to_pages:
            input_dir = guide_dir / "guide-data" / "input"
            (input_dir / "pagecontent").rename(input_dir / "pages")
        return guide_dir

    return _copy
