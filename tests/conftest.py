import os
import sys

import pytest


def pytest_configure():
    # `src/` holds top-level packages: common, state, presenter, refresh
    root = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    src_path = os.path.join(root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


@pytest.fixture(autouse=True)
def _no_feed_env(monkeypatch: pytest.MonkeyPatch):
    # Keep a developer's LOCATIONS_* settings out of the tests
    for name in list(os.environ):
        if name.startswith("LOCATIONS_"):
            monkeypatch.delenv(name, raising=False)
