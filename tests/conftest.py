import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI installs a stdout handler on the root logger; drop it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
