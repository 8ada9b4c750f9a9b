"""Shared fixtures for transpace tests."""
import logging

import pytest

from transpace.logging import ROOT_LOGGER

# "ael-in-image" as printed by the command line, sentinel included
AEL_IN_IMAGE = "%1$s%39220526$s%982942949$s"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop TRANSPACE_* variables and undo any logging setup after each test."""
    for name in ("TRANSPACE_LOG_LEVEL", "TRANSPACE_LOG_FILE",
                 "TRANSPACE_LOG_JSON", "TRANSPACE_SENTINEL"):
        monkeypatch.delenv(name, raising=False)
    yield
    root = logging.getLogger(ROOT_LOGGER)
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture
def encoded_sample():
    return AEL_IN_IMAGE
