from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger():
    # The CLI reconfigures the "rangecut" logger; keep tests independent.
    log = logging.getLogger("rangecut")
    handlers = list(log.handlers)
    propagate = log.propagate
    level = log.level
    yield
    log.handlers[:] = handlers
    log.propagate = propagate
    log.setLevel(level)
