import logging

import pytest

import flagledger
import flagledger.scope
import flagledger.utils


@pytest.fixture(autouse=True)
def reset_current_scope():
    token = flagledger.scope._current_scope.set(None)
    yield
    flagledger.scope._current_scope.reset(token)


@pytest.fixture(autouse=True)
def reset_debug():
    yield
    flagledger.utils.set_debug(False)


@pytest.fixture
def debug_logs(caplog):
    """Captures records from the library logger at debug level."""
    flagledger.utils.set_debug(True)
    caplog.set_level(logging.DEBUG, logger="flagledger.errors")
    return caplog


@pytest.fixture
def make_buffer():
    def inner(*names_and_results):
        return [{"flag": name, "result": result} for name, result in names_and_results]

    return inner
