import logging

from flagledger.debug import configure_logger, _ScopeBasedDebugFilter
from flagledger.scope import Scope
from flagledger.utils import logger, set_debug


def test_logger_is_configured_on_import():
    assert logger.handlers
    assert logger.level == logging.DEBUG
    assert any(isinstance(f, _ScopeBasedDebugFilter) for f in logger.filters)


def test_filter_follows_debug_option():
    record = logging.LogRecord("flagledger.errors", logging.DEBUG, "", 0, "x", (), None)
    filter = _ScopeBasedDebugFilter()

    set_debug(False)
    assert not filter.filter(record)

    set_debug(True)
    assert filter.filter(record)


def test_filter_follows_current_scope_debug_option():
    record = logging.LogRecord("flagledger.errors", logging.DEBUG, "", 0, "x", (), None)
    filter = _ScopeBasedDebugFilter()
    set_debug(False)

    assert not filter.filter(record)

    Scope.set_current_scope(Scope(debug=True))
    assert filter.filter(record)

    Scope.set_current_scope(Scope(debug=False))
    assert not filter.filter(record)


def test_configure_logger_writes_to_stderr(capsys):
    handlers, filters = list(logger.handlers), list(logger.filters)
    logger.handlers = []
    try:
        configure_logger()
        set_debug(True)
        logger.debug("hello")
    finally:
        logger.handlers = handlers
        logger.filters = filters

    assert " [flagledger] DEBUG: hello" in capsys.readouterr().err
