import sys
import logging

from flagledger import scope
from flagledger.utils import is_debug_enabled, logger
from logging import LogRecord


class _ScopeBasedDebugFilter(logging.Filter):
    def filter(self, record):
        # type: (LogRecord) -> bool
        if is_debug_enabled():
            return True

        current_scope = scope._current_scope.get()
        return current_scope is not None and bool(current_scope.options["debug"])


def init_debug_support():
    # type: () -> None
    if not logger.handlers:
        configure_logger()


def configure_logger():
    # type: () -> None
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(
        logging.Formatter(" [flagledger] %(levelname)s: %(message)s")
    )
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG)
    logger.addFilter(_ScopeBasedDebugFilter())
