import logging


logger = logging.getLogger("flagledger.errors")

_debug_enabled = False


def set_debug(enabled):
    # type: (bool) -> None
    global _debug_enabled
    _debug_enabled = bool(enabled)


def is_debug_enabled():
    # type: () -> bool
    return _debug_enabled


class InvariantViolation(ValueError):
    """Raised when a flag buffer is handed over in a state it should never be in."""
