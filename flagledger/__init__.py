from flagledger.scope import Scope, add_feature_flag, get_current_scope, new_scope
from flagledger.flag_utils import FlagBuffer, insert_to_flag_buffer
from flagledger.utils import InvariantViolation

from flagledger.consts import DEFAULT_MAX_SIZE, VERSION  # noqa

__all__ = [  # noqa
    "DEFAULT_MAX_SIZE",
    "FlagBuffer",
    "InvariantViolation",
    "Scope",
    "add_feature_flag",
    "get_current_scope",
    "insert_to_flag_buffer",
    "new_scope",
]

# Initialize the debug support after everything is loaded
from flagledger.debug import init_debug_support

init_debug_support()
del init_debug_support
