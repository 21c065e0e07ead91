from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any
    from typing import Dict


# Number of unique flags a buffer keeps before the least recently touched one
# is evicted.
DEFAULT_MAX_SIZE = 100

DEFAULT_OPTIONS = {
    "max_flags": DEFAULT_MAX_SIZE,
    "debug": False,
}  # type: Dict[str, Any]


VERSION = "0.1.0"
