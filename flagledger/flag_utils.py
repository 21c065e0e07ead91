from collections import deque
from typing import TYPE_CHECKING

from flagledger.consts import DEFAULT_MAX_SIZE
from flagledger.utils import InvariantViolation, logger

if TYPE_CHECKING:
    from flagledger._types import FlagSequence, Flags


def insert_to_flag_buffer(flags, name, value, max_size=DEFAULT_MAX_SIZE):
    # type: (FlagSequence, str, bool, int) -> None
    """
    Insert a flag evaluation into an ordered LRU buffer, in place. Not
    thread-safe. After inserting:

    - ``flags`` is ordered by recency, with the newest flag at the end.
    - No other record in ``flags`` has the same name.
    - ``len(flags)`` does not exceed ``max_size``; the oldest flag is evicted
      as needed.

    It's recommended to pass the same ``max_size`` on every call for a given
    buffer; the size bound is only as strong as the last value used.
    """
    if max_size < 1:
        raise InvariantViolation(
            "insert_to_flag_buffer called with max_size=%s, must be at least 1"
            % max_size
        )

    if len(flags) > max_size:
        raise InvariantViolation(
            "insert_to_flag_buffer called on a buffer of length %s, larger than "
            "the given max_size=%s" % (len(flags), max_size)
        )

    for index, flag in enumerate(flags):
        if flag["flag"] == name:
            del flags[index]
            break

    if len(flags) == max_size:
        evicted = flags[0]
        del flags[0]
        logger.debug(
            "Flag buffer at capacity (%s), evicted %r", max_size, evicted["flag"]
        )

    flags.append({"flag": name, "result": value})


class FlagBuffer:
    """Owns a flag buffer and pins its capacity."""

    def __init__(self, capacity=DEFAULT_MAX_SIZE):
        # type: (int) -> None
        if capacity < 1:
            raise InvariantViolation(
                "FlagBuffer capacity must be at least 1, got %s" % capacity
            )
        self.capacity = capacity
        self.buffer = deque()  # type: FlagSequence

    def __len__(self):
        # type: () -> int
        return len(self.buffer)

    def __copy__(self):
        # type: () -> FlagBuffer
        buffer = FlagBuffer(capacity=self.capacity)
        buffer.buffer = deque(dict(flag) for flag in self.buffer)
        return buffer

    def clear(self):
        # type: () -> None
        self.buffer.clear()

    def get(self):
        # type: () -> Flags
        """Return the flags ordered from oldest to newest."""
        return [
            {"flag": flag["flag"], "result": flag["result"]} for flag in self.buffer
        ]

    def set(self, flag, result):
        # type: (str, bool) -> None
        insert_to_flag_buffer(self.buffer, flag, result, max_size=self.capacity)
