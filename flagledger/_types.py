from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import MutableSequence
    from typing import Any, Dict, List

    from typing_extensions import TypedDict

    FlagRecord = TypedDict("FlagRecord", {"flag": str, "result": bool})
    Flags = List[FlagRecord]

    # Anything ordered that supports ``len``, iteration, ``del seq[i]`` and
    # ``append``. Both ``list`` and ``collections.deque`` qualify.
    FlagSequence = MutableSequence[FlagRecord]

    Event = Dict[str, Any]
