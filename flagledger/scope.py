from contextlib import contextmanager
from contextvars import ContextVar
from copy import copy

from flagledger.consts import DEFAULT_MAX_SIZE, DEFAULT_OPTIONS
from flagledger.flag_utils import FlagBuffer
from flagledger.utils import logger

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, Dict, Generator, Optional

    from flagledger._types import Event


_current_scope = ContextVar("current_scope", default=None)


class Scope:
    """The observability context a flag buffer is attached to.

    The buffer is created on first access, sized by the ``max_flags`` option.
    """

    __slots__ = ("_options", "_flags")

    def __init__(
        self, options: "Optional[Dict[str, Any]]" = None, **kwargs: "Any"
    ) -> None:
        merged = dict(DEFAULT_OPTIONS)
        for key, value in dict(options or {}, **kwargs).items():
            if key not in DEFAULT_OPTIONS:
                raise TypeError("Unknown option %r" % (key,))
            merged[key] = value

        self._options: "Dict[str, Any]" = merged
        self._flags: "Optional[FlagBuffer]" = None

    def __copy__(self) -> "Scope":
        rv: "Scope" = object.__new__(self.__class__)
        rv._options = dict(self._options)
        rv._flags = copy(self._flags)
        return rv

    def fork(self) -> "Scope":
        """Returns a fork of this scope."""
        return copy(self)

    @classmethod
    def get_current_scope(cls) -> "Scope":
        """Returns the current scope, creating one with default options if needed."""
        current_scope = _current_scope.get()
        if current_scope is None:
            current_scope = Scope()
            _current_scope.set(current_scope)

        return current_scope

    @classmethod
    def set_current_scope(cls, new_current_scope: "Scope") -> None:
        _current_scope.set(new_current_scope)

    @property
    def options(self) -> "Dict[str, Any]":
        return self._options

    @property
    def flags(self) -> "FlagBuffer":
        if self._flags is None:
            max_flags = self._options.get("max_flags") or DEFAULT_MAX_SIZE
            self._flags = FlagBuffer(capacity=max_flags)
        return self._flags

    def add_feature_flag(self, flag: "Optional[str]", result: bool) -> None:
        if flag is None:
            logger.debug("Ignoring feature flag evaluation without a name")
            return
        self.flags.set(flag, result)

    def update_from_scope(self, scope: "Scope") -> None:
        """Merge the flags of another scope into this one.

        Flags from ``scope`` become the most recently touched. This scope keeps
        its own capacity, so only the newest flags survive a smaller one.
        """
        if scope._flags:
            flags = self.flags
            for flag in scope._flags.get():
                flags.set(flag["flag"], flag["result"])

    def apply_to_event(self, event: "Event") -> "Event":
        flags = self.flags.get()
        if len(flags) > 0:
            event.setdefault("contexts", {}).setdefault("flags", {}).update(
                {"values": flags}
            )
        return event

    def clear(self) -> None:
        self._flags = None

    def __repr__(self) -> str:
        return "<%s id=%s flags=%s>" % (
            self.__class__.__name__,
            hex(id(self)),
            len(self._flags) if self._flags is not None else 0,
        )


def get_current_scope() -> "Scope":
    return Scope.get_current_scope()


@contextmanager
def new_scope() -> "Generator[Scope, None, None]":
    """
    Context manager that forks the current scope and runs the wrapped code in it.
    After the wrapped code is executed, the original scope is restored.

    Example Usage:

    .. code-block:: python

        import flagledger

        with flagledger.new_scope():
            flagledger.add_feature_flag("new-checkout", True)  # only seen here

        flagledger.add_feature_flag("dark-mode", False)

    """
    forked = Scope.get_current_scope().fork()
    token = _current_scope.set(forked)

    try:
        yield forked

    finally:
        _current_scope.reset(token)


def add_feature_flag(
    flag: "Optional[str]", result: bool, scope: "Optional[Scope]" = None
) -> None:
    """
    Records a flag and its value to be attached to subsequent events.
    We recommend you do this on flag evaluations. Flags are buffered per scope.
    """
    if scope is None:
        scope = get_current_scope()
    scope.add_feature_flag(flag, result)
