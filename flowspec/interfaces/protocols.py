# flowspec/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Optional, Protocol, runtime_checkable

GUARD_METHOD_PREFIX = "can_transition_to_"


@runtime_checkable
class EntryHandler(Protocol):
    """
    Handler protocol for state entry.

    A handler class is instantiated with the execution context and its
    on_entry() is called when the workflow enters the state the handler is
    attached to.
    """

    def on_entry(self) -> None:
        """Run entry behaviour for the handled state."""
        ...


@runtime_checkable
class ExitHandler(Protocol):
    """
    Handler protocol for state exit. Mirrors EntryHandler.
    """

    def on_exit(self) -> None:
        """Run exit behaviour for the handled state."""
        ...


def guard_method_name(target: str) -> str:
    """Name of the handler predicate consulted for transitions into `target`."""
    return f"{GUARD_METHOD_PREFIX}{target}"


def handler_guard_method(handler: Optional[type], target: str) -> Optional[str]:
    """
    Return the predicate name if `handler` defines one for `target`, else None.
    """
    if handler is None:
        return None
    method = guard_method_name(target)
    if callable(getattr(handler, method, None)):
        return method
    return None
