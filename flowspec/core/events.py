# flowspec/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from flowspec.interfaces.types import Action, Condition


@dataclass(frozen=True, eq=False)
class Event:
    """
    A named edge leaving a state. Several events may share a name on the same
    state; the guard (`condition`) decides which of them applies.

    :param name: Event name, not unique across a state's edges.
    :param target: Name of the destination state.
    :param condition: None, a predicate taking the execution context, or the
        name of a zero-argument method on the context.
    :param meta: Arbitrary metadata, used by renderers.
    :param action: Optional callable invoked by the execution engine.
    """

    name: str
    target: str
    condition: Optional[Condition] = None
    meta: Dict[str, Any] = field(default_factory=dict)
    action: Optional[Action] = None

    def __post_init__(self) -> None:
        if self.condition is not None and not isinstance(self.condition, str) and not callable(self.condition):
            raise TypeError("condition must be None, a context method name or a callable")
        if self.action is not None and not callable(self.action):
            raise TypeError("action must be callable")

    @property
    def transitions_to(self) -> str:
        """Alias for the target state name."""
        return self.target

    @property
    def display_name(self) -> str:
        """Human readable label, `meta['display_name']` when supplied."""
        if "display_name" in self.meta:
            return str(self.meta["display_name"])
        return self.name.replace("_", " ").strip().capitalize()

    def is_applicable(self, context: Any) -> bool:
        """
        Evaluate the guard against the execution context.

        :param context: The object attempting the transition.
        :return: True if there is no guard or the guard is truthy.
        """
        if self.condition is None:
            return True
        if isinstance(self.condition, str):
            return bool(getattr(context, self.condition)())
        return bool(self.condition(context))

    def __repr__(self) -> str:
        return f"Event({self.name!r} -> {self.target!r})"


class EventCollection:
    """
    Ordered multi-map from event name to the events declared under that name
    for one state. Name order is first declaration; within a name, events keep
    declaration order, which is the only disambiguation between alternatives.
    """

    def __init__(self) -> None:
        self._events: Dict[str, List[Event]] = {}

    def push(self, name: str, event: Event) -> None:
        """
        Append an event under `name`. Never replaces an existing event.
        """
        self._events.setdefault(name, []).append(event)

    def get(self, name: str) -> Tuple[Event, ...]:
        """Events declared under `name`, empty when the name is unknown."""
        return tuple(self._events.get(name, ()))

    def __getitem__(self, name: str) -> Tuple[Event, ...]:
        return self.get(name)

    def __contains__(self, name: Any) -> bool:
        return isinstance(name, str) and name in self._events

    def __iter__(self) -> Iterator[Tuple[str, Tuple[Event, ...]]]:
        for name, events in self._events.items():
            yield name, tuple(events)

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def names(self) -> List[str]:
        """Distinct event names in first-declared order."""
        return list(self._events)

    def flat(self) -> List[Event]:
        """Every declared event, grouped by name, in declaration order."""
        return [event for events in self._events.values() for event in events]

    def first_applicable(self, name: str, context: Any) -> Optional[Event]:
        """
        Resolve `name` against the context: the first event, in declaration
        order, whose guard is absent or passes.

        :return: The selected event, or None if no event applies.
        """
        for event in self._events.get(name, ()):
            if event.is_applicable(context):
                return event
        return None

    def __repr__(self) -> str:
        return f"EventCollection({self.names()!r})"
