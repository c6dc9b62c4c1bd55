# flowspec/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Union

from flowspec.core.events import EventCollection
from flowspec.interfaces.types import Hook

if TYPE_CHECKING:
    from flowspec.core.specification import Specification


class EventsList:
    """
    Presentation view over a state's events: one entry per distinct event
    name. Iterating is lazy and can be repeated.
    """

    def __init__(self, events: EventCollection) -> None:
        self._events = events

    def __iter__(self) -> Iterator[Dict[str, str]]:
        for name, events in self._events:
            yield {"display_name": events[0].display_name, "event": name}

    def __len__(self) -> int:
        return len(self._events)


class State:
    """
    A named node of the workflow graph.

    A state belongs to exactly one Specification, which owns it. Its ordering
    relative to other states is its position in the specification's
    declaration order; it is defined only against names the specification
    knows about.
    """

    def __init__(self, name: str, spec: "Specification", meta: Optional[Dict[str, Any]] = None) -> None:
        """
        :param name: Name identifying this state within its specification.
        :param spec: The owning specification.
        :param meta: Optional metadata, opaque to the core.
        """
        self._name = name
        self._spec = spec
        self._events = EventCollection()
        self.meta: Dict[str, Any] = dict(meta or {})
        self.on_entry: Optional[Hook] = None
        self.on_exit: Optional[Hook] = None
        self.handler: Optional[type] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def spec(self) -> "Specification":
        """The specification this state belongs to."""
        return self._spec

    @property
    def events(self) -> EventCollection:
        """Outgoing events grouped by name."""
        return self._events

    def events_list(self) -> EventsList:
        """One {display_name, event} entry per distinct event name."""
        return EventsList(self._events)

    def compare(self, other: Union["State", str]) -> int:
        """
        Compare declaration positions within the owning specification.

        :param other: A state or state name.
        :return: -1, 0 or 1.
        :raises UnknownStateError: If `other` is not a declared state name.
        """
        theirs = self._spec.position(str(other))
        mine = self._spec.position(self._name)
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: Union["State", str]) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Union["State", str]) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Union["State", str]) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Union["State", str]) -> bool:
        return self.compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        # Equal to a same-named state of the same spec, or to its bare name.
        if isinstance(other, State):
            return self._spec is other._spec and self._name == other._name
        if isinstance(other, str):
            return self._name == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"State({self._name!r})"
