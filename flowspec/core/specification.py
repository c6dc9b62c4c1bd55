# flowspec/core/specification.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from flowspec.core.errors import UnknownStateError, WorkflowDefinitionError
from flowspec.core.events import Event
from flowspec.core.states import State
from flowspec.interfaces.protocols import EntryHandler, ExitHandler, handler_guard_method
from flowspec.interfaces.types import Action, Condition, Declaration, ErrorHook, Hook

logger = logging.getLogger(__name__)


def _handler_hook(handler: type, method: str) -> Hook:
    def hook(context: Any, transition: Any = None) -> None:
        getattr(handler(context), method)()

    return hook


def _handler_guard(handler: type, method: str) -> Condition:
    def guard(context: Any) -> bool:
        predicate = getattr(handler(context), method, None)
        return bool(predicate()) if callable(predicate) else False

    return guard


class Specification:
    """
    The finished workflow graph: states in declaration order, the initial
    state and the specification-wide transition hooks.

    The declaration callable receives a SpecificationBuilder and is evaluated
    once, eagerly, from the constructor. If it raises, no specification is
    returned. Consumers treat the result as read-only.
    """

    def __init__(self, declaration: Optional[Declaration] = None, meta: Optional[Dict[str, Any]] = None) -> None:
        """
        :param declaration: Callable declaring states and hooks on a builder.
        :param meta: Optional specification-level metadata.
        """
        self.states: Dict[str, State] = {}
        self.initial_state: Optional[State] = None
        self.meta: Dict[str, Any] = dict(meta or {})
        self.before_transition_proc: Optional[Hook] = None
        self.after_transition_proc: Optional[Hook] = None
        self.on_transition_proc: Optional[Hook] = None
        self.on_error_proc: Optional[ErrorHook] = None
        self._order: List[str] = []
        self._positions: Dict[str, int] = {}

        if declaration is not None:
            declaration(SpecificationBuilder(self))
        logger.debug("Built specification with states %s", self.state_names())

    def state_names(self) -> List[str]:
        """State names in declaration order."""
        return list(self._order)

    def position(self, name: str) -> int:
        """
        Declaration position of `name`, 0 for the earliest state.

        :raises UnknownStateError: If `name` is not a declared state.
        """
        try:
            return self._positions[name]
        except KeyError:
            raise UnknownStateError(f"state `{name}' does not exist") from None

    def _register(self, state: State) -> None:
        # The ordered name list is authoritative; `states` and the position
        # index follow it.
        name = state.name
        if name in self._positions:
            self._order.remove(name)
            del self.states[name]
            self._order.append(name)
            self._positions = {n: i for i, n in enumerate(self._order)}
        else:
            self._order.append(name)
            self._positions[name] = len(self._order) - 1
        self.states[name] = state

    def __contains__(self, name: object) -> bool:
        return str(name) in self.states

    def __repr__(self) -> str:
        return f"Specification({self.state_names()!r})"


class StateScope:
    """
    Declaration scope bound to one state. Events, hooks and the handler
    declared here attach to that state only.

    Usable as a context manager::

        with w.state("new") as new:
            new.event("approve", transitions_to="approved")
    """

    def __init__(self, state: State) -> None:
        self._state = state

    @property
    def state(self) -> State:
        return self._state

    def __enter__(self) -> "StateScope":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def handler(self, handler: type) -> None:
        """
        Attach a handler class. Entry/exit hooks are derived only for the
        methods the class actually provides.

        :param handler: Class constructed with the execution context.
        """
        state = self._state
        state.handler = handler
        if isinstance(handler, type) and issubclass(handler, EntryHandler):
            state.on_entry = _handler_hook(handler, "on_entry")
        if isinstance(handler, type) and issubclass(handler, ExitHandler):
            state.on_exit = _handler_hook(handler, "on_exit")

    def event(
        self,
        name: str,
        transitions_to: Optional[str] = None,
        *,
        transition_to: Optional[str] = None,
        if_: Optional[Condition] = None,
        condition: Optional[Condition] = None,
        meta: Optional[Dict[str, Any]] = None,
        action: Optional[Action] = None,
    ) -> Event:
        """
        Declare an event leaving this state. Repeating a name appends another
        alternative; alternatives are tried in declaration order.

        :param name: Event name.
        :param transitions_to: Target state name (`transition_to` is accepted too).
        :param if_: Explicit guard; `condition` is an alias.
        :param meta: Optional event metadata.
        :param action: Optional callable run when the event fires.
        :raises WorkflowDefinitionError: If the name is not a non-empty string
            or no target is given.
        """
        if not name or not isinstance(name, str):
            raise WorkflowDefinitionError("Event name must be a non-empty string")
        target = transitions_to or transition_to
        if not target:
            raise WorkflowDefinitionError(f"missing 'transitions_to' in workflow event definition for '{name}'")
        target = str(target)

        guard = if_ if if_ is not None else condition
        if guard is None:
            method = handler_guard_method(self._state.handler, target)
            if method is not None:
                guard = _handler_guard(self._state.handler, method)

        try:
            event = Event(name, target, guard, dict(meta or {}), action)
        except TypeError as e:
            raise WorkflowDefinitionError(f"invalid definition for event '{name}': {e}") from e
        self._state.events.push(name, event)
        logger.debug("Declared event %s: %s -> %s", name, self._state.name, target)
        return event

    def on_entry(self, proc: Hook) -> Hook:
        """Set the entry hook, replacing any handler-derived one."""
        self._state.on_entry = proc
        return proc

    def on_exit(self, proc: Hook) -> Hook:
        """Set the exit hook, replacing any handler-derived one."""
        self._state.on_exit = proc
        return proc


class SpecificationBuilder:
    """
    Declaration entry point handed to the declaration callable. Declares
    states and the specification-wide hooks of one Specification.
    """

    def __init__(self, spec: Specification) -> None:
        self._spec = spec

    @property
    def spec(self) -> Specification:
        return self._spec

    def state(
        self,
        name: str,
        meta: Optional[Dict[str, Any]] = None,
        declare: Optional[Declaration] = None,
    ) -> StateScope:
        """
        Declare a state and return its scope.

        Redeclaring a name replaces the earlier state, events included, and
        moves it to the new declaration point.

        :param name: State name.
        :param meta: Options; state metadata is read from `meta["meta"]`.
        :param declare: Optional callable receiving the new state's scope.
        """
        if not name or not isinstance(name, str):
            raise WorkflowDefinitionError("State name must be a non-empty string")

        spec = self._spec
        if meta is not None:
            spec.meta = meta
        new_state = State(name, spec, (meta or {}).get("meta"))

        if name in spec.states:
            logger.warning("State '%s' redeclared, previous definition discarded", name)
            if spec.initial_state is not None and spec.initial_state.name == name:
                spec.initial_state = new_state
        if spec.initial_state is None:
            spec.initial_state = new_state
        spec._register(new_state)
        logger.debug("Declared state %s", name)

        scope = StateScope(new_state)
        if declare is not None:
            declare(scope)
        return scope

    def before_transition(self, proc: Hook) -> Hook:
        self._spec.before_transition_proc = proc
        return proc

    def after_transition(self, proc: Hook) -> Hook:
        self._spec.after_transition_proc = proc
        return proc

    def on_transition(self, proc: Hook) -> Hook:
        self._spec.on_transition_proc = proc
        return proc

    def on_error(self, proc: ErrorHook) -> ErrorHook:
        self._spec.on_error_proc = proc
        return proc
