# flowspec/runtime/executor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from flowspec.core.errors import (
    NoTransitionAllowed,
    TransitionGuardedError,
    TransitionHalted,
    UnknownStateError,
    WorkflowError,
)
from flowspec.core.events import Event
from flowspec.core.specification import Specification
from flowspec.core.states import State

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """Record of a transition in progress, passed to every hook."""

    source: State
    target: State
    event: str
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)


class WorkflowExecutor:
    """
    Drives one execution context through a Specification.

    The current state is held in memory on the executor. Only one transition
    is processed at a time per executor; the specification itself is shared
    read-only between executors.
    """

    def __init__(self, specification: Specification, context: Any = None, current_state: Optional[str] = None) -> None:
        """
        :param specification: The workflow graph to follow.
        :param context: Object handed to guards, actions and hooks. Defaults
            to the executor itself.
        :param current_state: Optional name of the state to start from,
            defaults to the specification's initial state.
        :raises WorkflowError: If the specification declares no states.
        :raises UnknownStateError: If `current_state` is not declared.
        """
        if specification.initial_state is None:
            raise WorkflowError("Specification declares no states")
        self._spec = specification
        self._context = self if context is None else context
        self._lock = threading.Lock()
        self._halted_because: Optional[str] = None
        self._halted = False
        if current_state is None:
            self._current_state = specification.initial_state
        else:
            self._current_state = self._lookup(current_state)

    @property
    def specification(self) -> Specification:
        return self._spec

    @property
    def context(self) -> Any:
        return self._context

    @property
    def current_state(self) -> State:
        """The state the context is currently in."""
        return self._current_state

    @property
    def halted(self) -> bool:
        """Whether the last transition attempt was halted."""
        return self._halted

    @property
    def halted_because(self) -> Optional[str]:
        return self._halted_because

    def can_fire(self, name: str) -> bool:
        """Whether `name` would resolve to an event from the current state."""
        return self._current_state.events.first_applicable(name, self._context) is not None

    def available_events(self) -> List[str]:
        """Event names that currently resolve, in declaration order."""
        return [name for name in self._current_state.events.names() if self.can_fire(name)]

    def process_event(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Fire event `name` from the current state.

        :return: The action's return value, True when it returned None, or
            False when the transition was halted.
        :raises NoTransitionAllowed: If the current state declares no such event.
        :raises TransitionGuardedError: If every guard for the name failed.

        A step that fails or halts, even after the state switch, rolls the
        executor back to the source state.
        """
        with self._lock:
            self._halted = False
            self._halted_because = None
            source = self._current_state
            if name not in source.events:
                raise NoTransitionAllowed(f"There is no event {name} defined for the {source} state")

            try:
                event = source.events.first_applicable(name, self._context)
            except Exception as error:
                return self._handle_error(error, Transition(source, source, name, args, kwargs))
            if event is None:
                raise TransitionGuardedError(f"No transition for event {name} from the {source} state passed its guard")

            transition = Transition(source, self._lookup(event.target), name, args, kwargs)
            try:
                return self._run(event, transition)
            except TransitionHalted as halt:
                self._current_state = source
                self._halt(halt.reason)
                return False
            except Exception as error:
                # A failed step never leaves the context in the target state.
                self._current_state = source
                return self._handle_error(error, transition)

    def _run(self, event: Event, transition: Transition) -> Any:
        spec = self._spec
        context = self._context
        if spec.before_transition_proc is not None:
            spec.before_transition_proc(context, transition)

        result = None
        if event.action is not None:
            result = event.action(context, *transition.args, **transition.kwargs)

        if spec.on_transition_proc is not None:
            spec.on_transition_proc(context, transition)
        if transition.source.on_exit is not None:
            transition.source.on_exit(context, transition)

        self._current_state = transition.target
        logger.debug("Transitioned %s -> %s on %s", transition.source, transition.target, transition.event)

        if transition.target.on_entry is not None:
            transition.target.on_entry(context, transition)
        if spec.after_transition_proc is not None:
            spec.after_transition_proc(context, transition)
        return True if result is None else result

    def _handle_error(self, error: Exception, transition: Transition) -> bool:
        on_error = self._spec.on_error_proc
        if on_error is None:
            raise error
        logger.debug("Routing %r raised during %s to on_error", error, transition.event)
        on_error(self._context, error, transition)
        self._halt(str(error))
        return False

    def _halt(self, reason: Optional[str]) -> None:
        self._halted = True
        self._halted_because = reason
        logger.debug("Transition halted in %s: %s", self._current_state, reason)

    def _lookup(self, name: str) -> State:
        try:
            return self._spec.states[name]
        except KeyError:
            raise UnknownStateError(f"state `{name}' does not exist") from None
