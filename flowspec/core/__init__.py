"""
Core package: the declarative specification model.

- events: edge descriptors and the per-state ordered multi-map of edges
- states: graph nodes with declaration-order comparison
- specification: the builder that evaluates a declaration into a graph
- errors: the exception hierarchy shared with the runtime
"""

from .errors import (
    NoTransitionAllowed,
    TransitionError,
    TransitionGuardedError,
    TransitionHalted,
    UnknownStateError,
    WorkflowDefinitionError,
    WorkflowError,
)
from .events import Event, EventCollection
from .states import State
from .specification import Specification, SpecificationBuilder, StateScope

__all__ = [
    "Event",
    "EventCollection",
    "State",
    "Specification",
    "SpecificationBuilder",
    "StateScope",
    "WorkflowError",
    "WorkflowDefinitionError",
    "UnknownStateError",
    "TransitionError",
    "NoTransitionAllowed",
    "TransitionGuardedError",
    "TransitionHalted",
]
