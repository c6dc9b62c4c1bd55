"""flowspec: declarative specification engine for finite-state workflows

A declaration callable builds an in-memory graph of named states connected by
named, guarded events. The finished Specification is read by an execution
engine that drives a host object through its lifecycle.

Responsibilities:
    - Evaluating declarations into states, events and hooks
    - Ordered, multi-valued event storage per state
    - Handler-derived guards and entry/exit hooks
    - Declaration-order comparison between states
    - First-match transition resolution

Interactions:
    - Client code through the declaration API
    - Host objects as execution context for guards, actions and hooks
    - Graphviz for optional diagrams
    - Logging system for diagnostics

Cross-cutting Concerns:
    Thread Safety:
        - Specifications are built once and then shared read-only
        - One transition in flight per executor

    Error Handling:
        - Structured error hierarchy rooted at WorkflowError
        - Definition errors fail fast at construction

    Logging:
        - Module level loggers, no handlers installed
"""

from flowspec.core import (
    Event,
    EventCollection,
    NoTransitionAllowed,
    Specification,
    SpecificationBuilder,
    State,
    StateScope,
    TransitionError,
    TransitionGuardedError,
    TransitionHalted,
    UnknownStateError,
    WorkflowDefinitionError,
    WorkflowError,
)
from flowspec.runtime import Transition, WorkflowExecutor

__version__ = "0.1.0"

__all__ = [
    "Event",
    "EventCollection",
    "State",
    "Specification",
    "SpecificationBuilder",
    "StateScope",
    "Transition",
    "WorkflowExecutor",
    "WorkflowError",
    "WorkflowDefinitionError",
    "UnknownStateError",
    "TransitionError",
    "NoTransitionAllowed",
    "TransitionGuardedError",
    "TransitionHalted",
]
