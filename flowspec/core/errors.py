# flowspec/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class WorkflowError(Exception):
    """
    Base exception class for errors raised by the workflow specification library.
    """


class WorkflowDefinitionError(WorkflowError):
    """
    Raised while a specification is being declared when a declaration is invalid,
    e.g. an event without a target state.
    """


class UnknownStateError(WorkflowError, ValueError):
    """
    Raised when a state name is not declared in the owning specification.
    """


class TransitionError(WorkflowError):
    """
    Raised when an event cannot move the workflow out of its current state.
    """


class NoTransitionAllowed(TransitionError):
    """
    Raised when the current state declares no event with the requested name.
    """


class TransitionGuardedError(TransitionError):
    """
    Raised when events with the requested name exist but every guard failed.
    """


class TransitionHalted(WorkflowError):
    """
    Raised from a hook or action to stop the transition in progress. The
    execution engine catches it and records the reason.
    """

    def __init__(self, reason: str = None) -> None:
        super().__init__(reason)
        self.reason = reason
