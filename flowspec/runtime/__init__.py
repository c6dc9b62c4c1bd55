"""
Runtime package: a reference execution engine that drives a context object
through a finished Specification.
"""

from .executor import Transition, WorkflowExecutor

__all__ = ["Transition", "WorkflowExecutor"]
