# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from flowspec.core.specification import Specification


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


class Article:
    """A host object going through the article workflow."""

    def __init__(self, title="Draft", awesome=False):
        self.title = title
        self.awesome = awesome
        self.log = []

    def is_awesome(self):
        return self.awesome


class ReviewHandler:
    """Handler for the `being_reviewed` state."""

    def __init__(self, context):
        self.context = context

    def on_entry(self):
        self.context.log.append("review:entry")

    def on_exit(self):
        self.context.log.append("review:exit")

    def can_transition_to_accepted(self):
        return self.context.awesome


def declare_article(w):
    with w.state("new") as new:
        new.event("submit", transitions_to="awaiting_review")
    with w.state("awaiting_review") as awaiting:
        awaiting.event("review", transitions_to="being_reviewed")
    with w.state("being_reviewed") as reviewed:
        reviewed.handler(ReviewHandler)
        reviewed.event("accept", transitions_to="accepted")
        reviewed.event("reject", transitions_to="rejected")
    w.state("accepted")
    w.state("rejected")


@pytest.fixture
def article():
    return Article()


@pytest.fixture
def article_spec():
    """The article review workflow."""
    return Specification(declare_article)


@pytest.fixture
def linear_spec():
    """Three states a -> b -> c."""

    def declare(w):
        w.state("a").event("next", transitions_to="b")
        w.state("b").event("next", transitions_to="c")
        w.state("c")

    return Specification(declare)


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from flowspec.core.errors import (
        NoTransitionAllowed,
        TransitionError,
        TransitionGuardedError,
        UnknownStateError,
        WorkflowDefinitionError,
        WorkflowError,
    )

    return (
        WorkflowError,
        WorkflowDefinitionError,
        UnknownStateError,
        TransitionError,
        NoTransitionAllowed,
        TransitionGuardedError,
    )
