# tests/unit/test_draw.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging

from flowspec.core.specification import Specification
from flowspec.plugins.draw import DiagramOptions, to_dot, workflow_diagram


def declare_order(w):
    with w.state("new", {"meta": {"color": "blue"}}) as new:
        new.event("approve", transitions_to="approved", meta={"weight": 8})
        new.event("approve", transitions_to="rejected", if_=lambda ctx: False)
    w.state("approved")
    w.state("rejected")


def test_to_dot_lists_states_and_edges():
    dot = to_dot(Specification(declare_order))
    assert dot.startswith("digraph G {")
    assert '"rankdir"="LR"' in dot
    assert '"new" ["label"="new", "width"="1", "height"="1", "shape"="ellipse", "color"="blue", "fontname"="Helvetica"];' in dot
    assert '"approved" [' in dot
    assert '"new" -> "approved" ["label"="Approve", "weight"="8", "fontname"="Helvetica"];' in dot
    assert '"new" -> "rejected"' in dot


def test_portrait_orientation_and_font():
    dot = to_dot(Specification(declare_order), DiagramOptions(orientation="portrait", font="Courier"))
    assert '"rankdir"="TB"' in dot
    assert '"fontname"="Courier"' in dot
    assert "Helvetica" not in dot


def test_labels_are_escaped():
    spec = Specification(lambda w: w.state("say").event("go", transitions_to="b", meta={"display_name": 'a "b"'}))
    assert '"label"="a \\"b\\""' in to_dot(spec)


def test_rendering_does_not_mutate_spec():
    spec = Specification(declare_order)
    before = dict(spec.states["new"].meta)
    to_dot(spec)
    assert spec.states["new"].meta == before
    assert spec.state_names() == ["new", "approved", "rejected"]


def test_workflow_diagram_writes_file(tmp_path, caplog):
    spec = Specification(declare_order)
    with caplog.at_level(logging.INFO, logger="flowspec.plugins.draw"):
        filename = workflow_diagram(spec, name="orders_workflow", path=str(tmp_path))
    assert filename == str(tmp_path / "orders_workflow.dot")
    assert (tmp_path / "orders_workflow.dot").read_text(encoding="utf-8") == to_dot(spec)
    assert "orders_workflow.dot" in caplog.text


def test_attribute_names_are_quoted():
    spec = Specification(lambda w: w.state("a", {"meta": {"font-size": 12, "my key": "x"}}))
    dot = to_dot(spec)
    assert '"font-size"="12"' in dot
    assert '"my key"="x"' in dot
