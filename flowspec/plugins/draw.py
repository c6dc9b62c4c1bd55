# flowspec/plugins/draw.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Graphviz rendering of a finished specification.

Node and edge attributes can be tuned through state and event metadata, e.g.
give the typical path a higher edge weight so other states are arranged
around it::

    with w.state("new") as new:
        new.event("approve", transitions_to="approved", meta={"weight": 8})

The output is `dot` source only; there is no image `format` option. Convert
it with the Graphviz binary, e.g.
``dot -Tpng orders_workflow.dot -o orders_workflow.png``.

Meta keys become attribute names verbatim (quoted), so they should be valid
Graphviz attributes.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List

from flowspec.core.specification import Specification

logger = logging.getLogger(__name__)

NODE_DEFAULTS = {"width": "1", "height": "1", "shape": "ellipse"}


@dataclass
class DiagramOptions:
    name: str = "workflow"
    path: str = "."
    orientation: str = "landscape"
    ratio: str = "fill"
    font: str = "Helvetica"


def _quote(value: Any) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def _attributes(attrs: Dict[str, Any]) -> str:
    return ", ".join(f"{_quote(key)}={_quote(value)}" for key, value in attrs.items())


def to_dot(spec: Specification, options: DiagramOptions = None) -> str:
    """
    Render the specification as `dot` source. The specification is only read.

    :param spec: The specification to draw.
    :param options: Layout options, defaults when omitted.
    :return: The graph source.
    """
    options = options or DiagramOptions()
    rankdir = "LR" if options.orientation == "landscape" else "TB"
    lines: List[str] = [
        "digraph G {",
        f"  graph [{_attributes({'rankdir': rankdir, 'ratio': options.ratio})}];",
    ]

    for name, state in spec.states.items():
        node = {"label": name, **NODE_DEFAULTS, **state.meta, "fontname": options.font}
        lines.append(f"  {_quote(name)} [{_attributes(node)}];")

    for name, state in spec.states.items():
        for event in state.events.flat():
            edge = {"label": event.display_name, **event.meta, "fontname": options.font}
            lines.append(f"  {_quote(name)} -> {_quote(event.target)} [{_attributes(edge)}];")

    lines.append("}")
    return "\n".join(lines) + "\n"


def workflow_diagram(spec: Specification, **options: Any) -> str:
    """
    Write the `dot` source for `spec` to `<path>/<name>.dot`.

    :param options: Overrides for DiagramOptions fields.
    :return: Path of the written file.
    """
    opts = DiagramOptions(**options)
    filename = os.path.join(opts.path, f"{opts.name}.dot")
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(to_dot(spec, opts))
    logger.info("Wrote workflow diagram to %s, render it with: dot -Tpng '%s'", filename, filename)
    return filename
