from .draw import DiagramOptions, to_dot, workflow_diagram

__all__ = ["DiagramOptions", "to_dot", "workflow_diagram"]
