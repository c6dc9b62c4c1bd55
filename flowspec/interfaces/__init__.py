from .protocols import EntryHandler, ExitHandler, guard_method_name

__all__ = ["EntryHandler", "ExitHandler", "guard_method_name"]
