"""Errors raised by the registry.

Every error derives from RegistryError. Where a builtin exception already
describes the failure (a bad argument type, a missing key) the error also
derives from it so that callers catching TypeError or KeyError keep working.
"""

from typing import Any, Sequence, Tuple


class RegistryError(Exception):
    """Base class for all registry errors."""


class InvalidArgument(RegistryError, TypeError):
    """An argument has the wrong shape (non-string id, non-sequence deps)."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class _KeyedError(RegistryError, KeyError):
    # KeyError quotes its message in __str__, which reads badly for sentences.
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DuplicateId(_KeyedError):
    """A module id was defined twice."""

    def __init__(self, module_id: str) -> None:
        super().__init__(f"id already defined: {module_id}")
        self.module_id = module_id


class UndefinedId(_KeyedError):
    """A module id (or one of its transitive dependencies) was never defined."""

    def __init__(self, module_id: str) -> None:
        super().__init__(f"id not defined: {module_id}")
        self.module_id = module_id


class CircularDependency(RegistryError):
    """A dependency chain revisits an id that is still being resolved.

    Attributes:
        module_id: the dependency that closed the cycle.
        stack: the ids in resolution at the time, outermost first.
    """

    def __init__(self, module_id: str, stack: Sequence[str]) -> None:
        self.module_id = module_id
        self.stack: Tuple[str, ...] = tuple(stack)
        path = " -> ".join(self.stack + (module_id,))
        super().__init__(f"circular dependency: {module_id} in {path}")
