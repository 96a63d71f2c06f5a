from typing import TYPE_CHECKING, Any, Dict, Optional
from unittest.mock import MagicMock

from .errors import InvalidArgument, UndefinedId
from .types import MockingFunction, ModuleId
from .utils import check, is_string

if TYPE_CHECKING:
    from .registry import Registry


DEFAULT_MOCKING_FUNCTION: MockingFunction = lambda module_id: MagicMock(name=module_id)


def mock(
    registry: "Registry",
    module_id: ModuleId,
    mocking_function: Optional[MockingFunction] = None,
) -> Any:
    """
    Create a fresh value for module_id with every direct dependency replaced
    by a mock.

    The mocks are passed to the module factory in place of the real
    dependency values. Neither the module nor its mocks are stored in the
    registry, so instances already created there are left untouched and
    later require calls are unaffected.
    """
    check(is_string(module_id), InvalidArgument, f"id must be string: {module_id!r}", module_id)
    mocking_f = mocking_function or DEFAULT_MOCKING_FUNCTION

    definition = registry.definitions.get(module_id)
    if definition is None:
        raise UndefinedId(module_id)

    fakes: Dict[ModuleId, Any] = {}
    for dep_id in definition.deps:
        if dep_id not in fakes:
            fakes[dep_id] = mocking_f(dep_id)

    return registry.require(module_id, fakes)
