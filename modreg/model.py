import enum
from typing import Any, List, Tuple

from attr import frozen, field
from typing_extensions import TypedDict

from .types import Factory, ModuleId
from .utils import is_function


class ResolveMode(enum.Enum):
    """Selects what the resolution engine produces for an id."""

    # construct (or fetch the memoized) module value
    VALUE = "value"
    # list the transitive dependency ids, nothing is constructed
    IDS = "ids"


def _constant(value: Any) -> Factory:
    def factory() -> Any:
        return value

    return factory


def _to_factory(value: Any) -> Factory:
    return value if is_function(value) else _constant(value)


@frozen
class Definition:
    """A registered module: its id, ordered dependency ids and factory.

    Non-callable values passed as the factory are wrapped into a factory
    returning that value unchanged.
    """

    id: ModuleId
    deps: Tuple[ModuleId, ...] = field(converter=tuple)
    factory: Factory = field(converter=_to_factory)

    def create(self, *args: Any) -> Any:
        return self.factory(*args)


class ModuleState(TypedDict):
    """Introspection record for a single defined module."""

    # direct dependencies, as declared
    deps: List[ModuleId]
    # transitive dependencies, deduplicated, first occurrence first
    reqs: List[ModuleId]
    # whether an instance has been created
    init: bool
    # ids that (transitively) depend on this module
    reqd: List[ModuleId]
