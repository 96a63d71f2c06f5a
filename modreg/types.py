from typing import Any, Callable, Dict, MutableMapping, Sequence

from typing_extensions import Protocol, TypeAlias, runtime_checkable

ModuleId: TypeAlias = str
DependencyIds: TypeAlias = Sequence[ModuleId]
Factory: TypeAlias = Callable[..., Any]

# Caller-owned table used in place of the registry instances for one call.
FakeInstances: TypeAlias = MutableMapping[ModuleId, Any]
Instances: TypeAlias = Dict[ModuleId, Any]

# Creates the stand-in value for a dependency id.
MockingFunction: TypeAlias = Callable[[ModuleId], Any]


@runtime_checkable
class _MinimalMappingProtocol(Protocol):
    """
    Defines the minimum methods needed for the dict-like objects acceptable as registry config.
    """

    def get(self, key: str, default: Any = None) -> Any: ...

    def __contains__(self, key: object) -> bool: ...
