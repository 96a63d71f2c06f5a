"""The Registry holds module definitions and lazily creates their instances."""
import functools
import logging
from threading import RLock
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
    overload,
)

from typing_extensions import Concatenate, Literal, ParamSpec

from .config import RegistryConfigWrapper, RegistryInitConfig
from .errors import CircularDependency, DuplicateId, InvalidArgument, UndefinedId
from .model import Definition, ModuleState, ResolveMode
from .report import format_state
from .types import DependencyIds, FakeInstances, Instances, ModuleId
from .utils import check, contains, each, is_array, is_string, uniq

LOG = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])
R = TypeVar("R")
P = ParamSpec("P")

Stack = Tuple[ModuleId, ...]


def create(config: Optional[RegistryInitConfig] = None) -> "Registry":
    """Create a new, independent registry instance."""
    LOG.debug("creating a new registry instance")
    return Registry(config)


def _synchronized(
    func: Callable[Concatenate["Registry", P], R]
) -> Callable[Concatenate["Registry", P], R]:
    """Decorator to synchronize method access with a reentrant lock."""

    @functools.wraps(func)
    def wrapper(self: "Registry", *args: P.args, **kwargs: P.kwargs) -> R:
        with self._lock:
            return func(self, *args, **kwargs)

    return wrapper


class Registry:
    """Tracks module definitions and their memoized instances."""

    def __init__(self, config: Optional[RegistryInitConfig] = None):
        self._definitions: Dict[ModuleId, Definition] = {}
        self._instances: Instances = {}
        self._config = RegistryConfigWrapper()

        # stack of the value resolution whose factory is currently running
        self._building: Stack = ()

        self._lock = RLock()

        if config is not None:
            self._config._from_dict(config)

    @property
    def config(self) -> RegistryConfigWrapper:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def definitions(self) -> Mapping[ModuleId, Definition]:
        """Read-only view of the definition table."""
        return MappingProxyType(self._definitions)

    @property
    def instances(self) -> Mapping[ModuleId, Any]:
        """Read-only view of the memoized instances."""
        return MappingProxyType(self._instances)

    @_synchronized
    def define(
        self, module_id: ModuleId, deps: Optional[DependencyIds] = None, factory: Any = None
    ) -> None:
        """Define a new module.

        Parameters:
            module_id: unique id of the module.
            deps: ids of the modules whose values are passed to factory, in order.
            factory: callable creating the module value, or the value itself.
        Raises:
            InvalidArgument: module_id is not a string or deps is not a sequence.
            DuplicateId: module_id has already been defined.
        """
        check(is_string(module_id), InvalidArgument, f"id must be string: {module_id!r}", module_id)
        check(module_id not in self._definitions, DuplicateId, module_id)
        if deps is None:
            deps = []
        check(is_array(deps), InvalidArgument, f"deps must be array: {module_id}", deps)

        LOG.debug("%s: defining %s (deps=%s)", self.name, module_id, list(deps))
        self._definitions[module_id] = Definition(module_id, deps, factory)

    def module(self, module_id: ModuleId, deps: Optional[DependencyIds] = None) -> Callable[[F], F]:
        """Decorator to define a module with the decorated function as its factory."""

        def wrap(func: F) -> F:
            self.define(module_id, deps, func)
            return func

        return wrap

    @overload
    def _resolve(
        self,
        module_id: ModuleId,
        mode: Literal[ResolveMode.IDS],
        stack: Stack = (),
        instances: Optional[FakeInstances] = None,
    ) -> List[ModuleId]: ...

    @overload
    def _resolve(
        self,
        module_id: ModuleId,
        mode: Literal[ResolveMode.VALUE],
        stack: Stack = (),
        instances: Optional[FakeInstances] = None,
    ) -> Any: ...

    def _resolve(
        self,
        module_id: ModuleId,
        mode: ResolveMode,
        stack: Stack = (),
        instances: Optional[FakeInstances] = None,
    ) -> Union[Any, List[ModuleId]]:
        """Resolve module_id to its value or to its transitive dependency ids.

        Parameters:
            module_id: the module to resolve.
            mode: VALUE to construct the module, IDS to only list its dependencies.
            stack: ids currently being resolved, outermost first.
            instances: table used instead of the registry instances, if given.
        """
        check(is_string(module_id), InvalidArgument, f"id must be string: {module_id!r}", module_id)

        if instances is None:
            instances = self._instances

        if mode is ResolveMode.VALUE and module_id in instances:
            return instances[module_id]

        definition = self._definitions.get(module_id)
        if definition is None:
            raise UndefinedId(module_id)

        stack = stack + (module_id,)

        # dependency ids in IDS mode, dependency values in VALUE mode
        deps: List[Any] = []
        for _, dep_id in each(definition.deps):
            check(not contains(stack, dep_id), CircularDependency, dep_id, stack)

            if mode is ResolveMode.IDS:
                deps.extend(self._resolve(dep_id, ResolveMode.IDS, stack))
                deps.append(dep_id)
            else:
                deps.append(self._resolve(dep_id, ResolveMode.VALUE, stack, instances))

        if mode is ResolveMode.IDS:
            return uniq(deps)

        LOG.debug("%s: instantiating %s", self.name, module_id)
        outer, self._building = self._building, stack
        try:
            obj = definition.create(*deps)
        finally:
            self._building = outer

        instances[module_id] = obj
        return obj

    @_synchronized
    def require(self, module_id: ModuleId, fake_instances: Optional[FakeInstances] = None) -> Any:
        """Get the instance of a module, creating it and its dependencies if needed.

        Parameters:
            module_id: the module to get.
            fake_instances: optional mapping used instead of the registry instances
                for this call only. Ids present in it are used as they are, every
                other module created along the way is stored into it rather than
                in the registry.
        Returns:
            The module value.
        Raises:
            InvalidArgument: module_id is not a string or fake_instances is not a
                mutable mapping.
            UndefinedId: module_id or one of its dependencies was never defined.
            CircularDependency: module_id depends on itself.
        """
        if fake_instances is not None:
            check(
                isinstance(fake_instances, MutableMapping),
                InvalidArgument,
                f"fake instances must be a mutable mapping: {fake_instances!r}",
                fake_instances,
            )
            LOG.debug(
                "%s: requiring %s with fake instances for %s",
                self.name,
                module_id,
                list(fake_instances),
            )

        # a factory requiring a module that is still being built
        check(
            not contains(self._building, module_id),
            CircularDependency,
            module_id,
            self._building,
        )
        return self._resolve(module_id, ResolveMode.VALUE, self._building, fake_instances)

    @_synchronized
    def state(self) -> Dict[ModuleId, ModuleState]:
        """Describe every defined module and how the modules depend on each other.

        Returns:
            A mapping of module id (in definition order) to a ModuleState with the
            direct dependencies, transitive dependencies, whether the module has
            been created and the modules transitively depending on it.
        """
        result: Dict[ModuleId, ModuleState] = {}

        for module_id, definition in self._definitions.items():
            result[module_id] = {
                "deps": list(definition.deps),
                "reqs": self._resolve(module_id, ResolveMode.IDS),
                "init": module_id in self._instances,
                "reqd": [],
            }

        # inverse dependencies need every forward set computed first
        for module_id, module_state in result.items():
            module_state["reqd"] = [
                other_id
                for other_id, other_state in result.items()
                if contains(other_state["reqs"], module_id)
            ]

        return result

    def log(self, inverse: bool = False) -> str:
        """Render the module dependencies as text.

        Parameters:
            inverse: list the modules depending on each module instead of its dependencies.
        """
        return format_state(self.state(), inverse, self._config)

    def __getitem__(self, module_id: ModuleId) -> Any:
        return self.require(module_id)

    @_synchronized
    def __contains__(self, module_id: object) -> bool:
        """Check if a module is defined (it may not have been created yet)."""
        return is_string(module_id) and module_id in self._definitions

    @_synchronized
    def __iter__(self) -> Iterator[ModuleId]:
        return iter(list(self._definitions))

    @_synchronized
    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return (
            f"<Registry {self.name!r} definitions={len(self._definitions)} "
            f"instances={len(self._instances)}>"
        )
