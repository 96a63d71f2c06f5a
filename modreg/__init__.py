"""
The Registry is a small dependency injection container for named modules.

Modules are declared with an id, the ids of the modules they depend on and
a factory. Nothing is created at definition time: the first time a module
is required the registry creates its dependencies (recursively, in declared
order), passes their values to the factory and keeps the result, so every
later request returns the very same object.

from modreg import create
registry = create()

registry.define("settings", factory={"url": "http://localhost"})
registry.define("client", ["settings"], lambda settings: ApiClient(settings["url"]))

client = registry.require("client")

Factories can also be registered with a decorator:

@registry.module("service", ["client"])
def make_service(client):
    return Service(client)

To build a module against different dependencies, pass a mapping of fake
instances. Modules found in it are used as they are, and everything created
for the call is stored into that mapping instead of the registry:

service = registry.require("service", {"client": FakeClient()})

Circular dependencies and undefined ids are reported when a module is
required. registry.state() and registry.log() describe the dependency graph:

print(registry.log())
"""

__version__ = "1.0.0"

from .errors import CircularDependency, DuplicateId, InvalidArgument, RegistryError, UndefinedId
from .mock import mock
from .model import ModuleState
from .registry import Registry, create

__all__ = [
    "CircularDependency",
    "create",
    "DuplicateId",
    "InvalidArgument",
    "mock",
    "ModuleState",
    "Registry",
    "RegistryError",
    "UndefinedId",
]
