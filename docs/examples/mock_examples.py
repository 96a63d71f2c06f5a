from unittest.mock import MagicMock, Mock

from modreg import create, mock

registry = create()


class Adult:
    def __init__(self, name):
        self.name = name

    def print_name(self):
        print(self.name)


class Child:
    def __init__(self, parent):
        self.parent = parent

    def print_parent(self):
        self.parent.print_name()


registry.define("name", factory="Douglas")
registry.define("parent", ["name"], Adult)
registry.define("child", ["parent"], Child)

mocked = mock(registry, "child")
mocked.parent.print_name.assert_not_called()
mocked.print_parent()
mocked.parent.print_name.assert_called_once()

assert isinstance(mocked.parent, MagicMock)

mocked_2 = mock(registry, "child", lambda module_id: Mock(name=module_id))
assert isinstance(mocked_2.parent, Mock)

# Fake instances replace any module of the graph for a single call
fakes = {"name": "Arthur"}
child = registry.require("child", fakes)
assert child.parent.name == "Arthur"
assert fakes["child"] is child

# The registry itself was not used by any of the above
assert not registry.state()["child"]["init"]
assert registry.require("child").parent.name == "Douglas"

print("Mocking Tests Passed!")
