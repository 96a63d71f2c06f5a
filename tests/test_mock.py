"""Test building modules against mocked dependencies"""

import unittest
from unittest.mock import MagicMock, Mock

import tests.test_registry_helpers as helpers
from modreg import InvalidArgument, UndefinedId, create
from modreg.mock import mock


class MockTestCase(unittest.TestCase):
    def setUp(self):
        self.registry = create()
        helpers.define_app(self.registry)

    def test_mock(self) -> None:
        """Test canonical usage of mock"""
        repository = mock(self.registry, "repository")

        self.assertIsInstance(repository, helpers.Repository)
        self.assertIsInstance(repository.database, MagicMock)
        self.assertIsInstance(repository.cache, MagicMock)
        repository.database.query.assert_not_called()
        repository.database.query("select 1")
        repository.database.query.assert_called_once_with("select 1")

    def test_mock_leaves_registry_untouched(self) -> None:
        database = self.registry.require("database")

        repository = mock(self.registry, "repository")

        self.assertIsNot(database, repository.database)
        self.assertEqual({"settings", "database"}, set(self.registry.instances))
        self.assertIsNot(repository, self.registry.require("repository"))
        self.assertIs(database, self.registry.require("repository").database)

    def test_mock_only_direct_dependencies(self) -> None:
        factory = helpers.CountingFactory()
        self.registry.define("settings_user", ["settings"], factory)

        mock(self.registry, "repository")
        mock(self.registry, "settings_user")

        self.assertEqual(1, factory.count)
        self.assertIsInstance(factory.calls[0][0], MagicMock)
        self.assertNotIn("settings", self.registry.instances)

    def test_mocking_function(self) -> None:
        repository = mock(self.registry, "repository", lambda module_id: Mock(name=module_id))

        self.assertIsInstance(repository.database, Mock)
        self.assertNotIsInstance(repository.database, MagicMock)

    def test_mocking_function_receives_ids(self) -> None:
        repository = mock(self.registry, "repository", lambda module_id: module_id.upper())

        self.assertEqual("DATABASE", repository.database)
        self.assertEqual("CACHE", repository.cache)

    def test_mock_duplicate_dependency(self) -> None:
        self.registry.define("pair", ["settings", "settings"], helpers.passthrough)

        first, second = mock(self.registry, "pair")

        self.assertIs(first, second)

    def test_mock_no_dependencies(self) -> None:
        settings = mock(self.registry, "settings")

        self.assertIsInstance(settings, helpers.Settings)
        self.assertNotIn("settings", self.registry.instances)

    def test_mock_invalid_id(self) -> None:
        for module_id in (42, None, ["repository"]):
            with self.assertRaises(InvalidArgument) as context:
                mock(self.registry, module_id)  # type: ignore[arg-type]
            self.assertEqual(module_id, context.exception.value)

    def test_mock_undefined(self) -> None:
        with self.assertRaises(UndefinedId):
            mock(self.registry, "missing")


if __name__ == "__main__":
    unittest.main()
