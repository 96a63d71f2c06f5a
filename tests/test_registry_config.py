from typing import Any

import pytest

import tests.test_registry_helpers as helpers
from modreg import InvalidArgument, registry
from modreg.config import DEFAULT_REPORT, RegistryConfigWrapper
from modreg.report import format_state


def test_config_default() -> None:
    reg = registry.create()

    assert reg.name == "registry"
    assert "name" not in reg.config
    assert reg.config.report_options() == DEFAULT_REPORT


def test_config_name() -> None:
    reg = registry.create({"name": "app"})

    assert reg.name == "app"
    assert reg.config["name"] == "app"
    assert repr(reg) == "<Registry 'app' definitions=0 instances=0>"


def test_config_missing_key() -> None:
    reg = registry.create({"other": None})

    assert "other" in reg.config
    assert reg.config.get("missing", "default") == "default"
    with pytest.raises(KeyError):
        _ = reg.config["other"]
    with pytest.raises(KeyError):
        _ = reg.config["missing"]


def test_config_report_partial() -> None:
    reg = registry.create({"report": {"separator": " | ", "init_marker": None}})

    assert reg.config.report_options() == {
        "init_marker": "* ",
        "pending_marker": "  ",
        "separator": " | ",
    }


def test_config_report() -> None:
    reg = registry.create(
        {"report": {"init_marker": "+ ", "pending_marker": "- ", "separator": " "}}
    )
    helpers.define_abc(reg)
    reg.require("a")

    assert reg.log() == "\n+ a -> [  ]\n- b -> [ a ]\n- c -> [ a b ]\n"
    assert reg.log() == format_state(reg.state(), config=reg.config)


@pytest.mark.parametrize(
    ("config",),
    (("name=app",), (["name", "app"],), (42,)),
    ids=("string", "list", "int"),
)
def test_config_invalid(config: Any) -> None:
    with pytest.raises(InvalidArgument):
        registry.create(config)


@pytest.mark.parametrize(
    ("report",),
    (("x",), ([" | "],), (3,)),
    ids=("string", "list", "int"),
)
def test_config_invalid_report(report: Any) -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        registry.create({"report": report})
    assert excinfo.value.value == report


def test_config_empty_report() -> None:
    reg = registry.create({"report": {}})

    assert reg.config.report_options() == DEFAULT_REPORT
    assert reg.log() == "\n"


def test_config_wrapper_empty() -> None:
    wrapper = RegistryConfigWrapper()

    assert wrapper.name == "registry"
    assert wrapper.get("report") is None
    assert wrapper.report_options() == DEFAULT_REPORT


if __name__ == "__main__":
    pytest.main()
