from typing import Any, Mapping, Optional, TypeVar, Union

from typing_extensions import TypedDict

from .errors import InvalidArgument
from .types import _MinimalMappingProtocol

# Unbound, invariant type variable
T = TypeVar("T")

DEFAULT_NAME = "registry"


class ReportConfig(TypedDict, total=False):
    """Configuration entries that control the dependency report."""

    # Prefix for modules that already have an instance.
    init_marker: str
    # Prefix for modules that were defined but never required.
    pending_marker: str
    # Joins the dependency ids of a module on its report line.
    separator: str


DEFAULT_REPORT: ReportConfig = {
    "init_marker": "* ",
    "pending_marker": "  ",
    "separator": ", ",
}


class InternalRegistryConfig(TypedDict, total=False):
    # Name used when logging and in the registry repr.
    name: str
    report: ReportConfig


RegistryInitConfig = Union[Mapping[str, Any], InternalRegistryConfig]


class RegistryConfigWrapper:
    """Manages the configuration of the registry."""

    def __init__(self):
        self._impl = {}

    def _from_dict(self, config_dict: RegistryInitConfig):
        """Configure the registry from a dictionary-like mapping.

        Parameters:
            config_dict: the configuration data to apply.
        """
        if not isinstance(config_dict, _MinimalMappingProtocol):
            raise InvalidArgument(f"config must be a mapping: {config_dict!r}", config_dict)
        report = config_dict.get("report")
        if report is not None and not isinstance(report, _MinimalMappingProtocol):
            raise InvalidArgument(f"report config must be a mapping: {report!r}", report)
        self._impl = config_dict

    def __contains__(self, key: str):
        return key in self._impl

    def get(self, key: str, default: Optional[T] = None) -> T:
        return self._impl.get(key, default)

    def __getitem__(self, key: str) -> Any:
        item: Optional[Any] = self.get(key)
        if item is None:
            raise KeyError(key)
        return item

    @property
    def name(self) -> str:
        return self.get("name") or DEFAULT_NAME

    def report_options(self) -> ReportConfig:
        """Get the report options, with defaults filled in for missing entries."""
        result: ReportConfig = dict(DEFAULT_REPORT)  # type: ignore[assignment]

        report = self._impl.get("report")
        if report:
            for key in DEFAULT_REPORT:
                value = report.get(key)
                if value is not None:
                    result[key] = value  # type: ignore[literal-required]

        return result
