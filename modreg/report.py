"""Human readable dependency report."""

from typing import TYPE_CHECKING, Mapping, Optional

from .config import DEFAULT_REPORT, ReportConfig

if TYPE_CHECKING:
    from .config import RegistryConfigWrapper
    from .model import ModuleState


def format_state(
    state: "Mapping[str, ModuleState]",
    inverse: bool = False,
    config: "Optional[RegistryConfigWrapper]" = None,
) -> str:
    """Render a registry state as one line per module.

    Each line shows whether the module was created, its id and either its
    transitive dependencies or, with inverse, the modules that depend on it:

        * b -> [ a ]
          c -> [ a, b ]

    The output is meant for humans and not for parsing.
    """
    options: ReportConfig = config.report_options() if config is not None else DEFAULT_REPORT

    out = "\n"
    for module_id, module_state in state.items():
        ids = module_state["reqd"] if inverse else module_state["reqs"]
        marker = options["init_marker"] if module_state["init"] else options["pending_marker"]
        out += f"{marker}{module_id} -> [ {options['separator'].join(ids)} ]\n"

    return out
