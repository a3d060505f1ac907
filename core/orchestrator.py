"""Top-level application wiring."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.runtime_config import load_effective_config, resolve_names_path
from os_controller.gsettings_bridge import GSettingsBridge
from os_controller.wofi_launcher import WofiLauncher
from os_controller.wmctrl_probe import WmctrlProbe
from store.name_store import NameStore
from workspaces.operations import WorkspaceOperations


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    store: NameStore
    probe: WmctrlProbe
    bridge: GSettingsBridge
    finder: WofiLauncher
    operations: WorkspaceOperations


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None, config_path: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.config_path = config_path

    def load_config(self) -> dict[str, Any]:
        return load_effective_config(self.root, self.config_path)

    def build(self) -> RuntimeBundle:
        return self.wire(self.load_config())

    @staticmethod
    def wire(config: dict[str, Any]) -> RuntimeBundle:
        commands = config.get("commands", {})
        gsettings = config.get("gsettings", {})
        display = config.get("display", {})

        store = NameStore(resolve_names_path(config))

        probe = WmctrlProbe(
            binary=str(commands.get("wmctrl", "wmctrl")),
            active_marker=str(display.get("active_marker", "*")),
        )
        bridge = GSettingsBridge(
            binary=str(commands.get("gsettings", "gsettings")),
            dynamic_schema=str(gsettings.get("dynamic_schema", "org.gnome.mutter")),
            dynamic_key=str(gsettings.get("dynamic_key", "dynamic-workspaces")),
            count_schema=str(gsettings.get("count_schema", "org.gnome.desktop.wm.preferences")),
            count_key=str(gsettings.get("count_key", "num-workspaces")),
        )
        finder_cmd = commands.get("fuzzy_finder") or []
        if isinstance(finder_cmd, str):
            finder_cmd = shlex.split(finder_cmd)
        finder = WofiLauncher(command=[str(part) for part in finder_cmd] or None)
        operations = WorkspaceOperations(
            store=store,
            probe=probe,
            bridge=bridge,
            new_workspace_label=str(display.get("new_workspace_label", "New Workspace")),
        )
        return RuntimeBundle(
            config=config,
            store=store,
            probe=probe,
            bridge=bridge,
            finder=finder,
            operations=operations,
        )
