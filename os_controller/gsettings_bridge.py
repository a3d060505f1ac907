"""Settings bridge backed by the gsettings CLI."""

from __future__ import annotations

import logging

from core.errors import ExternalToolError
from executor.command_executor import CommandRunner, check_output, run_command
from os_controller.base_controller import SettingsBridge

logger = logging.getLogger("gnav.gsettings")


class GSettingsBridge(SettingsBridge):
    """Reads and writes mutter workspace preferences."""

    def __init__(
        self,
        binary: str = "gsettings",
        dynamic_schema: str = "org.gnome.mutter",
        dynamic_key: str = "dynamic-workspaces",
        count_schema: str = "org.gnome.desktop.wm.preferences",
        count_key: str = "num-workspaces",
        runner: CommandRunner = run_command,
    ) -> None:
        self.binary = binary
        self.dynamic_schema = dynamic_schema
        self.dynamic_key = dynamic_key
        self.count_schema = count_schema
        self.count_key = count_key
        self.runner = runner

    def _get(self, schema: str, key: str) -> str:
        return check_output([self.binary, "get", schema, key], runner=self.runner).strip()

    def _set(self, schema: str, key: str, value: str) -> None:
        logger.debug("gsettings set %s %s %s", schema, key, value)
        check_output([self.binary, "set", schema, key, value], runner=self.runner)

    def get_dynamic(self) -> bool:
        value = self._get(self.dynamic_schema, self.dynamic_key)
        if value not in ("true", "false"):
            raise ExternalToolError(f"unexpected {self.dynamic_key} value: {value!r}")
        return value == "true"

    def set_dynamic(self, enabled: bool) -> None:
        self._set(self.dynamic_schema, self.dynamic_key, "true" if enabled else "false")

    def get_workspace_count(self) -> int:
        value = self._get(self.count_schema, self.count_key)
        # gsettings prints typed GVariants, e.g. "int32 4" on some versions
        token = value.split()[-1] if value else value
        try:
            return int(token)
        except ValueError as exc:
            raise ExternalToolError(f"unexpected {self.count_key} value: {value!r}") from exc

    def expand_static(self, count: int) -> None:
        self._set(self.count_schema, self.count_key, str(count))
        self._set(self.dynamic_schema, self.dynamic_key, "false")
