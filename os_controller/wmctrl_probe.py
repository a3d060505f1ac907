"""Workspace probe backed by wmctrl."""

from __future__ import annotations

import logging

from core.errors import NotFoundError
from executor.command_executor import CommandRunner, check_output, run_command
from os_controller.base_controller import WorkspaceProbe

logger = logging.getLogger("gnav.wmctrl")


class WmctrlProbe(WorkspaceProbe):
    """Reads ``wmctrl -d`` and switches with ``wmctrl -s``.

    ``wmctrl -d`` prints one line per desktop; the second column is ``*``
    for the current desktop and ``-`` otherwise::

        0  * DG: 3840x1080  VP: 0,0  WA: 0,27 1920x1053  Workspace 1
        1  - DG: 3840x1080  VP: N/A  WA: 0,27 1920x1053  Workspace 2
    """

    def __init__(
        self,
        binary: str = "wmctrl",
        active_marker: str = "*",
        runner: CommandRunner = run_command,
    ) -> None:
        self.binary = binary
        self.active_marker = active_marker
        self.runner = runner

    def _desktop_lines(self) -> list[str]:
        out = check_output([self.binary, "-d"], runner=self.runner)
        return [line for line in out.strip().splitlines() if line.strip()]

    def _is_active(self, line: str) -> bool:
        columns = line.split()
        if len(columns) >= 2:
            return columns[1] == self.active_marker
        return self.active_marker in line

    def system_workspace_count(self) -> int:
        count = len(self._desktop_lines())
        logger.debug("wmctrl reports %d workspaces", count)
        return count

    def active_workspace_index(self) -> int:
        for index, line in enumerate(self._desktop_lines()):
            if self._is_active(line):
                return index
        raise NotFoundError("no active workspace found")

    def switch_to(self, index: int) -> None:
        logger.debug("Switching to workspace index %d", index)
        check_output([self.binary, "-s", str(index)], runner=self.runner)
