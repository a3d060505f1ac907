"""Fuzzy finder backed by wofi's dmenu mode."""

from __future__ import annotations

import logging

from core.errors import ExternalToolError, FormatError
from executor.command_executor import CommandRunner, run_command
from os_controller.base_controller import FuzzyFinder

logger = logging.getLogger("gnav.wofi")

DEFAULT_WOFI_COMMAND = ["wofi", "--show", "dmenu", "-i", "--allow-images", "--allow-markup"]


class WofiLauncher(FuzzyFinder):
    """Pipes newline-delimited entries to wofi and reads back one line."""

    def __init__(self, command: list[str] | None = None, runner: CommandRunner = run_command) -> None:
        self.command = list(command or DEFAULT_WOFI_COMMAND)
        self.runner = runner

    def choose(self, lines: list[str]) -> str:
        feed = "".join(f"{line}\n" for line in lines)
        code, out, err = self.runner(self.command, input_text=feed)
        if code != 0:
            # wofi exits 1 when the user dismisses the menu
            raise ExternalToolError(
                f"{self.command[0]} canceled or error: exit status {code}",
                command=self.command,
                stderr=err,
            )
        selection = out.strip()
        if not selection:
            raise FormatError(f"no selection from {self.command[0]}")
        logger.debug("wofi selection: %s", selection)
        return selection
