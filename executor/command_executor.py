"""Command execution wrapper."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

from core.errors import ExternalToolError

logger = logging.getLogger("gnav.executor")

CommandRunner = Callable[..., tuple[int, str, str]]


def run_command(
    command: list[str],
    cwd: Path | None = None,
    input_text: str | None = None,
) -> tuple[int, str, str]:
    """Run command and return (exit_code, stdout, stderr)."""
    logger.debug("exec %s", " ".join(command))
    try:
        proc = subprocess.run(command, cwd=cwd, input=input_text, capture_output=True, text=True)
    except FileNotFoundError as exc:
        raise ExternalToolError(f"{command[0]}: command not found", command=command) from exc
    except OSError as exc:
        raise ExternalToolError(f"{command[0]}: {exc}", command=command) from exc
    return proc.returncode, proc.stdout, proc.stderr


def check_output(
    command: list[str],
    runner: CommandRunner = run_command,
    input_text: str | None = None,
) -> str:
    """Run command and return stdout, raising on a non-zero exit."""
    code, out, err = runner(command, input_text=input_text)
    if code != 0:
        detail = err.strip() or f"exit status {code}"
        raise ExternalToolError(f"{' '.join(command)} failed: {detail}", command=command, stderr=err)
    return out
