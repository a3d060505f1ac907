"""Shared fakes standing in for wmctrl, gsettings and wofi."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import ExternalToolError, NotFoundError
from os_controller.base_controller import FuzzyFinder, SettingsBridge, WorkspaceProbe
from store.name_store import NameStore
from workspaces.operations import WorkspaceOperations


class FakeProbe(WorkspaceProbe):
    def __init__(self, count: int = 3, active: int | None = 0) -> None:
        self.count = count
        self.active = active
        self.calls = 0
        self.switched: list[int] = []
        self.fail_switch = False

    def system_workspace_count(self) -> int:
        self.calls += 1
        return self.count

    def active_workspace_index(self) -> int:
        self.calls += 1
        if self.active is None:
            raise NotFoundError("no active workspace found")
        return self.active

    def switch_to(self, index: int) -> None:
        self.calls += 1
        if self.fail_switch:
            raise ExternalToolError("wmctrl -s failed: cannot switch")
        self.switched.append(index)
        self.active = index


class FakeBridge(SettingsBridge):
    def __init__(self, dynamic: bool = False, count: int = 3) -> None:
        self.dynamic = dynamic
        self.count = count
        self.writes: list[tuple[str, object]] = []
        self.fail_reads = False
        self.fail_writes = False

    def get_dynamic(self) -> bool:
        if self.fail_reads:
            raise ExternalToolError("gsettings get failed")
        return self.dynamic

    def set_dynamic(self, enabled: bool) -> None:
        if self.fail_writes:
            raise ExternalToolError("gsettings set failed")
        self.writes.append(("dynamic", enabled))
        self.dynamic = enabled

    def get_workspace_count(self) -> int:
        return self.count

    def expand_static(self, count: int) -> None:
        if self.fail_writes:
            raise ExternalToolError("gsettings set failed")
        self.writes.append(("count", count))
        self.writes.append(("dynamic", False))
        self.count = count
        self.dynamic = False


class FakeFinder(FuzzyFinder):
    def __init__(self, answer: str = "") -> None:
        self.answer = answer
        self.offered: list[str] = []

    def choose(self, lines: list[str]) -> str:
        self.offered = list(lines)
        return self.answer


class FakeRunner:
    """Command runner returning canned (code, stdout, stderr) per command."""

    def __init__(self, responses: dict[tuple[str, ...], tuple[int, str, str]] | None = None) -> None:
        self.responses = dict(responses or {})
        self.commands: list[list[str]] = []
        self.inputs: list[str | None] = []

    def __call__(self, command: list[str], input_text: str | None = None) -> tuple[int, str, str]:
        self.commands.append(list(command))
        self.inputs.append(input_text)
        return self.responses.get(tuple(command), (0, "", ""))


@pytest.fixture
def names_path(tmp_path: Path) -> Path:
    return tmp_path / "gnav" / "workspaces.yaml"


@pytest.fixture
def store(names_path: Path) -> NameStore:
    name_store = NameStore(names_path)
    name_store.load()
    return name_store


@pytest.fixture
def probe() -> FakeProbe:
    return FakeProbe()


@pytest.fixture
def bridge() -> FakeBridge:
    return FakeBridge()


@pytest.fixture
def operations(store: NameStore, probe: FakeProbe, bridge: FakeBridge) -> WorkspaceOperations:
    return WorkspaceOperations(store=store, probe=probe, bridge=bridge)


@pytest.fixture
def fake_runner() -> type[FakeRunner]:
    return FakeRunner


@pytest.fixture
def finder() -> FakeFinder:
    return FakeFinder()
