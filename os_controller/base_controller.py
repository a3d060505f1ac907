"""Capability interfaces for the external desktop collaborators."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WorkspaceProbe(ABC):
    """Live workspace queries and switching."""

    @abstractmethod
    def system_workspace_count(self) -> int:
        """Return the number of workspaces the window manager reports."""

    @abstractmethod
    def active_workspace_index(self) -> int:
        """Return the 0-based index of the active workspace."""

    @abstractmethod
    def switch_to(self, index: int) -> None:
        """Switch to the 0-based workspace index."""


class SettingsBridge(ABC):
    """Desktop settings touching workspace layout."""

    @abstractmethod
    def get_dynamic(self) -> bool:
        """Return whether dynamic workspaces are enabled."""

    @abstractmethod
    def set_dynamic(self, enabled: bool) -> None:
        """Enable or disable dynamic workspaces."""

    @abstractmethod
    def get_workspace_count(self) -> int:
        """Return the static workspace count preference."""

    @abstractmethod
    def expand_static(self, count: int) -> None:
        """Raise the static workspace count and leave dynamic mode."""


class FuzzyFinder(ABC):
    """Interactive line picker fed on stdin."""

    @abstractmethod
    def choose(self, lines: list[str]) -> str:
        """Return the line the user picked."""
