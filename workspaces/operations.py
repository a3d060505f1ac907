"""Workspace operations combining the name store with live desktop state."""

from __future__ import annotations

import logging

from core.errors import ExternalToolError, GnavError, InvalidArgumentError, InvalidIndexError, NotFoundError
from os_controller.base_controller import SettingsBridge, WorkspaceProbe
from store.name_store import NameStore
from world_model.desktop_state import NEW_WORKSPACE_LABEL, DesktopState, DisplayRow, merge_rows

logger = logging.getLogger("gnav.operations")


class WorkspaceOperations:
    """Validated workspace actions.

    All argument checks run before any file write or external call, so a
    rejected request leaves both the names file and the desktop untouched.
    """

    def __init__(
        self,
        store: NameStore,
        probe: WorkspaceProbe,
        bridge: SettingsBridge,
        new_workspace_label: str = NEW_WORKSPACE_LABEL,
    ) -> None:
        self.store = store
        self.probe = probe
        self.bridge = bridge
        self.new_workspace_label = new_workspace_label

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    def snapshot(self) -> DesktopState:
        """Reload stored names and query the live desktop."""
        self.store.load()
        count = self.probe.system_workspace_count()
        try:
            active: int | None = self.probe.active_workspace_index()
        except NotFoundError:
            active = None
        try:
            dynamic = self.bridge.get_dynamic()
        except ExternalToolError as exc:
            logger.warning("Could not read dynamic workspaces flag: %s", exc)
            dynamic = False
        return DesktopState(workspace_count=count, active_index=active, dynamic=dynamic)

    def rows(self) -> list[DisplayRow]:
        state = self.snapshot()
        return merge_rows(state, self.store.names, new_workspace_label=self.new_workspace_label)

    def stored_label(self, index: int) -> str:
        """Label stored for a 1-based index, or its synthesized default."""
        return self.store.label(index)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def rename(self, index: int, new_name: str) -> None:
        if index < 1:
            raise InvalidIndexError(f"invalid index: {index}")
        self.store.load()
        self.store.pad(index)
        self.store.names[index - 1] = new_name
        self.store.save()
        logger.info("Renamed workspace %d to %r", index, new_name)

    def create(self, count: int) -> None:
        """Make sure at least ``count`` workspaces exist and are named."""
        if count < 1:
            raise InvalidArgumentError("workspaces must be >= 1")
        self.store.load()
        system_count = self.probe.system_workspace_count()
        if count > system_count:
            try:
                self.bridge.expand_static(count)
            except ExternalToolError as exc:
                # Names stay authoritative even if the desktop refuses to grow.
                logger.warning("Could not expand static workspaces to %d: %s", count, exc)
        self.store.pad(count)
        self.store.save()

    def switch(self, index: int) -> None:
        if index < 1:
            raise InvalidIndexError("invalid workspace index")
        self.probe.switch_to(index - 1)

    def set_dynamic(self, enabled: bool) -> None:
        self.bridge.set_dynamic(enabled)
        logger.info("Dynamic workspaces %s", "enabled" if enabled else "disabled")

    def toggle_dynamic(self) -> bool:
        """Flip the dynamic workspaces flag and return its new value."""
        try:
            current = self.bridge.get_dynamic()
        except GnavError as exc:
            raise ExternalToolError(f"Error reading dynamic workspaces: {exc}") from exc
        try:
            self.bridge.set_dynamic(not current)
        except GnavError as exc:
            raise ExternalToolError(f"Error setting dynamic: {exc}") from exc
        return not current

    def swap(self, first: int, second: int) -> None:
        """Exchange the labels at two 0-based positions."""
        if first < 0 or second < 0:
            raise InvalidIndexError(f"invalid positions: {first}, {second}")
        self.store.pad(max(first, second) + 1)
        names = self.store.names
        names[first], names[second] = names[second], names[first]
        self.store.save()

    def remove(self, position: int) -> bool:
        """Drop the stored label at a 0-based position, shifting later ones up."""
        if position < 0 or position >= len(self.store.names):
            return False
        del self.store.names[position]
        self.store.save()
        return True
