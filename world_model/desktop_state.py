"""Live workspace snapshot and derived display rows."""

from __future__ import annotations

from dataclasses import dataclass

from store.name_store import default_name

NEW_WORKSPACE_LABEL = "New Workspace"


@dataclass(frozen=True)
class DesktopState:
    """Point-in-time view of the window manager; never cached."""

    workspace_count: int
    active_index: int | None = None
    dynamic: bool = False


@dataclass(frozen=True)
class DisplayRow:
    """One workspace as shown to the user (0-based index)."""

    index: int
    label: str
    active: bool = False

    @property
    def number(self) -> int:
        return self.index + 1


def merge_rows(
    state: DesktopState,
    names: list[str],
    new_workspace_label: str = NEW_WORKSPACE_LABEL,
) -> list[DisplayRow]:
    """Combine live state with stored labels.

    Missing labels fall back to ``Workspace N``. In dynamic mode the trailing
    workspace is the empty one the compositor keeps appending, so it is
    always shown with the placeholder label.
    """
    rows: list[DisplayRow] = []
    last = state.workspace_count - 1
    for index in range(state.workspace_count):
        label = names[index] if index < len(names) else default_name(index + 1)
        if state.dynamic and index == last:
            label = new_workspace_label
        rows.append(DisplayRow(index=index, label=label, active=index == state.active_index))
    return rows
