"""YAML-backed store for workspace labels."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from core.errors import ParseError, StoreIOError
from store.schemas import WorkspaceNamesDocument

logger = logging.getLogger("gnav.store")

DEFAULT_NAMES = ["Workspace 1", "Workspace 2"]


def default_name(position: int) -> str:
    """Synthesized label for a 1-based workspace position."""
    return f"Workspace {position}"


class NameStore:
    """Ordered workspace labels persisted as a single YAML document.

    Index 0 holds the label of workspace 1. Every save rewrites the whole
    file; concurrent editors are not detected and the last writer wins.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.names: list[str] = []

    def load(self) -> list[str]:
        """Read the names file, seeding defaults when it does not exist."""
        if not self.path.exists():
            logger.info("Names file %s missing, writing defaults", self.path)
            self.names = list(DEFAULT_NAMES)
            self.save()
            return self.names
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreIOError(f"Cannot read {self.path}: {exc}") from exc
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ParseError(f"Invalid YAML in {self.path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ParseError(f"Names file must contain a mapping: {self.path}")
        try:
            document = WorkspaceNamesDocument.model_validate(data)
        except ValidationError as exc:
            raise ParseError(f"Invalid names file {self.path}: {exc}") from exc
        self.names = list(document.workspace_names)
        return self.names

    def save(self) -> None:
        """Overwrite the names file with the in-memory list."""
        document = WorkspaceNamesDocument(workspace_names=list(self.names))
        payload = yaml.safe_dump(
            document.model_dump(),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise StoreIOError(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Saved %d names to %s", len(self.names), self.path)

    def pad(self, count: int) -> None:
        """Append default labels until at least ``count`` names exist."""
        while len(self.names) < count:
            self.names.append(default_name(len(self.names) + 1))

    def label(self, position: int) -> str:
        """Stored label for a 1-based position, or its default."""
        if 1 <= position <= len(self.names):
            return self.names[position - 1]
        return default_name(position)
