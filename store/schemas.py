"""Names file document model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WorkspaceNamesDocument(BaseModel):
    """On-disk layout of the workspace names file."""

    model_config = ConfigDict(strict=True)

    workspace_names: list[str] = Field(default_factory=list)
