from __future__ import annotations

import logging
from pathlib import Path

import pytest

from core.errors import ParseError
from core.orchestrator import Orchestrator
from core.runtime_config import (
    DEFAULT_CONFIG,
    configure_logging,
    load_effective_config,
    load_yaml,
    merge_dicts,
    resolve_names_path,
)


def test_merge_dicts_is_recursive_and_non_mutating() -> None:
    base = {"display": {"active_marker": "*", "highlight_color": "red"}, "logging": {"level": "INFO"}}
    merged = merge_dicts(base, {"display": {"highlight_color": "blue"}})

    assert merged["display"] == {"active_marker": "*", "highlight_color": "blue"}
    assert merged["logging"] == {"level": "INFO"}
    assert base["display"]["highlight_color"] == "red"


def test_load_yaml_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_yaml(tmp_path / "absent.yaml") == {}


def test_load_yaml_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ParseError):
        load_yaml(path)


def test_user_file_overrides_repo_defaults(tmp_path: Path) -> None:
    root = tmp_path / "repo"
    (root / "config").mkdir(parents=True)
    (root / "config" / "default.yaml").write_text("display:\n  highlight_color: '#00ff00'\n", encoding="utf-8")
    user = tmp_path / "user.yaml"
    user.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")

    config = load_effective_config(root, user)

    assert config["display"]["highlight_color"] == "#00ff00"
    assert config["display"]["active_marker"] == "*"
    assert config["logging"]["level"] == "DEBUG"
    assert DEFAULT_CONFIG["logging"]["level"] == "WARNING"


def test_resolve_names_path_expands_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GNAV_TEST_DIR", str(tmp_path))

    path = resolve_names_path({"paths": {"names_file": "$GNAV_TEST_DIR/names.yaml"}})

    assert path == tmp_path / "names.yaml"


def test_configure_logging_verbose_forces_debug() -> None:
    handler = logging.NullHandler()
    try:
        configure_logging({"logging": {"level": "ERROR"}}, verbose=True, handler=handler)
        assert logging.getLogger().level == logging.DEBUG

        configure_logging({"logging": {"level": "bogus"}}, handler=handler)
        assert logging.getLogger().level == logging.WARNING
    finally:
        logging.getLogger().removeHandler(handler)


def test_wire_is_lazy_and_splits_finder_string(tmp_path: Path) -> None:
    names_file = tmp_path / "names" / "workspaces.yaml"
    config = merge_dicts(
        DEFAULT_CONFIG,
        {
            "paths": {"names_file": str(names_file)},
            "commands": {"fuzzy_finder": "rofi -dmenu -i"},
            "display": {"new_workspace_label": "+"},
        },
    )

    bundle = Orchestrator.wire(config)

    assert not names_file.exists()
    assert bundle.store.path == names_file
    assert bundle.finder.command == ["rofi", "-dmenu", "-i"]
    assert bundle.operations.new_workspace_label == "+"
