"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from podkit import AggregateTarget, Sandbox, TargetDefinition


@pytest.fixture
def sandbox() -> Sandbox:
    return Sandbox("/sandbox")


@pytest.fixture
def definition() -> TargetDefinition:
    return TargetDefinition("App", platform="ios")


@pytest.fixture
def target(definition: TargetDefinition, sandbox: Sandbox) -> AggregateTarget:
    """Aggregate target labelled Pods-App with no client root yet."""
    return AggregateTarget(definition, sandbox)


@pytest.fixture
def write_config(tmp_path: Path):
    """Helper to write a CONFIG.podkit file into a temporary workspace.

    Usage:
        root = write_config('CTX.add_config("debug", sandbox_root="Pods")')
    """

    def _write(content: str) -> Path:
        (tmp_path / "CONFIG.podkit").write_text(content, encoding="utf-8")
        return tmp_path

    return _write
