"""Shared pytest fixtures for the NEXUS CLI test suite.

Provides reusable fixtures for:
- A baseline ``NexusConfig``
- Temporary project directories (empty and with a saved manifest)
- A deterministic generation source pinned to a fixed date
- Small helpers for writing and reading project-relative files
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from nexus_cli.config import NexusConfig, NexusManifest, NexusPersona
from nexus_cli.generators import generate_canonical_files
from nexus_cli.reconciler.models import GeneratedFile

FIXED_NOW = datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def base_config() -> NexusConfig:
    """A typical web project configuration."""
    return NexusConfig(
        project_name="test-app",
        display_name="Test App",
        project_type="web",
        data_strategy="cloud-first",
        app_patterns=[],
        frontend_framework="nextjs",
        backend_strategy="integrated",
        backend_framework="none",
        test_framework="vitest",
        package_manager="npm",
        git=True,
        install_deps=False,
        persona=NexusPersona(),
    )


# ---------------------------------------------------------------------------
# Generation source
# ---------------------------------------------------------------------------


def fixed_source(config: NexusConfig) -> list[GeneratedFile]:
    """Generation source with dates pinned to ``FIXED_NOW``."""
    return generate_canonical_files(config, now=FIXED_NOW)


@pytest.fixture
def canonical(base_config: NexusConfig) -> dict[str, str]:
    """``{path: content}`` of the canonical files for ``base_config``."""
    return {f.path: f.content for f in fixed_source(base_config)}


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Empty project directory (auto-cleanup)."""
    project_dir = tmp_path / "test-app"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def manifest_project(tmp_project_dir: Path, base_config: NexusConfig) -> Path:
    """Project directory containing only a valid ``.nexus/manifest.json``."""
    NexusManifest.for_config(base_config, FIXED_NOW).save(tmp_project_dir)
    return tmp_project_dir


def write(root: Path, rel_path: str, content: str) -> Path:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def read(root: Path, rel_path: str) -> str:
    return (root / rel_path).read_text(encoding="utf-8")
