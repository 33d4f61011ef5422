"""Generation of the NEXUS documentation set.

Produces the eight numbered docs, the project index, the knowledge log and
the manifest.  Every numbered doc and the index open with a metadata block
whose ``status`` field starts as ``template``; humans or agents flip it to
``populated`` once the doc holds real project knowledge, which is what
``nexus upgrade`` uses to decide whether a doc may be regenerated.

The knowledge log is free-form and append-only, so it carries no metadata
block.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from nexus_cli import __version__
from nexus_cli.config import EcosystemLayout, NexusConfig, NexusManifest
from nexus_cli.reconciler.models import GeneratedFile, PopulationStatus

from .templates import TemplateRenderer

# (doc id, title, template) in generation order
DOC_TEMPLATES: tuple[tuple[str, str, str], ...] = (
    ("01_vision", "Product Vision & Requirements", "docs/01_vision.md.j2"),
    ("02_architecture", "System Architecture", "docs/02_architecture.md.j2"),
    ("03_data_contracts", "Data Contracts", "docs/03_data_contracts.md.j2"),
    ("04_api_contracts", "API Contracts", "docs/04_api_contracts.md.j2"),
    ("05_business_logic", "Business Logic", "docs/05_business_logic.md.j2"),
    ("06_test_strategy", "Test Strategy", "docs/06_test_strategy.md.j2"),
    ("07_implementation", "Implementation Plan", "docs/07_implementation.md.j2"),
    ("08_deployment", "Deployment", "docs/08_deployment.md.j2"),
)

PROJECT_INDEX_ID = "project_index"
PROJECT_INDEX_TITLE = "Project Index - AI Agent Brain"


def frontmatter(doc_id: str, title: str, today: str) -> str:
    """Metadata block for a freshly generated (template-status) doc."""
    return (
        "---\n"
        "nexus_doc: true\n"
        f'id: "{doc_id}"\n'
        f'title: "{title}"\n'
        f"status: {PopulationStatus.TEMPLATE.value}\n"
        "confidence: low\n"
        f'last_updated: "{today}"\n'
        "---\n"
        "\n"
    )


def build_context(config: NexusConfig, now: datetime) -> dict[str, Any]:
    """Template context shared by every doc."""
    return {
        "config": config,
        "display_name": config.display_name,
        "project_name": config.project_name,
        "framework": config.frontend_framework,
        "data_strategy": config.data_strategy,
        "test_framework": config.test_framework,
        "backend_framework": config.backend_framework,
        "app_patterns": list(config.app_patterns),
        "today": now.date().isoformat(),
        "version": __version__,
    }


def generate_docs(
    config: NexusConfig,
    *,
    now: datetime | None = None,
    renderer: TemplateRenderer | None = None,
) -> list[GeneratedFile]:
    """Render the documentation set, knowledge log and manifest for *config*.

    Args:
        config: Project configuration.
        now: Timestamp embedded in ``last_updated`` fields and the manifest.
            Defaults to the current UTC time.
        renderer: Template renderer to use (a default one is created).

    Returns:
        Files in generation order: numbered docs, project index, knowledge
        log, manifest.
    """
    now = now or datetime.now(timezone.utc)
    renderer = renderer or TemplateRenderer()
    context = build_context(config, now)
    today = context["today"]

    files: list[GeneratedFile] = []
    for doc_id, title, template in DOC_TEMPLATES:
        body = renderer.render(template, context)
        files.append(
            GeneratedFile(
                path=f"{EcosystemLayout.DOCS_DIR}/{doc_id}.md",
                content=frontmatter(doc_id, title, today) + body,
            )
        )

    files.append(
        GeneratedFile(
            path=EcosystemLayout.PROJECT_INDEX,
            content=frontmatter(PROJECT_INDEX_ID, PROJECT_INDEX_TITLE, today)
            + renderer.render("docs/index.md.j2", context),
        )
    )
    files.append(
        GeneratedFile(
            path=EcosystemLayout.KNOWLEDGE_LOG,
            content=renderer.render("docs/knowledge.md.j2", context),
        )
    )
    files.append(generate_manifest(config, now))
    return files


def generate_manifest(config: NexusConfig, now: datetime | None = None) -> GeneratedFile:
    """The ``.nexus/manifest.json`` file for *config*."""
    manifest = NexusManifest.for_config(config, now)
    return GeneratedFile(path=EcosystemLayout.MANIFEST, content=manifest.to_json())
