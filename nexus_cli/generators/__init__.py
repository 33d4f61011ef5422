"""NEXUS generators -- the canonical ``.nexus`` ecosystem for a configuration.

Quick usage::

    from nexus_cli.generators import generate_canonical_files

    for file in generate_canonical_files(config):
        print(file.path)
"""

from __future__ import annotations

from datetime import datetime, timezone

from nexus_cli.config import NexusConfig
from nexus_cli.generators.ai_config import generate_ai_config
from nexus_cli.generators.docs import generate_docs, generate_manifest
from nexus_cli.generators.templates import TemplateRenderer
from nexus_cli.reconciler.models import GeneratedFile


def generate_canonical_files(
    config: NexusConfig,
    *,
    now: datetime | None = None,
) -> list[GeneratedFile]:
    """Every file ``upgrade`` and ``repair`` reconcile, in a fixed order.

    Documentation first (numbered docs, project index, knowledge log,
    manifest), then AI-agent files.  Pass *now* to pin the embedded dates.
    """
    now = now or datetime.now(timezone.utc)
    renderer = TemplateRenderer()
    return [
        *generate_docs(config, now=now, renderer=renderer),
        *generate_ai_config(config, renderer=renderer),
    ]


__all__ = [
    "TemplateRenderer",
    "generate_ai_config",
    "generate_canonical_files",
    "generate_docs",
    "generate_manifest",
]
