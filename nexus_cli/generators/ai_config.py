"""Generation of AI-agent instruction files.

The full operating instructions live in ``.nexus/ai/instructions.md``.  Each
supported coding tool gets a short pointer file in the location it reads on
startup, directing the agent to the instructions and the project index.  All
of these are machine-maintained and contain no dates, so regenerating them is
byte-stable for a given configuration and CLI version.
"""

from __future__ import annotations

from typing import Any

from nexus_cli import __version__
from nexus_cli.config import EcosystemLayout, NexusConfig
from nexus_cli.reconciler.models import GeneratedFile

from .templates import TemplateRenderer

# pointer path -> tool display name
TOOL_POINTER_FILES: dict[str, str] = {
    ".cursorrules": "Cursor",
    ".windsurfrules": "Windsurf",
    ".clinerules": "Cline",
    "AGENTS.md": "Codex / generic agents",
    ".github/copilot-instructions.md": "GitHub Copilot",
}

TONE_GUIDANCE: dict[str, str] = {
    "professional": "Clear, precise and courteous. No slang.",
    "friendly": "Warm and encouraging, like a helpful teammate.",
    "witty": "Light-hearted with the occasional quip; never at the expense of clarity.",
    "zen": "Calm and unhurried. Short sentences.",
    "pirate": "Speak like a ship's navigator, but keep code and commands exact.",
}

VERBOSITY_GUIDANCE: dict[str, str] = {
    "concise": "Answer in as few words as possible; show code, skip narration.",
    "balanced": "Explain decisions briefly, then show the work.",
    "detailed": "Walk through reasoning step by step and note trade-offs.",
}


def _ai_context(config: NexusConfig) -> dict[str, Any]:
    persona = config.persona
    return {
        "config": config,
        "display_name": config.display_name,
        "framework": config.frontend_framework,
        "test_framework": config.test_framework,
        "package_manager": config.package_manager,
        "persona": persona,
        "tone_guidance": TONE_GUIDANCE.get(persona.tone, ""),
        "verbosity_guidance": VERBOSITY_GUIDANCE.get(persona.verbosity, ""),
        "instructions_path": EcosystemLayout.AI_INSTRUCTIONS,
        "project_index_path": EcosystemLayout.PROJECT_INDEX,
        "knowledge_path": EcosystemLayout.KNOWLEDGE_LOG,
        "docs_dir": EcosystemLayout.DOCS_DIR,
        "version": __version__,
    }


def generate_ai_config(
    config: NexusConfig,
    *,
    renderer: TemplateRenderer | None = None,
) -> list[GeneratedFile]:
    """Render the agent instructions, ecosystem index and tool pointer files.

    Returns:
        ``.nexus/ai/instructions.md``, ``.nexus/index.md``, then one pointer
        file per entry of ``TOOL_POINTER_FILES`` in declaration order.
    """
    renderer = renderer or TemplateRenderer()
    context = _ai_context(config)

    files = [
        GeneratedFile(
            path=EcosystemLayout.AI_INSTRUCTIONS,
            content=renderer.render("ai/instructions.md.j2", context),
        ),
        GeneratedFile(
            path=EcosystemLayout.ECOSYSTEM_INDEX,
            content=renderer.render("ai/ecosystem_index.md.j2", context),
        ),
    ]
    for path, tool in TOOL_POINTER_FILES.items():
        files.append(
            GeneratedFile(
                path=path,
                content=renderer.render("ai/pointer.md.j2", {**context, "tool": tool}),
            )
        )
    return files
