"""Tests for AI-agent file generation (nexus_cli.generators.ai_config)."""

from __future__ import annotations

import pytest

from conftest import FIXED_NOW
from nexus_cli.config import NexusPersona
from nexus_cli.generators import generate_canonical_files
from nexus_cli.generators.ai_config import TOOL_POINTER_FILES, generate_ai_config
from nexus_cli.reconciler.classifier import is_corrupted
from nexus_cli.reconciler.policy import DEFAULT_POLICY

pytestmark = pytest.mark.unit


class TestGenerateAiConfig:
    def test_paths(self, base_config):
        paths = [f.path for f in generate_ai_config(base_config)]
        assert paths == [".nexus/ai/instructions.md", ".nexus/index.md", *TOOL_POINTER_FILES]

    def test_all_always_replace(self, base_config):
        for f in generate_ai_config(base_config):
            assert f.path in DEFAULT_POLICY.always_replace
            assert not is_corrupted(f.path, f.content)

    def test_persona_rendered(self, base_config):
        config = base_config.model_copy(update={
            "persona": NexusPersona(tone="pirate", verbosity="concise", identity="Cap", custom_directive="Say arr."),
        })
        instructions = generate_ai_config(config)[0].content
        assert "Refer to yourself as **Cap**" in instructions
        assert "pirate" in instructions
        assert "Say arr." in instructions

    def test_no_identity_line_when_empty(self, base_config):
        config = base_config.model_copy(update={"persona": NexusPersona(identity="")})
        assert "Refer to yourself" not in generate_ai_config(config)[0].content

    def test_pointer_names_tool(self, base_config):
        files = {f.path: f.content for f in generate_ai_config(base_config)}
        assert "Cursor" in files[".cursorrules"]
        assert "GitHub Copilot" in files[".github/copilot-instructions.md"]
        assert ".nexus/ai/instructions.md" in files["AGENTS.md"]

    def test_byte_stable(self, base_config):
        assert generate_ai_config(base_config) == generate_ai_config(base_config)


class TestGenerateCanonicalFiles:
    def test_docs_then_ai_files(self, base_config):
        files = generate_canonical_files(base_config, now=FIXED_NOW)
        paths = [f.path for f in files]
        assert len(paths) == len(set(paths)) == 18
        assert paths[0] == ".nexus/docs/01_vision.md"
        assert paths.index(".nexus/manifest.json") < paths.index(".nexus/ai/instructions.md")

    def test_every_always_replace_path_is_canonical(self, base_config):
        paths = {f.path for f in generate_canonical_files(base_config, now=FIXED_NOW)}
        assert DEFAULT_POLICY.always_replace <= paths
        assert DEFAULT_POLICY.always_preserve <= paths
