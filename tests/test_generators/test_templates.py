"""Tests for the Jinja2 TemplateRenderer (nexus_cli.generators.templates)."""

from __future__ import annotations

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from nexus_cli.generators.templates import TemplateRenderer, framework_label

pytestmark = pytest.mark.unit


class TestTemplateRenderer:
    def test_renders_bundled_pointer_template(self):
        out = TemplateRenderer().render("ai/pointer.md.j2", {
            "tool": "Cursor",
            "display_name": "Todo App",
            "instructions_path": ".nexus/ai/instructions.md",
            "project_index_path": ".nexus/docs/index.md",
            "version": "1.2.3",
        })
        assert out.startswith("# Todo App - Cursor Instructions\n")
        assert "NEXUS CLI v1.2.3" in out

    def test_filters(self, tmp_path):
        (tmp_path / "f.j2").write_text("{{ name | slugify }} on {{ fw | framework_label }}", encoding="utf-8")
        out = TemplateRenderer(tmp_path).render("f.j2", {"name": "Todo List App", "fw": "react-vite"})
        assert out == "todo-list-app on React + Vite"

    def test_undefined_variable_raises(self, tmp_path):
        (tmp_path / "u.j2").write_text("{{ missing }}", encoding="utf-8")
        with pytest.raises(UndefinedError):
            TemplateRenderer(tmp_path).render("u.j2", {})

    def test_missing_template_raises(self, tmp_path):
        with pytest.raises(TemplateNotFound):
            TemplateRenderer(tmp_path).render("nope.j2", {})

    def test_custom_template_dir(self, tmp_path):
        (tmp_path / "hello.md.j2").write_text("Hello {{ who }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.md.j2", {"who": "Nexus"}) == "Hello Nexus\n"


class TestFrameworkLabel:
    def test_known(self):
        assert framework_label("nextjs") == "Next.js 15 (App Router)"

    def test_unknown_passes_through(self):
        assert framework_label("qwik") == "qwik"
