"""NEXUS project configuration and manifest models.

The ``NexusConfig`` produced by the interactive wizard is persisted inside
every generated project as ``.nexus/manifest.json``.  The ``upgrade`` and
``repair`` commands read it back to regenerate the canonical ecosystem, so the
on-disk JSON keeps the camelCase field names written by earlier CLI releases
while Python code works with snake_case attributes.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from nexus_cli import __version__

CLI_NAME = "@nexus-framework/cli"
MANIFEST_VERSION = "1.0.0"


# ---------------------------------------------------------------------------
# Ecosystem layout
# ---------------------------------------------------------------------------


class EcosystemLayout:
    """Fixed paths (relative to the project root) of the ``.nexus`` ecosystem."""

    NEXUS_DIR = ".nexus"
    DOCS_DIR = ".nexus/docs"
    AI_DIR = ".nexus/ai"
    CI_DIR = ".github"

    MANIFEST = ".nexus/manifest.json"
    ECOSYSTEM_INDEX = ".nexus/index.md"
    PROJECT_INDEX = ".nexus/docs/index.md"
    KNOWLEDGE_LOG = ".nexus/docs/knowledge.md"
    AI_INSTRUCTIONS = ".nexus/ai/instructions.md"


ECOSYSTEM_DIRECTORIES: tuple[str, ...] = (
    EcosystemLayout.NEXUS_DIR,
    EcosystemLayout.DOCS_DIR,
    EcosystemLayout.AI_DIR,
    EcosystemLayout.CI_DIR,
)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ProjectType(str, Enum):
    WEB = "web"
    API = "api"
    MONOREPO = "monorepo"
    MOBILE = "mobile"
    DESKTOP = "desktop"
    UI_LIBRARY = "ui-library"


class DataStrategy(str, Enum):
    LOCAL_ONLY = "local-only"
    LOCAL_FIRST = "local-first"
    CLOUD_FIRST = "cloud-first"
    HYBRID = "hybrid"


class AppPattern(str, Enum):
    PWA = "pwa"
    OFFLINE_FIRST = "offline-first"
    THEMING = "theming"
    WHITE_LABEL = "white-label"
    I18N = "i18n"
    REAL_TIME = "real-time"


class FrontendFramework(str, Enum):
    NEXTJS = "nextjs"
    REACT_VITE = "react-vite"
    SVELTEKIT = "sveltekit"
    NUXT = "nuxt"
    REMIX = "remix"
    ASTRO = "astro"


class BackendFramework(str, Enum):
    EXPRESS = "express"
    FASTIFY = "fastify"
    NESTJS = "nestjs"
    SPRING_BOOT = "spring-boot"
    NONE = "none"


class BackendStrategy(str, Enum):
    INTEGRATED = "integrated"
    SEPARATE = "separate"
    SERVERLESS = "serverless"
    BAAS = "baas"


class TestFramework(str, Enum):
    VITEST = "vitest"
    JEST = "jest"
    NONE = "none"


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class AgentTone(str, Enum):
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    WITTY = "witty"
    ZEN = "zen"
    PIRATE = "pirate"


class AgentVerbosity(str, Enum):
    CONCISE = "concise"
    BALANCED = "balanced"
    DETAILED = "detailed"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class _CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


class NexusPersona(_CamelModel):
    """How AI agents talk to the user once synced with the NEXUS docs."""

    tone: AgentTone = Field(default=AgentTone.FRIENDLY)
    verbosity: AgentVerbosity = Field(default=AgentVerbosity.BALANCED)
    identity: str = Field(default="Nexus", description="Name the agent uses; empty means none")
    custom_directive: str = Field(default="", description="Free-form personality instruction")


class NexusConfig(_CamelModel):
    """Full project configuration resolved from the setup wizard."""

    project_name: str = Field(..., min_length=1, description="Slug used for folder and package names")
    display_name: str = Field(..., min_length=1, description="Human-readable project name")
    project_type: ProjectType = Field(default=ProjectType.WEB)
    data_strategy: DataStrategy = Field(default=DataStrategy.CLOUD_FIRST)
    app_patterns: list[AppPattern] = Field(default_factory=list)
    frontend_framework: FrontendFramework = Field(default=FrontendFramework.NEXTJS)
    backend_strategy: BackendStrategy = Field(default=BackendStrategy.INTEGRATED)
    backend_framework: BackendFramework = Field(default=BackendFramework.NONE)
    test_framework: TestFramework = Field(default=TestFramework.VITEST)
    package_manager: PackageManager = Field(default=PackageManager.NPM)
    git: bool = Field(default=True)
    install_deps: bool = Field(default=False)
    persona: NexusPersona = Field(default_factory=NexusPersona)
    local_only: bool = Field(default=False, description="Whether .nexus/ is gitignored")


class CliInfo(_CamelModel):
    version: str = Field(default=__version__)
    name: str = Field(default=CLI_NAME)


class ManifestError(Exception):
    """Raised when ``.nexus/manifest.json`` is missing or cannot be trusted."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class NexusManifest(_CamelModel):
    """The ``.nexus/manifest.json`` document written into generated projects."""

    version: str = Field(default=MANIFEST_VERSION)
    generated_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )
    config: NexusConfig
    cli: CliInfo = Field(default_factory=CliInfo)
    local_only: bool = Field(default=False)

    @classmethod
    def for_config(cls, config: NexusConfig, now: datetime | None = None) -> "NexusManifest":
        """Build the manifest for *config*, stamped with *now* (UTC by default)."""
        stamp = now or datetime.now(timezone.utc)
        return cls(
            generated_at=stamp.isoformat(),
            config=config,
            local_only=config.local_only,
        )

    def to_json(self) -> str:
        """Serialise with camelCase keys, two-space indent and a trailing newline."""
        return self.model_dump_json(by_alias=True, indent=2) + "\n"

    def save(self, project_dir: str | Path) -> Path:
        """Write the manifest under *project_dir* and return its path."""
        target = Path(project_dir) / EcosystemLayout.MANIFEST
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.to_json(), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: str | Path) -> "NexusManifest":
        """Load and validate a manifest file.

        Raises:
            ManifestError: If the file is missing, is not JSON, or does not
                describe a valid configuration.
        """
        manifest_path = Path(path)
        try:
            raw = manifest_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ManifestError(manifest_path, "manifest not found") from exc
        except OSError as exc:
            raise ManifestError(manifest_path, f"cannot read manifest ({exc})") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ManifestError(manifest_path, f"invalid JSON ({exc.msg})") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ManifestError(
                manifest_path, f"invalid manifest ({exc.error_count()} validation errors)"
            ) from exc


def load_manifest(project_dir: str | Path) -> NexusManifest:
    """Read ``.nexus/manifest.json`` from *project_dir*."""
    return NexusManifest.load(Path(project_dir) / EcosystemLayout.MANIFEST)
