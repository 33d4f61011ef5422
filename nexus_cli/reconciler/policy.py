"""Per-path upgrade policy.

The table partitions canonical paths into three classes by exact path
string:

* ``always-replace``: machine-maintained scaffolding such as agent
  instructions, tool pointer files, the ecosystem index and the manifest.
* ``always-preserve``: accumulated knowledge that is never regenerated.
* ``smart``: everything else; replaced only while still a template.

The table also carries the two layout facts the corruption rules depend on
(the documentation directory and its free-form files) so that an alternate
layout can be reconciled by passing a different table.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from nexus_cli.config import EcosystemLayout
from nexus_cli.reconciler.models import PolicyClass


class PolicyTable(BaseModel):
    """Immutable path -> ``PolicyClass`` mapping; unlisted paths are ``smart``."""

    model_config = ConfigDict(frozen=True)

    always_replace: frozenset[str] = Field(default_factory=frozenset)
    always_preserve: frozenset[str] = Field(default_factory=frozenset)
    docs_dir: str = Field(default=EcosystemLayout.DOCS_DIR)
    freeform_docs: frozenset[str] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def check_disjoint(self) -> "PolicyTable":
        overlap = self.always_replace & self.always_preserve
        if overlap:
            raise ValueError(
                f"paths cannot be both always-replace and always-preserve: {sorted(overlap)}"
            )
        return self

    def classify(self, path: str) -> PolicyClass:
        if path in self.always_replace:
            return PolicyClass.ALWAYS_REPLACE
        if path in self.always_preserve:
            return PolicyClass.ALWAYS_PRESERVE
        return PolicyClass.SMART


DEFAULT_POLICY = PolicyTable(
    always_replace=frozenset({
        EcosystemLayout.AI_INSTRUCTIONS,
        EcosystemLayout.ECOSYSTEM_INDEX,
        EcosystemLayout.MANIFEST,
        ".cursorrules",
        ".windsurfrules",
        ".clinerules",
        "AGENTS.md",
        ".github/copilot-instructions.md",
    }),
    always_preserve=frozenset({EcosystemLayout.KNOWLEDGE_LOG}),
    docs_dir=EcosystemLayout.DOCS_DIR,
    freeform_docs=frozenset({EcosystemLayout.KNOWLEDGE_LOG}),
)
