"""Pydantic v2 models for the reconciliation engine.

Defines the vocabulary shared by the classifier, the policy table and the
engine: the run mode, per-path policy classes, file dispositions, and the
immutable result summary returned to command handlers.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ReconcileMode(str, Enum):
    """``upgrade`` refreshes scaffolding and fixes breakage; ``repair`` only fixes."""
    UPGRADE = "upgrade"
    REPAIR = "repair"


class PolicyClass(str, Enum):
    """How an existing, structurally valid file is treated during upgrade."""
    ALWAYS_REPLACE = "always-replace"
    ALWAYS_PRESERVE = "always-preserve"
    SMART = "smart"


class FileDisposition(str, Enum):
    """The single outcome recorded for one canonical path in one run."""
    CREATED = "created"
    REPLACED = "replaced"
    PRESERVED = "preserved"
    REPAIRED = "repaired"

    @property
    def writes(self) -> bool:
        """True when this outcome overwrites the file with canonical content."""
        return self is not FileDisposition.PRESERVED


class PopulationStatus(str, Enum):
    """Self-declared maturity of a documentation file."""
    POPULATED = "populated"
    TEMPLATE = "template"


# ---------------------------------------------------------------------------
# Canonical files
# ---------------------------------------------------------------------------


class GeneratedFile(BaseModel):
    """One file of the canonical ecosystem: a project-relative path and its content."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="POSIX path relative to the project root")
    content: str = Field(..., description="Exact text written when the file is (re)generated")


# ---------------------------------------------------------------------------
# Result summary
# ---------------------------------------------------------------------------


class ReconcileResult(BaseModel):
    """Which canonical paths were created, replaced, preserved, or repaired.

    The four tuples are pairwise disjoint, their union is every canonical path
    processed in the run, and each keeps the generation order.
    """

    model_config = ConfigDict(frozen=True)

    created: tuple[str, ...] = ()
    replaced: tuple[str, ...] = ()
    preserved: tuple[str, ...] = ()
    repaired: tuple[str, ...] = ()

    @classmethod
    def from_dispositions(
        cls, dispositions: list[tuple[str, FileDisposition]]
    ) -> "ReconcileResult":
        """Group ``(path, disposition)`` pairs, keeping their order."""
        buckets: dict[FileDisposition, list[str]] = {d: [] for d in FileDisposition}
        for path, disposition in dispositions:
            buckets[disposition].append(path)
        return cls(
            created=tuple(buckets[FileDisposition.CREATED]),
            replaced=tuple(buckets[FileDisposition.REPLACED]),
            preserved=tuple(buckets[FileDisposition.PRESERVED]),
            repaired=tuple(buckets[FileDisposition.REPAIRED]),
        )

    @property
    def total(self) -> int:
        """Number of canonical paths processed."""
        return len(self.created) + len(self.replaced) + len(self.preserved) + len(self.repaired)

    @property
    def fix_count(self) -> int:
        """Files that were missing or broken and have been restored."""
        return len(self.created) + len(self.repaired)

    def disposition_of(self, path: str) -> FileDisposition | None:
        """Return the disposition recorded for *path*, or ``None`` if it was not processed."""
        for disposition in FileDisposition:
            if path in getattr(self, disposition.value):
                return disposition
        return None
