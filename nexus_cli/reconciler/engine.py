"""Reconciliation of the canonical ecosystem against a project directory.

Shared core of ``nexus upgrade`` and ``nexus repair``:

    UPGRADE -- replace scaffolding with the latest templates, create missing
               files, repair broken ones, keep populated docs and knowledge.
    REPAIR  -- create missing files and repair broken ones; never touch a
               structurally valid file, even a stale template.

Per canonical file the decision is:

    absent                          -> created
    present, corrupted              -> repaired   (both modes)
    present, valid, repair mode     -> preserved
    present, valid, upgrade mode    -> by policy class:
        always-replace              -> replaced
        always-preserve             -> preserved
        smart                       -> preserved if populated, else replaced

Files are processed one at a time in generation order.  The first I/O
failure aborts the run with a ``ReconcileError``; no partial result is
returned.  Concurrent runs against the same directory must be serialised by
the caller.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from nexus_cli.config import ECOSYSTEM_DIRECTORIES, NexusConfig
from nexus_cli.generators import generate_canonical_files
from nexus_cli.reconciler.classifier import is_corrupted, is_populated
from nexus_cli.reconciler.models import (
    FileDisposition,
    GeneratedFile,
    PolicyClass,
    ReconcileMode,
    ReconcileResult,
)
from nexus_cli.reconciler.policy import DEFAULT_POLICY, PolicyTable
from nexus_cli.utils import ensure_dir, is_within, read_text_or_none, write_text

CanonicalSource = Callable[[NexusConfig], list[GeneratedFile]]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ReconcileError(Exception):
    """Raised when a file cannot be read or written; aborts the whole run."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


# ---------------------------------------------------------------------------
# Decision
# ---------------------------------------------------------------------------


def decide_disposition(
    path: str,
    on_disk: str | None,
    mode: ReconcileMode,
    policy: PolicyTable = DEFAULT_POLICY,
) -> FileDisposition:
    """Choose the disposition for one canonical path.

    Args:
        path: Project-relative canonical path.
        on_disk: Current file content, or ``None`` if the file is absent.
        mode: Upgrade or repair.
        policy: Policy table consulted for valid files in upgrade mode.
    """
    if on_disk is None:
        return FileDisposition.CREATED

    if is_corrupted(path, on_disk, docs_dir=policy.docs_dir, freeform_docs=policy.freeform_docs):
        return FileDisposition.REPAIRED

    if mode is ReconcileMode.REPAIR:
        return FileDisposition.PRESERVED

    policy_class = policy.classify(path)
    if policy_class is PolicyClass.ALWAYS_REPLACE:
        return FileDisposition.REPLACED
    if policy_class is PolicyClass.ALWAYS_PRESERVE:
        return FileDisposition.PRESERVED

    if is_populated(on_disk):
        return FileDisposition.PRESERVED
    return FileDisposition.REPLACED


# ---------------------------------------------------------------------------
# Reconcile
# ---------------------------------------------------------------------------


async def _run_io(path: str, action: str, func: Callable[..., Any], *args: Any) -> Any:
    """Run a blocking filesystem call off the event loop, tagging failures with *path*."""
    try:
        return await asyncio.to_thread(func, *args)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise ReconcileError(path, f"cannot {action} ({reason})") from exc


def _check_unique(files: list[GeneratedFile]) -> None:
    seen: set[str] = set()
    for file in files:
        if file.path in seen:
            raise ValueError(f"duplicate canonical path: {file.path}")
        seen.add(file.path)


async def reconcile(
    target_dir: str | Path,
    config: NexusConfig,
    mode: ReconcileMode | str,
    *,
    policy: PolicyTable = DEFAULT_POLICY,
    source: CanonicalSource = generate_canonical_files,
    directories: Iterable[str] = ECOSYSTEM_DIRECTORIES,
) -> ReconcileResult:
    """Bring *target_dir* in line with the canonical files for *config*.

    Args:
        target_dir: Project root.
        config: Configuration recovered from the project's manifest.
        mode: ``"upgrade"`` or ``"repair"``.
        policy: Path classification used in upgrade mode.
        source: Generation source producing the canonical files.
        directories: Ecosystem directories created before any file is touched.

    Returns:
        The disposition of every canonical path, in generation order.

    Raises:
        ReconcileError: If a path escapes *target_dir* or any read, write or
            directory creation fails.
    """
    mode = ReconcileMode(mode)
    root = Path(target_dir)

    for directory in directories:
        await _run_io(directory, "create directory", ensure_dir, root / directory)

    files = source(config)
    _check_unique(files)

    dispositions: list[tuple[str, FileDisposition]] = []
    for file in files:
        full_path = root / file.path
        if not is_within(root, full_path):
            raise ReconcileError(file.path, "resolves outside the project directory")

        await _run_io(file.path, "create parent directory", ensure_dir, full_path.parent)
        on_disk = await _run_io(file.path, "read", read_text_or_none, full_path)

        disposition = decide_disposition(file.path, on_disk, mode, policy)
        if disposition.writes:
            await _run_io(file.path, "write", write_text, full_path, file.content)
        dispositions.append((file.path, disposition))

    return ReconcileResult.from_dispositions(dispositions)


async def upgrade_project(target_dir: str | Path, config: NexusConfig) -> ReconcileResult:
    """Upgrade the ecosystem: refresh scaffolding, fix breakage, keep knowledge."""
    return await reconcile(target_dir, config, ReconcileMode.UPGRADE)


async def repair_project(target_dir: str | Path, config: NexusConfig) -> ReconcileResult:
    """Repair the ecosystem: restore missing or corrupted files only."""
    return await reconcile(target_dir, config, ReconcileMode.REPAIR)
