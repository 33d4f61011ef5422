"""NEXUS reconciler -- decides, file by file, what ``upgrade`` and ``repair`` do.

Quick usage::

    from nexus_cli.reconciler import reconcile, ReconcileMode

    result = await reconcile(project_dir, config, ReconcileMode.REPAIR)
    print(result.repaired)
"""

from nexus_cli.reconciler.models import (
    FileDisposition,
    GeneratedFile,
    PolicyClass,
    PopulationStatus,
    ReconcileMode,
    ReconcileResult,
)
from nexus_cli.reconciler.classifier import is_corrupted, is_populated, population_status
from nexus_cli.reconciler.policy import DEFAULT_POLICY, PolicyTable
from nexus_cli.reconciler.engine import (
    ReconcileError,
    decide_disposition,
    reconcile,
    repair_project,
    upgrade_project,
)

__all__ = [
    "DEFAULT_POLICY",
    "FileDisposition",
    "GeneratedFile",
    "PolicyClass",
    "PolicyTable",
    "PopulationStatus",
    "ReconcileError",
    "ReconcileMode",
    "ReconcileResult",
    "decide_disposition",
    "is_corrupted",
    "is_populated",
    "population_status",
    "reconcile",
    "repair_project",
    "upgrade_project",
]
