"""NEXUS CLI -- AI-native project scaffolding.

Generates the ``.nexus`` documentation ecosystem and AI-agent instruction
files for a project, and reconciles that generated state against user edits
through the ``upgrade`` and ``repair`` commands.

Quick usage::

    from nexus_cli import NexusConfig, upgrade_project

    config = NexusConfig(project_name="todo-app", display_name="Todo App")
    result = await upgrade_project("/path/to/todo-app", config)
    print(result.replaced)
"""

__version__ = "0.4.0"

from nexus_cli.config import NexusConfig, NexusManifest, NexusPersona, load_manifest  # noqa: E402
from nexus_cli.reconciler import (  # noqa: E402
    ReconcileError,
    ReconcileMode,
    ReconcileResult,
    reconcile,
    repair_project,
    upgrade_project,
)

__all__ = [
    "__version__",
    "NexusConfig",
    "NexusManifest",
    "NexusPersona",
    "ReconcileError",
    "ReconcileMode",
    "ReconcileResult",
    "load_manifest",
    "reconcile",
    "repair_project",
    "upgrade_project",
]
