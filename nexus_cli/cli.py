"""NEXUS CLI entry point for the ``upgrade`` and ``repair`` commands.

Usage::

    nexus upgrade [path]     # refresh CLI-maintained files, keep project knowledge
    nexus repair [path]      # restore missing or corrupted files only
    python -m nexus_cli.cli repair ./my-app

Both commands read ``.nexus/manifest.json`` to recover the configuration the
project was generated with, reconcile the canonical ecosystem against the
directory, and report what happened to each file.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from nexus_cli import __version__
from nexus_cli.config import ManifestError, NexusManifest, load_manifest
from nexus_cli.reconciler import ReconcileError, ReconcileResult, repair_project, upgrade_project
from nexus_cli.utils import (
    console,
    print_banner,
    print_error,
    print_file_list,
    print_info,
    print_success,
    print_warning,
)

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _resolve_target(target_path: str | None) -> Path:
    cwd = Path.cwd()
    return (cwd / target_path).resolve() if target_path else cwd


def _read_manifest(target_dir: Path, command: str) -> NexusManifest | None:
    """Load the manifest or print guidance and return ``None``."""
    try:
        return load_manifest(target_dir)
    except ManifestError as exc:
        print_error("No valid .nexus/manifest.json found in this project.")
        print_error(str(exc))
        console.print()
        print_info(f"The {command} command requires an existing NEXUS project.")
        if command == "repair":
            print_info("If the manifest itself is corrupted, restore it from version control first.")
        console.print()
        return None


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def upgrade_command(target_path: str | None = None) -> int:
    """Handler for ``nexus upgrade [path]``. Returns the process exit code."""
    print_banner(__version__)
    target_dir = _resolve_target(target_path)

    manifest = _read_manifest(target_dir, "upgrade")
    if manifest is None:
        return 1

    config = manifest.config
    old_version = manifest.cli.version.strip()

    print_success(f'Upgrading "{config.display_name}" NEXUS ecosystem...')
    if old_version:
        print_info(f"Previous CLI version: {old_version}")
    else:
        print_warning("Previous CLI version: unknown (the manifest does not record one)")
    print_info(f"Current CLI version:  {__version__}")
    console.print()

    try:
        result = asyncio.run(upgrade_project(target_dir, config))
    except ReconcileError as exc:
        print_error("Upgrade failed.")
        print_error(str(exc))
        return 1

    report_upgrade(result)
    console.print()
    if old_version:
        print_success(
            f"Upgrade complete! NEXUS ecosystem updated from v{old_version} to v{__version__}."
        )
    else:
        print_success(f"Upgrade complete! NEXUS ecosystem updated to v{__version__}.")
    print_info("Your project knowledge (populated docs, knowledge base, progress) was preserved.")
    return 0


def repair_command(target_path: str | None = None) -> int:
    """Handler for ``nexus repair [path]``. Returns the process exit code."""
    print_banner(__version__)
    target_dir = _resolve_target(target_path)

    manifest = _read_manifest(target_dir, "repair")
    if manifest is None:
        return 1

    config = manifest.config
    print_success(f'Repairing "{config.display_name}" NEXUS ecosystem...')
    console.print()

    try:
        result = asyncio.run(repair_project(target_dir, config))
    except ReconcileError as exc:
        print_error("Repair failed.")
        print_error(str(exc))
        return 1

    if result.fix_count == 0:
        print_success("All NEXUS files are intact - nothing to repair.")
        return 0

    report_repair(result)
    console.print()
    plural = "" if result.fix_count == 1 else "s"
    print_success(f"Repair complete! Fixed {result.fix_count} file{plural}.")
    print_info("Your project knowledge was preserved.")
    return 0


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def report_upgrade(result: ReconcileResult) -> None:
    if result.created:
        print_file_list(f"Created ({len(result.created)} new files):", result.created, "+", "green")
    if result.repaired:
        print_file_list(
            f"Repaired ({len(result.repaired)} corrupted files restored):",
            result.repaired, "~", "yellow",
        )
    if result.replaced:
        print_file_list(
            f"Replaced ({len(result.replaced)} files updated to latest):",
            result.replaced, ">", "cyan",
        )
    if result.preserved:
        print_file_list(
            f"Preserved ({len(result.preserved)} files with project knowledge):",
            result.preserved, "=", "blue",
        )


def report_repair(result: ReconcileResult) -> None:
    if result.created:
        print_file_list(f"Restored ({len(result.created)} missing files):", result.created, "+", "green")
    if result.repaired:
        print_file_list(
            f"Repaired ({len(result.repaired)} corrupted files):", result.repaired, "~", "yellow"
        )
    print_info(f"Untouched ({len(result.preserved)} valid files preserved)")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nexus",
        description="NEXUS CLI -- AI-native project scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  nexus upgrade\n"
            "  nexus upgrade ./my-app\n"
            "  nexus repair ./my-app\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    upgrade = subparsers.add_parser(
        "upgrade", help="Regenerate CLI-maintained files while preserving project knowledge"
    )
    upgrade.add_argument("path", nargs="?", default=None, help="Project directory (default: cwd)")

    repair = subparsers.add_parser(
        "repair", help="Restore missing or corrupted files without updating templates"
    )
    repair.add_argument("path", nargs="?", default=None, help="Project directory (default: cwd)")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``nexus`` and ``python -m nexus_cli.cli``."""
    args = build_parser().parse_args(argv)

    if args.command == "upgrade":
        code = upgrade_command(args.path)
    else:
        code = repair_command(args.path)

    sys.exit(code)


if __name__ == "__main__":
    main()
