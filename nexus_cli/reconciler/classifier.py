"""Structural classification of generated files.

Pure functions over ``(path, content)`` pairs: no I/O and no exceptions for
any string input.

Documentation files open with a metadata block delimited by ``---`` markers::

    ---
    nexus_doc: true
    id: "01_vision"
    status: template
    ---

The block opens with the marker at the very start of the content and closes
at the next occurrence of the marker, wherever it falls.  The same boundary
decides both whether a document is corrupted and whether it is populated.
Inside the block, lines are scanned rather than parsed as YAML; anything that
looks like metadata after the block is ignored.
"""

from __future__ import annotations

import json
import re

from nexus_cli.config import EcosystemLayout
from nexus_cli.reconciler.models import PopulationStatus

METADATA_MARKER = "---"

_STATUS_LINE = re.compile(r"^\s*status\s*:(?P<value>.*)$")


def _metadata_block(content: str) -> str | None:
    """Return the text between the opening and closing markers, or ``None``."""
    if not content.startswith(METADATA_MARKER):
        return None
    start = len(METADATA_MARKER)
    end = content.find(METADATA_MARKER, start)
    if end == -1:
        return None
    return content[start:end]


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def population_status(content: str) -> PopulationStatus:
    """Classify documentation content as ``populated`` or ``template``."""
    block = _metadata_block(content)
    if block is None:
        return PopulationStatus.TEMPLATE
    for line in block.splitlines():
        match = _STATUS_LINE.match(line)
        if match and match.group("value").strip() == PopulationStatus.POPULATED.value:
            return PopulationStatus.POPULATED
    return PopulationStatus.TEMPLATE


def is_populated(content: str) -> bool:
    """True iff the leading metadata block declares ``status: populated``."""
    return population_status(content) is PopulationStatus.POPULATED


def is_json_path(path: str) -> bool:
    return path.lower().endswith(".json")


def is_corrupted(
    path: str,
    content: str,
    *,
    docs_dir: str = EcosystemLayout.DOCS_DIR,
    freeform_docs: frozenset[str] = frozenset({EcosystemLayout.KNOWLEDGE_LOG}),
) -> bool:
    """Decide whether an on-disk file is structurally broken.

    Rules, first match wins:

    1. Empty or whitespace-only content is corrupted.
    2. JSON paths are corrupted iff the content is not strict JSON
       (``NaN`` and ``Infinity`` are rejected).
    3. Files under *docs_dir* (except *freeform_docs*) are corrupted unless
       they start with the metadata marker and the marker appears again later.
    4. Everything else is intact.

    Args:
        path: Project-relative POSIX path of the file.
        content: Current on-disk text.
        docs_dir: Directory whose files must carry a metadata block.
        freeform_docs: Paths inside *docs_dir* exempt from rule 3.
    """
    if not content.strip():
        return True

    if is_json_path(path):
        try:
            json.loads(content, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            return True
        return False

    prefix = docs_dir.rstrip("/") + "/"
    if path.startswith(prefix) and path not in freeform_docs:
        return _metadata_block(content) is None

    return False
