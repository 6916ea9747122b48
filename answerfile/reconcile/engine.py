"""Reconcile the embedded-file entries of an answer file."""

from __future__ import annotations

import logging

from lxml import etree

from ..core.models import BuildConfig, BuildResult, MappingRow
from ..document import tree
from ..document.io import atomic_write_bytes
from ..mapping.loader import load_mappings

logger = logging.getLogger(__name__)

ROOT_ANCHOR = "unattend"
CONTAINER_ANCHOR = "Extensions"
ENTRY_TAG = "File"
ENTRY_PATH_ATTRIBUTE = "path"
PROVENANCE_TEXT = (
    "This file was generated by answerfile. "
    "Edit the template and file mapping instead of this file."
)

_CDATA_END = "]]>"


def _entry_tag(container: etree._Element) -> str:
    return etree.QName(etree.QName(container).namespace, ENTRY_TAG).text


def clear_entries(container: etree._Element) -> int:
    """Remove every embedded-file entry from the container.

    Returns:
        Number of entries removed
    """
    stale = container.findall(_entry_tag(container))
    for entry in stale:
        container.remove(entry)
    logger.debug(f"Removed {len(stale)} stale entries")
    return len(stale)


def add_entry(container: etree._Element, row: MappingRow) -> bool:
    """Append an entry embedding the row's source file.

    Rows that cannot be embedded are skipped with a warning: a missing or
    unreadable source, a blank destination, or script text that XML cannot
    represent (NUL and most control characters).

    Args:
        container: The ``Extensions`` element
        row: Mapping row to embed

    Returns:
        True when an entry was added, False when the row was skipped
    """
    if not row.destination_path.strip():
        logger.warning(f"No destination for {row.source_path}, skipping")
        return False

    if not row.source_path.is_file():
        logger.warning(f"Source file not found, skipping: {row.source_path}")
        return False

    try:
        with row.source_path.open(newline="") as handle:
            content = handle.read()
    except (UnicodeDecodeError, OSError) as e:
        logger.warning(f"Cannot read {row.source_path}, skipping: {e}")
        return False

    entry = etree.Element(_entry_tag(container))
    entry.set(ENTRY_PATH_ATTRIBUTE, row.destination_path)
    # A CDATA section cannot contain its own terminator; escaped text
    # decodes to the same string.
    try:
        entry.text = content if _CDATA_END in content else etree.CDATA(content)
    except ValueError as e:
        logger.warning(f"Cannot embed {row.source_path}, skipping: {e}")
        return False
    container.append(entry)

    logger.debug(f"Embedded {row.source_path} as {row.destination_path}")
    return True


def annotate(document: tree.Document) -> None:
    """Mark the document as generated."""
    document.prepend_comment(PROVENANCE_TEXT)


def reconcile(config: BuildConfig) -> BuildResult:
    """Build the answer file described by ``config``.

    The template, mapping and both anchors are validated before anything is
    written, so a failed build leaves any previous output untouched.

    Args:
        config: Build configuration

    Returns:
        Summary of embedded and skipped rows
    """
    document = tree.load(config.template_path)
    rows = load_mappings(config.mapping_path)

    tree.locate_root(document, ROOT_ANCHOR)
    container = tree.locate_anchor(document, CONTAINER_ANCHOR)

    clear_entries(container)

    result = BuildResult(output_path=config.output_path)
    for row in rows:
        if add_entry(container, row):
            result.written.append(row.destination_path)
        else:
            result.skipped.append(row)

    annotate(document)

    atomic_write_bytes(config.output_path, document.to_bytes(), mode=config.file_mode)
    logger.info(
        f"Embedded {len(result.written)} file(s), skipped {len(result.skipped)}"
    )
    return result
