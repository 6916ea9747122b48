"""Answer file document tree and namespace-aware queries."""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from ..core.errors import MalformedTemplateError, TemplateNotFoundError

logger = logging.getLogger(__name__)

UNATTEND_NS = "urn:schemas-microsoft-com:unattend"
DEFAULT_PREFIX = "u"


class Document:
    """A parsed answer file with a namespace table for XPath queries.

    The document's default namespace is bound to the ``u`` prefix, so
    queries read like ``//u:settings[@pass='specialize']``.
    """

    def __init__(self, tree: etree._ElementTree) -> None:
        self._tree = tree
        default_ns = tree.getroot().nsmap.get(None) or UNATTEND_NS
        self.namespaces: dict[str, str] = {DEFAULT_PREFIX: default_ns}

    @property
    def root(self) -> etree._Element:
        return self._tree.getroot()

    @property
    def default_namespace(self) -> str:
        return self.namespaces[DEFAULT_PREFIX]

    def find_all(self, query: str) -> list[etree._Element]:
        """Return every element matching an XPath query."""
        try:
            result = self._tree.xpath(query, namespaces=self.namespaces)
        except etree.XPathError as e:
            raise ValueError(f"Invalid query {query!r}: {e}") from e
        return [node for node in result if isinstance(node, etree._Element)]

    def find_one(self, query: str) -> etree._Element | None:
        """Return the first element matching an XPath query, if any."""
        matches = self.find_all(query)
        return matches[0] if matches else None

    def prepend_comment(self, text: str) -> etree._Comment:
        """Insert a comment as the first child of the root element.

        Existing root-level comments with the same text are dropped first so
        a previous output can be reused as a template.
        """
        root = self.root
        for child in list(root):
            if isinstance(child, etree._Comment) and (child.text or "").strip() == text:
                root.remove(child)

        comment = etree.Comment(f" {text} ")
        root.insert(0, comment)
        return comment

    def to_bytes(self) -> bytes:
        return etree.tostring(
            self._tree,
            xml_declaration=True,
            encoding="utf-8",
            pretty_print=True,
        )


def load(template_path: Path) -> Document:
    """Parse an answer file template.

    Args:
        template_path: Path to the template file

    Returns:
        Mutable document tree
    """
    if not template_path.exists():
        raise TemplateNotFoundError(f"Template not found: {template_path}")

    # Keep CDATA sections of existing entries intact; drop indentation so
    # the output can be pretty printed consistently.
    parser = etree.XMLParser(strip_cdata=False, remove_blank_text=True)
    try:
        tree = etree.parse(str(template_path), parser)
    except etree.XMLSyntaxError as e:
        raise MalformedTemplateError(f"Template is not well-formed: {e}") from e

    logger.debug(f"Loaded template {template_path}")
    return Document(tree)


def locate_root(document: Document, name: str) -> etree._Element:
    """Return the document element, which must be ``name`` in the default namespace."""
    root = document.root
    expected = etree.QName(document.default_namespace, name)
    if etree.QName(root) != expected:
        raise MalformedTemplateError(
            f"Template root is <{etree.QName(root).localname}>, expected <{name}> "
            f"in namespace {document.default_namespace}"
        )
    return root


def locate_anchor(document: Document, name: str) -> etree._Element:
    """Find the single element called ``name`` in the default namespace.

    Args:
        document: Document to search
        name: Local element name (e.g. ``Extensions``)

    Returns:
        The matching element
    """
    matches = document.find_all(f"//{DEFAULT_PREFIX}:{name}")
    if not matches:
        raise MalformedTemplateError(
            f"Template has no <{name}> element in namespace {document.default_namespace}"
        )
    if len(matches) > 1:
        raise MalformedTemplateError(
            f"Template has {len(matches)} <{name}> elements, expected exactly one"
        )
    return matches[0]
