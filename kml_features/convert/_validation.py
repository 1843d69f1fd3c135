"""Document-level parsing for KML conversion.

Turning the raw text into an element tree is the only step that can
fail a conversion.  Everything downstream absorbs its own problems.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lxml import etree

from kml_features.core.exceptions import KmlParseError

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("kml_features.convert")


def parse_document(document: str | bytes, *, huge_tree: bool = False) -> _Element:
    """Parse ``document`` into an lxml element tree and return its root.

    ``str`` input is encoded as UTF-8 first so documents carrying an
    ``<?xml ... encoding=...?>`` declaration are accepted.

    Raises:
        KmlParseError: If the document is empty or not well-formed XML.
    """
    content = document.encode("utf-8") if isinstance(document, str) else document

    if not content.strip():
        msg = "KML document is empty"
        raise KmlParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=huge_tree)
    try:
        root: _Element = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg) from exc

    logger.debug("Parsed document | root=%s", etree.QName(root).localname)
    return root
