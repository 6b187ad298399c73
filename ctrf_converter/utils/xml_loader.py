# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Loader stage: read a report file and parse it into an element tree."""

import logging
from pathlib import Path

# lxml.etree is 2-5x faster than stdlib xml.etree.ElementTree
from lxml import etree as ET

from ctrf_converter.core.errors import ParseError

logger = logging.getLogger(__name__)


def load_xml(file_path: Path | str) -> ET._Element:
    """Read an XML report and return its root element.

    The file is read as bytes so lxml honours the encoding declared in the
    XML prolog.

    Args:
        file_path: Path to the XML report.

    Returns:
        Root element of the parsed document.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ParseError: If the content is not well-formed XML.
    """
    path = Path(file_path)
    logger.info(f"Reading report file: {path}")
    content = path.read_bytes()

    parser = ET.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)
    try:
        root = ET.fromstring(content, parser)  # nosec B320 - entities disabled
    except ET.XMLSyntaxError as e:
        raise ParseError(f"Failed to parse XML report {path}: {e}") from e

    logger.debug(f"Parsed {path}: root element <{root.tag}>")
    return root
