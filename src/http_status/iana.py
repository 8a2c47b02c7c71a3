"""
Reader for the IANA "Hypertext Transfer Protocol (HTTP) Status Code Registry".

The registry is published as XML at `IANA_REGISTRY_URL`. This module only
parses a document that has already been fetched, and compares it with the
reason phrase table; it never performs network access itself.
"""
from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Union

import yarl

from .status_table import REASON_PHRASES

logger = logging.getLogger(__name__)

IANA_REGISTRY_URL = yarl.URL(
    "https://www.iana.org/assignments/http-status-codes/http-status-codes.xml"
)
RFC_BASE_URL = yarl.URL("https://www.rfc-editor.org/rfc/")

IANA_NAMESPACE = "http://www.iana.org/assignments"
SKIPPED_DESCRIPTIONS = ("Unassigned", "(Unused)")

_NS = {"ns": IANA_NAMESPACE}
_RANGE_RE = re.compile(r"^(\d+)\s*-\s*(\d+)$")
# "(OBSOLETED)", "(TEMPORARY - registered 2024-11-13, expires 2025-11-13)"
_ANNOTATION_RE = re.compile(r"\s*\((?:OBSOLETED|TEMPORARY)[^)]*\)\s*$")


@dataclass(frozen=True)
class RegistryRecord:
    """A single assigned code as listed in the registry."""

    code: int
    description: str
    references: List[yarl.URL] = field(default_factory=list)

    @property
    def phrase(self) -> str:
        """The description without lifecycle annotations such as "(OBSOLETED)"."""
        return _ANNOTATION_RE.sub("", self.description)


@dataclass(frozen=True)
class RegistryMismatch:
    code: int
    registry_phrase: str
    table_phrase: Optional[str]

    @property
    def is_missing(self) -> bool:
        return self.table_phrase is None


def _reference_url(xref: ET.Element) -> Optional[yarl.URL]:
    ref_type = xref.get("type")
    data = xref.get("data")
    if not data:
        return None

    if ref_type == "rfc":
        url = RFC_BASE_URL / data.lower()
        section = xref.get("data2")
        if section and section.lower().startswith("section "):
            url = url.with_fragment(
                "section-" + section.split(" ", 1)[1].strip()
            )
        return url
    if ref_type == "uri":
        return yarl.URL(data)
    return None


def parse_registry(document: Union[str, bytes]) -> List[RegistryRecord]:
    """
    Parse the registry XML into one record per assigned status code.

    Records described as "Unassigned" or "(Unused)" are skipped and
    "105-199"-style value ranges are expanded.

    Args:
        document: The registry XML, as text or bytes.

    Returns:
        The records, in document order.

    Raises:
        ValueError: If the document is not well-formed XML or a record
            has a value that is not a code or a code range.
    """
    if isinstance(document, str):
        document = document.encode("utf-8")
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise ValueError(f"Invalid IANA registry XML: {e}") from e

    records: List[RegistryRecord] = []
    for record in root.iterfind(".//ns:record", _NS):
        value = record.findtext("ns:value", default="", namespaces=_NS).strip()
        description = record.findtext(
            "ns:description", default="", namespaces=_NS
        ).strip()

        if description in SKIPPED_DESCRIPTIONS:
            logger.debug("Skipping %s record for %s", description, value)
            continue

        references = [
            url
            for url in (_reference_url(x) for x in record.iterfind("ns:xref", _NS))
            if url is not None
        ]

        match = _RANGE_RE.match(value)
        if match:
            first, last = int(match.group(1)), int(match.group(2))
            logger.debug("Expanding range %s-%s (%s)", first, last, description)
            codes = range(first, last + 1)
        elif value.isdigit():
            codes = range(int(value), int(value) + 1)
        else:
            raise ValueError(f"Invalid IANA registry value: {value!r}")

        records.extend(
            RegistryRecord(code=code, description=description, references=references)
            for code in codes
        )

    return records


def compare_with_registry(
    records: Iterable[RegistryRecord],
    phrases: Mapping[int, str] = REASON_PHRASES,
) -> List[RegistryMismatch]:
    """
    List registry codes that are missing from, or phrased differently in,
    the reason phrase table.
    """
    mismatches = []
    for record in records:
        table_phrase = phrases.get(record.code)
        if table_phrase != record.phrase:
            mismatches.append(
                RegistryMismatch(
                    code=record.code,
                    registry_phrase=record.phrase,
                    table_phrase=table_phrase,
                )
            )
    return mismatches
