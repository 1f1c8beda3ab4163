"""Load a completion catalog from a keywords XML description.

The source format is the one used by the bundled ``c.xml``::

    <keywords>
      <keyword name="printf" type="function" returnType="int" definedIn="stdio.h">
        <params>
          <param type="const char *" name="format"/>
          <param type="..."/>
        </params>
        <desc>Writes formatted output to stdout.</desc>
      </keyword>
      <keyword name="EOF" type="constant" returnType="int" definedIn="stdio.h"/>
    </keywords>

Attribute names are part of the format and must match exactly.
"""

from __future__ import annotations

import logging
import time
import xml.sax
from importlib.resources import files
from pathlib import Path
from typing import IO, Iterable

from procedural_completion.errors import DataFormatError, ResourceNotFoundError
from procedural_completion.models import (
    RECORD_KINDS,
    CompletionRecord,
    FunctionRecord,
    Parameter,
    SortKey,
    case_insensitive_key,
)

logger = logging.getLogger(__name__)

# Record kinds the XML grammar can emit. "variable" is buildable but never parsed.
XML_KEYWORD_TYPES = ("function", "constant")

BUNDLED_DATA_DIR = "data"


def build_record(
    kind: str,
    name: str,
    declared_type: str,
    *,
    parameters: Iterable[Parameter] = (),
    summary_html: str | None = None,
    defined_in: str | None = None,
) -> CompletionRecord:
    """Construct the record variant for ``kind``.

    ``declared_type`` is the return type for functions and the value type
    for constants and variables. Raises DataFormatError for an unknown kind
    or when parameters are given for a non-function record.
    """
    cls = RECORD_KINDS.get(kind)
    if cls is None:
        raise DataFormatError(
            f"Unexpected keyword type {kind!r} for {name!r}; "
            f"expected one of {sorted(RECORD_KINDS)}"
        )
    try:
        if cls is FunctionRecord:
            return FunctionRecord(
                name,
                declared_type,
                tuple(parameters),
                summary_html=summary_html,
                defined_in=defined_in,
            )
        params = tuple(parameters)
        if params:
            raise DataFormatError(f"{kind} {name!r} cannot declare parameters")
        return cls(name, declared_type, summary_html=summary_html, defined_in=defined_in)
    except DataFormatError:
        raise
    except ValueError as e:
        raise DataFormatError(str(e), cause=e) from e


class _KeywordsHandler(xml.sax.ContentHandler):
    """SAX handler collecting keyword entries found under <keywords>."""

    def __init__(self, source_name: str):
        super().__init__()
        self.source_name = source_name
        self.records: list[CompletionRecord] = []
        self._in_keywords = False
        self._keyword: dict[str, str | None] | None = None
        self._params: list[Parameter] = []
        self._in_params = False
        self._in_desc = False
        self._desc_buf: list[str] = []

    def _location(self) -> str:
        locator = getattr(self, "_locator", None)
        if locator is None:
            return self.source_name
        return f"{self.source_name}:{locator.getLineNumber()}"

    def _require(self, attrs, attr: str, element: str) -> str:
        value = attrs.get(attr)
        if not value:
            raise DataFormatError(
                f"{self._location()}: <{element}> is missing the {attr!r} attribute"
            )
        return value

    def startElement(self, tag, attrs):
        if tag == "keywords":
            self._in_keywords = True
            return
        if not self._in_keywords:
            return

        if tag == "keyword":
            self._keyword = {
                "name": self._require(attrs, "name", "keyword"),
                "type": self._require(attrs, "type", "keyword"),
                "returnType": self._require(attrs, "returnType", "keyword"),
                "definedIn": attrs.get("definedIn") or None,
            }
            self._params = []
            self._desc_buf = []
            return

        if self._keyword is None:
            return

        if tag == "desc":
            self._in_desc = True
            self._desc_buf = []
        elif tag == "params":
            self._in_params = True
        elif tag == "param" and self._in_params:
            self._params.append(
                Parameter(
                    type=self._require(attrs, "type", "param"),
                    name=attrs.get("name") or None,
                )
            )

    def characters(self, content):
        if self._in_desc:
            self._desc_buf.append(content)

    def endElement(self, tag):
        if tag == "keywords":
            self._in_keywords = False
            return
        if self._keyword is None:
            return

        if tag == "desc":
            self._in_desc = False
        elif tag == "params":
            self._in_params = False
        elif tag == "keyword":
            self._finish_keyword()

    def _finish_keyword(self):
        kw = self._keyword
        kind = kw["type"]
        if kind not in XML_KEYWORD_TYPES:
            raise DataFormatError(
                f"{self._location()}: unexpected keyword type {kind!r} for "
                f"{kw['name']!r}; expected one of {list(XML_KEYWORD_TYPES)}"
            )
        desc = "".join(self._desc_buf) or None
        self.records.append(
            build_record(
                kind,
                kw["name"],
                kw["returnType"],
                parameters=self._params,
                summary_html=desc,
                defined_in=kw["definedIn"],
            )
        )
        self._keyword = None
        self._params = []
        self._desc_buf = []


def load_catalog_from_stream(
    stream: IO,
    *,
    key: SortKey | None = None,
    source_name: str = "<stream>",
) -> tuple[CompletionRecord, ...]:
    """Parse an open keywords XML stream into a sorted catalog.

    The caller owns the stream. Raises DataFormatError on malformed input;
    nothing parsed before the failure is returned.
    """
    handler = _KeywordsHandler(source_name)
    try:
        xml.sax.parse(stream, handler)
    except xml.sax.SAXParseException as e:
        raise DataFormatError(f"{source_name}: malformed XML: {e.getMessage()}", cause=e) from e
    return tuple(sorted(handler.records, key=key or case_insensitive_key))


def open_source(source: str | Path) -> IO[bytes]:
    """Open ``source`` as a file, falling back to a bundled data resource."""
    path = Path(source)
    if path.is_file():
        return path.open("rb")

    # Resource names stay inside the bundled data directory
    if not path.is_absolute() and ".." not in path.parts:
        resource = files("procedural_completion") / BUNDLED_DATA_DIR
        for part in path.parts:
            resource = resource / part
        if resource.is_file():
            logger.debug("No file at %s; using bundled resource", source)
            return resource.open("rb")

    raise ResourceNotFoundError(f"Completion source not found as file or resource: {source}")


def load_catalog(
    source: str | Path,
    *,
    key: SortKey | None = None,
) -> tuple[CompletionRecord, ...]:
    """Load the catalog described by the file or bundled resource ``source``."""
    start = time.monotonic()
    with open_source(source) as stream:
        records = load_catalog_from_stream(stream, key=key, source_name=str(source))
    elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.info("Loaded %d completions from %s in %dms", len(records), source, elapsed_ms)
    return records
