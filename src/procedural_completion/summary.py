"""Build the HTML summary page shown in the description window."""

from __future__ import annotations

import html
import re

from procedural_completion.classifier import DataTypeClassifier
from procedural_completion.models import CompletionRecord, FunctionRecord

NO_DESCRIPTION = "No description available"


def no_description_page(text: str = NO_DESCRIPTION) -> str:
    """Page shown when there is no record to describe."""
    return f"<html><em>{html.escape(text)}</em>"


NO_DESCRIPTION_HTML = no_description_page()

_WORD_RE = re.compile(r"\w+")


def _type_html(
    type_str: str,
    classifier: DataTypeClassifier | None,
    colorize: bool,
) -> str:
    if not colorize or classifier is None:
        return html.escape(type_str)

    out = []
    pos = 0
    for m in _WORD_RE.finditer(type_str):
        out.append(html.escape(type_str[pos:m.start()]))
        color = classifier.classify(m.group(0))
        if color is None:
            out.append(m.group(0))
        else:
            out.append(f'<font color="{color}">{m.group(0)}</font>')
        pos = m.end()
    out.append(html.escape(type_str[pos:]))
    return "".join(out)


def build_header(
    record: CompletionRecord,
    classifier: DataTypeClassifier | None = None,
    colorize_header: bool = False,
) -> str:
    """Declaration line, e.g. ``int <b>printf</b>(const char * format, ...)``."""
    type_html = _type_html(record.declared_type, classifier, colorize_header)
    header = f"{type_html} <b>{html.escape(record.name)}</b>"
    if isinstance(record, FunctionRecord):
        params = []
        for p in record.parameters:
            text = _type_html(p.type, classifier, colorize_header)
            if p.name:
                text += f" {html.escape(p.name)}"
            params.append(text)
        header += "(" + ", ".join(params) + ")"
    return header


def build_summary(
    record: CompletionRecord | None,
    classifier: DataTypeClassifier | None = None,
    colorize_header: bool = False,
    no_description: str = NO_DESCRIPTION,
) -> str:
    """Full description page for ``record``.

    ``summary_html`` is embedded as-is; it may carry ``<a href="name">``
    links to other records.
    """
    if record is None:
        return no_description_page(no_description)

    parts = ["<html>", build_header(record, classifier, colorize_header)]
    if record.defined_in:
        parts.append(f"<br><em>Defined in:</em> {html.escape(record.defined_in)}")
    parts.append("<hr>")
    if record.summary_html:
        parts.append(record.summary_html)
    else:
        parts.append(f"<em>{html.escape(no_description)}</em>")
    return "".join(parts)
