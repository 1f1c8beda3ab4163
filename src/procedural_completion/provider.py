"""Completion provider for procedural languages such as C.

Holds the catalog loaded from a keywords XML source and answers the
editor's questions: what has been typed, what matches it, and what a
given record's description page looks like.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from procedural_completion.classifier import DataTypeClassifier
from procedural_completion.config import require_provider_config
from procedural_completion.errors import InvalidOffsetError
from procedural_completion.loader import load_catalog
from procedural_completion.models import (
    CompletionRecord,
    SortKey,
    case_insensitive_key,
    sort_key_for,
)
from procedural_completion.scanner import is_identifier_char, prefix_at
from procedural_completion.summary import build_summary

logger = logging.getLogger(__name__)


class ProceduralCompletionProvider:
    """Catalog of completions plus the lookups an editor needs.

    Subclasses override ``is_valid_char`` for languages whose identifiers
    use other characters.
    """

    def __init__(
        self,
        records: Iterable[CompletionRecord],
        *,
        classifier: DataTypeClassifier | None = None,
        colorize_header: bool = False,
        key: SortKey | None = None,
        _sorted: bool = False,
    ):
        if _sorted:
            self._records = tuple(records)
        else:
            self._records = tuple(sorted(records, key=key or case_insensitive_key))
        self.classifier = classifier or DataTypeClassifier()
        self.colorize_header = colorize_header

    @classmethod
    def from_source(
        cls,
        source: str | Path,
        *,
        classifier: DataTypeClassifier | None = None,
        colorize_header: bool = False,
        key: SortKey | None = None,
    ) -> "ProceduralCompletionProvider":
        """Load the catalog from a file or bundled resource."""
        return cls(
            load_catalog(source, key=key),
            classifier=classifier,
            colorize_header=colorize_header,
            _sorted=True,
        )

    @classmethod
    def from_config(
        cls,
        config: dict | None,
        source: str | Path | None = None,
    ) -> "ProceduralCompletionProvider":
        """Build a provider from the [provider] config table.

        ``source`` overrides the configured source.
        """
        section = require_provider_config(config)
        source = source or section.get("source")
        if not source:
            raise ValueError("No completion source given and [provider].source is unset")
        classifier = DataTypeClassifier(
            section.get("data_types"),
            section.get("data_type_color"),
        )
        return cls.from_source(
            source,
            classifier=classifier,
            colorize_header=section.get("colorize_header", False),
            key=sort_key_for(section.get("case_sensitive", False)),
        )

    @property
    def records(self) -> tuple[CompletionRecord, ...]:
        return self._records

    def is_valid_char(self, ch: str) -> bool:
        """Whether ``ch`` can be part of an auto-completable identifier."""
        return is_identifier_char(ch)

    def already_entered_text(self, buffer: str, caret_offset: int) -> str:
        """Text typed so far for the identifier ending at the caret.

        An out-of-range caret is logged and treated as "nothing typed".
        """
        try:
            return prefix_at(buffer, caret_offset, self.is_valid_char)
        except InvalidOffsetError as e:
            logger.warning("Cannot read entered text: %s", e)
            return ""

    def completions_for(self, prefix: str) -> list[CompletionRecord]:
        """Records whose name starts with ``prefix``, ignoring case, in catalog order."""
        folded = prefix.lower()
        return [r for r in self._records if r.name.lower().startswith(folded)]

    def completion_by_name(self, name: str) -> CompletionRecord | None:
        """First record named exactly ``name`` in catalog order, or None."""
        matches = [r for r in self._records if r.name == name]
        if not matches:
            return None
        if len(matches) > 1:
            logger.warning(
                "%d completions named %r; using the first in catalog order", len(matches), name
            )
        return matches[0]

    def summary_for(self, record: CompletionRecord | None) -> str:
        return build_summary(record, self.classifier, self.colorize_header)
