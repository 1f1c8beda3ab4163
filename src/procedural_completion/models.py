"""Completion record data model: functions, constants, variables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar


@dataclass(frozen=True)
class Parameter:
    """One function parameter. Unnamed parameters are allowed."""

    type: str
    name: str | None = None

    def __str__(self) -> str:
        return self.type if not self.name else f"{self.type} {self.name}"


@dataclass(frozen=True)
class CompletionRecord:
    """A single catalog entry available for auto-completion."""

    kind: ClassVar[str] = ""

    name: str
    summary_html: str | None = field(default=None, kw_only=True)
    defined_in: str | None = field(default=None, kw_only=True)  # e.g. "stdio.h"

    def __post_init__(self):
        if type(self) is CompletionRecord:
            raise TypeError(
                "CompletionRecord is a base class; build a FunctionRecord, "
                "ConstantRecord or VariableRecord"
            )
        if not self.name:
            raise ValueError(f"{type(self).__name__} name must be non-empty")

    @property
    def declared_type(self) -> str:
        """Return type for functions, value type for constants and variables."""
        raise NotImplementedError


@dataclass(frozen=True)
class FunctionRecord(CompletionRecord):
    kind: ClassVar[str] = "function"

    return_type: str
    parameters: tuple[Parameter, ...] = ()

    def __post_init__(self):
        super().__post_init__()
        # Accept any iterable but store an immutable copy
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def declared_type(self) -> str:
        return self.return_type


@dataclass(frozen=True)
class ConstantRecord(CompletionRecord):
    kind: ClassVar[str] = "constant"

    value_type: str

    @property
    def declared_type(self) -> str:
        return self.value_type


@dataclass(frozen=True)
class VariableRecord(CompletionRecord):
    kind: ClassVar[str] = "variable"

    value_type: str

    @property
    def declared_type(self) -> str:
        return self.value_type


RECORD_KINDS: dict[str, type[CompletionRecord]] = {
    cls.kind: cls for cls in (FunctionRecord, ConstantRecord, VariableRecord)
}

SortKey = Callable[[CompletionRecord], object]


def case_insensitive_key(record: CompletionRecord) -> tuple[str, str]:
    """Default catalog ordering: case-insensitive name, exact name as tiebreak."""
    return record.name.lower(), record.name


def case_sensitive_key(record: CompletionRecord) -> str:
    return record.name


def sort_key_for(case_sensitive: bool) -> SortKey:
    """Map the ``case_sensitive`` config flag to a catalog sort key."""
    return case_sensitive_key if case_sensitive else case_insensitive_key
