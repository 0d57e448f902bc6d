"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ClassKind(str, Enum):
    """Classification of a declared type."""

    INTERFACE = "Interface"
    ABSTRACT_CLASS = "Abstract Class"
    REGULAR_CLASS = "Regular Class"


class ControlFlowKind(str, Enum):
    """Which control-flow construct a top-level statement is."""

    LOOP = "loopType"
    CONDITIONAL = "conditionalType"


class ReportStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class MethodRecord:
    """Per-method features extracted from the method's top-level statements."""

    name: str
    contains_loops: bool = False
    contains_conditionals: bool = False


@dataclass(slots=True)
class ClassRecord:
    """A class or interface declaration and its directly declared methods."""

    class_name: str
    kind: ClassKind
    methods: list[MethodRecord] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CallEdge:
    """One call expression textually appearing inside ``caller``'s body."""

    caller: str
    called_method: str


@dataclass(frozen=True, slots=True)
class ControlFlowEntry:
    """A top-level loop or conditional statement together with its source text."""

    method: str
    kind: ControlFlowKind
    text: str


@dataclass(frozen=True, slots=True)
class RepositoryInfo:
    repo_name: str
    total_classes: int
    total_methods: int


@dataclass(frozen=True, slots=True)
class Summary:
    abstract_classes: int
    interfaces: int
    method_with_loops: int
    method_with_conditionals: int


@dataclass(frozen=True, slots=True)
class ReportData:
    """Everything a successful analysis produces."""

    repository_info: RepositoryInfo
    class_details: list[ClassRecord]
    method_calls: list[CallEdge]
    loops_and_conditionals: list[ControlFlowEntry]
    summary: Summary


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """The final outcome of one analysis run: either data or an error message."""

    status: ReportStatus
    data: ReportData | None = None
    message: str | None = None

    @classmethod
    def success(cls, data: ReportData) -> AnalysisReport:
        return cls(status=ReportStatus.SUCCESS, data=data)

    @classmethod
    def error(cls, message: str) -> AnalysisReport:
        return cls(status=ReportStatus.ERROR, message=message)
