"""Pydantic response DTOs for the API boundary.

Field names follow the report's wire format (camelCase); the domain
entities stay snake_case and know nothing about JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from reposcope.domain.entities import (
    AnalysisReport,
    ClassRecord,
    ControlFlowEntry,
    ControlFlowKind,
    ReportData,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RepositoryInfoSchema(_CamelModel):
    repo_name: str
    total_classes: int
    total_methods: int


class MethodSchema(_CamelModel):
    name: str
    contains_loops: bool
    contains_conditionals: bool


class ClassDetailSchema(_CamelModel):
    class_name: str
    type: str
    methods: list[MethodSchema]

    @classmethod
    def from_record(cls, record: ClassRecord) -> ClassDetailSchema:
        return cls(
            class_name=record.class_name,
            type=record.kind.value,
            methods=[
                MethodSchema(
                    name=m.name,
                    contains_loops=m.contains_loops,
                    contains_conditionals=m.contains_conditionals,
                )
                for m in record.methods
            ],
        )


class MethodCallSchema(_CamelModel):
    caller: str
    called_method: str


class ControlFlowSchema(_CamelModel):
    """Exactly one of ``loopType`` / ``conditionalType`` is set."""

    method: str
    loop_type: str | None = None
    conditional_type: str | None = None

    @classmethod
    def from_entry(cls, entry: ControlFlowEntry) -> ControlFlowSchema:
        if entry.kind is ControlFlowKind.LOOP:
            return cls(method=entry.method, loop_type=entry.text)
        return cls(method=entry.method, conditional_type=entry.text)


class SummarySchema(_CamelModel):
    abstract_classes: int
    interfaces: int
    method_with_loops: int
    method_with_conditionals: int


class ReportDataSchema(_CamelModel):
    repository_info: RepositoryInfoSchema
    class_details: list[ClassDetailSchema]
    method_calls: list[MethodCallSchema]
    loops_and_conditionals: list[ControlFlowSchema]
    summary: SummarySchema

    @classmethod
    def from_data(cls, data: ReportData) -> ReportDataSchema:
        info = data.repository_info
        summary = data.summary
        return cls(
            repository_info=RepositoryInfoSchema(
                repo_name=info.repo_name,
                total_classes=info.total_classes,
                total_methods=info.total_methods,
            ),
            class_details=[ClassDetailSchema.from_record(r) for r in data.class_details],
            method_calls=[
                MethodCallSchema(caller=e.caller, called_method=e.called_method)
                for e in data.method_calls
            ],
            loops_and_conditionals=[
                ControlFlowSchema.from_entry(e) for e in data.loops_and_conditionals
            ],
            summary=SummarySchema(
                abstract_classes=summary.abstract_classes,
                interfaces=summary.interfaces,
                method_with_loops=summary.method_with_loops,
                method_with_conditionals=summary.method_with_conditionals,
            ),
        )


class AnalyzeResponse(_CamelModel):
    """Response of ``GET /api/repo/analyze``: ``data`` on success, ``message`` on error."""

    status: str
    data: ReportDataSchema | None = None
    message: str | None = None

    @classmethod
    def from_report(cls, report: AnalysisReport) -> AnalyzeResponse:
        if report.data is None:
            return cls(status=report.status.value, message=report.message)
        return cls(status=report.status.value, data=ReportDataSchema.from_data(report.data))


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
