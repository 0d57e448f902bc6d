"""Aggregator — per-run counters and lists, and final report assembly."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from reposcope.domain.entities import (
    AnalysisReport,
    CallEdge,
    ClassRecord,
    ControlFlowEntry,
    ReportData,
    RepositoryInfo,
    Summary,
)


@dataclass
class AnalysisState:
    """Everything one analysis run accumulates.

    A fresh instance is created for every run, so repeated analyses never
    add up.  Mutations go through the methods below, which hold a lock, so
    the counters and lists stay consistent if visitors ever run concurrently.
    """

    interfaces: int = 0
    abstract_classes: int = 0
    total_classes: int = 0
    total_methods: int = 0
    methods_with_loops: int = 0
    methods_with_conditionals: int = 0
    class_details: list[ClassRecord] = field(default_factory=list)
    method_calls: list[CallEdge] = field(default_factory=list)
    loops_and_conditionals: list[ControlFlowEntry] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    # ── Counters ────────────────────────────────────────────────────────

    def increment(self, counter: str, amount: int = 1) -> int:
        """Add ``amount`` to the named counter and return the new value."""
        with self._lock:
            value = getattr(self, counter) + amount
            setattr(self, counter, value)
            return value

    # ── Lists ───────────────────────────────────────────────────────────

    def add_class(self, record: ClassRecord) -> None:
        with self._lock:
            self.class_details.append(record)

    def add_call(self, edge: CallEdge) -> None:
        with self._lock:
            self.method_calls.append(edge)

    def add_control_flow(self, entry: ControlFlowEntry) -> None:
        with self._lock:
            self.loops_and_conditionals.append(entry)

    # ── Report ──────────────────────────────────────────────────────────

    def build_report(self, repo_name: str) -> AnalysisReport:
        """Snapshot the counters and lists into a success report."""
        with self._lock:
            data = ReportData(
                repository_info=RepositoryInfo(
                    repo_name=repo_name,
                    total_classes=self.total_classes,
                    total_methods=self.total_methods,
                ),
                class_details=list(self.class_details),
                method_calls=list(self.method_calls),
                loops_and_conditionals=list(self.loops_and_conditionals),
                summary=Summary(
                    abstract_classes=self.abstract_classes,
                    interfaces=self.interfaces,
                    method_with_loops=self.methods_with_loops,
                    method_with_conditionals=self.methods_with_conditionals,
                ),
            )
        return AnalysisReport.success(data)
