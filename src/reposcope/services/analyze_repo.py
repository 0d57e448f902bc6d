"""Analyze-repository use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the workspace manager (and through it the :class:`RepoCloner` port) and the
pure service modules.  The interface layer injects concrete adapters at
runtime.
"""

from __future__ import annotations

import logging
from pathlib import Path

from reposcope.domain.entities import AnalysisReport
from reposcope.domain.exceptions import AnalysisError, ReposcopeError
from reposcope.domain.value_objects import RepoUrl
from reposcope.services.aggregator import AnalysisState
from reposcope.services.file_discovery import JAVA_SUFFIX, discover_source_files
from reposcope.services.java_parser import parse_source_file
from reposcope.services.type_visitor import visit_compilation_unit
from reposcope.services.workspace import WorkspaceManager

logger = logging.getLogger(__name__)


class AnalyzeRepoUseCase:
    """Orchestrates the full repo → report pipeline.

    Parameters
    ----------
    workspace:
        Manager of the directory the repository is cloned into.
    source_suffix:
        File-name suffix of the source files to analyze.
    source_encoding:
        Encoding used to decode source files.
    """

    def __init__(
        self,
        workspace: WorkspaceManager,
        source_suffix: str = JAVA_SUFFIX,
        source_encoding: str = "utf-8",
    ) -> None:
        self._workspace = workspace
        self._suffix = source_suffix
        self._encoding = source_encoding

    # ── Public entry point ──────────────────────────────────────────────

    def execute(self, repo_url: str) -> AnalysisReport:
        """Clone ``repo_url``, analyze it and return a report; never raises."""
        try:
            logger.info("Starting repository analysis for URL: %s", repo_url)
            url = RepoUrl.from_string(repo_url)
            with self._workspace.lock:
                repo_dir = self._workspace.prepare(url)
                return self.analyze_directory(repo_dir, url.name)
        except ReposcopeError as exc:
            logger.error("Error analyzing repository: %s: %s", repo_url, exc)
            return AnalysisReport.error(str(exc))
        except Exception as exc:
            logger.exception("Error analyzing repository: %s", repo_url)
            return AnalysisReport.error(str(exc) or type(exc).__name__)

    def analyze_directory(self, root: Path, repo_name: str) -> AnalysisReport:
        """Run discovery, parsing and visiting over an already populated directory."""
        state = AnalysisState()
        logger.info("Starting analysis of files in directory: %s", Path(root).absolute())

        source_files = discover_source_files(root, self._suffix)
        logger.info("Found %d Java files in the repository.", len(source_files))

        for path in source_files:
            logger.info("Analyzing Java file: %s", path.absolute())
            unit = parse_source_file(path, self._encoding)
            if unit is None:
                continue
            logger.debug("Successfully parsed file: %s", path.name)
            try:
                visit_compilation_unit(unit, state)
            except RecursionError as exc:
                raise AnalysisError(f"AST too deep to analyze in {path}") from exc

        logger.info(
            "File analysis completed. Total classes: %d, Total methods: %d",
            state.total_classes,
            state.total_methods,
        )
        logger.info(
            "Repository analysis summary: abstractClasses = %d, interfaces = %d",
            state.abstract_classes,
            state.interfaces,
        )
        return state.build_report(repo_name)
