"""Domain exception hierarchy.

Inner layers raise these; the analysis use case turns fatal ones into an
error report and the interface layer translates whatever escapes it.
"""

from __future__ import annotations


class ReposcopeError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRepositoryUrlError(ReposcopeError):
    """The supplied repository URL is blank."""


# ── Workspace errors ────────────────────────────────────────────────────────


class WorkspacePreparationError(ReposcopeError):
    """An entry of the previous workspace could not be removed."""


class CloneError(ReposcopeError):
    """The clone collaborator failed to fetch the repository."""


# ── Processing errors ───────────────────────────────────────────────────────


class SourceParseError(ReposcopeError):
    """A single source file could not be read or parsed (recoverable)."""


class AnalysisError(ReposcopeError):
    """Unexpected failure while traversing the parsed sources."""
