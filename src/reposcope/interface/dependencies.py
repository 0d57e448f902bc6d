"""FastAPI dependency injection wiring."""

from __future__ import annotations

from reposcope.infrastructure.config import get_settings
from reposcope.infrastructure.git_cloner import GitPythonCloner
from reposcope.services.analyze_repo import AnalyzeRepoUseCase
from reposcope.services.workspace import WorkspaceManager

_workspace: WorkspaceManager | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _workspace  # noqa: PLW0603

    settings = get_settings()
    cloner = GitPythonCloner(depth=settings.clone_depth, branch=settings.clone_branch)
    _workspace = WorkspaceManager(cloner=cloner, directory=settings.workspace_dir)


async def shutdown() -> None:
    """Release shared resources; the workspace itself is left on disk."""
    global _workspace  # noqa: PLW0603

    _workspace = None


def get_use_case() -> AnalyzeRepoUseCase:
    """Build the use case around the shared workspace manager."""
    settings = get_settings()

    assert _workspace is not None, "startup() was not called"

    return AnalyzeRepoUseCase(
        workspace=_workspace,
        source_suffix=settings.source_suffix,
        source_encoding=settings.source_encoding,
    )
