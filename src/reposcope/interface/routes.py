"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Query

from reposcope.interface.dependencies import get_use_case
from reposcope.interface.schemas import AnalyzeResponse
from reposcope.services.analyze_repo import AnalyzeRepoUseCase

router = APIRouter(prefix="/api/repo")


@router.get(
    "/analyze",
    response_model=AnalyzeResponse,
    response_model_exclude_none=True,
    responses={422: {"description": "Missing or empty repoUrl"}},
)
async def analyze(
    repo_url: str = Query(..., alias="repoUrl", min_length=1),
    use_case: AnalyzeRepoUseCase = Depends(get_use_case),
) -> AnalyzeResponse:
    """Clone and analyze a repository; analysis failures come back in the body."""
    report = await asyncio.to_thread(use_case.execute, repo_url)
    return AnalyzeResponse.from_report(report)
