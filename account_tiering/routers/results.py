"""
Results Router - Account Tiering
account_tiering/routers/results.py

Step 4: ranked, tiered results and CSV export, plus a stateless
evaluation endpoint for callers that keep their own wizard state.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from account_tiering.config import settings
from account_tiering.core.dependencies import get_scoring_engine, get_session
from account_tiering.models.evaluation import EvaluateRequest, EvaluationResult, ResultsReport
from account_tiering.scoring.engine import ScoringEngine
from account_tiering.services.export import export_results_csv
from account_tiering.services.report import build_report
from account_tiering.services.wizard_session import WizardSession

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Results & Tiering"])


@router.get(
    "/sessions/{session_id}/results",
    response_model=ResultsReport,
    summary="Ranked results",
    description="Tier counts, top accounts and the full ranking of the session's accounts.",
)
async def get_results(
    top: Optional[int] = Query(default=None, ge=1, le=100, description="Size of the top accounts table"),
    session: WizardSession = Depends(get_session),
) -> ResultsReport:
    return build_report(session.results, top_limit=top)


@router.get(
    "/sessions/{session_id}/results/export",
    summary="Export results as CSV",
    response_class=Response,
)
async def export_results(session: WizardSession = Depends(get_session)) -> Response:
    return Response(
        content=export_results_csv(session.results),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{settings.EXPORT_FILENAME}"'},
    )


@router.post(
    "/evaluate",
    response_model=List[EvaluationResult],
    summary="Score accounts without a session",
)
async def evaluate(
    request: EvaluateRequest,
    engine: ScoringEngine = Depends(get_scoring_engine),
) -> List[EvaluationResult]:
    return engine.evaluate(request.accounts, request.questions, request.answers)
