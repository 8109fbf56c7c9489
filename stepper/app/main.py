import logging

from fastapi import FastAPI, HTTPException, Depends, Query, status
from fastapi.responses import Response

from ..config import settings
from ..execution.schemas.results import BackResult, ContinueResult, StartResult
from ..services.exceptions import (
    ArticleNotFoundError,
    NoActiveArticleError,
    SessionNotFoundError,
)
from ..services.troubleshooting import FailureOutcome, TroubleshootingService
from ..state.models import CompletionSummary
from .dependencies import get_troubleshooting_service
from .schemas import (
    ArticleCard,
    CreateSessionResponse,
    FailureReport,
    SearchResponse,
    SessionRead,
    StartArticleRequest,
)

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="Stepper Troubleshooting")


# --- Error Mapping ---

def _raise_http(error: Exception):
    if isinstance(error, (SessionNotFoundError, ArticleNotFoundError)):
        raise HTTPException(status_code=404, detail=str(error))
    if isinstance(error, NoActiveArticleError):
        raise HTTPException(status_code=409, detail=str(error))
    raise error


# --- Endpoints ---

@app.get("/articles/search", response_model=SearchResponse)
def search_articles(
    q: str = Query(..., min_length=1),
    limit: int | None = Query(None, ge=1),
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    """Ranks articles for a free-text issue description."""
    outcome = service.search(q, limit)
    return SearchResponse(
        results=[
            ArticleCard(
                id=r.article.id,
                title=r.article.title,
                summary=r.article.summary,
                product=r.article.product,
                total_steps=len(r.article.steps),
                score=r.score,
            )
            for r in outcome.results
        ],
        low_confidence=outcome.low_confidence,
    )


@app.post(
    "/sessions",
    response_model=CreateSessionResponse,
    status_code=status.HTTP_201_CREATED
)
def create_session(
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    """Starts a new idle session."""
    session = service.create_session()
    return CreateSessionResponse(session_id=session.session_id)


@app.get("/sessions/{session_id}", response_model=SessionRead)
def get_session(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    """Retrieves the session with its position on the active path."""
    session = service.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")

    state = session.runner.get_state()
    article = service.selected_article(session_id)

    return SessionRead(
        session_id=session.session_id,
        status=session.runner.phase(article).name,
        selected_article_id=state.selected_article_id,
        active_path=state.active_path,
        current_step_index=state.current_step_index,
        total_steps=session.runner.get_total_steps(article),
        current_step=session.runner.get_current_step(article),
        completed_step_ids=state.completed_step_ids,
        updated_at=session.updated_at,
    )


@app.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    """
    Deletes a session. Returns 204 No Content on success.
    """
    success = service.delete_session(session_id)
    if not success:
        raise HTTPException(status_code=404, detail="Session not found")

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/sessions/{session_id}/article", response_model=StartResult)
def start_article(
    session_id: str,
    request: StartArticleRequest,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        return service.start_article(session_id, request.article_id)
    except (SessionNotFoundError, ArticleNotFoundError) as e:
        _raise_http(e)


@app.post("/sessions/{session_id}/continue", response_model=ContinueResult)
def continue_step(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        return service.continue_step(session_id)
    except (SessionNotFoundError, ArticleNotFoundError, NoActiveArticleError) as e:
        _raise_http(e)


@app.post("/sessions/{session_id}/back", response_model=BackResult)
def back_step(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        return service.back_step(session_id)
    except SessionNotFoundError as e:
        _raise_http(e)


@app.post("/sessions/{session_id}/failures", response_model=FailureOutcome)
def report_failure(
    session_id: str,
    report: FailureReport,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    """Records a failed step and moves the session to the best alternative path."""
    try:
        return service.report_failure(session_id, report.reason_category.value, report.note)
    except (SessionNotFoundError, ArticleNotFoundError, NoActiveArticleError) as e:
        _raise_http(e)


@app.post("/sessions/{session_id}/reset", status_code=status.HTTP_204_NO_CONTENT)
def reset_session(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        service.reset(session_id)
    except SessionNotFoundError as e:
        _raise_http(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/sessions/{session_id}/summary", response_model=CompletionSummary)
def get_summary(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        return service.get_summary(session_id)
    except SessionNotFoundError as e:
        _raise_http(e)
