from __future__ import annotations

import logging
from datetime import date

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool

from .config import load_config
from .dependencies import get_catalog, get_store, get_today
from .errors import (
    InvalidEncodingError,
    MalformedFormError,
    MissingVoterError,
    StorageError,
    SubmissionError,
)
from .intake.form import parse_vote_form, submit_votes
from .presenter import build_raw_results, build_results, render_vote_form
from .venues.catalog import VenueCatalog
from .votes.models import (
    ErrorResponse,
    RawResultsResponse,
    ResultsResponse,
    VenueOut,
    VenuesResponse,
)
from .votes.store import VoteStore

logger = logging.getLogger(__name__)

config = load_config()
logging.basicConfig(level=config.log_level)

app = FastAPI(title="Lunch Vote API", version="1.0.0")
app.state.catalog = VenueCatalog(config.venues)
app.state.store = VoteStore(config.database_path)

_ERROR_MESSAGES: dict[str, str] = {
    MissingVoterError.reason: "Please enter your name before voting.",
    InvalidEncodingError.reason: "Form input was invalid UTF-8.",
    MalformedFormError.reason: "Invalid form input.",
}


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Vote storage unavailable"})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index(catalog: VenueCatalog = Depends(get_catalog)) -> str:
    return render_vote_form(catalog)


@app.get("/venues", response_model=VenuesResponse)
def venues(catalog: VenueCatalog = Depends(get_catalog)) -> VenuesResponse:
    return VenuesResponse(venues=[VenueOut(key=v.key, name=v.name) for v in catalog])


# ── Voting ───────────────────────────────────────────────────────────────


@app.post("/vote")
async def vote(
    request: Request,
    catalog: VenueCatalog = Depends(get_catalog),
    store: VoteStore = Depends(get_store),
    today: date = Depends(get_today),
) -> RedirectResponse:
    body = await request.body()
    try:
        submission = parse_vote_form(body, catalog)
    except SubmissionError as exc:
        logger.info("Rejected vote submission (%s): %s", exc.reason, exc)
        return RedirectResponse(url=f"/error?reason={exc.reason}", status_code=303)

    await run_in_threadpool(submit_votes, submission, store, today)
    return RedirectResponse(url="/results", status_code=303)


@app.get("/error", response_model=ErrorResponse, status_code=400)
def error(reason: str = Query(default=SubmissionError.reason)) -> ErrorResponse:
    return ErrorResponse(
        error=reason,
        detail=_ERROR_MESSAGES.get(reason, "The vote could not be recorded."),
    )


# ── Results ──────────────────────────────────────────────────────────────


@app.get("/results", response_model=ResultsResponse)
def results(
    catalog: VenueCatalog = Depends(get_catalog),
    store: VoteStore = Depends(get_store),
    today: date = Depends(get_today),
) -> ResultsResponse:
    return build_results(today, catalog, store)


@app.get("/results/raw", response_model=RawResultsResponse)
def raw_results(store: VoteStore = Depends(get_store)) -> RawResultsResponse:
    return build_raw_results(store)
