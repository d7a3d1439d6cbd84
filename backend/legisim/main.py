from __future__ import annotations
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, LOG_LEVEL
from .models import (
    ElectRequest,
    LegislatureSummary,
    LegislatorDetail,
    PartyDetail,
    SessionResponse,
)
from .sim.engine import LegislatureConfigError
from .state import (
    build_legislature,
    get_active_legislature,
    hold_active_session,
    serialize_legislator,
    serialize_party,
    set_active_legislature,
    summarize,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
LOGGER = logging.getLogger(__name__)

app = FastAPI(title="Legislature Simulator", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_legislature():
    legislature = get_active_legislature()
    if legislature is None:
        raise HTTPException(status_code=404, detail="No legislature has been elected yet.")
    return legislature


@app.get("/health")
def health():
    legislature = get_active_legislature()
    return {"ok": True, "elected": legislature is not None}


@app.post("/legislature/elect", response_model=LegislatureSummary)
def elect(req: ElectRequest):
    try:
        legislature = build_legislature(req)
    except LegislatureConfigError as e:
        raise HTTPException(status_code=400, detail=f"Cannot elect legislature: {e}")
    set_active_legislature(legislature)
    return summarize(legislature)


@app.get("/legislature", response_model=LegislatureSummary)
def legislature_summary():
    return summarize(_require_legislature())


@app.post("/legislature/session", response_model=SessionResponse)
def next_session():
    # Sessions are serialized in state; the UI shouldn't fire the next one until
    # it has finished showing this one anyway.
    out = hold_active_session()
    if out is None:
        raise HTTPException(status_code=409, detail="Elect a legislature before holding a session.")
    return out


@app.get("/legislators/{index}", response_model=LegislatorDetail)
def legislator_detail(index: int):
    legislature = _require_legislature()
    if not 0 <= index < len(legislature.legislators):
        raise HTTPException(status_code=404, detail=f"No legislator at index {index}.")
    return serialize_legislator(legislature, index)


@app.get("/parties/{index}", response_model=PartyDetail)
def party_detail(index: int):
    legislature = _require_legislature()
    if not 0 <= index < len(legislature.parties):
        raise HTTPException(status_code=404, detail=f"No party at index {index}.")
    return serialize_party(legislature, index)
