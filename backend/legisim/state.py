from __future__ import annotations

import logging
import random
import threading
from typing import Any, Dict, List, Optional

from .config import SEED
from .models import ElectRequest
from .sim.agent import Legislator, Party
from .sim.engine import Legislature, SessionResult
from .sim.geometry import Point
from .sim.naming import WordPools, load_word_pools, shuffled, title_case

LOGGER = logging.getLogger(__name__)


def _round(num: float) -> float:
    return round(num * 100) / 100


def default_party_names(words: WordPools) -> List[str]:
    return [title_case(f"{noun} Party") for noun in words.nouns]


def default_issues(words: WordPools, count: int, rng: random.Random) -> List[str]:
    # A random slice of the noun pool.
    return shuffled(words.nouns, rng)[:count]


def build_legislature(req: ElectRequest, words: Optional[WordPools] = None) -> Legislature:
    """Elect a legislature from the form options, filling in the default pools."""
    words = words or load_word_pools()
    seed = req.seed if req.seed is not None else SEED
    rng = random.Random(seed)
    issues = req.issue_names or default_issues(words, req.issues, rng)
    LOGGER.debug("Electing a legislature (seed=%s, issues=%s)", seed, issues)
    return Legislature(
        legislator_names=req.legislator_names or list(words.names),
        party_names=req.party_names or default_party_names(words),
        colors=req.colors or list(words.colors),
        issues=issues,
        size=req.size,
        num_parties=req.parties,
        issue_selections=req.issue_selections or req.issues,
        rng=rng,
        delegate_to_party=req.delegate_to_party,
        words=words,
    )


# --- In-memory "current" legislature ---

ACTIVE_LEGISLATURE: Optional[Legislature] = None
# One session (or election) at a time.
SESSION_LOCK = threading.Lock()


def set_active_legislature(legislature: Optional[Legislature]) -> None:
    global ACTIVE_LEGISLATURE
    with SESSION_LOCK:
        ACTIVE_LEGISLATURE = legislature


def get_active_legislature() -> Optional[Legislature]:
    return ACTIVE_LEGISLATURE


def hold_active_session() -> Optional[Dict[str, Any]]:
    with SESSION_LOCK:
        if ACTIVE_LEGISLATURE is None:
            return None
        result = ACTIVE_LEGISLATURE.hold_session()
        return serialize_session(ACTIVE_LEGISLATURE, result)


# --- Serialization for the UI ---

def serialize_point(p: Point) -> Dict[str, float]:
    # x is the economic axis, y the social one.
    return {"x": _round(p.x), "y": _round(p.y)}


def party_ref(legislature: Legislature, index: int) -> Dict[str, Any]:
    party = legislature.parties[index]
    return {"index": index, "name": party.name, "color": party.color}


def summarize(legislature: Legislature) -> Dict[str, Any]:
    return {
        "size": legislature.size,
        "parties": [
            {**party_ref(legislature, i), "members": len(p.members)}
            for i, p in enumerate(legislature.parties)
        ],
        "issues": list(legislature.issues),
        "laws": list(legislature.laws),
        "sessions": legislature.sessions,
        "passed": len(legislature.laws),
        "percent_passed": _round(legislature.percent_passed()),
        "failed": legislature.failed(),
    }


def serialize_legislator(legislature: Legislature, index: int) -> Dict[str, Any]:
    leg: Legislator = legislature.legislators[index]
    return {
        "index": index,
        "name": leg.name,
        "party": party_ref(legislature, leg.party),
        "compass": serialize_point(leg.compass),
        "issues": list(leg.issues),
        "bills_introduced": list(leg.bills_introduced),
        "vote_history": list(leg.vote_history),
    }


def serialize_party(legislature: Legislature, index: int) -> Dict[str, Any]:
    party: Party = legislature.parties[index]
    return {
        "index": index,
        "name": party.name,
        "color": party.color,
        "compass": serialize_point(party.compass),
        "issues": list(party.issues),
        "members": list(party.members),
        "vote_history": list(party.vote_history),
    }


def serialize_session(legislature: Legislature, result: SessionResult) -> Dict[str, Any]:
    sponsor_name = legislature.legislators[result.sponsor].name if result.sponsor is not None else None
    return {
        "session": legislature.sessions,
        "name": result.name,
        "sponsor": result.sponsor,
        "sponsor_name": sponsor_name,
        "issue": result.issue,
        "compass": serialize_point(result.compass),
        "passed": result.passed,
        "aye": result.aye,
        "nay": result.nay,
        "abstain": result.abstain,
        "votes": dict(result.votes),
        "party_lines": dict(result.party_lines),
    }
