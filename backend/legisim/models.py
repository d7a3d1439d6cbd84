from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional, Union

from .config import DEFAULT_ISSUES, DEFAULT_PARTIES, DEFAULT_SIZE
from .sim.agent import Vote


def _split_lines(value: Union[str, List[str], None]) -> Optional[List[str]]:
    # Form textareas send one name per line; blank lines are dropped.
    if value is None:
        return None
    lines = value.split("\n") if isinstance(value, str) else list(value)
    if not all(isinstance(s, str) for s in lines):
        raise ValueError("expected newline-separated text or a list of strings")
    cleaned = [s.strip() for s in lines if s.strip()]
    return cleaned or None


class ElectRequest(BaseModel):
    size: int = Field(DEFAULT_SIZE, ge=1, le=1000, description="Number of legislators")
    parties: int = Field(DEFAULT_PARTIES, ge=1, le=50, description="Number of parties to generate")
    issues: int = Field(DEFAULT_ISSUES, ge=1, le=100, description="Issue universe size when no issue names are given")
    issue_selections: Optional[int] = Field(None, ge=1, le=100, description="Issues rolled per actor (defaults to `issues`)")
    legislator_names: Optional[List[str]] = Field(None, examples=["Ada Alvarez\nCaleb Nguyen"])
    party_names: Optional[List[str]] = Field(None, examples=[["Harbor Party", "Forest Party"]])
    issue_names: Optional[List[str]] = Field(None, examples=[["Health", "Defense"]])
    colors: Optional[List[str]] = None
    delegate_to_party: bool = False
    seed: Optional[int] = None

    @field_validator("legislator_names", "party_names", "issue_names", "colors", mode="before")
    @classmethod
    def _lines(cls, v):
        return _split_lines(v)


class PointOut(BaseModel):
    x: float
    y: float


class PartyRef(BaseModel):
    index: int
    name: str
    color: str


class PartySummary(PartyRef):
    members: int


class LegislatureSummary(BaseModel):
    size: int
    parties: List[PartySummary]
    issues: List[str]
    laws: List[str]
    sessions: int
    passed: int
    percent_passed: float
    failed: int


class LegislatorDetail(BaseModel):
    index: int
    name: str
    party: PartyRef
    compass: PointOut
    issues: List[str]
    bills_introduced: List[str]
    vote_history: List[str]


class PartyDetail(BaseModel):
    index: int
    name: str
    color: str
    compass: PointOut
    issues: List[str]
    members: List[int]
    vote_history: List[str] = Field(default_factory=list, description="Party line on every bill")


class SessionResponse(BaseModel):
    session: int
    name: str
    sponsor: Optional[int]
    sponsor_name: Optional[str] = None
    issue: str
    compass: PointOut
    passed: bool
    aye: int
    nay: int
    abstain: int
    votes: Dict[int, Vote]
    party_lines: Dict[int, Vote]
