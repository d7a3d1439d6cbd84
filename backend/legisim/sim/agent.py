from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Literal, Optional

from .geometry import Point

Vote = Literal["AYE", "NAY", "ABSTAIN"]

# Party lines are deterministic: a bill further than this from the party compass gets an AYE.
PARTY_LINE_THRESHOLD = 7.5
# Legislators draw a fresh tolerance in [MIN, MIN + SPREAD) for every decision.
LEGISLATOR_TOLERANCE_MIN = 5.0
LEGISLATOR_TOLERANCE_SPREAD = 5.0

def unique_issues(issues: Iterable[str]) -> List[str]:
    # Drop duplicates but keep first-seen order so seeded draws stay reproducible.
    return list(dict.fromkeys(issues))

@dataclass(eq=False)
class PoliticalActor:
    name: str
    compass: Point
    issues: List[str] = field(default_factory=list)
    vote_history: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.issues = unique_issues(self.issues)

    def cares_about(self, issue: str) -> bool:
        return issue in self.issues

    def record_vote(self, bill_name: str, vote: Vote) -> None:
        self.vote_history.append(f"{bill_name} - {vote}")

@dataclass(eq=False)
class Party(PoliticalActor):
    color: str = "gray"                                   # purely cosmetic for UI
    members: List[int] = field(default_factory=list)      # indices into Legislature.legislators

    def decide(self, bill_issue: str, bill_compass: Point) -> Vote:
        """The party line on a bill.

        Parties abstain on issues they don't hold. Otherwise the line is AYE when
        the bill sits *further* than PARTY_LINE_THRESHOLD from the party compass
        and NAY when it is at or inside it.
        """
        if not self.cares_about(bill_issue):
            return "ABSTAIN"
        if self.compass.distance_to(bill_compass) > PARTY_LINE_THRESHOLD:
            return "AYE"
        return "NAY"

@dataclass(eq=False)
class Legislator(PoliticalActor):
    party: int = 0                                        # index into Legislature.parties
    bills_introduced: List[str] = field(default_factory=list)

    def decide(
        self,
        bill_issue: str,
        bill_compass: Point,
        rng: Optional[random.Random] = None,
        fallback: Optional[Party] = None,
    ) -> Vote:
        """How this legislator votes on a bill.

        Outside their own issues a legislator abstains, or follows `fallback`'s
        party line when one is given. On an issue they hold, they vote NAY when
        the bill is further away than a tolerance drawn uniformly from [5, 10),
        so two evaluations of the same bill may differ.
        """
        if not self.cares_about(bill_issue):
            if fallback is not None:
                return fallback.decide(bill_issue, bill_compass)
            return "ABSTAIN"
        rng = rng or random.Random()
        tolerance = LEGISLATOR_TOLERANCE_MIN + rng.random() * LEGISLATOR_TOLERANCE_SPREAD
        if self.compass.distance_to(bill_compass) > tolerance:
            return "NAY"
        return "AYE"
