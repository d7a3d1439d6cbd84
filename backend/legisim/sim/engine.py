from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .agent import Legislator, Party, Vote, unique_issues
from .geometry import COMPASS_BOUND, Point
from .naming import WordPools, generate_bill_name, load_word_pools, random_compass, random_select, shuffled

LOGGER = logging.getLogger(__name__)

# A bill lands within this distance (per axis) of its sponsor's compass.
BILL_SPREAD = 5.0
PASS_THRESHOLD = 0.5

class LegislatureConfigError(ValueError):
    """Raised when a legislature can't be generated from the given pools and counts."""

@dataclass(frozen=True)
class Bill:
    name: str
    issue: str
    compass: Point
    sponsor: Optional[int] = None      # index into Legislature.legislators

@dataclass
class SessionResult:
    bill: Bill
    passed: bool
    aye: int
    nay: int
    abstain: int
    votes: Dict[int, Vote] = field(default_factory=dict)        # legislator index -> vote
    party_lines: Dict[int, Vote] = field(default_factory=dict)  # party index -> vote

    @property
    def name(self) -> str:
        return self.bill.name

    @property
    def sponsor(self) -> Optional[int]:
        return self.bill.sponsor

    @property
    def issue(self) -> str:
        return self.bill.issue

    @property
    def compass(self) -> Point:
        return self.bill.compass

def tally(votes: Mapping[int, Vote]) -> Tuple[int, int, int, bool]:
    """Count a roll call and apply the passage rule.

    A bill passes when strictly more than half of the non-abstaining votes are
    AYE. With no AYE or NAY votes at all the bill does not pass.
    """
    aye = sum(1 for v in votes.values() if v == "AYE")
    nay = sum(1 for v in votes.values() if v == "NAY")
    abstain = len(votes) - (aye + nay)
    cast = aye + nay
    passed = cast > 0 and (aye / cast) > PASS_THRESHOLD
    return aye, nay, abstain, passed

def _require_pool(pool: Sequence[str], what: str) -> None:
    if not pool:
        raise LegislatureConfigError(f"The {what} pool is empty.")

def _require_positive(value: int, what: str) -> None:
    if value < 1:
        raise LegislatureConfigError(f"{what} must be at least 1 (got {value}).")

class Legislature:
    """A generated population of parties and legislators plus its session history.

    Parties and legislators are generated once, in the constructor, and never
    change membership. Legislators point at their party by index and parties
    list their members by index. Every random draw goes through `rng`, so a
    seeded `random.Random` reproduces the same legislature and sessions.
    """

    def __init__(
        self,
        legislator_names: Sequence[str],
        party_names: Sequence[str],
        colors: Sequence[str],
        issues: Sequence[str],
        size: int,
        num_parties: int,
        issue_selections: int,
        rng: Optional[random.Random] = None,
        delegate_to_party: bool = False,
        words: Optional[WordPools] = None,
    ):
        _require_positive(size, "Legislature size")
        _require_positive(num_parties, "Number of parties")
        _require_positive(issue_selections, "Issue selections")
        _require_pool(legislator_names, "legislator name")
        _require_pool(party_names, "party name")
        _require_pool(colors, "party color")
        _require_pool(issues, "issue")

        self.rng = rng or random.Random()
        self.size = size
        self.issues = issues
        self.issue_selections = issue_selections
        self.delegate_to_party = delegate_to_party
        self.words = words or load_word_pools()

        legislator_names = shuffled(legislator_names, self.rng)
        party_names = shuffled(party_names, self.rng)
        colors = shuffled(colors, self.rng)
        self.parties: List[Party] = self._generate_parties(party_names, colors, num_parties)
        self.legislators: List[Legislator] = self._generate_legislators(legislator_names, size)
        LOGGER.info(
            "Created a legislature with %d members and %d available parties to join.",
            size, num_parties,
        )

        self.laws: List[str] = []
        self.sessions = 0

    # --- generation ---

    def _roll_issues(self) -> List[str]:
        # With replacement: an actor may roll the same issue more than once.
        return [random_select(self.issues, self.rng) for _ in range(self.issue_selections)]

    def _generate_parties(self, names: Sequence[str], colors: Sequence[str], num_parties: int) -> List[Party]:
        parties: List[Party] = []
        for i in range(num_parties):
            issues = self._roll_issues()
            parties.append(
                Party(
                    name=names[i % len(names)],
                    color=colors[i % len(colors)],
                    compass=random_compass(COMPASS_BOUND, self.rng),
                    issues=issues,
                )
            )
        return parties

    def _closest_party(self, compass: Point) -> int:
        # Earliest party wins ties.
        best = 0
        for i in range(1, len(self.parties)):
            if compass.distance_to(self.parties[i].compass) < compass.distance_to(self.parties[best].compass):
                best = i
        return best

    def _generate_legislators(self, names: Sequence[str], size: int) -> List[Legislator]:
        legislators: List[Legislator] = []
        for i in range(size):
            compass = random_compass(COMPASS_BOUND, self.rng)
            party_idx = self._closest_party(compass)
            party = self.parties[party_idx]
            own = self._roll_issues()
            legislators.append(
                Legislator(
                    name=names[i % len(names)],
                    compass=compass,
                    issues=unique_issues(own + party.issues),
                    party=party_idx,
                )
            )
            party.members.append(i)
        return legislators

    # --- lookups ---

    def party_of(self, legislator: Legislator) -> Party:
        return self.parties[legislator.party]

    def members_of(self, party: Party) -> List[Legislator]:
        return [self.legislators[i] for i in party.members]

    # --- sessions ---

    def introduce_bill(self) -> Bill:
        """Draft a random bill: random sponsor, one of the sponsor's issues, near the sponsor's compass."""
        name = generate_bill_name(self.words.adjectives, self.words.nouns, self.words.verbs, self.rng)
        sponsor = self.rng.randrange(len(self.legislators))
        sponsor_leg = self.legislators[sponsor]
        issue = random_select(sponsor_leg.issues, self.rng)
        compass = sponsor_leg.compass.add(random_compass(BILL_SPREAD, self.rng))
        return Bill(name=name, issue=issue, compass=compass, sponsor=sponsor)

    def hold_session(self) -> SessionResult:
        """Hold a session where a random legislator sponsors a bill and everyone votes."""
        return self.vote(self.introduce_bill())

    def vote(self, bill: Bill) -> SessionResult:
        """Put `bill` to a floor vote and record the outcome.

        The sponsor (if any) always votes AYE. Every party records its party
        line and every legislator records their vote in their history.
        """
        self.sessions += 1
        if bill.sponsor is not None:
            sponsor = self.legislators[bill.sponsor]
            sponsor.bills_introduced.append(bill.name)
            LOGGER.info(
                "%s (%s) is introducing the %s, which is about the following topic: %s",
                sponsor.name, self.party_of(sponsor).name, bill.name, bill.issue,
            )

        party_lines: Dict[int, Vote] = {}
        for i, party in enumerate(self.parties):
            line = party.decide(bill.issue, bill.compass)
            party_lines[i] = line
            party.record_vote(bill.name, line)

        votes: Dict[int, Vote] = {}
        for i, legislator in enumerate(self.legislators):
            if i == bill.sponsor:
                v: Vote = "AYE"
            else:
                fallback = self.party_of(legislator) if self.delegate_to_party else None
                v = legislator.decide(bill.issue, bill.compass, self.rng, fallback=fallback)
            votes[i] = v
            legislator.record_vote(bill.name, v)

        aye, nay, abstain, passed = tally(votes)
        if passed:
            self.laws.append(bill.name)
        LOGGER.info(
            "The %s %s with %d AYE %d NAY and %d abstaining.",
            bill.name, "PASSED" if passed else "FAILED", aye, nay, abstain,
        )
        return SessionResult(
            bill=bill,
            passed=passed,
            aye=aye,
            nay=nay,
            abstain=abstain,
            votes=votes,
            party_lines=party_lines,
        )

    # --- summaries ---

    def percent_passed(self) -> float:
        return (len(self.laws) / self.sessions) * 100 if self.sessions else 0.0

    def failed(self) -> int:
        return self.sessions - len(self.laws)
