from __future__ import annotations

import random

import pytest

from legisim.sim.engine import Legislature
from legisim.sim.naming import WordPools

# ── Pools ─────────────────────────────────────────────────────────────────────


class FixedRandom(random.Random):
    """A random source whose uniform draws always return the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_random() -> type[FixedRandom]:
    return FixedRandom


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def words() -> WordPools:
    return WordPools(
        adjectives=("clean",),
        nouns=("water",),
        verbs=("protection",),
        names=("Ada Alvarez", "Caleb Nguyen"),
        colors=("red", "blue"),
    )


@pytest.fixture
def legislator_names() -> list[str]:
    return ["Ada Alvarez", "Benjamin Okafor", "Carmen Liu", "Darius Novak", "Elena Petrova"]


@pytest.fixture
def party_names() -> list[str]:
    return ["Harbor Party", "Forest Party", "Granite Party"]


@pytest.fixture
def colors() -> list[str]:
    return ["red", "green", "blue"]


@pytest.fixture
def issues() -> list[str]:
    return ["Health", "Defense", "Education", "Housing"]


# ── Legislatures ──────────────────────────────────────────────────────────────


@pytest.fixture
def legislature(legislator_names, party_names, colors, issues, rng) -> Legislature:
    return Legislature(
        legislator_names, party_names, colors, issues,
        size=40, num_parties=3, issue_selections=2, rng=rng,
    )


@pytest.fixture
def solo_legislature(rng, words) -> Legislature:
    """One legislator, one party, one issue: every bill passes unanimously."""
    return Legislature(
        ["Ada Alvarez"], ["Harbor Party"], ["red"], ["Health"],
        size=1, num_parties=1, issue_selections=1, rng=rng, words=words,
    )
