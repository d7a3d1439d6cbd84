from __future__ import annotations
import json
import os
import random
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Sequence, Tuple, TypeVar

from .geometry import Point

T = TypeVar("T")

_WORD = re.compile(r"([^\s:\-])([^\s:\-]*)")

def shuffled(items: Sequence[T], rng: random.Random) -> List[T]:
    """Return a uniformly shuffled copy of `items` (Fisher-Yates); the input is left alone."""
    out = list(items)
    rng.shuffle(out)
    return out

def random_select(items: Sequence[T], rng: random.Random) -> T:
    # Uniform pick, with replacement across calls.
    return rng.choice(items)

def random_compass(distance: float, rng: random.Random) -> Point:
    """Random point where each axis is uniform in [-distance, distance)."""
    return Point(
        rng.random() * distance * 2 - distance,
        rng.random() * distance * 2 - distance,
    )

def title_case(s: str) -> str:
    # Words are split on whitespace, ':' and '-'.
    return _WORD.sub(lambda m: m.group(1).upper() + m.group(2).lower(), s)

def generate_bill_name(
    adjectives: Sequence[str],
    nouns: Sequence[str],
    verbs: Sequence[str],
    rng: random.Random,
) -> str:
    """ADJECTIVE NOUN VERB Act, e.g. "Reckless Harbor Dredge Act"."""
    adjective = random_select(adjectives, rng)
    noun = random_select(nouns, rng)
    verb = random_select(verbs, rng)
    return title_case(f"{adjective} {noun} {verb} Act")

@dataclass(frozen=True)
class WordPools:
    adjectives: Tuple[str, ...]
    nouns: Tuple[str, ...]
    verbs: Tuple[str, ...]
    names: Tuple[str, ...]
    colors: Tuple[str, ...]

@lru_cache(maxsize=1)
def load_word_pools() -> WordPools:
    base_dir = os.path.dirname(os.path.dirname(__file__))
    path = os.path.join(base_dir, "data", "words.json")
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return WordPools(
        adjectives=tuple(raw["adjectives"]),
        nouns=tuple(raw["nouns"]),
        verbs=tuple(raw["verbs"]),
        names=tuple(raw["names"]),
        colors=tuple(raw["colors"]),
    )
