from __future__ import annotations

import random

from legisim.sim.naming import (
    generate_bill_name,
    load_word_pools,
    random_compass,
    random_select,
    shuffled,
    title_case,
)


class TestTitleCase:
    def test_words(self) -> None:
        assert title_case("reckless harbor dredge act") == "Reckless Harbor Dredge Act"

    def test_separators(self) -> None:
        assert title_case("SELF-help:now") == "Self-Help:Now"


class TestRandomHelpers:
    def test_shuffled_leaves_input_alone(self) -> None:
        items = ["a", "b", "c", "d", "e"]
        out = shuffled(items, random.Random(3))
        assert items == ["a", "b", "c", "d", "e"]
        assert sorted(out) == items

    def test_random_select_draws_from_pool(self) -> None:
        rng = random.Random(5)
        picks = {random_select(["x", "y"], rng) for _ in range(50)}
        assert picks == {"x", "y"}

    def test_random_compass_bounds(self) -> None:
        rng = random.Random(11)
        for _ in range(200):
            p = random_compass(5, rng)
            assert -5 <= p.x < 5
            assert -5 <= p.y < 5


class TestBillNames:
    def test_format(self) -> None:
        name = generate_bill_name(["clean"], ["water"], ["protection"], random.Random(0))
        assert name == "Clean Water Protection Act"

    def test_packaged_pools(self) -> None:
        words = load_word_pools()
        assert words.adjectives and words.nouns and words.verbs and words.names
        assert words.colors == ("red", "green", "blue", "orange", "purple")

    def test_packaged_names_end_in_act(self) -> None:
        words = load_word_pools()
        name = generate_bill_name(words.adjectives, words.nouns, words.verbs, random.Random(2))
        assert name.endswith(" Act")
        assert len(name.split()) >= 4
