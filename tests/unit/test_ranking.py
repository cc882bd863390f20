# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import random

from boorutags.models import Candidate
from boorutags.relevance.ranking import aggregate_candidates, rank_candidates


def test_aggregate_counts_and_excludes_chosen_tags():
    images = [["cute", "smile"], ["cute", "smile"], ["cute", "happy"]]
    candidates = aggregate_candidates(images, exclude=["cute"])
    assert {c.tag: c.frequency for c in candidates} == {"smile": 2, "happy": 1}


def test_aggregate_with_no_images_is_empty():
    assert aggregate_candidates([], exclude=["cute"]) == []


def test_rank_orders_by_frequency_then_text():
    candidates = [Candidate("zebra", 1), Candidate("apple", 1), Candidate("mango", 3)]
    assert rank_candidates(candidates) == ["mango", "apple", "zebra"]


def test_rank_is_deterministic_regardless_of_input_order():
    candidates = [Candidate(f"tag{i:02d}", i % 4) for i in range(30)]
    expected = rank_candidates(candidates)
    rng = random.Random(7)
    for _ in range(5):
        shuffled = list(candidates)
        rng.shuffle(shuffled)
        assert rank_candidates(shuffled) == expected


def test_rank_truncates_to_limit():
    candidates = [Candidate(f"t{i}", 1) for i in range(50)]
    assert len(rank_candidates(candidates)) == 20
    assert len(rank_candidates(candidates, limit=5)) == 5
    assert rank_candidates(candidates, limit=0) == []


def test_tie_break_is_case_sensitive_codepoint_order():
    candidates = [Candidate("b", 2), Candidate("B", 2), Candidate("a", 2)]
    assert rank_candidates(candidates) == ["B", "a", "b"]


def test_rank_caps_oversized_limit_at_twenty():
    candidates = [Candidate(f"t{i:02d}", 1) for i in range(40)]
    assert rank_candidates(candidates, limit=35) == [f"t{i:02d}" for i in range(20)]
