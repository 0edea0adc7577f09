from __future__ import annotations

import pytest

from recruitdesk.core import ShortlistingConfig, ShortlistingEngine
from recruitdesk.schemas import Candidate, CandidateStatus


def build_batch(size: int) -> list[Candidate]:
    return [
        Candidate(
            name=f"candidate-{index}",
            experience="3 years",
            skills="Communication",
            qualifications="Bachelor's Degree",
        )
        for index in range(size)
    ]


@pytest.mark.parametrize("size", range(0, 31))
def test_shortlists_leading_fifth_by_position(size: int):
    engine = ShortlistingEngine()
    batch = build_batch(size)

    result = engine.shortlist(batch)

    expected = size // 5
    statuses = [candidate.status for candidate in batch]
    assert result.threshold == expected
    assert result.shortlisted_count == expected
    assert result.rejected_count == size - expected
    assert statuses == (
        [CandidateStatus.SHORTLISTED] * expected
        + [CandidateStatus.REJECTED] * (size - expected)
    )


@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_small_batches_never_shortlist(size: int):
    batch = build_batch(size)

    result = ShortlistingEngine().shortlist(batch)

    assert result.shortlisted == []
    assert all(candidate.status is CandidateStatus.REJECTED for candidate in batch)


def test_empty_batch_is_noop():
    result = ShortlistingEngine().shortlist([])

    assert result.candidates == []
    assert result.threshold == 0
    assert result.rejected_count == 0


def test_batch_of_five_shortlists_first_only():
    batch = build_batch(5)

    result = ShortlistingEngine().shortlist(batch)

    assert [c.name for c in result.shortlisted] == ["candidate-0"]
    assert batch[0].status is CandidateStatus.SHORTLISTED


def test_batch_of_ten_shortlists_first_two():
    batch = build_batch(10)

    result = ShortlistingEngine().shortlist(batch)

    assert [c.name for c in result.shortlisted] == ["candidate-0", "candidate-1"]
    assert len(result.rejected) == 8


def test_rewrites_in_place_without_reordering():
    batch = build_batch(7)
    originals = list(batch)

    result = ShortlistingEngine().shortlist(batch)

    assert [c.name for c in batch] == [f"candidate-{i}" for i in range(7)]
    assert all(a is b for a, b in zip(batch, originals))
    assert all(a is b for a, b in zip(result.candidates, originals))


def test_rerun_is_idempotent():
    engine = ShortlistingEngine()
    batch = build_batch(12)

    first = [c.status for c in engine.shortlist(batch).candidates]
    second = [c.status for c in engine.shortlist(batch).candidates]

    assert first == second


def test_rerun_overwrites_previous_status():
    engine = ShortlistingEngine()
    batch = build_batch(5)
    engine.shortlist(batch)
    batch.insert(0, build_batch(1)[0])

    engine.shortlist(batch)

    # six candidates still yield a threshold of one
    assert batch[0].status is CandidateStatus.SHORTLISTED
    assert batch[1].status is CandidateStatus.REJECTED


def test_ratio_override():
    engine = ShortlistingEngine(config=ShortlistingConfig(ratio=0.5))
    batch = build_batch(5)

    result = engine.shortlist(batch)

    assert result.threshold == 2
    assert [c.status for c in batch[:2]] == [CandidateStatus.SHORTLISTED] * 2
