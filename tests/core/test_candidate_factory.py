from __future__ import annotations

import random

import pytest

from recruitdesk.adapters import CandidateFactoryConfig, CandidateSource, UploadCandidateFactory
from recruitdesk.adapters.upload import display_name
from recruitdesk.schemas import CandidateStatus


class FixedRandom(random.Random):
    """Random source returning a fixed sequence of integers."""

    def __init__(self, values: list[int]):
        super().__init__(0)
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self._values.pop(0)


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("resume.final.pdf", "resume.final"),
        ("noext", "noext"),
        ("Jane Doe.docx", "Jane Doe"),
        ("", ""),
        ("uploads/cv.pdf", "cv"),
        ("trailing.", "trailing."),
    ],
)
def test_display_name_strips_last_extension(file_name: str, expected: str):
    assert display_name(file_name) == expected


def test_from_upload_builds_pending_candidate():
    rng = FixedRandom([7])
    factory = UploadCandidateFactory(rng=rng)

    candidate = factory.from_upload("resume.final.pdf")

    assert candidate.name == "resume.final"
    assert candidate.experience == "7 years"
    assert candidate.skills == "Communication, Teamwork, Problem-Solving"
    assert candidate.qualifications == "Bachelor's Degree"
    assert candidate.status is CandidateStatus.PENDING_REVIEW
    assert rng.calls == [(1, 10)]


def test_experience_stays_within_bounds():
    factory = UploadCandidateFactory(rng=random.Random(1234))

    years = {
        int(factory.from_upload(f"cv-{i}.pdf").experience.split()[0])
        for i in range(500)
    }

    assert years <= set(range(1, 11))
    assert {1, 10} <= years


def test_from_uploads_preserves_order():
    factory = UploadCandidateFactory(rng=FixedRandom([1, 2, 3]))

    candidates = factory.from_uploads(["b.pdf", "a.pdf", "c"])

    assert [c.name for c in candidates] == ["b", "a", "c"]
    assert [c.experience for c in candidates] == ["1 years", "2 years", "3 years"]


def test_seeded_config_is_deterministic():
    config = CandidateFactoryConfig(seed=99)
    names = [f"cv-{i}.pdf" for i in range(10)]

    first = UploadCandidateFactory(config=config).from_uploads(names)
    second = UploadCandidateFactory(config=config).from_uploads(names)

    assert [c.experience for c in first] == [c.experience for c in second]


def test_config_overrides_placeholders():
    config = CandidateFactoryConfig(
        experience_min_years=3,
        experience_max_years=3,
        skills="Python",
        qualifications="MSc",
    )

    candidate = UploadCandidateFactory(config=config).from_upload("x.pdf")

    assert candidate.experience == "3 years"
    assert candidate.skills == "Python"
    assert candidate.qualifications == "MSc"


def test_factory_satisfies_candidate_source_protocol():
    assert isinstance(UploadCandidateFactory(), CandidateSource)
