import pytest

from infoguess.context import ScoringConfig, ScoringContext


WORDS = [
    "crane",
    "slate",
    "adieu",
    "stare",
    "roate",
    "zzzzz",
    "abcde",
    "abcdf",
    "eerie",
    "llama",
    "civic",
    "fuzzy",
    "tarse",
    "salet",
]

CONFIGS = [
    ScoringConfig(representation="bitmap", precompute_pairs=False, workers=1),
    ScoringConfig(representation="bitmap", precompute_pairs=True, workers=1),
    ScoringConfig(representation="ordered", precompute_pairs=False, workers=1),
    ScoringConfig(representation="ordered", precompute_pairs=True, workers=1),
]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture(params=CONFIGS, ids=lambda c: f"{c.representation}-pairs{int(c.precompute_pairs)}")
def context(request):
    return ScoringContext.build(WORDS, request.param)


@pytest.fixture
def bitmap_context():
    return ScoringContext.build(WORDS, ScoringConfig(workers=1))
