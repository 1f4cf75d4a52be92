import pytest

from infoguess.context import ScoringContext
from infoguess.errors import IndexOutOfRangeError
from infoguess.predicates import (
    PREDICATE_COUNT,
    LetterState,
    Predicate,
    all_predicates,
    filter_linear,
)
from infoguess.words import letter_code


def test_predicate_space_size():
    assert PREDICATE_COUNT == 390
    assert len(all_predicates()) == 390


def test_index_is_a_bijection():
    seen = set()
    for letter in range(26):
        for state in LetterState:
            for position in range(5):
                pred = Predicate(letter, state, position)
                i = pred.index()
                assert 0 <= i < PREDICATE_COUNT
                assert Predicate.from_index(i) == pred
                seen.add(i)

    assert seen == set(range(PREDICATE_COUNT))


def test_all_predicates_in_index_order():
    assert [p.index() for p in all_predicates()] == list(range(PREDICATE_COUNT))


@pytest.mark.parametrize(
    "pred",
    [
        Predicate(26, LetterState.ABSENT, 0),
        Predicate(-1, LetterState.ABSENT, 0),
        Predicate(0, LetterState.AT_POS, 5),
    ],
)
def test_index_out_of_range(pred):
    with pytest.raises(IndexOutOfRangeError):
        pred.index()


@pytest.mark.parametrize("index", [-1, PREDICATE_COUNT, 1023])
def test_from_index_out_of_range(index):
    with pytest.raises(IndexOutOfRangeError):
        Predicate.from_index(index)


def test_concrete_scenario():
    context = ScoringContext.build(["abcde", "abcdf", "zzzzz"])
    a_first = Predicate(letter_code("a"), LetterState.AT_POS, 0)

    assert [w for w in range(3) if context.matches(a_first, w)] == [0, 1]
    for pos in range(5):
        no_z = Predicate(letter_code("z"), LetterState.ABSENT, pos)
        assert [w for w in range(3) if context.matches(no_z, w)] == [0, 1]


def test_states_are_exclusive_and_exhaustive(bitmap_context):
    for word_id in range(bitmap_context.size):
        for letter in range(26):
            for pos in range(5):
                hits = [
                    state
                    for state in LetterState
                    if bitmap_context.matches(Predicate(letter, state, pos), word_id)
                ]
                assert len(hits) == 1


def test_present_excludes_the_position():
    context = ScoringContext.build(["eerie", "crane"])
    e = letter_code("e")

    assert not context.matches(Predicate(e, LetterState.PRESENT, 0), 0)
    assert context.matches(Predicate(e, LetterState.PRESENT, 2), 0)
    assert context.matches(Predicate(e, LetterState.AT_POS, 4), 1)


def test_mask_matches_direct_evaluation(bitmap_context):
    ctx = bitmap_context
    for pred in all_predicates():
        mask = pred.mask(ctx.letter_sets, ctx.positioned_words)
        direct = [ctx.matches(pred, w) for w in range(ctx.size)]
        assert mask.tolist() == direct


def test_filter_linear(bitmap_context):
    ctx = bitmap_context
    pattern = [
        Predicate(letter_code("c"), LetterState.AT_POS, 0),
        Predicate(letter_code("r"), LetterState.AT_POS, 1),
    ]

    ids = filter_linear(pattern, ctx.letter_sets, ctx.positioned_words)

    assert [ctx.words[i] for i in ids] == ["crane"]
