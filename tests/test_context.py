import pytest

from infoguess.context import ScoringConfig, ScoringContext
from infoguess.errors import DecodeError, EmptyDictionaryError


def test_build_exposes_encodings(bitmap_context):
    ctx = bitmap_context

    assert ctx.size == len(ctx.words)
    assert ctx.codes.shape == (ctx.size, 5)
    assert ctx.letter_sets.shape == (ctx.size,)
    assert ctx.positioned_words.shape == (ctx.size,)
    assert ctx.index.size == ctx.size


def test_arrays_are_read_only(bitmap_context):
    with pytest.raises(ValueError):
        bitmap_context.codes[0, 0] = 1


def test_word_id(bitmap_context):
    assert bitmap_context.word_id("crane") == 0
    assert bitmap_context.word_id("salet") == bitmap_context.size - 1


def test_word_id_keeps_first_duplicate():
    ctx = ScoringContext.build(["crane", "slate", "crane"])

    assert ctx.word_id("crane") == 0
    assert ctx.size == 3


def test_word_id_unknown(bitmap_context):
    with pytest.raises(KeyError):
        bitmap_context.word_id("qqqqq")


def test_empty_dictionary():
    with pytest.raises(EmptyDictionaryError):
        ScoringContext.build([])


def test_malformed_dictionary_builds_nothing():
    with pytest.raises(DecodeError):
        ScoringContext.build(["crane", "slat", "adieu"])


def test_unknown_representation():
    with pytest.raises(ValueError):
        ScoringContext.build(["crane"], ScoringConfig(representation="roaring"))


def test_default_config():
    config = ScoringConfig()

    assert config.representation == "bitmap"
    assert not config.precompute_pairs
    assert config.workers is None
