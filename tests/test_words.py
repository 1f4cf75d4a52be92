import numpy as np
import pytest

from infoguess.errors import DecodeError
from infoguess.words import decode_word, encode_words, load_dictionary, load_word_list


def test_load_word_list_skips_blank_lines(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("crane\n\n  slate  \nadieu\n")

    assert load_word_list(path) == ["crane", "slate", "adieu"]


def test_encode_words_codes():
    codes = encode_words(["abcde", "zzzzz"])

    assert codes.dtype == np.uint8
    assert codes.tolist() == [[0, 1, 2, 3, 4], [25, 25, 25, 25, 25]]


def test_decode_word_reverses_encoding():
    for word in ["crane", "fuzzy", "abcde"]:
        assert decode_word(encode_words([word])[0]) == word


@pytest.mark.parametrize("bad", ["abcd", "abcdef", "", "ab3de", "Crane", "cafés"])
def test_encode_words_rejects_malformed_entries(bad):
    with pytest.raises(DecodeError) as exc:
        encode_words(["crane", bad])

    assert "entry 1" in str(exc.value)


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        encode_words(["toolong"])


def test_load_dictionary_refuses_malformed_file(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("crane\nslat\n")

    with pytest.raises(DecodeError):
        load_dictionary(path)


def test_load_dictionary(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("crane\nslate\n")

    words, codes = load_dictionary(path)

    assert words == ["crane", "slate"]
    assert codes.shape == (2, 5)
