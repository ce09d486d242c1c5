import pytest

from sentilex.preprocessing import PreprocessingPipeline, Tokenizer
from sentilex.stopwords import StopWordSet


def test_tokenize_lowercases_strips_punctuation_and_keeps_order():
    tokenizer = Tokenizer()
    assert tokenizer.tokenize("Great, GREAT movie!!  Bad-ish?") == [
        "great", "great", "movie", "badish"]


def test_tokenize_drops_empty_pieces_and_handles_empty_text():
    tokenizer = Tokenizer()
    assert tokenizer.tokenize("... !!! ok") == ["ok"]
    assert tokenizer.tokenize("") == []
    assert tokenizer.tokenize(None) == []


def test_tokenize_filters_stop_words_when_configured(movie_stop_words):
    assert Tokenizer(stop_words=movie_stop_words)("The movie was GREAT") == ["was", "great"]
    assert Tokenizer()("The movie was GREAT") == ["the", "movie", "was", "great"]


def test_stop_word_check_happens_after_punctuation_is_stripped(movie_stop_words):
    assert Tokenizer(stop_words=movie_stop_words).tokenize("movie! (the) film") == ["film"]


def test_tokenize_is_idempotent_on_joined_tokens(tokenizer):
    tokens = tokenizer.tokenize("I LOVED it, the movie's ending... not so much!")
    assert tokenizer.tokenize(" ".join(tokens)) == tokens


def test_pipeline_rejects_unknown_steps():
    assert PreprocessingPipeline().process("ABC") == "abc"
    with pytest.raises(ValueError):
        PreprocessingPipeline(["lowercase", "stem_everything"])


def test_tokenizer_reports_filter_mode():
    assert Tokenizer(stop_words=StopWordSet(["a"])).filters_stop_words
    assert not Tokenizer().filters_stop_words
