from sentilex.document import Record
from sentilex.lexicon import Lexicon
from sentilex.predictor import Prediction, Predictor, decide
from sentilex.preprocessing import Tokenizer


def make_predictor(tokenizer):
    lexicon = Lexicon({"great": 2, "bad": -1})
    lexicon.freeze()
    return Predictor(lexicon, tokenizer)


def test_decision_rule_ties_go_positive():
    assert decide(1) == 4
    assert decide(0) == 4
    assert decide(-1) == 0


def test_summed_score_decides_label(tokenizer):
    predictor = make_predictor(tokenizer)
    assert predictor.score("great bad") == 1
    assert predictor.predict(Record("7", "great bad")) == Prediction(4, "7")
    assert predictor.predict(Record("8", "bad, BAD movie")) == Prediction(0, "8")


def test_unknown_words_score_zero_and_predict_positive(tokenizer):
    predictor = make_predictor(tokenizer)
    assert predictor.score("never seen before") == 0
    assert predictor.predict(Record("x-1", "never seen before")).label == 4


def test_batch_prediction_keeps_order_and_ids_verbatim(tokenizer):
    predictor = make_predictor(tokenizer)
    records = [Record("0042", "bad"), Record("abc", "great"), Record("7", "")]
    first = predictor.predict_batch(records)
    second = predictor.predict_batch(records)
    assert first == [Prediction(0, "0042"), Prediction(4, "abc"), Prediction(4, "7")]
    assert first == second


def test_score_stage_stop_words_are_ignored(movie_stop_words):
    lexicon = Lexicon({"movie": -10, "great": 1})
    predictor = Predictor(lexicon, Tokenizer(), score_stop_words=movie_stop_words)
    assert predictor.tokens("great movie") == ["great"]
    assert predictor.predict(Record("1", "great movie")).label == 4
