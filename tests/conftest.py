from pathlib import Path

import pytest

from sentilex import ClassifierConfig, SentimentClassifier, StopWordSet, Tokenizer


TRAINING_ROWS = [
    'label,id,date,query,user,text',
    '4,1,Mon Apr 06 2009,NO_QUERY,alice,great great movie',
    '0,2,Mon Apr 06 2009,NO_QUERY,bob,bad movie',
    '2,3,Mon Apr 06 2009,NO_QUERY,carol,terrible awful horrible',
    'x,4,Mon Apr 06 2009,NO_QUERY,dave,awful awful',
]

TESTING_ROWS = [
    'id,date,query,user,text',
    '10,Tue Apr 07 2009,NO_QUERY,erin,"great, bad!"',
    '11,Tue Apr 07 2009,NO_QUERY,frank,bad bad day',
    '12,Tue Apr 07 2009,NO_QUERY,grace,unseen words only',
]

GROUND_TRUTH_ROWS = [
    'label,id',
    '4,10',
    '4,11',
    '0,12',
]


def write_lines(path: Path, lines) -> Path:
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return path


@pytest.fixture
def movie_stop_words() -> StopWordSet:
    return StopWordSet(['movie', 'the', 'a'])


@pytest.fixture
def tokenizer(movie_stop_words) -> Tokenizer:
    return Tokenizer(stop_words=movie_stop_words)


@pytest.fixture
def data_files(tmp_path: Path):
    return {
        'training': write_lines(tmp_path / 'train.csv', TRAINING_ROWS),
        'stop_words': write_lines(tmp_path / 'stop.txt', ['Movie', 'the', "Day's", '']),
        'testing': write_lines(tmp_path / 'test.csv', TESTING_ROWS),
        'ground_truth': write_lines(tmp_path / 'truth.csv', GROUND_TRUTH_ROWS),
        'results': tmp_path / 'out' / 'results.txt',
        'accuracy': tmp_path / 'out' / 'accuracy.txt',
    }


@pytest.fixture
def quiet_classifier(data_files) -> SentimentClassifier:
    config = ClassifierConfig(stop_words_source=data_files['stop_words'], verbose=False)
    return SentimentClassifier(config)
