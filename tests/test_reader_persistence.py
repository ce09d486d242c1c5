import pytest

from sentilex.document import Record, parse_label
from sentilex.evaluation import EvaluationReport, Misclassification, ReportFormat
from sentilex.persistence import ResultsStore
from sentilex.predictor import Prediction
from sentilex.reader import RecordReader


def write_lines(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_parse_label():
    assert parse_label("4") == 4
    assert parse_label(" 0 ") == 0
    assert parse_label("abc") is None
    assert parse_label(None) is None
    assert parse_label("4.0") is None
    assert parse_label("0_4") is None
    assert parse_label("\u0664") is None
    assert parse_label("+4") == 4


def test_training_rows_are_decoded_with_header(data_files):
    records = RecordReader(has_header=True).read_training_records(data_files['training'])
    assert [r.record_id for r in records] == ["1", "2", "3", "4"]
    assert [r.label for r in records] == [4, 0, 2, None]
    assert records[0].text == "great great movie"
    assert records[0].user == "alice"
    assert [r.is_trainable for r in records] == [True, True, False, False]


def test_headerless_files_keep_first_row(tmp_path):
    path = write_lines(tmp_path / "train.csv", [
        '4,100,date,NO_QUERY,user,"loved it, truly"',
        '0,101,date,NO_QUERY,user,hated it',
    ])
    records = RecordReader(has_header=False).read_training_records(path)
    assert records == [
        Record("100", "loved it, truly", label=4,
               metadata={"date": "date", "query": "NO_QUERY", "user": "user"}),
        Record("101", "hated it", label=0,
               metadata={"date": "date", "query": "NO_QUERY", "user": "user"}),
    ]


def test_testing_rows_preserve_identifier_text(data_files):
    records = RecordReader().read_testing_records(data_files['testing'])
    assert [r.record_id for r in records] == ["10", "11", "12"]
    assert records[0].text == "great, bad!"
    assert all(r.label is None for r in records)


def test_ground_truth_uses_first_two_columns(tmp_path):
    path = write_lines(tmp_path / "truth.csv", [
        "label,id,date,query,user,text",
        "4,1,d,q,u,nice",
        "0,2,d,q,u,mean",
        "oops,3,d,q,u,bad label",
    ])
    reader = RecordReader()
    assert reader.read_ground_truth(path) == {"1": 4, "2": 0}
    assert reader.skipped_rows == 1


def test_missing_and_empty_inputs(tmp_path):
    reader = RecordReader()
    with pytest.raises(FileNotFoundError):
        reader.read_training_records(tmp_path / "nope.csv")

    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")
    assert reader.read_testing_records(empty) == []


def test_results_file_round_trip(tmp_path):
    store = ResultsStore(base_path=tmp_path, verbose=False)
    predictions = [Prediction(4, "10"), Prediction(0, "0011")]

    path = store.save_predictions(predictions, "out/results.txt")
    assert path.read_text(encoding="utf-8") == "4, 10\n0, 0011\n"
    assert store.load_predictions("out/results.txt") == predictions


def test_accuracy_report_file(tmp_path):
    store = ResultsStore(verbose=False)
    report = EvaluationReport(1, 2, [Misclassification(0, 4, "2")])

    path = store.save_report(report, tmp_path / "accuracy.txt")
    assert path.read_text(encoding="utf-8").splitlines() == [
        "Overall Accuracy: 0.500",
        "ID: 2, Actual: 0, Predicted: 4",
    ]

    store.save_report(report, path, ReportFormat(include_predicted=False))
    assert path.read_text(encoding="utf-8").splitlines()[1] == "ID: 2, Actual: 0"


@pytest.mark.parametrize("has_header", [True, False])
def test_text_keeps_unquoted_commas(tmp_path, has_header):
    lines = ['4,1,d,NO_QUERY,u,meh, but truly wonderful, and great',
             '0,2,d,NO_QUERY,u,fine']
    if has_header:
        lines.insert(0, 'label,id,date,query,user,text')
    path = write_lines(tmp_path / "train.csv", lines)

    records = RecordReader(has_header=has_header).read_training_records(path)
    assert [r.record_id for r in records] == ["1", "2"]
    assert records[0].text == "meh, but truly wonderful, and great"
    assert records[1].text == "fine"


def test_fully_quoted_rows_are_unquoted(tmp_path):
    path = write_lines(tmp_path / "train.csv", [
        '"0","1467810369","Mon Apr 06 2009","NO_QUERY","someone","say ""hi"", ok"',
    ])
    records = RecordReader(has_header=False).read_training_records(path)
    assert records[0].label == 0
    assert records[0].record_id == "1467810369"
    assert records[0].user == "someone"
    assert records[0].text == 'say "hi", ok'


def test_bad_rows_do_not_stop_the_good_ones(tmp_path):
    path = write_lines(tmp_path / "train.csv", [
        '4,1,d,q,u,"so good',
        '4,2',
        '0,3,d,q,u,not good',
        '',
        '4,4,d,q,u,fine',
    ])
    reader = RecordReader(has_header=False)
    records = reader.read_training_records(path)

    assert [r.record_id for r in records] == ["1", "3", "4"]
    assert records[0].text == '"so good'
    assert reader.skipped_rows == 1


def test_results_identifiers_keep_commas(tmp_path):
    store = ResultsStore(verbose=False)
    predictions = [Prediction(4, "a,b")]
    path = store.save_predictions(predictions, tmp_path / "results.txt")
    assert store.load_predictions(path) == predictions
