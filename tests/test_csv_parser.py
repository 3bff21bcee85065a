import warnings

import pytest

from brfss_heatmap.constants import VARIABLE_LABELS
from brfss_heatmap.csv_parser import load_survey_dataset, read_survey_rows

KEYS = list(VARIABLE_LABELS)


def _write(path, header, rows, delimiter=','):
    lines = [delimiter.join(header)]
    lines += [delimiter.join(str(v) for v in row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding='utf-8')
    return str(path)


def test_read_rows_detects_semicolon_and_strips_header(tmp_path):
    path = _write(tmp_path / 's.csv', [' A ', 'B'], [[1, 2], [3, 4]], ';')
    rows = read_survey_rows(path)
    assert rows == [{'A': '1', 'B': '2'}, {'A': '3', 'B': '4'}]


def test_read_rows_handles_tabs_bom_and_blank_lines(tmp_path):
    path = tmp_path / 't.tsv'
    path.write_bytes("\ufeffA\tB\n\n1\t2\n\n".encode('utf-8'))
    assert read_survey_rows(str(path)) == [{'A': '1', 'B': '2'}]


def test_read_rows_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_survey_rows(str(tmp_path / 'missing.csv'))


def test_read_rows_header_only(tmp_path):
    path = _write(tmp_path / 'h.csv', ['A', 'B'], [])
    with pytest.raises(ValueError, match="at least one data row"):
        read_survey_rows(path)


def test_read_rows_empty_file(tmp_path):
    path = tmp_path / 'e.csv'
    path.write_text("", encoding='utf-8')
    with pytest.raises(ValueError, match="empty"):
        read_survey_rows(str(path))


def test_load_dataset_filters_sentinels_and_sparse_rows(tmp_path):
    header = ['_STATE'] + KEYS
    full = [1] + [2] * len(KEYS)
    sentinel = [1] + [77, 99, 9, 1, 2, 7, 99, 99, 99, 99]
    sparse = [1] + [1, 2, 3, 4, '', '', '', '', '', '']
    path = _write(tmp_path / 'survey.csv', header, [full, sentinel, sparse])

    dataset = load_survey_dataset(path)
    assert dataset.n_raw_rows == 3
    assert len(dataset) == 1
    assert dataset.source_file == path
    assert dataset.variable_keys == tuple(KEYS)
    assert dataset.observations[0].values == {k: 2.0 for k in KEYS}


def test_load_dataset_warns_on_missing_columns(tmp_path):
    header = KEYS[:6]
    path = _write(tmp_path / 'partial.csv', header, [[1] * 6])
    with pytest.warns(UserWarning, match="PHYSHLTH"):
        dataset = load_survey_dataset(path)
    assert len(dataset) == 1
    assert dataset.observations[0].get('PHYSHLTH') is None


def test_load_dataset_rejects_unrelated_file(tmp_path):
    path = _write(tmp_path / 'other.csv', ['foo', 'bar'], [[1, 2]])
    with pytest.raises(ValueError, match="none of the expected columns"):
        load_survey_dataset(path)


def test_load_dataset_warns_when_nothing_survives(tmp_path):
    path = _write(tmp_path / 'bad.csv', KEYS, [[99] * len(KEYS)])
    with pytest.warns(UserWarning, match="No rows"):
        dataset = load_survey_dataset(path)
    assert len(dataset) == 0


def test_load_dataset_custom_labels(tmp_path):
    path = _write(tmp_path / 'ab.csv', ['a', 'b'], [[1, 2]] * 3)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        dataset = load_survey_dataset(
            path, {'a': 'Alpha', 'b': 'Beta'}, min_valid_fields=2,
        )
    assert dataset.variable_keys == ('a', 'b')
    assert len(dataset) == 3
