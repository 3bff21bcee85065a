import math

import pytest

from brfss_heatmap.constants import MIN_VALID_FIELDS, VARIABLE_LABELS
from brfss_heatmap.data_processor import (
    build_dataset, parse_observation, parse_value,
)

KEYS = list(VARIABLE_LABELS)


@pytest.mark.parametrize("raw, expected", [
    ("3", 3.0),
    (" 2 ", 2.0),
    ("2.5", 2.5),
    (".5", 0.5),
    ("+3", 3.0),
    ("5e-1", 0.5),
    (4, 4.0),
    (9.99, 9.99),
])
def test_parse_value_accepts_codes_inside_range(raw, expected):
    assert parse_value(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", [
    None, "", "   ", "abc", "NA", "0", 0, "10", 10, "77", "99", "777",
    "-1", float("nan"), float("inf"), "inf", True,
])
def test_parse_value_marks_invalid_as_absent(raw):
    assert parse_value(raw) is None


@pytest.mark.parametrize("raw", [
    "2,5", "1.234,56", "1,234.5", "0_5", "\uff15", "3 4", "0x5", "2.5.1",
])
def test_parse_value_rejects_text_that_is_not_a_plain_decimal(raw):
    assert parse_value(raw) is None


def test_comma_decimals_do_not_count_towards_row_threshold():
    row = {k: '2' for k in KEYS[:4]}
    row[KEYS[4]] = '2,5'
    dataset = build_dataset([row], KEYS)
    assert len(dataset) == 0
    assert dataset.n_dropped == 1


def test_parse_observation_extracts_only_requested_keys():
    row = {'A': '1', 'B': '99', 'C': 'x', 'EXTRA': '5'}
    obs = parse_observation(row, ['A', 'B', 'C', 'D'])
    assert obs.values == {'A': 1.0, 'B': None, 'C': None, 'D': None}
    assert obs.valid_count == 1


def _row_with_valid(count):
    return {k: ('2' if i < count else '99') for i, k in enumerate(KEYS)}


def test_build_dataset_drops_row_with_four_valid_values():
    dataset = build_dataset([_row_with_valid(4)], KEYS)
    assert len(dataset) == 0
    assert dataset.n_raw_rows == 1
    assert dataset.n_dropped == 1


def test_build_dataset_keeps_row_with_five_valid_values():
    dataset = build_dataset([_row_with_valid(5)], KEYS)
    assert len(dataset) == 1
    assert dataset.observations[0].valid_count == 5


def test_default_threshold_is_five():
    assert MIN_VALID_FIELDS == 5


def test_build_dataset_custom_threshold_and_order():
    rows = [_row_with_valid(n) for n in (1, 3, 10, 2)]
    dataset = build_dataset(rows, KEYS, min_valid_fields=2)
    assert [o.valid_count for o in dataset.observations] == [3, 10, 2]
    assert dataset.variable_keys == tuple(KEYS)


def test_build_dataset_empty_input_is_valid():
    dataset = build_dataset([], KEYS)
    assert len(dataset) == 0
    assert dataset.n_raw_rows == 0


def test_build_dataset_consumes_generators_and_records_source():
    rows = (_row_with_valid(6) for _ in range(3))
    dataset = build_dataset(rows, KEYS, source_file="survey.csv")
    assert len(dataset) == 3
    assert dataset.source_file == "survey.csv"


def test_absent_values_are_none_never_sentinels():
    row = {k: '9' for k in KEYS}
    row['GENHLTH'] = '77'
    dataset = build_dataset([row], KEYS)
    column = dataset.column('GENHLTH')
    assert column == [None]
    assert all(
        v is None or (0 < v < 10 and not math.isnan(v))
        for obs in dataset.observations for v in obs.values.values()
    )
