import warnings

from brfss_heatmap.csv_parser import load_survey_dataset, read_survey_rows
from brfss_heatmap.example_data import generate_example_csv
from brfss_heatmap.session import HeatmapSession


def test_example_csv_loads_cleanly(tmp_path):
    path = generate_example_csv(str(tmp_path), n_rows=300)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        dataset = load_survey_dataset(path)

    assert dataset.n_raw_rows == 300
    assert 0 < len(dataset) < 300
    assert all(obs.valid_count >= 5 for obs in dataset.observations)


def test_example_csv_contains_sentinels_and_extra_column(tmp_path):
    rows = read_survey_rows(generate_example_csv(str(tmp_path)))
    assert '_STATE' in rows[0]
    values = {v for row in rows for v in row.values()}
    assert {'77', '99', ''} <= values


def test_example_csv_is_reproducible(tmp_path):
    first = generate_example_csv(str(tmp_path / 'a'), seed=7)
    second = generate_example_csv(str(tmp_path / 'b'), seed=7)
    with open(first, encoding='utf-8') as a, open(second, encoding='utf-8') as b:
        assert a.read() == b.read()


def test_example_data_has_structure(tmp_path):
    dataset = load_survey_dataset(generate_example_csv(str(tmp_path)))
    session = HeatmapSession(dataset)
    general_health_vs_bmi = session.matrix.value('GENHLTH', '_BMI5')
    assert general_health_vs_bmi is not None
    assert general_health_vs_bmi > 0.2
    session.toggle_sort()
    assert sorted(session.order) == sorted(session.natural_order)
