import matplotlib

matplotlib.use("Agg")

import pytest

from brfss_heatmap.data_model import Observation, SurveyDataset


def make_dataset(columns, keys=None):
    """Dataset built straight from ``{key: [values...]}`` columns.

    Bypasses range filtering so tests can use any numbers.
    """
    keys = tuple(keys or columns)
    n_rows = len(next(iter(columns.values())))
    observations = tuple(
        Observation(values={k: columns[k][i] for k in keys})
        for i in range(n_rows)
    )
    return SurveyDataset(
        observations=observations, variable_keys=keys, n_raw_rows=n_rows,
    )


@pytest.fixture
def linear_dataset():
    """X, Y = 2X (perfect), Z weakly related, W constant."""
    xs = [float(i) for i in range(1, 13)]
    zs = [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0, 5.0, 3.0, 5.0, 8.0]
    return make_dataset({
        'X': xs,
        'Y': [2 * x for x in xs],
        'Z': zs,
        'W': [4.0] * len(xs),
    })


@pytest.fixture
def dataset_factory():
    return make_dataset
