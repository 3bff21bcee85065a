import pytest

from brfss_heatmap.constants import (
    DEFAULT_COLOR_SCHEME, RESET_LABEL, SORT_LABEL,
)
from brfss_heatmap.correlation import compute_matrix
from brfss_heatmap.session import HeatmapSession


@pytest.fixture
def session(linear_dataset):
    return HeatmapSession(
        linear_dataset, labels={}, natural_order=('W', 'Z', 'Y', 'X'),
    )


def test_starts_in_natural_order(session, linear_dataset):
    assert not session.is_sorted
    assert session.order == ('W', 'Z', 'Y', 'X')
    assert session.matrix == compute_matrix(linear_dataset, session.order, {})
    assert session.color_scheme == DEFAULT_COLOR_SCHEME
    assert session.sort_button_text == SORT_LABEL


def test_natural_order_defaults_to_dataset_keys(linear_dataset):
    session = HeatmapSession(linear_dataset)
    assert session.order == linear_dataset.variable_keys


def test_toggle_sorts_by_similarity(session):
    order = session.toggle_sort()
    assert session.is_sorted
    assert order == ('Y', 'X', 'Z', 'W')
    assert session.matrix.variables == order
    assert session.sort_button_text == RESET_LABEL


def test_double_toggle_restores_natural_order(session):
    start_order = session.order
    start_matrix = session.matrix
    session.toggle_sort()
    session.toggle_sort()
    assert session.order == start_order
    assert session.matrix == start_matrix


def test_sorted_order_derived_from_natural_order_each_time(session):
    first = session.toggle_sort()
    session.toggle_sort()
    assert session.toggle_sort() == first
    session.set_sorted(True)
    assert session.order == first


def test_matrix_regenerated_not_mutated(session):
    before = session.matrix
    session.toggle_sort()
    assert session.matrix is not before
    assert before.variables == ('W', 'Z', 'Y', 'X')


def test_color_scheme_selection(session):
    session.set_color_scheme('viridis')
    assert session.color_scheme == 'viridis'
    with pytest.raises(ValueError):
        session.set_color_scheme('rainbow')
    assert session.color_scheme == 'viridis'


def test_unknown_initial_scheme_rejected(linear_dataset):
    with pytest.raises(ValueError):
        HeatmapSession(linear_dataset, color_scheme='nope')
