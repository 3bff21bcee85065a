"""
View state for the BRFSS Correlation Heatmap.

``HeatmapSession`` owns everything the heatmap view can change: the
natural/similarity order toggle, the colour scheme, and the current
matrix.  Renderers receive the session (or its matrix) explicitly.

The similarity order is always derived from the natural order, never
from the previous similarity order, so toggling twice returns to the
exact starting sequence.
"""

from typing import Mapping, Optional, Sequence, Tuple

from .constants import (
    COLOR_SCHEMES, DEFAULT_COLOR_SCHEME, RESET_LABEL, SORT_LABEL,
    VARIABLE_LABELS,
)
from .correlation import compute_matrix, reorder_by_similarity
from .data_model import CorrelationMatrix, SurveyDataset


class HeatmapSession:
    """Order toggle, colour scheme, and matrix for one loaded dataset."""

    def __init__(
        self,
        dataset: SurveyDataset,
        labels: Mapping[str, str] = VARIABLE_LABELS,
        natural_order: Optional[Sequence[str]] = None,
        color_scheme: str = DEFAULT_COLOR_SCHEME,
    ):
        _check_scheme(color_scheme)
        self._dataset = dataset
        self._labels = labels
        if natural_order is None:
            natural_order = dataset.variable_keys
        self._natural_order: Tuple[str, ...] = tuple(natural_order)
        self._color_scheme = color_scheme
        self._sorted = False
        self._order = self._natural_order
        self._matrix = compute_matrix(dataset, self._order, labels)

    # ── Read-only state ──────────────────────────────────────────────

    @property
    def dataset(self) -> SurveyDataset:
        return self._dataset

    @property
    def natural_order(self) -> Tuple[str, ...]:
        return self._natural_order

    @property
    def order(self) -> Tuple[str, ...]:
        return self._order

    @property
    def matrix(self) -> CorrelationMatrix:
        return self._matrix

    @property
    def is_sorted(self) -> bool:
        return self._sorted

    @property
    def color_scheme(self) -> str:
        return self._color_scheme

    @property
    def sort_button_text(self) -> str:
        return RESET_LABEL if self._sorted else SORT_LABEL

    # ── Transitions ──────────────────────────────────────────────────

    def toggle_sort(self) -> Tuple[str, ...]:
        """Flip between natural and similarity order; return the new order."""
        self.set_sorted(not self._sorted)
        return self._order

    def set_sorted(self, flag: bool) -> None:
        """Enter similarity order (``True``) or natural order (``False``)."""
        self._sorted = bool(flag)
        if self._sorted:
            self._order = reorder_by_similarity(
                self._dataset, self._natural_order, self._labels
            )
        else:
            self._order = self._natural_order
        self._matrix = compute_matrix(self._dataset, self._order, self._labels)

    def set_color_scheme(self, name: str) -> None:
        _check_scheme(name)
        self._color_scheme = name


def _check_scheme(name: str) -> None:
    if name not in COLOR_SCHEMES:
        raise ValueError(
            f"Unknown colour scheme {name!r}; expected one of "
            f"{list(COLOR_SCHEMES)}"
        )
