"""
Correlation engine for the BRFSS Correlation Heatmap.

Pairwise Pearson coefficients over a ``SurveyDataset`` and reordering
of variables by mean absolute correlation.  Every function here is
pure: no module state is read or written, so the same dataset and
ordering always give the same matrix.

Absent results (``None``) mean "no meaningful value": fewer than
``MIN_PAIRS`` complete pairs, or zero variance on either side.
"""

import math
from typing import Dict, Mapping, Optional, Sequence, Tuple

import numpy as np

from .constants import (
    INSUFFICIENT_DATA_TEXT, MIN_PAIRS, STRENGTH_BANDS, STRENGTH_FLOOR,
    VARIABLE_LABELS,
)
from .data_model import CorrelationCell, CorrelationMatrix, SurveyDataset


def pearson(
    xs: Sequence[Optional[float]],
    ys: Sequence[Optional[float]],
) -> Optional[float]:
    """Pearson product-moment coefficient over complete pairs.

    Parameters
    ----------
    xs, ys : sequence of float or None
        Paired observations for two variables, aligned by index.

    Returns
    -------
    float or None
        ``None`` if fewer than ``MIN_PAIRS`` pairs have both values, or
        if either side is constant.  Otherwise a value in ``[-1, 1]``
        up to floating-point drift.

    Raises
    ------
    ValueError
        If the sequences differ in length.
    """
    if len(xs) != len(ys):
        raise ValueError(
            f"pearson requires equal-length sequences, got "
            f"{len(xs)} and {len(ys)}"
        )

    pairs = [(x, y) for x, y in zip(xs, ys) if x is not None and y is not None]
    if len(pairs) < MIN_PAIRS:
        return None

    x = np.array([p[0] for p in pairs], dtype=float)
    y = np.array([p[1] for p in pairs], dtype=float)

    # Constant columns can leave a tiny non-zero denominator after rounding
    if np.all(x == x[0]) or np.all(y == y[0]):
        return None

    n = float(len(pairs))
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))
    sum_y2 = float(np.sum(y * y))

    numerator = n * sum_xy - sum_x * sum_y
    spread = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if not spread > 0.0:
        return None

    return numerator / math.sqrt(spread)


def compute_matrix(
    dataset: SurveyDataset,
    ordered_keys: Sequence[str],
    labels: Mapping[str, str] = VARIABLE_LABELS,
) -> CorrelationMatrix:
    """Build the full ``n × n`` matrix for *ordered_keys*.

    Cells are produced row-major (row variable outer, column variable
    inner).  Diagonal cells are ``1.0`` by definition; off-diagonal
    cells use the whole dataset.  Keys absent from *labels* are shown
    under their own name.
    """
    keys = tuple(ordered_keys)
    names = tuple(labels.get(k, k) for k in keys)
    columns = {k: dataset.column(k) for k in keys}

    cells = []
    for i, row_key in enumerate(keys):
        for j, col_key in enumerate(keys):
            if i == j:
                value = 1.0
            else:
                value = pearson(columns[row_key], columns[col_key])
            cells.append(CorrelationCell(
                row_key=row_key,
                col_key=col_key,
                row_label=names[i],
                col_label=names[j],
                row_index=i,
                col_index=j,
                value=value,
            ))

    return CorrelationMatrix(variables=keys, labels=names, cells=tuple(cells))


def mean_abs_correlations(matrix: CorrelationMatrix) -> Dict[str, float]:
    """Mean ``|r|`` of each variable against all others.

    Only present off-diagonal cells count; a variable with none gets
    ``0.0``.
    """
    means = {}
    n = matrix.size
    for i, key in enumerate(matrix.variables):
        row = [
            abs(matrix.cell(i, j).value)
            for j in range(n)
            if j != i and matrix.cell(i, j).value is not None
        ]
        means[key] = sum(row) / len(row) if row else 0.0
    return means


def rank_by_mean_abs(
    variable_keys: Sequence[str],
    means: Mapping[str, float],
) -> Tuple[str, ...]:
    """Order keys by descending mean, ties kept in original order."""
    keys = tuple(variable_keys)
    # sorted() is stable, so equal means keep their first-seen order
    order = sorted(range(len(keys)), key=lambda i: -means.get(keys[i], 0.0))
    return tuple(keys[i] for i in order)


def reorder_by_similarity(
    dataset: SurveyDataset,
    variable_keys: Sequence[str],
    labels: Mapping[str, str] = VARIABLE_LABELS,
) -> Tuple[str, ...]:
    """Similarity order for *variable_keys*.

    The matrix used for ranking is always computed fresh from the
    given order, so calling this with the natural order never depends
    on a previously sorted view.
    """
    matrix = compute_matrix(dataset, variable_keys, labels)
    return rank_by_mean_abs(matrix.variables, mean_abs_correlations(matrix))


def interpret_strength(value: Optional[float]) -> str:
    """Verbal strength for a coefficient, e.g. ``"Moderate Negative"``."""
    if value is None:
        return INSUFFICIENT_DATA_TEXT
    magnitude = abs(value)
    strength = STRENGTH_FLOOR
    for bound, name in STRENGTH_BANDS:
        if magnitude > bound:
            strength = name
            break
    direction = 'Positive' if value > 0 else 'Negative'
    return f"{strength} {direction}"
