"""
Data model for the BRFSS Correlation Heatmap.

Immutable dataclasses for parsed survey data and the correlation
matrix derived from it.  A ``SurveyDataset`` is constructed once by
``data_processor`` and never mutated; a ``CorrelationMatrix`` is
regenerated wholesale whenever the variable ordering changes.

Missing data is modelled as ``None`` (not ``NaN`` and never a sentinel
survey code).  ``NaN`` only appears in ``CorrelationMatrix.to_array``,
the numeric view handed to matplotlib.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Observation:
    """One respondent record.

    Parameters
    ----------
    values : dict
        ``{variable_key: float_or_None}`` for every extracted variable.
        A value is present only if it passed validity filtering.
    """
    values: Dict[str, Optional[float]]

    @property
    def valid_count(self) -> int:
        """Number of present (non-``None``) values."""
        return sum(1 for v in self.values.values() if v is not None)

    def get(self, key: str) -> Optional[float]:
        return self.values.get(key)


@dataclass(frozen=True)
class SurveyDataset:
    """Filtered respondent records, read-only once built.

    Parameters
    ----------
    observations : tuple of Observation
        Retained rows in source order.  Every one has at least the
        minimum number of present values it was built with.
    variable_keys : tuple of str
        Variables extracted from each raw row, in declaration order.
    n_raw_rows : int
        Number of raw rows seen before filtering.
    source_file : str
        Path the rows were read from, or ``""`` for in-memory data.
    """
    observations: Tuple[Observation, ...]
    variable_keys: Tuple[str, ...]
    n_raw_rows: int = 0
    source_file: str = ""

    def __len__(self) -> int:
        return len(self.observations)

    @property
    def n_dropped(self) -> int:
        return max(self.n_raw_rows - len(self.observations), 0)

    def column(self, key: str) -> List[Optional[float]]:
        """Values of *key* across all observations (``None`` = absent)."""
        return [obs.get(key) for obs in self.observations]


@dataclass(frozen=True)
class CorrelationCell:
    """Relationship between one ordered pair of variables.

    ``value`` is ``None`` when the sample was too small or either
    variable had zero variance.  Self-pairs always hold ``1.0``.
    """
    row_key: str
    col_key: str
    row_label: str
    col_label: str
    row_index: int
    col_index: int
    value: Optional[float]

    @property
    def has_value(self) -> bool:
        return self.value is not None

    @property
    def is_diagonal(self) -> bool:
        return self.row_index == self.col_index


@dataclass(frozen=True)
class CorrelationMatrix:
    """All ``n²`` cells for one variable ordering.

    Cells are stored row-major: the cell for row ``i`` and column ``j``
    sits at ``cells[i * n + j]``.

    Parameters
    ----------
    variables : tuple of str
        Variable keys in the ordering that drives both axes.
    labels : tuple of str
        Display labels aligned with ``variables``.
    cells : tuple of CorrelationCell
    """
    variables: Tuple[str, ...]
    labels: Tuple[str, ...]
    cells: Tuple[CorrelationCell, ...] = field(default_factory=tuple)

    @property
    def size(self) -> int:
        return len(self.variables)

    def cell(self, row: int, col: int) -> CorrelationCell:
        n = self.size
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"cell ({row}, {col}) outside {n}x{n} matrix")
        return self.cells[row * n + col]

    def value(self, row_key: str, col_key: str) -> Optional[float]:
        """Coefficient for a pair of variable keys."""
        row = self.variables.index(row_key)
        col = self.variables.index(col_key)
        return self.cell(row, col).value

    def to_array(self) -> np.ndarray:
        """Square float array with ``NaN`` in place of absent values."""
        n = self.size
        arr = np.full((n, n), np.nan, dtype=float)
        for c in self.cells:
            if c.value is not None:
                arr[c.row_index, c.col_index] = c.value
        return arr
