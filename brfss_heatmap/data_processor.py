"""
Survey row processing for the BRFSS Correlation Heatmap.

Turns raw tabular rows (``{field_name: raw_text_or_number}``) into a
``SurveyDataset``.  Invalid fields never raise: a value that is blank,
non-numeric, non-finite, or outside the valid code range is recorded
as ``None``.  Sentinel survey codes (77, 99, 777, ...) are excluded
here and never travel further as numbers.
"""

import math
import re
from numbers import Real
from typing import Any, Iterable, Mapping, Optional, Sequence

from .constants import MIN_VALID_FIELDS, VALID_MAX, VALID_MIN
from .data_model import Observation, SurveyDataset


# ── Strict decimal parsing ───────────────────────────────────────────────

# Optional sign, ASCII digits with an optional fraction, optional exponent.
# No digit grouping, comma decimals or '_' separators.
_DECIMAL_RE = re.compile(
    r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
)


def _strict_float(text: str) -> float:
    """Parse a plain decimal string such as ``"3"``, ``"-2.5"`` or ``"1e1"``.

    Raises ``ValueError`` for anything else, including ``"2,5"``,
    ``"1.234,56"``, ``"0_5"`` and non-ASCII digits.
    """
    s = text.strip()
    if not _DECIMAL_RE.fullmatch(s):
        raise ValueError(f"not a plain decimal number: {s!r}")
    return float(s)


def parse_value(raw: Any) -> Optional[float]:
    """Convert one raw field to a valid survey value, or ``None``.

    A value is kept only if it is numeric, finite, and strictly between
    ``VALID_MIN`` and ``VALID_MAX``.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Real):
        value = float(raw)
        if not math.isfinite(value):
            return None
    else:
        try:
            value = _strict_float(str(raw))
        except ValueError:
            return None
    if VALID_MIN < value < VALID_MAX:
        return value
    return None


def parse_observation(
    raw_row: Mapping[str, Any],
    variable_keys: Sequence[str],
) -> Observation:
    """Extract *variable_keys* from one raw row."""
    return Observation(
        values={key: parse_value(raw_row.get(key)) for key in variable_keys}
    )


def build_dataset(
    raw_rows: Iterable[Mapping[str, Any]],
    variable_keys: Sequence[str],
    min_valid_fields: int = MIN_VALID_FIELDS,
    *,
    source_file: str = "",
) -> SurveyDataset:
    """Parse every raw row and keep those with enough present values.

    Parameters
    ----------
    raw_rows : iterable of mapping
        Field name → raw value.  Consumed once.
    variable_keys : sequence of str
        Variables to extract, in declaration order.
    min_valid_fields : int
        Rows with fewer present values are dropped.
    source_file : str
        Recorded on the dataset for display purposes.

    Returns
    -------
    SurveyDataset
        Possibly empty; an empty dataset is a valid result.
    """
    keys = tuple(variable_keys)
    kept = []
    n_raw = 0
    for raw_row in raw_rows:
        n_raw += 1
        obs = parse_observation(raw_row, keys)
        if obs.valid_count >= min_valid_fields:
            kept.append(obs)

    return SurveyDataset(
        observations=tuple(kept),
        variable_keys=keys,
        n_raw_rows=n_raw,
        source_file=source_file,
    )
