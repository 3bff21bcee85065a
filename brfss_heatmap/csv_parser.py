"""
CSV loader for the BRFSS Correlation Heatmap.

Reads one delimited survey extract and hands its rows to
``data_processor.build_dataset``.  Handles:

- Auto-detected delimiters (tab → semicolon → comma)
- UTF-8 BOM markers
- Padded header names
- Expected indicator columns that are missing from the header
"""

import csv
import os
import warnings
from typing import Dict, List, Mapping

from .constants import MIN_VALID_FIELDS, VARIABLE_LABELS
from .data_model import SurveyDataset
from .data_processor import build_dataset

_LARGE_FILE_BYTES = 100 * 1024 * 1024


# ── Delimiter auto-detection ─────────────────────────────────────────────

def _detect_delimiter(sample_line: str) -> str:
    """Detect CSV delimiter from the header line.

    Priority: tab → semicolon → comma.
    """
    if '\t' in sample_line:
        return '\t'
    if ';' in sample_line:
        return ';'
    return ','


# ── Raw row reader ───────────────────────────────────────────────────────

def read_survey_rows(filepath: str) -> List[Dict[str, str]]:
    """Read a delimited file into ``{column_name: raw_text}`` rows.

    Blank lines are skipped.  Short rows are padded with ``None`` by
    ``csv.DictReader``; the processor treats those as absent.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    ValueError
        If the file has no header or no data rows.
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"Survey CSV not found: {filepath}")

    name = os.path.basename(filepath)
    file_size = os.path.getsize(filepath)
    if file_size > _LARGE_FILE_BYTES:
        warnings.warn(
            f"File is very large ({file_size / (1024 * 1024):.0f} MB). "
            f"The whole extract is held in memory.",
            stacklevel=2,
        )

    with open(filepath, 'r', encoding='utf-8-sig', newline='') as fh:
        lines = [line for line in fh if line.strip()]

    if not lines:
        raise ValueError(f"CSV file '{name}' is empty.")

    delimiter = _detect_delimiter(lines[0])
    reader = csv.DictReader(lines, delimiter=delimiter)
    if not reader.fieldnames:
        raise ValueError(f"CSV file '{name}' has no header row.")
    reader.fieldnames = [f.strip() for f in reader.fieldnames]

    rows = list(reader)
    if not rows:
        raise ValueError(
            f"CSV file '{name}' must have a header row and at least "
            f"one data row."
        )
    return rows


# ── Dataset loader ───────────────────────────────────────────────────────

def load_survey_dataset(
    filepath: str,
    labels: Mapping[str, str] = VARIABLE_LABELS,
    *,
    min_valid_fields: int = MIN_VALID_FIELDS,
) -> SurveyDataset:
    """Load a survey extract into a ``SurveyDataset``.

    Parameters
    ----------
    filepath : str
    labels : mapping
        VariableKey → DisplayLabel; its key order is the extraction order.
    min_valid_fields : int
        Rows with fewer valid indicator values are dropped.

    Raises
    ------
    FileNotFoundError, ValueError
        If the file is missing, empty, or carries none of the
        expected indicator columns.
    """
    rows = read_survey_rows(filepath)
    name = os.path.basename(filepath)
    variable_keys = list(labels)

    header = set(rows[0].keys())
    missing = [k for k in variable_keys if k not in header]
    if len(missing) == len(variable_keys):
        raise ValueError(
            f"CSV file '{name}' contains none of the expected columns: "
            f"{', '.join(variable_keys)}."
        )
    if missing:
        warnings.warn(
            f"Columns missing from '{name}': {', '.join(missing)}. "
            f"These indicators will have no data.",
            stacklevel=2,
        )

    dataset = build_dataset(
        rows, variable_keys, min_valid_fields, source_file=filepath,
    )

    if not dataset.observations:
        warnings.warn(
            f"No rows in '{name}' have at least {min_valid_fields} valid "
            f"values; every correlation will be empty.",
            stacklevel=2,
        )
    return dataset
