"""
Example data generator for the BRFSS Correlation Heatmap.

Creates one synthetic survey extract with the ten tracked indicators
plus an unrelated ``_STATE`` column.  Answers are driven by a shared
latent health score so the heatmap shows real structure.  Roughly 4%
of answers carry sentinel codes (77, 99) or blanks, a small share of
respondents skip most questions, and ``SMOKDAY2`` is only asked of
respondents who answered ``SMOKE100 = 1``.

The cleaned extract stores BMI as a 1-4 category and high blood
pressure as a 1-2 answer, so every valid value is a single digit.
"""

import csv
import os
import random

from .constants import VARIABLE_LABELS

_SENTINELS = (77, 99)
_SENTINEL_RATE = 0.04
_SPARSE_ROW_RATE = 0.05


def _code(value: float, low: int, high: int) -> int:
    """Round and clamp a latent value onto an answer scale."""
    return int(min(high, max(low, round(value))))


def _respondent(rng: random.Random) -> dict:
    health = rng.gauss(0.0, 1.0)          # higher = worse health
    smoker = rng.random() < 0.35 + 0.1 * max(health, 0.0)

    def yes_no(bias: float) -> int:
        # 1 = yes, 2 = no
        return 1 if rng.random() < bias else 2

    row = {
        '_BMI5': _code(2.5 + 0.8 * health + rng.gauss(0, 0.7), 1, 4),
        'GENHLTH': _code(2.6 + 1.0 * health + rng.gauss(0, 0.6), 1, 5),
        'SMOKE100': 1 if smoker else 2,
        'SMOKDAY2': (_code(1.8 + 0.5 * health + rng.gauss(0, 0.8), 1, 3)
                     if smoker else ''),
        'EXERANY2': yes_no(0.8 - 0.15 * health),
        'DIABETE4': _code(3.4 - 0.6 * health + rng.gauss(0, 0.6), 1, 4),
        'CVDINFR4': yes_no(0.04 + 0.05 * max(health, 0.0)),
        'CVDCRHD4': yes_no(0.05 + 0.05 * max(health, 0.0)),
        'CVDSTRK3': yes_no(0.03 + 0.03 * max(health, 0.0)),
        'PHYSHLTH': yes_no(0.3 + 0.15 * health),
    }

    for key in row:
        if row[key] != '' and rng.random() < _SENTINEL_RATE:
            row[key] = rng.choice(_SENTINELS + ('',))

    if rng.random() < _SPARSE_ROW_RATE:
        for key in rng.sample(list(VARIABLE_LABELS), 7):
            row[key] = ''

    return row


def generate_example_csv(
    output_dir: str,
    n_rows: int = 500,
    seed: int = 42,
) -> str:
    """Write ``example_brfss.csv`` into *output_dir*.

    Returns
    -------
    str
        Path of the written file.
    """
    os.makedirs(output_dir, exist_ok=True)
    rng = random.Random(seed)
    states = [1, 2, 4, 5, 6, 8, 9, 10, 11, 12]

    path = os.path.join(output_dir, 'example_brfss.csv')
    fieldnames = ['_STATE'] + list(VARIABLE_LABELS)
    with open(path, 'w', encoding='utf-8', newline='') as fh:
        writer = csv.DictWriter(fh, fieldnames=fieldnames)
        writer.writeheader()
        for _ in range(n_rows):
            row = _respondent(rng)
            row['_STATE'] = rng.choice(states)
            writer.writerow(row)
    return path
