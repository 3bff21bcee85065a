"""
Correlation heatmap for the BRFSS Correlation Heatmap.

Variable × variable grid coloured by Pearson coefficient:
  - Colour: selected scheme over [-1, 1]
  - Gray:   insufficient data (no coefficient)

Also maps mouse positions back to cells and builds hover text.
"""

from typing import Optional, Tuple

import numpy as np
from matplotlib.cm import ScalarMappable
from matplotlib.colors import Normalize
from matplotlib.figure import Figure

from .constants import (
    CELL_TEXT_CONTRAST, CELL_TEXT_DARK, CELL_TEXT_LIGHT,
    DEFAULT_COLOR_SCHEME, EXPORT_BG_COLOR, EXPORT_TEXT_COLOR,
    HIGHLIGHT_DIM_ALPHA, NO_DATA_TEXT_COLOR,
)
from .correlation import interpret_strength
from .data_model import CorrelationCell, CorrelationMatrix
from .theme import get_colormap


def render_correlation_heatmap(
    fig: Figure,
    matrix: CorrelationMatrix,
    *,
    color_scheme: str = DEFAULT_COLOR_SCHEME,
    for_export: bool = False,
    highlight: Optional[Tuple[int, int]] = None,
) -> None:
    """Render the correlation matrix on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    matrix : CorrelationMatrix
        Cells in the order to display; row ``i`` is drawn top to bottom.
    color_scheme : str
        Key of ``COLOR_SCHEMES``.
    for_export : bool
        If ``True``, use light-theme text colours.
    highlight : (row, col) or None
        Cell under the pointer.  Cells outside its row and column are
        dimmed.
    """
    fig.clf()
    n = matrix.size
    ax = fig.add_subplot(111)
    text_color = EXPORT_TEXT_COLOR if for_export else None

    if n == 0:
        ax.set_axis_off()
        ax.text(0.5, 0.5, "No variables to correlate",
                ha='center', va='center', transform=ax.transAxes,
                color=text_color)
        return

    values = matrix.to_array()
    cmap = get_colormap(color_scheme)
    norm = Normalize(vmin=-1.0, vmax=1.0)

    # ── RGBA grid (alpha carries the row/column highlight) ───────────
    alpha = np.ones((n, n), dtype=float)
    if highlight is not None:
        h_row, h_col = highlight
        rows = np.arange(n)[:, None]
        cols = np.arange(n)[None, :]
        in_cross = (rows == h_row) | (cols == h_col)
        alpha = np.where(in_cross, 1.0, HIGHLIGHT_DIM_ALPHA)

    rgba = cmap(norm(np.ma.masked_invalid(values)))
    rgba[..., 3] = alpha
    ax.imshow(rgba, aspect='equal', origin='upper', interpolation='nearest')

    # ── Cell annotations ─────────────────────────────────────────────
    for c in matrix.cells:
        if c.value is None:
            text = "N/A"
            tc = NO_DATA_TEXT_COLOR
        else:
            text = f"{c.value:.2f}"
            tc = CELL_TEXT_LIGHT if abs(c.value) > CELL_TEXT_CONTRAST else CELL_TEXT_DARK
        ax.text(
            c.col_index, c.row_index, text,
            ha='center', va='center',
            fontsize=7, color=tc, fontweight='bold',
            alpha=float(alpha[c.row_index, c.col_index]),
        )

    # ── Axis labels (columns on top, as in a correlation table) ──────
    ax.xaxis.tick_top()
    ax.set_xticks(range(n))
    ax.set_xticklabels(matrix.labels, rotation=45, ha='left',
                       rotation_mode='anchor', fontsize=7)
    ax.set_yticks(range(n))
    ax.set_yticklabels(matrix.labels, fontsize=7)

    # Cell separators
    ax.set_xticks(np.arange(-0.5, n, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, n, 1), minor=True)
    ax.grid(which='minor', color=EXPORT_BG_COLOR, linewidth=1.5)
    ax.tick_params(which='minor', length=0)
    ax.tick_params(which='major', length=0)

    # ── Legend: colour bar with labelled ends ────────────────────────
    mappable = ScalarMappable(norm=norm, cmap=cmap)
    cbar = fig.colorbar(
        mappable, ax=ax, orientation='horizontal',
        fraction=0.046, pad=0.04, ticks=[-1.0, 0.0, 1.0],
    )
    cbar.ax.set_xticklabels(
        ['-1 (Negative)', '0 (No Correlation)', '+1 (Positive)'],
        fontsize=7,
    )
    label_kw = {'color': text_color} if text_color else {}
    cbar.set_label('Correlation Strength', fontsize=8, fontweight='bold',
                   **label_kw)

    fig.tight_layout(pad=1.0)


def locate_cell(
    matrix: CorrelationMatrix,
    xdata: Optional[float],
    ydata: Optional[float],
) -> Optional[CorrelationCell]:
    """Cell under axes data coordinates, or ``None`` outside the grid."""
    if xdata is None or ydata is None or matrix.size == 0:
        return None
    col = int(np.floor(xdata + 0.5))
    row = int(np.floor(ydata + 0.5))
    if 0 <= row < matrix.size and 0 <= col < matrix.size:
        return matrix.cell(row, col)
    return None


def format_cell_tooltip(cell: CorrelationCell) -> str:
    """Hover text for one cell."""
    header = f"{cell.row_label} vs {cell.col_label}"
    if cell.value is None:
        return f"{header}\n{interpret_strength(None)}"
    return (
        f"{header}\n"
        f"Correlation: {cell.value:.3f}\n"
        f"Strength: {interpret_strength(cell.value)}"
    )
