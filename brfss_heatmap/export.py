"""
Export utilities for the BRFSS Correlation Heatmap.

Handles PNG export with automatic light-theme switching (dark GUI
theme → white-background export), clipboard copy, and writing the
correlation matrix itself as a square CSV table.  Uses try/finally to
guarantee theme restoration.
"""

import csv
import io

from matplotlib.figure import Figure

from .constants import (
    CLIPBOARD_DPI, CSV_DECIMALS, DARK_COLORS, EXPORT_DPI,
    EXPORT_WIDTH_INCHES, PLOT_STYLE_LIGHT,
)
from .data_model import CorrelationMatrix


def _save_figure_state(fig: Figure) -> dict:
    """Save current figure/axes colours for later restoration.

    Captures every property ``_apply_light_theme`` modifies so
    ``_restore_figure_state`` can undo each change.
    """
    state = {
        'fig_facecolor': fig.get_facecolor(),
        'axes_states': [],
    }
    for ax in fig.get_axes():
        state['axes_states'].append({
            'facecolor': ax.get_facecolor(),
            'title_color': ax.title.get_color(),
            'xlabel_color': ax.xaxis.label.get_color(),
            'ylabel_color': ax.yaxis.label.get_color(),
            'tick_label_colors_x': [
                t.get_color() for t in ax.get_xticklabels()
            ],
            'tick_label_colors_y': [
                t.get_color() for t in ax.get_yticklabels()
            ],
            'text_colors': [t.get_color() for t in ax.texts],
        })
    return state


def _apply_light_theme(fig: Figure) -> None:
    """Apply light (white background) theme to figure for export."""
    light = PLOT_STYLE_LIGHT
    fig.set_facecolor(light['figure.facecolor'])

    # Known dark-theme foreground colours to convert
    _dark_fg_set = frozenset((DARK_COLORS['fg'], DARK_COLORS['fg_dim']))

    for ax in fig.get_axes():
        ax.set_facecolor(light['axes.facecolor'])
        ax.title.set_color(light['text.color'])
        ax.xaxis.label.set_color(light['axes.labelcolor'])
        ax.yaxis.label.set_color(light['axes.labelcolor'])
        for label in ax.get_xticklabels():
            label.set_color(light['xtick.color'])
        for label in ax.get_yticklabels():
            label.set_color(light['ytick.color'])

        # Cell annotations keep their contrast colours; only dark-theme
        # foreground text is converted.
        for text in ax.texts:
            if text.get_color() in _dark_fg_set:
                text.set_color(light['text.color'])


def _restore_figure_state(fig: Figure, state: dict) -> None:
    """Restore saved figure/axes colours after export."""
    fig.set_facecolor(state['fig_facecolor'])

    for ax, ax_state in zip(fig.get_axes(), state['axes_states']):
        ax.set_facecolor(ax_state['facecolor'])
        ax.title.set_color(ax_state['title_color'])
        ax.xaxis.label.set_color(ax_state['xlabel_color'])
        ax.yaxis.label.set_color(ax_state['ylabel_color'])
        for label, color in zip(
            ax.get_xticklabels(), ax_state['tick_label_colors_x']
        ):
            label.set_color(color)
        for label, color in zip(
            ax.get_yticklabels(), ax_state['tick_label_colors_y']
        ):
            label.set_color(color)
        for text, color in zip(ax.texts, ax_state['text_colors']):
            text.set_color(color)


def export_png(
    fig: Figure,
    filepath: str,
    *,
    dpi: int = EXPORT_DPI,
    width_inches: float = EXPORT_WIDTH_INCHES,
) -> None:
    """Export figure as PNG with light theme.

    Theme and size are switched for the export and restored afterwards,
    even on error.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
    filepath : str
        Output file path (should end with ``.png``).
    dpi : int
        Export resolution.
    width_inches : float
        Figure width in inches; height scales proportionally.
    """
    state = _save_figure_state(fig)
    current_w = fig.get_figwidth()
    current_h = fig.get_figheight()
    try:
        scale = width_inches / current_w if current_w > 0 else 1.0
        fig.set_size_inches(width_inches, current_h * scale)

        _apply_light_theme(fig)
        fig.savefig(
            filepath,
            dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
            pad_inches=0.1,
        )
    finally:
        fig.set_size_inches(current_w, current_h)
        _restore_figure_state(fig, state)


def copy_to_clipboard(fig: Figure, dpi: int = CLIPBOARD_DPI) -> bool:
    """Copy figure to system clipboard as PNG image.

    Returns ``True`` on success, ``False`` if clipboard is unavailable.
    """
    try:
        from PySide6.QtWidgets import QApplication
        from PySide6.QtGui import QImage
    except ImportError:
        return False

    buf = io.BytesIO()
    state = _save_figure_state(fig)
    try:
        _apply_light_theme(fig)
        fig.savefig(
            buf, format='png', dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
        )
    finally:
        _restore_figure_state(fig, state)

    img = QImage()
    img.loadFromData(buf.getvalue())

    clipboard = QApplication.clipboard()
    if clipboard is None:
        return False
    clipboard.setImage(img)
    return True


def export_matrix_csv(
    matrix: CorrelationMatrix,
    filepath: str,
    *,
    decimals: int = CSV_DECIMALS,
) -> None:
    """Write *matrix* as a square CSV table.

    The header row and first column hold display labels in the
    matrix's current order.  Absent coefficients are written as blank
    cells.
    """
    with open(filepath, 'w', encoding='utf-8', newline='') as fh:
        writer = csv.writer(fh)
        writer.writerow([''] + list(matrix.labels))
        for i, label in enumerate(matrix.labels):
            row = [label]
            for j in range(matrix.size):
                value = matrix.cell(i, j).value
                row.append('' if value is None else f"{value:.{decimals}f}")
            writer.writerow(row)
