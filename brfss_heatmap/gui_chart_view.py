"""
Heatmap view (right side) for the BRFSS Correlation Heatmap.

A matplotlib FigureCanvas with navigation toolbar, copy/export
buttons, and hover tooltips that highlight the row and column of the
cell under the pointer.
"""

import os

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFileDialog,
    QMessageBox, QToolTip,
)
from PySide6.QtGui import QCursor

import matplotlib
matplotlib.use('QtAgg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import (
    FigureCanvasQTAgg as FigureCanvas,
    NavigationToolbar2QT as NavigationToolbar,
)

from .constants import DARK_COLORS, PLOT_STYLE_DARK
from .chart_heatmap import (
    format_cell_tooltip, locate_cell, render_correlation_heatmap,
)
from .export import copy_to_clipboard, export_png
from .theme import apply_plot_style


class HeatmapView(QWidget):
    """Figure canvas showing the current session's correlation matrix."""

    def __init__(self, figsize=(8, 7), parent=None):
        super().__init__(parent)
        self._session = None
        self._highlight = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        # ── Toolbar row ──────────────────────────────────────────────
        toolbar_row = QHBoxLayout()
        toolbar_row.setSpacing(4)

        self._fig = Figure(figsize=figsize)
        self._fig.set_facecolor(DARK_COLORS['bg_alt'])
        self._canvas = FigureCanvas(self._fig)
        self._toolbar = NavigationToolbar(self._canvas, self)

        toolbar_row.addWidget(self._toolbar)
        toolbar_row.addStretch()

        self._btn_copy = QPushButton("Copy to Clipboard")
        self._btn_copy.setFixedHeight(28)
        self._btn_copy.setStyleSheet("font-size: 11px; padding: 2px 8px;")
        self._btn_copy.clicked.connect(lambda *_: self._on_copy())
        toolbar_row.addWidget(self._btn_copy)

        self._btn_export = QPushButton("Export PNG...")
        self._btn_export.setFixedHeight(28)
        self._btn_export.setStyleSheet("font-size: 11px; padding: 2px 8px;")
        self._btn_export.clicked.connect(lambda *_: self.export_dialog())
        toolbar_row.addWidget(self._btn_export)

        layout.addLayout(toolbar_row)
        layout.addWidget(self._canvas, 1)

        self._canvas.mpl_connect('motion_notify_event', self._on_motion)
        self._canvas.mpl_connect('figure_leave_event', self._on_leave)

        apply_plot_style(PLOT_STYLE_DARK)

    @property
    def fig(self) -> Figure:
        return self._fig

    def set_session(self, session):
        """Show *session* (a ``HeatmapSession``), or clear with ``None``."""
        self._session = session
        self._highlight = None
        self.redraw()

    def redraw(self):
        """Re-render from the session's current matrix and scheme."""
        if self._session is None:
            self._fig.clf()
        else:
            apply_plot_style(PLOT_STYLE_DARK)
            render_correlation_heatmap(
                self._fig, self._session.matrix,
                color_scheme=self._session.color_scheme,
                highlight=self._highlight,
            )
        self._canvas.draw_idle()

    # ── Hover ────────────────────────────────────────────────────────

    def _on_motion(self, event):
        if self._session is None:
            return
        axes = self._fig.get_axes()
        cell = None
        if axes and event.inaxes is axes[0]:
            cell = locate_cell(self._session.matrix, event.xdata, event.ydata)

        target = None if cell is None else (cell.row_index, cell.col_index)
        if target == self._highlight:
            return
        self._highlight = target
        self.redraw()
        if cell is None:
            QToolTip.hideText()
        else:
            QToolTip.showText(
                QCursor.pos(), format_cell_tooltip(cell), self._canvas
            )

    def _on_leave(self, event):
        if self._highlight is not None:
            self._highlight = None
            QToolTip.hideText()
            self.redraw()

    # ── Export ───────────────────────────────────────────────────────

    def _on_copy(self):
        if copy_to_clipboard(self._fig):
            self.window().statusBar().showMessage(
                "Chart copied to clipboard", 3000
            )
        else:
            QMessageBox.warning(self, "Copy Failed",
                                "Could not copy chart to clipboard.")

    def export_dialog(self):
        if self._session is None:
            QMessageBox.warning(
                self, "Nothing to Export",
                "Load a survey file before exporting the heatmap.",
            )
            return
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Heatmap as PNG",
            "", "PNG Files (*.png);;All Files (*)",
        )
        if not path:
            return
        if not path.lower().endswith('.png'):
            path += '.png'

        # Export without the hover highlight
        highlight, self._highlight = self._highlight, None
        try:
            self.redraw()
            export_png(self._fig, path)
            self.window().statusBar().showMessage(
                f"Exported to {os.path.basename(path)}", 3000
            )
        except (ValueError, OSError) as exc:
            QMessageBox.critical(
                self, "Export Error", f"Failed to export: {exc}"
            )
        finally:
            self._highlight = highlight
            self.redraw()
