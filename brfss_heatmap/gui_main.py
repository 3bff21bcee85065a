"""
Main window for the BRFSS Correlation Heatmap.

Hosts the ControlPanel (left) and HeatmapView (right) in a horizontal
splitter, with a menu bar and status bar.  The window owns the single
``HeatmapSession`` for the loaded dataset.
"""

import os

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QScrollArea,
    QFileDialog, QMessageBox,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from . import APP_NAME, APP_VERSION
from .constants import SORT_LABEL
from .export import export_matrix_csv
from .gui_chart_view import HeatmapView
from .gui_config_panel import ControlPanel
from .session import HeatmapSession


class HeatmapMainWindow(QMainWindow):
    """Main window for the BRFSS Correlation Heatmap."""

    def __init__(self):
        super().__init__()
        self._session = None

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(1100, 760)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self.statusBar().showMessage("Ready — load a survey CSV to begin")

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(4, 4, 4, 4)
        main_layout.setSpacing(4)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        self._control_panel = ControlPanel()
        scroll = QScrollArea()
        scroll.setWidget(self._control_panel)
        scroll.setWidgetResizable(True)
        scroll.setMinimumWidth(280)
        scroll.setMaximumWidth(420)

        self._view = HeatmapView()

        splitter.addWidget(scroll)
        splitter.addWidget(self._view)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([320, 780])

        main_layout.addWidget(splitter)

    def _setup_menu(self):
        menubar = self.menuBar()

        # ── File menu ────────────────────────────────────────────────
        file_menu = menubar.addMenu("File")

        act_open = QAction("Open Survey CSV...", self)
        act_open.triggered.connect(
            lambda *_: self._control_panel.browse_file()
        )
        file_menu.addAction(act_open)

        file_menu.addSeparator()

        act_export_png = QAction("Export Heatmap PNG...", self)
        act_export_png.triggered.connect(lambda *_: self._view.export_dialog())
        file_menu.addAction(act_export_png)

        act_export_csv = QAction("Export Matrix CSV...", self)
        act_export_csv.triggered.connect(lambda *_: self._export_csv())
        file_menu.addAction(act_export_csv)

        file_menu.addSeparator()

        act_exit = QAction("Exit", self)
        act_exit.triggered.connect(self.close)
        file_menu.addAction(act_exit)

        # ── Examples menu ────────────────────────────────────────────
        examples_menu = menubar.addMenu("Examples")

        act_load_example = QAction("Load Example Dataset", self)
        act_load_example.triggered.connect(
            lambda *_: self._control_panel.load_example()
        )
        examples_menu.addAction(act_load_example)

        # ── Help menu ────────────────────────────────────────────────
        help_menu = menubar.addMenu("Help")

        act_about = QAction("About", self)
        act_about.triggered.connect(lambda *_: self._show_about())
        help_menu.addAction(act_about)

    def _connect_signals(self):
        self._control_panel.dataset_loaded.connect(self._on_dataset_loaded)
        self._control_panel.scheme_changed.connect(self._on_scheme_changed)
        self._control_panel.sort_requested.connect(self._on_sort_requested)
        self._control_panel.export_csv_button.clicked.connect(
            lambda *_: self._export_csv()
        )

    # ── Public API ───────────────────────────────────────────────────

    def load_file(self, path: str):
        self._control_panel.load_file(path)

    def current_source(self) -> str:
        """Path of the survey file on screen, or ``""``."""
        if self._session is None:
            return ""
        return self._session.dataset.source_file

    # ── Slots ────────────────────────────────────────────────────────

    def _on_dataset_loaded(self, dataset):
        """Slot: a survey file was loaded (``None`` clears stale state)."""
        self._control_panel.set_sort_text(SORT_LABEL)
        if dataset is None:
            self._session = None
            self._view.set_session(None)
            self.statusBar().showMessage("Data load cleared")
            return

        self._session = HeatmapSession(
            dataset, color_scheme=self._control_panel.current_scheme(),
        )
        self._view.set_session(self._session)
        self.statusBar().showMessage(
            f"Loaded {os.path.basename(dataset.source_file)}: "
            f"{len(dataset)} of {dataset.n_raw_rows} rows, "
            f"{len(dataset.variable_keys)} indicators"
        )

    def _on_scheme_changed(self, scheme: str):
        if self._session is None:
            return
        self._session.set_color_scheme(scheme)
        self._view.redraw()

    def _on_sort_requested(self):
        if self._session is None:
            return
        self._session.toggle_sort()
        self._control_panel.set_sort_text(self._session.sort_button_text)
        self._view.redraw()
        state = "similarity" if self._session.is_sorted else "declared"
        self.statusBar().showMessage(f"Variables in {state} order", 3000)

    def _export_csv(self):
        if self._session is None:
            QMessageBox.warning(
                self, "No Data",
                "Please load a survey CSV before exporting the matrix.",
            )
            return

        path, _ = QFileDialog.getSaveFileName(
            self, "Export Correlation Matrix as CSV",
            "", "CSV Files (*.csv);;All Files (*)",
        )
        if not path:
            return
        if not path.lower().endswith('.csv'):
            path += '.csv'
        try:
            export_matrix_csv(self._session.matrix, path)
            self.statusBar().showMessage(
                f"Exported to {os.path.basename(path)}", 5000
            )
        except OSError as exc:
            QMessageBox.critical(
                self, "Export Error", f"Failed to export: {exc}"
            )

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} v{APP_VERSION}</h3>"
            f"<p>Pearson correlation heatmap for BRFSS health survey "
            f"indicators.</p>"
            f"<p>Sentinel answer codes are treated as missing; pairs "
            f"with fewer than 10 complete answers show N/A.</p>",
        )
