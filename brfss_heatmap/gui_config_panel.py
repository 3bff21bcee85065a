"""
Control panel (left side) for the BRFSS Correlation Heatmap.

Survey file input, colour scheme selection, the sort toggle, and
export / example actions.
"""

import os
import tempfile
import warnings

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox,
    QLabel, QPushButton, QLineEdit, QComboBox, QFileDialog,
    QMessageBox,
)
from PySide6.QtCore import Signal

from .constants import (
    COLOR_SCHEMES, DARK_COLORS, DEFAULT_COLOR_SCHEME, SORT_LABEL,
)
from .csv_parser import load_survey_dataset
from .data_model import SurveyDataset


class ControlPanel(QWidget):
    """Left-side panel with the file input and display options."""

    # Signals
    dataset_loaded = Signal(object)   # emits SurveyDataset or None
    scheme_changed = Signal(str)      # emits COLOR_SCHEMES key
    sort_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._dataset = None
        self._setup_ui()
        self._connect_signals()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(8)

        # ── Group 1: Survey File ─────────────────────────────────────
        grp_file = QGroupBox("Survey File")
        file_layout = QVBoxLayout(grp_file)
        file_layout.setSpacing(4)

        row = QHBoxLayout()
        row.setSpacing(4)
        self._edt_file = QLineEdit()
        self._edt_file.setReadOnly(True)
        self._edt_file.setPlaceholderText("No file selected")
        self._edt_file.setStyleSheet("font-size: 11px;")
        self._btn_browse = QPushButton("Browse...")
        self._btn_browse.setFixedWidth(80)
        row.addWidget(self._edt_file, 1)
        row.addWidget(self._btn_browse)
        file_layout.addLayout(row)

        self._lbl_file_status = QLabel("")
        self._lbl_file_status.setStyleSheet(
            f"color: {DARK_COLORS['fg_dim']}; font-size: 11px;"
        )
        self._lbl_file_status.setWordWrap(True)
        file_layout.addWidget(self._lbl_file_status)

        layout.addWidget(grp_file)

        # ── Group 2: Display ─────────────────────────────────────────
        grp_display = QGroupBox("Display")
        display_layout = QFormLayout(grp_display)
        display_layout.setSpacing(4)

        self._cmb_scheme = QComboBox()
        for key, entry in COLOR_SCHEMES.items():
            self._cmb_scheme.addItem(entry['label'], key)
        self._cmb_scheme.setCurrentIndex(
            self._cmb_scheme.findData(DEFAULT_COLOR_SCHEME)
        )
        display_layout.addRow("Colour scheme:", self._cmb_scheme)

        self._btn_sort = QPushButton(SORT_LABEL)
        self._btn_sort.setToolTip(
            "Order variables by their mean absolute correlation\n"
            "with all other variables (strongest first)."
        )
        self._btn_sort.setEnabled(False)
        display_layout.addRow(self._btn_sort)

        layout.addWidget(grp_display)

        # ── Actions ──────────────────────────────────────────────────
        c = DARK_COLORS
        self._btn_export_csv = QPushButton("Export Matrix CSV...")
        self._btn_export_csv.setStyleSheet(
            f"QPushButton {{ background-color: {c['surface0']}; "
            f"font-size: 12px; padding: 8px; }}"
            f"QPushButton:hover {{ background-color: {c['overlay0']}; }}"
            f"QPushButton:disabled {{ background-color: {c['bg']}; "
            f"color: {c['fg_dim']}; }}"
        )
        self._btn_export_csv.setEnabled(False)
        layout.addWidget(self._btn_export_csv)

        self._btn_example = QPushButton("Load Example Data")
        layout.addWidget(self._btn_example)

        layout.addStretch()

    # ── Signal connections ───────────────────────────────────────────

    def _connect_signals(self):
        self._btn_browse.clicked.connect(lambda *_: self.browse_file())
        self._btn_example.clicked.connect(lambda *_: self.load_example())
        self._btn_sort.clicked.connect(lambda *_: self.sort_requested.emit())
        self._cmb_scheme.currentIndexChanged.connect(
            lambda *_: self.scheme_changed.emit(self.current_scheme())
        )

    # ── Loading ──────────────────────────────────────────────────────

    def browse_file(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Select Survey CSV File",
            "", "CSV Files (*.csv *.txt *.tsv);;All Files (*)",
        )
        if path:
            self.load_file(path)

    def load_example(self):
        """Generate and load the synthetic survey extract."""
        from .example_data import generate_example_csv

        example_dir = os.path.join(
            tempfile.gettempdir(), 'brfss_heatmap_example'
        )
        self.load_file(generate_example_csv(example_dir))

    def load_file(self, path: str):
        """Load *path*, report the outcome, and emit ``dataset_loaded``."""
        self._edt_file.setText(os.path.basename(path))
        self._edt_file.setToolTip(path)

        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always")
                dataset = load_survey_dataset(path)
        except (ValueError, OSError) as exc:
            self._set_status(f"Error: {exc}", 'red')
            self._set_loaded(None)
            QMessageBox.critical(self, "Data Load Error", str(exc))
            return

        summary = (
            f"Loaded {len(dataset)} of {dataset.n_raw_rows} rows "
            f"({dataset.n_dropped} with too few valid answers)"
        )
        if caught:
            notes = "\n".join(str(w.message) for w in caught)
            self._set_status(f"{summary}\n{notes}", 'yellow')
        else:
            self._set_status(summary, 'green')

        self._set_loaded(dataset)

    def _set_loaded(self, dataset):
        self._dataset = dataset
        loaded = dataset is not None
        self._btn_sort.setEnabled(loaded)
        self._btn_export_csv.setEnabled(loaded)
        self.dataset_loaded.emit(dataset)

    def _set_status(self, text: str, colour: str):
        self._lbl_file_status.setText(text)
        self._lbl_file_status.setStyleSheet(
            f"color: {DARK_COLORS[colour]}; font-size: 11px;"
        )

    # ── Public API ───────────────────────────────────────────────────

    def current_scheme(self) -> str:
        return self._cmb_scheme.currentData() or DEFAULT_COLOR_SCHEME

    def set_sort_text(self, text: str):
        self._btn_sort.setText(text)

    def get_dataset(self) -> SurveyDataset:
        """Return the currently loaded dataset, or ``None``."""
        return self._dataset

    @property
    def export_csv_button(self) -> QPushButton:
        """Access to the Export CSV button for external signal connection."""
        return self._btn_export_csv
