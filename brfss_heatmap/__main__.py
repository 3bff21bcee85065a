"""
Entry point for the BRFSS Correlation Heatmap.

Usage:
    python -m brfss_heatmap [survey.csv]
"""

import sys
import os
import traceback


_REQUIRED = ("PySide6", "matplotlib", "numpy")


def _check_dependencies():
    """Exit with an install hint if a GUI or plotting package is absent."""
    import importlib

    missing = []
    for name in _REQUIRED:
        try:
            importlib.import_module(name)
        except ImportError:
            missing.append(name)

    if missing:
        print(
            f"Missing required packages: {', '.join(missing)}\n"
            f"Install with: pip install {' '.join(missing)}",
            file=sys.stderr,
        )
        sys.exit(1)


def _show_error_dialog(text: str):
    from PySide6.QtWidgets import QMessageBox, QApplication
    if QApplication.instance() is not None:
        QMessageBox.critical(None, "Unhandled Error", text)


class CrashReporter:
    """``sys.excepthook`` that names the survey file on screen.

    The full traceback always goes to stderr.  A dialog is shown on top
    when a Qt application is running; if the dialog itself fails, that
    failure is reported on stderr instead of replacing the original
    error.
    """

    def __init__(self, source=None):
        # Callable returning the loaded survey path ("" when none)
        self.source = source

    def _source_file(self) -> str:
        if self.source is None:
            return ""
        try:
            return self.source() or ""
        except Exception as exc:
            return f"<unknown: {exc}>"

    def report(self, exc_type, exc_value) -> str:
        """Short user-facing summary of an unhandled error."""
        lines = [
            "An unexpected error occurred:",
            "",
            f"{exc_type.__name__}: {exc_value}",
        ]
        survey = self._source_file()
        if survey:
            lines += ["", f"Survey file: {os.path.basename(survey)}"]
        lines += ["", "See console for full traceback."]
        return "\n".join(lines)

    def __call__(self, exc_type, exc_value, exc_tb):
        msg = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
        survey = self._source_file()
        where = f" while showing {survey}" if survey else ""
        print(f"Unhandled exception{where}:\n{msg}", file=sys.stderr)

        try:
            _show_error_dialog(self.report(exc_type, exc_value))
        except Exception as dialog_exc:
            print(
                f"Could not show error dialog: "
                f"{type(dialog_exc).__name__}: {dialog_exc}",
                file=sys.stderr,
            )


def main():
    """Launch the BRFSS Correlation Heatmap GUI."""
    _check_dependencies()

    reporter = CrashReporter()
    sys.excepthook = reporter

    # Configure matplotlib backend before importing Qt widgets
    os.environ.setdefault("QT_API", "pyside6")
    import matplotlib
    matplotlib.use('QtAgg')

    from PySide6.QtWidgets import QApplication
    from PySide6.QtGui import QFont, QFontDatabase

    from .constants import FONT_FAMILIES
    from .theme import get_dark_stylesheet
    from .gui_main import HeatmapMainWindow

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    font = QFont()
    for family in FONT_FAMILIES:
        if QFontDatabase.hasFamily(family):
            font.setFamily(family)
            break
    font.setPointSize(10)
    app.setFont(font)

    app.setStyleSheet(get_dark_stylesheet())

    window = HeatmapMainWindow()
    reporter.source = window.current_source
    window.show()

    # First non-option argument is an optional survey file
    paths = [a for a in app.arguments()[1:] if not a.startswith('-')]
    if paths:
        window.load_file(paths[0])

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
