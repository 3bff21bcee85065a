import brfss_heatmap.__main__ as entry
from brfss_heatmap.__main__ import CrashReporter


def _exc_info():
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        return type(exc), exc, exc.__traceback__


def test_report_names_loaded_survey_file():
    reporter = CrashReporter(source=lambda: "/data/llcp2022.csv")
    text = reporter.report(RuntimeError, RuntimeError("boom"))
    assert "RuntimeError: boom" in text
    assert "Survey file: llcp2022.csv" in text


def test_report_without_loaded_file():
    text = CrashReporter().report(ValueError, ValueError("bad"))
    assert "ValueError: bad" in text
    assert "Survey file" not in text


def test_hook_prints_traceback_and_shows_dialog(monkeypatch, capsys):
    shown = []
    monkeypatch.setattr(entry, "_show_error_dialog", shown.append)
    CrashReporter(source=lambda: "s.csv")(*_exc_info())

    err = capsys.readouterr().err
    assert "Unhandled exception while showing s.csv" in err
    assert "RuntimeError: boom" in err
    assert len(shown) == 1
    assert "Survey file: s.csv" in shown[0]


def test_hook_survives_failing_dialog(monkeypatch, capsys):
    def broken_dialog(text):
        raise OSError("no display")

    monkeypatch.setattr(entry, "_show_error_dialog", broken_dialog)
    CrashReporter()(*_exc_info())

    err = capsys.readouterr().err
    assert "RuntimeError: boom" in err
    assert "Could not show error dialog: OSError: no display" in err


def test_hook_survives_failing_source(monkeypatch, capsys):
    def broken_source():
        raise AttributeError("gone")

    monkeypatch.setattr(entry, "_show_error_dialog", lambda text: None)
    reporter = CrashReporter(source=broken_source)
    reporter(*_exc_info())
    assert "<unknown: gone>" in capsys.readouterr().err
