"""
Theme, colour maps and stylesheet for the BRFSS Correlation Heatmap.

Provides the dark Catppuccin GUI stylesheet, the matplotlib style
switcher used for dark (GUI) and light (export) rendering, and the
colormap behind each selectable colour scheme.
"""

from matplotlib import colormaps
from matplotlib.colors import Colormap, LinearSegmentedColormap

from .constants import COLOR_SCHEMES, DARK_COLORS, NO_DATA_COLOR


def get_colormap(scheme: str) -> Colormap:
    """Colormap for a named colour scheme over the domain ``[-1, 1]``.

    Diverging schemes are three-stop linear maps (negative → neutral →
    positive); sequential schemes reuse a registered matplotlib map.
    ``NaN`` cells render in ``NO_DATA_COLOR``.

    Raises
    ------
    ValueError
        If *scheme* is not a key of ``COLOR_SCHEMES``.
    """
    entry = COLOR_SCHEMES.get(scheme)
    if entry is None:
        raise ValueError(
            f"Unknown colour scheme {scheme!r}; expected one of "
            f"{list(COLOR_SCHEMES)}"
        )
    if 'cmap' in entry:
        cmap = colormaps[entry['cmap']]
    else:
        cmap = LinearSegmentedColormap.from_list(
            f"corr_{scheme}",
            [entry['negative'], entry['neutral'], entry['positive']],
        )
    return cmap.with_extremes(bad=NO_DATA_COLOR)


def get_dark_stylesheet() -> str:
    """Generate the dark mode Qt stylesheet."""
    c = DARK_COLORS
    return f"""
    QMainWindow, QWidget {{
        background-color: {c['bg']};
        color: {c['fg']};
        font-size: 13px;
    }}
    QGroupBox {{
        border: 1px solid {c['border']};
        border-radius: 6px;
        margin-top: 12px;
        padding-top: 16px;
        font-weight: bold;
        color: {c['accent']};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 12px;
        padding: 0 6px;
    }}
    QPushButton {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 6px 16px;
        min-height: 24px;
    }}
    QPushButton:hover {{
        background-color: {c['selection']};
        border-color: {c['accent']};
    }}
    QPushButton:pressed {{
        background-color: {c['accent']};
        color: {c['bg']};
    }}
    QPushButton:disabled {{
        color: {c['fg_dim']};
        background-color: {c['bg']};
    }}
    QLineEdit, QComboBox {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 4px 8px;
        min-height: 22px;
    }}
    QLineEdit:focus, QComboBox:focus {{
        border-color: {c['accent']};
    }}
    QComboBox QAbstractItemView {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        selection-background-color: {c['selection']};
    }}
    QStatusBar {{
        background-color: {c['bg_alt']};
        color: {c['fg_dim']};
        border-top: 1px solid {c['border']};
    }}
    QMenuBar {{
        background-color: {c['bg_alt']};
        color: {c['fg']};
    }}
    QMenuBar::item:selected {{
        background-color: {c['selection']};
    }}
    QMenu {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
    }}
    QMenu::item:selected {{
        background-color: {c['selection']};
    }}
    QToolTip {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['accent']};
        padding: 6px;
        border-radius: 4px;
    }}
    QSplitter::handle {{
        background-color: {c['border']};
    }}
    QLabel {{
        color: {c['fg']};
    }}
    """


def apply_plot_style(style_dict: dict) -> None:
    """Apply a style dictionary to matplotlib rcParams.

    Parameters
    ----------
    style_dict : dict
        One of ``PLOT_STYLE_DARK`` or ``PLOT_STYLE_LIGHT``.
    """
    import matplotlib as mpl
    for key, value in style_dict.items():
        mpl.rcParams[key] = value
