"""
Constants for the BRFSS Correlation Heatmap.

Centralises the indicator mapping, data-quality thresholds, colour
schemes, GUI palette, matplotlib style dicts, and export settings.
"""

from collections import OrderedDict

# ── Tracked indicators: VariableKey → DisplayLabel (declaration order) ──
VARIABLE_LABELS = OrderedDict([
    ('_BMI5',    'BMI'),
    ('GENHLTH',  'General Health'),
    ('SMOKE100', 'Smoking Status'),
    ('SMOKDAY2', 'Smoke Daily'),
    ('EXERANY2', 'Exercise'),
    ('DIABETE4', 'Diabetes'),
    ('CVDINFR4', 'Heart Attack'),
    ('CVDCRHD4', 'Heart Disease'),
    ('CVDSTRK3', 'Stroke'),
    ('PHYSHLTH', 'High BP'),
])

# ── Data-quality thresholds (named, avoid magic numbers) ────────────────
# Valid survey codes lie strictly inside (VALID_MIN, VALID_MAX); sentinel
# "missing / refused" codes fall outside it.
VALID_MIN = 0.0
VALID_MAX = 10.0
MIN_VALID_FIELDS = 5     # present values needed to keep a respondent row
MIN_PAIRS = 10           # complete pairs needed for a coefficient

# ── Correlation strength bands (|r| strictly above the bound) ────────────
STRENGTH_BANDS = [
    (0.7, 'Strong'),
    (0.4, 'Moderate'),
    (0.2, 'Weak'),
]
STRENGTH_FLOOR = 'Very Weak'
INSUFFICIENT_DATA_TEXT = 'Insufficient data'

# ── Colour schemes (diverging three-stop, or a named sequential map) ────
COLOR_SCHEMES = OrderedDict([
    ('redblue', {
        'label':    'Red-Blue',
        'negative': '#d62728',
        'neutral':  '#ffffff',
        'positive': '#1f77b4',
    }),
    ('viridis', {
        'label':    'Viridis',
        'cmap':     'viridis',
    }),
    ('coolwarm', {
        'label':    'Cool-Warm',
        'negative': '#3b4cc0',
        'neutral':  '#f7f7f7',
        'positive': '#b40426',
    }),
])
DEFAULT_COLOR_SCHEME = 'redblue'

# ── Heatmap cell styling ─────────────────────────────────────────────────
NO_DATA_COLOR = '#cccccc'
NO_DATA_TEXT_COLOR = '#666666'
CELL_TEXT_LIGHT = '#ffffff'
CELL_TEXT_DARK = '#000000'
CELL_TEXT_CONTRAST = 0.5   # |r| above this gets light text
HIGHLIGHT_DIM_ALPHA = 0.3

# ── Sort button captions ─────────────────────────────────────────────────
SORT_LABEL = 'Sort by Correlation Strength'
RESET_LABEL = 'Reset Order'

# ── Font family fallback chain ───────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Ubuntu", "Helvetica", "Arial", "sans-serif",
]

# ── Dark Catppuccin-inspired GUI colour palette ──────────────────────────
DARK_COLORS = {
    'bg':           '#1e1e2e',
    'bg_alt':       '#252536',
    'surface0':     '#313244',
    'bg_widget':    '#2a2a3c',
    'bg_input':     '#333348',
    'fg':           '#cdd6f4',
    'fg_dim':       '#9399b2',
    'accent':       '#89b4fa',
    'green':        '#a6e3a1',
    'yellow':       '#f9e2af',
    'red':          '#f38ba8',
    'border':       '#45475a',
    'overlay0':     '#6c7086',
    'selection':    '#45475a',
}

# ── Export / light-theme text colours ────────────────────────────────────
EXPORT_TEXT_COLOR = '#333333'
EXPORT_BG_COLOR = '#ffffff'

# ── Export settings ──────────────────────────────────────────────────────
EXPORT_DPI = 300
EXPORT_WIDTH_INCHES = 8.0
CLIPBOARD_DPI = 150
CSV_DECIMALS = 4

# ── Matplotlib dark-theme style dict (GUI preview) ──────────────────────
PLOT_STYLE_DARK = {
    'figure.facecolor':  DARK_COLORS['bg_alt'],
    'axes.facecolor':    DARK_COLORS['bg_widget'],
    'axes.edgecolor':    DARK_COLORS['border'],
    'axes.labelcolor':   DARK_COLORS['fg'],
    'text.color':        DARK_COLORS['fg'],
    'xtick.color':       DARK_COLORS['fg_dim'],
    'ytick.color':       DARK_COLORS['fg_dim'],
    'xtick.labelsize':   8,
    'ytick.labelsize':   8,
    'axes.labelsize':    9,
    'axes.titlesize':    10,
}

# ── Matplotlib light-theme style dict (export) ──────────────────────────
PLOT_STYLE_LIGHT = {
    'figure.facecolor':  '#ffffff',
    'axes.facecolor':    '#ffffff',
    'axes.edgecolor':    '#333333',
    'axes.labelcolor':   '#1a1a2e',
    'text.color':        '#1a1a2e',
    'xtick.color':       '#333333',
    'ytick.color':       '#333333',
    'xtick.labelsize':   8,
    'ytick.labelsize':   8,
    'axes.labelsize':    9,
    'axes.titlesize':    10,
}
