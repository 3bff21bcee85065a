"""
BRFSS Correlation Heatmap v1.0.0

Pairwise Pearson correlation matrix over a fixed set of BRFSS health
survey indicators, rendered as an interactive heatmap with
similarity sorting and selectable colour schemes.

Reads one delimited survey file, filters sentinel-coded answers, and
exports the heatmap as PNG or the matrix as CSV.
"""

APP_NAME = "BRFSS Correlation Heatmap"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-19"
__version__ = APP_VERSION
