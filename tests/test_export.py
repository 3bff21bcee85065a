import csv

from matplotlib.figure import Figure

from brfss_heatmap.chart_heatmap import render_correlation_heatmap
from brfss_heatmap.correlation import compute_matrix
from brfss_heatmap.export import export_matrix_csv, export_png


def test_export_png_writes_file_and_restores_figure(tmp_path, linear_dataset):
    matrix = compute_matrix(linear_dataset, ('X', 'Z'))
    fig = Figure(figsize=(5, 4))
    fig.set_facecolor('#252536')
    render_correlation_heatmap(fig, matrix)
    facecolor = fig.get_facecolor()

    path = tmp_path / 'heatmap.png'
    export_png(fig, str(path), dpi=50, width_inches=4.0)

    assert path.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'
    assert fig.get_figwidth() == 5
    assert fig.get_figheight() == 4
    assert fig.get_facecolor() == facecolor


def test_export_matrix_csv(tmp_path, linear_dataset):
    matrix = compute_matrix(
        linear_dataset, ('Y', 'X', 'W'), {'X': 'Ex', 'Y': 'Why'},
    )
    path = tmp_path / 'matrix.csv'
    export_matrix_csv(matrix, str(path))

    with open(path, newline='', encoding='utf-8') as fh:
        rows = list(csv.reader(fh))

    assert rows[0] == ['', 'Why', 'Ex', 'W']
    assert rows[1] == ['Why', '1.0000', '1.0000', '']
    assert rows[3] == ['W', '', '', '1.0000']
    assert len(rows) == 4
