from __future__ import annotations

import pytest

from epath.path import Path
from epath.pathdata import parse_path_data
from epath.segments import Segment
from epath.tikz import generate_tikz_code, generate_tikz_document


def test_generate_tikz_code_draws_lines_with_flipped_y() -> None:
    path = parse_path_data("M 0 0 L 10 0 L 10 10 Z")

    tikz = generate_tikz_code(path)

    assert tikz.splitlines() == [
        "\\begin{tikzpicture}",
        "  \\draw[contour] (0, 0) -- (10, 0) -- (10, -10) -- (0, 0) -- cycle;",
        "\\end{tikzpicture}",
    ]


def test_quad_is_elevated_to_cubic() -> None:
    path = parse_path_data("M 0 0 Q 30 30 60 0 Z")

    tikz = generate_tikz_code(path)

    assert ".. controls (20, -20) and (40, -20) .. (60, 0)" in tikz


def test_cubic_controls_are_kept() -> None:
    path = parse_path_data("M 0 0 C 10 0 20 10 20 20 Z")

    tikz = generate_tikz_code(path, flip_y=False)

    assert ".. controls (10, 0) and (20, 10) .. (20, 20)" in tikz


def test_normalize_centres_and_scales() -> None:
    path = parse_path_data("M 0 0 L 100 0 L 100 100 L 0 100 Z")

    tikz = generate_tikz_code(path, normalize=True)

    assert "(-4, 4) -- (4, 4) -- (4, -4) -- (-4, -4)" in tikz


def test_one_draw_per_subpath_and_custom_style() -> None:
    path = parse_path_data("M 0 0 L 10 0 L 10 10 Z M 20 20 L 30 20 L 30 30 Z")

    tikz = generate_tikz_code(path, style="thick")

    assert tikz.count("\\draw[thick]") == 2


def test_empty_path_renders_empty_picture() -> None:
    assert generate_tikz_code(Path()) == "\\begin{tikzpicture}\n\\end{tikzpicture}"


def test_generate_tikz_document_preamble() -> None:
    document = generate_tikz_document(parse_path_data("M 0 0 L 10 0 L 10 10 Z"))

    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert "\\tikzset{" in document
    assert "contour/.style=" in document
    assert "\\begin{tikzpicture}" in document
    assert document.rstrip().endswith("\\end{document}")


def test_non_finite_coordinates_are_rejected() -> None:
    bad = Path.from_segments(
        [Segment.move((0, 0)), Segment.line((float("inf"), 0)), Segment.close()]
    )

    with pytest.raises(ValueError):
        generate_tikz_code(bad)
