import pytest

import epath.__main__ as cli

SQUARE = "M 0 0 L 0 100 L 100 100 L 100 0 Z"


def _write(tmp_path, text):
    path_file = tmp_path / "contour.txt"
    path_file.write_text(text, encoding="utf-8")
    return str(path_file)


def test_round_file_prints_path_data(tmp_path, capsys):
    cli.main([_write(tmp_path, SQUARE), "--round", "10", "--precision", "1"])

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "M 0 10 L 0 90 Q 0 100 10 100 L 90 100 Q 100 100 100 90 "
        "L 100 10 Q 100 0 90 0 L 10 0 Q 0 0 0 10 Z"
    ]


def test_rule_selects_turn_direction(capsys):
    cli.main(["--shape", "rect", "--round", "10", "--rule", "left"])
    assert capsys.readouterr().out.strip() == "M 0 200 L 0 0 L 100 0 L 100 200 L 0 200 Z"

    cli.main(["--shape", "rect", "--round", "10", "--rule", "right"])
    assert capsys.readouterr().out.count("Q") == 4


def test_analyze_reports_before_transforming(tmp_path, capsys):
    cli.main([_write(tmp_path, "M 0 0 L 50 0 L 50.5 0 L 50 50 Z"), "--analyze", "1", "--thin", "1"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == [
        "Analysis:",
        "SubPath #0:",
        "2: line to (50.50, 0.00) small! [0.5 < 1.0]",
    ]
    assert lines[3] == "M 0 0 L 50.5 0 L 50 50 L 0 0 Z"


def test_warnings_are_listed(tmp_path, capsys):
    cli.main([_write(tmp_path, "M 0 0 L 0.5 0 Z"), "--round", "10"])

    out = capsys.readouterr().out
    assert "Warnings:" in out
    assert "  - sub-path 0: sub-path has 3 segment(s); rounding needs more than 3" in out


def test_main_writes_tikz_document(tmp_path, monkeypatch, capsys):
    rendered = []

    def _generate_document(path):
        rendered.append(path)
        return "tikz document"

    monkeypatch.setattr(cli, "generate_tikz_document", _generate_document)
    tikz_path = tmp_path / "out" / "contour.tex"

    cli.main(["--shape", "circle", "--tikz-output-path", str(tikz_path)])

    assert tikz_path.read_text(encoding="utf-8") == "tikz document"
    assert len(rendered) == 1 and len(rendered[0]) == 1
    assert f"TikZ document written to {tikz_path}" in capsys.readouterr().out


def test_input_is_required():
    with pytest.raises(SystemExit):
        cli.main([])


def test_syntax_error_propagates(tmp_path):
    with pytest.raises(SyntaxError):
        cli.main([_write(tmp_path, "M 0 0 X")])
