"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

from gridlines.cli import main
from tests.conftest import NO_NAMESPACE_SVG, SQUARE_SVG


def test_writes_output_file(tmp_path, capsys):
    src = tmp_path / "logo.svg"
    src.write_text(SQUARE_SVG, encoding="utf-8")
    dst = tmp_path / "logo-grid.svg"

    assert main([str(src), "-o", str(dst)]) == 0
    assert dst.read_text(encoding="utf-8").count("<line") == 4
    assert "4 grid lines" in capsys.readouterr().out


def test_prints_to_stdout(tmp_path, capsys):
    src = tmp_path / "logo.svg"
    src.write_text(SQUARE_SVG, encoding="utf-8")

    assert main([str(src), "--layer-name", "Guides"]) == 0
    out = capsys.readouterr().out
    assert 'id="Guides"' in out


def test_empty_selection_exit_code(tmp_path, capsys):
    src = tmp_path / "logo.svg"
    src.write_text(SQUARE_SVG, encoding="utf-8")

    assert main([str(src), "-s", "missing"]) == 1
    assert "Please select artwork." in capsys.readouterr().err


def test_malformed_svg_exit_code(tmp_path):
    src = tmp_path / "broken.svg"
    src.write_text("<svg>", encoding="utf-8")
    assert main([str(src)]) == 2


@pytest.mark.parametrize("value", ["0", "-0.5", "abc"])
def test_non_positive_tolerance_is_rejected(tmp_path, capsys, value):
    src = tmp_path / "logo.svg"
    src.write_text(NO_NAMESPACE_SVG, encoding="utf-8")
    dst = tmp_path / "out.svg"

    with pytest.raises(SystemExit) as exc:
        main([str(src), "-o", str(dst), "--tolerance", value])
    assert exc.value.code == 2
    assert "--tolerance" in capsys.readouterr().err
    assert not dst.exists()


def test_single_line_is_emitted_once(tmp_path):
    src = tmp_path / "logo.svg"
    src.write_text(NO_NAMESPACE_SVG, encoding="utf-8")
    dst = tmp_path / "out.svg"

    assert main([str(src), "-o", str(dst), "--tolerance", "0.01"]) == 0
    # the source <line> plus one grid line
    assert dst.read_text(encoding="utf-8").count("<line") == 2


def test_missing_input_file_exit_code(tmp_path):
    assert main([str(tmp_path / "absent.svg")]) == 2


def test_non_utf8_input_exit_code(tmp_path):
    src = tmp_path / "latin1.svg"
    src.write_bytes(b"<svg><desc>caf\xe9</desc></svg>")
    assert main([str(src)]) == 2
