import sys
from pathlib import Path
from unittest.mock import patch

import pytest

import polysimpl as ps

# Setup path to import examples
EXAMPLES_DIR = Path(__file__).parent.parent / "examples"
sys.path.append(str(EXAMPLES_DIR))

import demo


def test_demo_main(capsys):
    argv = ["demo.py", "200"]

    with patch.object(sys, "argv", argv):
        demo.main()

    out = capsys.readouterr().out
    assert "200-point polyline" in out
    for name in ps.default_registry.names:
        assert name in out


def test_demo_polyline_is_deterministic():
    first = demo.noisy_polyline(50, seed=3)
    assert first.shape == (50, 2)
    assert (first == demo.noisy_polyline(50, seed=3)).all()


@pytest.fixture
def input_pdf_path(tmp_path):
    pikepdf = pytest.importorskip("pikepdf")
    stream = b"0 0 0 RG 10 10 m 20 10 l 30 10 l 40 10 l 50 10 l 50 60 l S"
    pdf = pikepdf.new()
    pdf.add_blank_page(page_size=(200, 200))
    pdf.pages[0].Contents = pdf.make_stream(stream)
    path = tmp_path / "input.pdf"
    pdf.save(path)
    return path


def test_pdf_path_simplifier_main(input_pdf_path, tmp_path, capsys):
    pikepdf = pytest.importorskip("pikepdf")
    import pdf_path_simplifier

    output = tmp_path / "simplified.pdf"
    argv = ["pdf_path_simplifier.py", str(input_pdf_path), str(output), "1.0"]

    with patch.object(sys, "argv", argv):
        pdf_path_simplifier.main()

    assert output.exists()
    assert "Path points: 6 -> 3" in capsys.readouterr().out

    with pikepdf.open(output) as pdf:
        ops = [str(i.operator) for i in pikepdf.parse_content_stream(pdf.pages[0])]
    assert ops == ["RG", "m", "l", "l", "S"]


def test_pdf_path_simplifier_usage(capsys):
    pytest.importorskip("pikepdf")
    import pdf_path_simplifier

    with patch.object(sys, "argv", ["pdf_path_simplifier.py"]):
        with pytest.raises(SystemExit):
            pdf_path_simplifier.main()

    assert "Usage" in capsys.readouterr().out
