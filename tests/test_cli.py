import csv

import PIL.Image
import pytest

import viewer


def test_parser_defaults():
    opt = viewer.build_parser().parse_args([])
    assert opt.max_iterations == 100
    assert (opt.width, opt.height) == (800, 600)
    assert opt.zoom_factor == 0.8
    assert not opt.nongui
    assert not opt.test


def test_nongui_renders_and_saves(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert viewer.main(["--nongui", "--width", "30", "--height", "20", "--max-iterations", "25"]) == 0
    with PIL.Image.open(tmp_path / "mandelbrot.png") as image:
        assert image.size == (30, 20)


def test_test_mode_writes_benchmark_csv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code = viewer.main([
        "--test",
        "--bench-start", "10",
        "--bench-stop", "30",
        "--bench-step", "10",
        "--max-iterations", "10",
    ])
    assert code == 0
    with open(tmp_path / "mandelbrot_results.csv", newline="") as handle:
        records = list(csv.reader(handle))
    assert records[0] == ["width", "height", "sequential"]
    assert [row[0] for row in records[1:]] == ["10", "20", "30"]


@pytest.mark.parametrize(
    "args",
    [
        ["--max-iterations", "0"],
        ["--width", "-5"],
        ["--zoom-factor", "0"],
        ["--bench-step", "0"],
        ["--width", "wide"],
    ],
)
def test_invalid_arguments_exit(args):
    with pytest.raises(SystemExit) as excinfo:
        viewer.main(args)
    assert excinfo.value.code == 2


def test_verbose_flag_enables_info_logs(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    viewer.main(["--nongui", "--width", "8", "--height", "8", "-v"])
    assert "Render time:" in capsys.readouterr().out
