import tempfile
from pathlib import Path

import pytest

from dft_challenge.cli import main


def _pairs(out: str):
    return [ln for ln in out.splitlines() if ln and not ln.startswith("[")]


def test_synthetic_run_prints_one_pair_per_bin(capsys):
    rc = main(["--synthetic", "16", "--method", "sincos"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "[info] Read in 16 samples from synthetic" in out
    assert "16-point DFT took" in out
    assert "[info] dominant bins: 1, 15" in out
    pairs = _pairs(out)
    assert len(pairs) == 16
    for line in pairs:
        re, im = (float(v) for v in line.split())


def test_file_run(capsys):
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "data.csv"
        p.write_text("1\n0\n0\n0\n", encoding="utf-8")
        rc = main([str(p), "--workers", "2"])
    assert rc == 0
    pairs = _pairs(capsys.readouterr().out)
    assert len(pairs) == 4
    for line in pairs:
        re, im = (float(v) for v in line.split())
        assert re == pytest.approx(1.0, abs=1e-12)
        assert im == pytest.approx(0.0, abs=1e-12)


def test_missing_file_is_fatal(capsys):
    rc = main(["/nonexistent/dir/data.csv"])
    assert rc == 2
    captured = capsys.readouterr()
    assert "[error] FileNotFoundError" in captured.err
    assert "DFT took" not in captured.out


def test_unparsable_file_is_fatal(capsys):
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "bad.txt"
        p.write_text("1\ntwo\n", encoding="utf-8")
        rc = main([str(p)])
    assert rc == 2
    assert "non-numeric token 'two'" in capsys.readouterr().err


def test_warnings_and_no_bins(capsys):
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "x.txt"
        p.write_text("1 nan 2\n", encoding="utf-8")
        rc = main([str(p), "--no-bins"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "[warn]" in out
    assert _pairs(out) == []


def test_empty_synthetic(capsys):
    rc = main(["--synthetic", "0"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "0-point DFT took" in out
    assert _pairs(out) == []


def test_benchmark_table(capsys):
    rc = main(["--synthetic", "8", "--benchmark"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "speedup" in out
    for m in ("exp", "sincos", "cis", "numpy"):
        assert m in out


def test_file_and_synthetic_are_exclusive(capsys):
    with pytest.raises(SystemExit):
        main(["data.csv", "--synthetic", "10"])


def test_invalid_worker_count_is_rejected(capsys):
    with pytest.raises(SystemExit):
        main(["--synthetic", "4", "--workers", "0"])


@pytest.mark.parametrize(
    "args",
    [
        ["--benchmark", "--repeat", "0"],
        ["--precision", "-1"],
        ["--precision", "0"],
    ],
)
def test_invalid_repeat_and_precision_are_usage_errors(args, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--synthetic", "4", *args])
    assert exc.value.code == 2
    assert "must be > 0" in capsys.readouterr().err
