from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from resampling.settings import Settings
from resampling.walkthrough import build_parser, main, run_walkthrough


def _settings(tmp_path: Path, **kwargs) -> Settings:
    params = dict(iterations=200, sample_size=30, seed=1, output_dir=tmp_path)
    params.update(kwargs)
    return Settings(**params)


def test_run_walkthrough(tmp_path: Path) -> None:
    lines: list[str] = []
    result = run_walkthrough(_settings(tmp_path), out=lines.append)

    assert result["sample"].shape == (30,)
    assert set(result["distributions"]) == {"mean", "median", "mean, NaN omitted"}
    for boots in result["distributions"].values():
        assert boots.shape == (200,)
    assert list(result["summary"].columns) == ["mean", "se", "ci_lo", "ci_hi", "iterations"]
    assert (result["summary"]["iterations"] == 200).all()
    assert result["figure"] == tmp_path / "bootstrap_densities.png"
    assert result["figure"].exists()

    text = "\n".join(lines)
    assert "Section 1: A random sample" in text
    assert "nan_policy='propagate' -> " in text


def test_walkthrough_is_reproducible(tmp_path: Path) -> None:
    settings = _settings(tmp_path, save_figures=False)
    a = run_walkthrough(settings, out=lambda *_: None)
    b = run_walkthrough(settings, out=lambda *_: None)

    assert a["figure"] is None
    for label in a["distributions"]:
        assert np.array_equal(a["distributions"][label], b["distributions"][label])


def test_propagate_run_is_always_reported(tmp_path: Path) -> None:
    for seed in range(10):
        lines: list[str] = []
        settings = _settings(
            tmp_path, iterations=1, seed=seed, missing_fraction=0.034, save_figures=False
        )
        run_walkthrough(settings, out=lines.append)
        assert any("nan_policy='propagate' -> " in line for line in lines)


def test_walkthrough_without_missing_values(tmp_path: Path) -> None:
    settings = _settings(tmp_path, missing_fraction=0.0, save_figures=False)
    result = run_walkthrough(settings, out=lambda *_: None)
    assert set(result["distributions"]) == {"mean", "median"}


def test_bootstrap_mean_centres_on_sample_mean(tmp_path: Path) -> None:
    settings = _settings(tmp_path, iterations=2000, save_figures=False)
    result = run_walkthrough(settings, out=lambda *_: None)
    row = result["summary"].loc["mean"]
    assert row["mean"] == pytest.approx(result["sample"].mean(), abs=0.5)
    assert row["ci_lo"] < result["sample"].mean() < row["ci_hi"]


def test_parser_leaves_unset_flags_as_none() -> None:
    args = vars(build_parser().parse_args(["-B", "10"]))
    assert args["iterations"] == 10
    assert args["seed"] is None
    assert args["save_figures"] is None


def test_main_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["-B", "50", "-n", "10", "--output-dir", str(tmp_path), "--no-figures"])

    assert code == 0
    out = capsys.readouterr().out
    assert "Section 3" in out
    assert not (tmp_path / "bootstrap_densities.png").exists()


def test_main_rejects_bad_iterations(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--iterations", "0", "--no-figures"]) == 2
    assert "iterations must be positive" in capsys.readouterr().err
