import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from series_smoothing.cli import (
    _format_rows,
    _load_series_csv,
    _merge_config,
    _parse_weights,
    app,
)
from series_smoothing.config.smoothing import FilterConfig, SmoothingConfig


def test_parse_weights() -> None:
    assert _parse_weights(None) is None
    assert _parse_weights(" ") is None
    assert _parse_weights("0.2, 0.3,0.5") == [0.2, 0.3, 0.5]
    with pytest.raises(ValueError):
        _parse_weights("0.2,x")


def test_load_series_csv_by_header(tmp_path: Path) -> None:
    p = tmp_path / "prices.csv"
    p.write_text("date,close\n2024-01-01,1.5\n2024-01-02,\n2024-01-03,2.5\n", encoding="utf-8")
    assert _load_series_csv(path=p, column="close", has_header=True) == [1.5, 2.5]
    with pytest.raises(ValueError):
        _load_series_csv(path=p, column="open", has_header=True)


def test_load_series_csv_warns_on_blank_cells(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="series_smoothing")
    p = tmp_path / "prices.csv"
    p.write_text("close\n1\n\n3\n ,\n", encoding="utf-8")
    assert _load_series_csv(path=p, column="close", has_header=True) == [1.0, 3.0]
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert "skipped blank cell on line 5" in messages


def test_load_series_csv_by_index(tmp_path: Path) -> None:
    p = tmp_path / "raw.csv"
    p.write_text("a,1\nb,2\nc,3\n", encoding="utf-8")
    assert _load_series_csv(path=p, column="1", has_header=False) == [1.0, 2.0, 3.0]
    with pytest.raises(ValueError):
        _load_series_csv(path=p, column="0", has_header=False)


def test_format_rows() -> None:
    rows = _format_rows(values=[1.0, 2.0], smoothed=[0.0, 1.5], precision=2)
    assert rows == ["index,value,smoothed", "0,1.00,0.00", "1,2.00,1.50"]


def test_merge_config_overrides_only_given_options() -> None:
    base = SmoothingConfig(filter=FilterConfig(kind="sma", period=5))
    merged = _merge_config(
        cfg=base,
        input_path=Path("x.csv"),
        column=None,
        kind=None,
        period=3,
        alpha=None,
        weights=None,
    )
    assert merged.input.path == Path("x.csv")
    assert merged.input.column == "close"
    assert merged.filter.kind == "sma"
    assert merged.filter.period == 3


def test_smooth_command_prints_rows(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OUTPUT_PRECISION", "1")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    p = tmp_path / "prices.csv"
    p.write_text("close\n1\n2\n3\n4\n5\n6\n", encoding="utf-8")

    result = CliRunner().invoke(
        app,
        ["smooth", "--input", str(p), "--kind", "sma", "--period", "3"],
    )
    assert result.exit_code == 0, result.output
    assert "index,value,smoothed" in result.output
    assert "1,2.0,0.0" in result.output
    assert "2,3.0,2.0" in result.output
    assert "5,6.0,5.0" in result.output


def test_smooth_command_reports_too_short_series(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    p = tmp_path / "prices.csv"
    p.write_text("close\n1\n2\n", encoding="utf-8")

    result = CliRunner().invoke(
        app,
        ["smooth", "--input", str(p), "--kind", "sma", "--period", "3"],
    )
    assert result.exit_code == 1


def test_show_config_prints_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("OUTPUT_PRECISION", "3")

    result = CliRunner().invoke(app, ["show-config"])
    assert result.exit_code == 0, result.output
    assert "'output_precision': 3" in result.output
