from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Optional

import typer

from series_smoothing.config.smoothing import (
    FilterConfig,
    InputConfig,
    SmoothingConfig,
    build_filter,
    load_smoothing_config,
)
from series_smoothing.logging_utils import configure_logging
from series_smoothing.settings import Settings

app = typer.Typer(no_args_is_help=True, add_completion=False)
logger = logging.getLogger("series_smoothing")


def _parse_weights(value: str | None) -> list[float] | None:
    if value is None or not value.strip():
        return None
    items: list[float] = []
    for token in value.split(","):
        t = token.strip()
        if not t:
            continue
        try:
            items.append(float(t))
        except ValueError as e:
            raise ValueError("--weights expects comma-separated numbers") from e
    if not items:
        raise ValueError("--weights is empty")
    return items


def _load_series_csv(*, path: Path, column: str, has_header: bool) -> list[float]:
    """
    Read one numeric column from a CSV file.

    With `has_header`, `column` is a header name; otherwise it is a
    zero-based column index. Blank cells are skipped with a warning.
    """
    values: list[float] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        if has_header:
            reader = csv.DictReader(f)
            if reader.fieldnames is None or column not in reader.fieldnames:
                raise ValueError(f"column {column!r} not found in {path}")
            cells = [(reader.line_num, row[column]) for row in reader]
        else:
            if not column.isdigit():
                raise ValueError("column must be a zero-based index when the CSV has no header")
            idx = int(column)
            raw_reader = csv.reader(f)
            cells = [
                (raw_reader.line_num, row[idx] if idx < len(row) else "")
                for row in raw_reader
            ]
    for line_no, cell in cells:
        s = (cell or "").strip()
        if not s:
            logger.warning("skipped blank cell on line %d", line_no, extra={"path": str(path)})
            continue
        try:
            values.append(float(s))
        except ValueError as e:
            raise ValueError(f"line {line_no}: not a number: {s!r}") from e
    return values


def _format_rows(*, values: list[float], smoothed: list[float], precision: int) -> list[str]:
    rows = ["index,value,smoothed"]
    for i, (v, s) in enumerate(zip(values, smoothed)):
        rows.append(f"{i},{v:.{precision}f},{s:.{precision}f}")
    return rows


def _merge_config(
    *,
    cfg: SmoothingConfig,
    input_path: Optional[Path],
    column: Optional[str],
    kind: Optional[str],
    period: Optional[int],
    alpha: Optional[float],
    weights: Optional[list[float]],
) -> SmoothingConfig:
    input_update = {
        k: v for k, v in {"path": input_path, "column": column}.items() if v is not None
    }
    filter_update = {
        k: v
        for k, v in {"kind": kind, "period": period, "alpha": alpha, "weights": weights}.items()
        if v is not None
    }
    return SmoothingConfig(
        input=InputConfig.model_validate({**cfg.input.model_dump(), **input_update}),
        filter=FilterConfig.model_validate({**cfg.filter.model_dump(), **filter_update}),
    )


@app.command()
def show_config() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    typer.echo(settings.model_dump())


@app.command()
def smooth(
    config: Optional[Path] = typer.Option(None, help="Smoothing config file (TOML)."),
    input_path: Optional[Path] = typer.Option(None, "--input", help="CSV file with the series."),
    column: Optional[str] = typer.Option(None, help="CSV column name (or index without header)."),
    kind: Optional[str] = typer.Option(None, help="Filter kind: sma, ema or wma."),
    period: Optional[int] = typer.Option(None, help="Window size / EMA period."),
    alpha: Optional[float] = typer.Option(None, help="EMA smoothing factor in (0, 1]."),
    weights: Optional[str] = typer.Option(None, help="WMA weights, oldest first: 0.2,0.3,0.5"),
) -> None:
    """
    Smooth one CSV column and print `index,value,smoothed` rows.
    """
    settings = Settings()
    configure_logging(settings.log_level)

    cfg = SmoothingConfig()
    if config is not None:
        if not config.exists():
            raise typer.BadParameter(f"config file not found: {config}")
        try:
            cfg = load_smoothing_config(config)
        except Exception as e:
            raise typer.BadParameter(f"invalid config: {e}") from e

    try:
        cfg = _merge_config(
            cfg=cfg,
            input_path=input_path,
            column=column,
            kind=kind,
            period=period,
            alpha=alpha,
            weights=_parse_weights(weights),
        )
        ma = build_filter(cfg.filter)
    except ValueError as e:
        raise typer.BadParameter(f"invalid filter: {e}") from e

    path = cfg.input.path
    if path is None:
        raise typer.BadParameter("no input file; pass --input or set [input].path")
    if not path.exists():
        raise typer.BadParameter(f"input file not found: {path}")

    try:
        values = _load_series_csv(
            path=path,
            column=cfg.input.column,
            has_header=cfg.input.has_header,
        )
    except ValueError as e:
        typer.echo(f"Cannot extract series from {path}: {e}", err=True)
        raise typer.Exit(code=1) from e

    logger.info(
        "smoothing",
        extra={"filter_id": ma.filter_id, "size": len(values), "path": str(path)},
    )
    result = ma.apply(values)
    if result.values is None:
        typer.echo(f"{ma!r} could not be computed: {result.error}", err=True)
        raise typer.Exit(code=1)

    rows = _format_rows(
        values=values,
        smoothed=result.values,
        precision=settings.output_precision,
    )
    for line in rows:
        typer.echo(line)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
