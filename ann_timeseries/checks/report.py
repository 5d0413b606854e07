# ann_timeseries/checks/report.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import math
import sys

import numpy as np
import pandas as pd
import xarray as xr

from ..config import PipelineConfig

DEFAULT_REPORT_DIR = Path("reports")

TIME_CANDIDATES = ["time", "valid_time"]


@dataclass
class VarStats:
    name: str
    units: str | None
    vmin: float | None
    vmax: float | None
    mean: float | None
    nan_count: int
    total_count: int


def _find_time_name(ds: xr.Dataset) -> str | None:
    for n in TIME_CANDIDATES:
        if n in ds.coords:
            return n
    return None


def _safe_float(x) -> float | None:
    try:
        v = float(x)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def _var_stats(da: xr.DataArray, name: str) -> VarStats:
    arr = np.asarray(da.values)
    total = int(arr.size)

    if not np.issubdtype(arr.dtype, np.floating) or total == 0:
        return VarStats(name, da.attrs.get("units"), None, None, None, 0, total)

    nan_count = int(np.isnan(arr).sum())
    if nan_count == total:
        return VarStats(name, da.attrs.get("units"), None, None, None, nan_count, total)

    return VarStats(
        name=name,
        units=da.attrs.get("units"),
        vmin=_safe_float(np.nanmin(arr)),
        vmax=_safe_float(np.nanmax(arr)),
        mean=_safe_float(np.nanmean(arr)),
        nan_count=nan_count,
        total_count=total,
    )


def _fmt_stats(s: VarStats) -> str:
    u = s.units if s.units is not None else "(units unknown)"
    return (
        f"{s.name}: units={u}, min={s.vmin}, max={s.vmax}, mean={s.mean}, "
        f"NaNs={s.nan_count}/{s.total_count}"
    )


def expected_vars(cfg: PipelineConfig) -> list[str]:
    return [*cfg.surface_vars, cfg.bottom_var_renamed]


def report_timeseries(path: Path, cfg: PipelineConfig | None = None) -> str:
    """Plain-text report on a final (or annual) time-series file."""
    if not path.exists():
        raise FileNotFoundError(path)
    cfg = cfg or PipelineConfig()

    lines: list[str] = []
    lines.append("ANN TIME-SERIES FILE REPORT")
    lines.append(f"Path: {path}")
    lines.append(f"Size (MB): {path.stat().st_size / 1e6:.2f}")
    lines.append("")

    with xr.open_dataset(path, engine="netcdf4") as ds:
        lines.append("STRUCTURE")
        lines.append(f"Dimensions: {dict(ds.sizes)}")
        lines.append(f"Coordinates: {list(ds.coords)}")
        lines.append(f"Data variables: {list(ds.data_vars)}")
        lines.append("")

        # One step per year, strictly increasing
        time_ok = True
        lines.append("TIME CHECKS")
        time_name = _find_time_name(ds)
        if time_name is None:
            time_ok = False
            lines.append(f"No time coordinate found. Tried: {TIME_CANDIDATES}")
        elif time_name not in ds.indexes or not hasattr(ds.indexes[time_name], "year"):
            time_ok = False
            lines.append(f"Time coordinate name: {time_name}")
            lines.append("Time axis: FAIL (not a decoded time dimension)")
        else:
            t = ds.indexes[time_name]
            years = [int(y) for y in t.year]
            lines.append(f"Time coordinate name: {time_name}")
            lines.append(f"Count: {len(t)}")
            if len(t):
                lines.append(f"Start: {t[0]}")
                lines.append(f"End:   {t[-1]}")
            lines.append(f"Years present: {sorted(set(years))}")

            if len(t) and not t.is_monotonic_increasing:
                time_ok = False
                lines.append("Time axis: FAIL (not increasing)")
            dup_years = sorted(pd.Series(years).loc[lambda s: s.duplicated()].unique().tolist())
            if dup_years:
                time_ok = False
                lines.append(f"Years with more than one step: {dup_years}")
            if time_ok:
                lines.append("One timestep per year, increasing: PASS")
        lines.append("")

        lines.append("VARIABLE PRESENCE")
        want = expected_vars(cfg)
        missing_vars = [v for v in want if v not in ds.data_vars]
        vars_ok = not missing_vars
        if missing_vars:
            lines.append(f"Missing expected variables: {missing_vars}")
        else:
            lines.append(f"All expected variables present: {', '.join(want)}")

        # Everything should be 2D per step by now
        not_2d = [v for v in want if v in ds.data_vars and len([d for d in ds[v].dims if d != time_name]) != 2]
        if not_2d:
            vars_ok = False
            lines.append(f"Variables not 2D per timestep: {not_2d}")
        lines.append("")

        lines.append("VARIABLE STATS")
        for v in want:
            if v in ds.data_vars:
                lines.append(_fmt_stats(_var_stats(ds[v], v)))
        lines.append("")

    lines.append("SUMMARY")
    lines.append(f"Time checks: {'PASS' if time_ok else 'FAIL'}")
    lines.append(f"Variable checks: {'PASS' if vars_ok else 'FAIL'}")

    return "\n".join(lines)


def save_report(text: str, path: Path, report_dir: Path = DEFAULT_REPORT_DIR) -> Path:
    report_dir.mkdir(parents=True, exist_ok=True)
    out = report_dir / f"{path.stem}_report.txt"
    out.write_text(text)
    return out


def main(argv: list[str] | None = None) -> int:
    """Same as `ann-timeseries report ...`."""
    from ..cli import main as cli_main

    argv = sys.argv[1:] if argv is None else list(argv)
    return cli_main(["report", *argv])


if __name__ == "__main__":
    raise SystemExit(main())
