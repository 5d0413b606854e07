# ann_timeseries/checks/inputs.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import sys

import xarray as xr

from ..config import PipelineConfig
from ..paths import input_path


@dataclass
class MonthCheck:
    year: int
    month: int
    path: Path
    exists: bool
    issues: list[str] = field(default_factory=list)

    @property
    def status(self) -> str:
        if not self.exists:
            return "MISSING"
        return "FAIL" if self.issues else "PASS"


def validate_one(path: Path, cfg: PipelineConfig) -> list[str]:
    issues: list[str] = []

    try:
        ds = xr.open_dataset(path, engine="netcdf4", decode_times=False)
    except Exception as e:
        return [f"could not open dataset: {e}"]

    with ds:
        expected = [cfg.bottom_var, *cfg.surface_vars]
        for name in dict.fromkeys(expected):
            if name not in ds.data_vars:
                issues.append(f"missing variable: {name}")

        if cfg.level_dim not in ds.sizes:
            issues.append(f"missing dimension: {cfg.level_dim}")
        elif ds.sizes[cfg.level_dim] != cfg.n_levels:
            issues.append(f"expected {cfg.n_levels} levels, got {ds.sizes[cfg.level_dim]}")

        if cfg.bottom_var in ds.data_vars and cfg.level_dim not in ds[cfg.bottom_var].dims:
            issues.append(f"{cfg.bottom_var} has no {cfg.level_dim} dimension")

    return issues


def check_inputs(cfg: PipelineConfig) -> list[MonthCheck]:
    results: list[MonthCheck] = []
    for year in cfg.years:
        for month in range(1, 13):
            path = input_path(cfg, year, month)
            if not path.exists():
                results.append(MonthCheck(year, month, path, exists=False))
                continue
            results.append(MonthCheck(year, month, path, exists=True, issues=validate_one(path, cfg)))
    return results


def format_results(cfg: PipelineConfig, results: list[MonthCheck]) -> str:
    lines: list[str] = []

    if cfg.bathy_file.exists():
        lines.append(f"bathymetry: PASS ({cfg.bathy_file})")
    else:
        lines.append(f"bathymetry: FAIL (file missing: {cfg.bathy_file})")

    for r in results:
        lines.append(f"{r.year}-{r.month:02d}: {r.status}")
        for i in r.issues:
            lines.append(f"  - {i}")

    n_present = sum(r.exists for r in results)
    n_failed = sum(r.status == "FAIL" for r in results)
    lines.append(f"Present: {n_present}/{len(results)} | Failed: {n_failed}")
    return "\n".join(lines)


def inputs_ok(cfg: PipelineConfig, results: list[MonthCheck]) -> bool:
    # Missing months are expected at the range edges; only broken files count
    return cfg.bathy_file.exists() and not any(r.status == "FAIL" for r in results)


def main(argv: list[str] | None = None) -> int:
    """Same as `ann-timeseries check-inputs ...`."""
    from ..cli import main as cli_main

    argv = sys.argv[1:] if argv is None else list(argv)
    return cli_main(["check-inputs", *argv])


if __name__ == "__main__":
    raise SystemExit(main())
