# ann_timeseries/paths.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import PipelineConfig


def input_path(cfg: PipelineConfig, year: int, month: int) -> Path:
    mm = f"{month:02d}"
    return cfg.input_dir / f"{cfg.file_prefix}{year}_{mm}.mean.nc"


@dataclass(frozen=True)
class MonthPaths:
    """Intermediates for one (year, month); every name carries the YYYYMM key."""

    oxy_with_level: Path
    oxy_squeezed: Path
    bottom: Path
    with_bathy: Path
    regridded: Path
    vertmean: Path
    merged: Path


def month_paths(temp_dir: Path, year: int, month: int) -> MonthPaths:
    key = f"{year}{month:02d}"
    return MonthPaths(
        oxy_with_level=temp_dir / f"temp_oxy_lev_{key}.nc",
        oxy_squeezed=temp_dir / f"temp_oxy_squeezed_{key}.nc",
        bottom=temp_dir / f"bottom_oxy_{key}.nc",
        with_bathy=temp_dir / f"ifile_with_bathy_{key}.nc",
        regridded=temp_dir / f"regridded_surf_{key}.nc",
        vertmean=temp_dir / f"vertmean_surf_{key}.nc",
        merged=temp_dir / f"merged_2d_{key}.nc",
    )


def yearly_timeseries_path(temp_dir: Path, year: int) -> Path:
    return temp_dir / f"timeseries_{year}.nc"


def annual_mean_path(cfg: PipelineConfig, year: int) -> Path:
    return cfg.output_dir / f"annual_mean_{year}.nc"


def final_output_path(cfg: PipelineConfig) -> Path:
    return cfg.output_dir / f"{cfg.region}_timeseries_{cfg.first_year}-{cfg.last_year}.nc"
