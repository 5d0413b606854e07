from __future__ import annotations

from dataclasses import astuple
from pathlib import Path

from ann_timeseries.config import PipelineConfig
from ann_timeseries.paths import (
    annual_mean_path,
    final_output_path,
    input_path,
    month_paths,
    yearly_timeseries_path,
)


def test_input_path_pattern():
    cfg = PipelineConfig(input_dir=Path("/data"), file_prefix="hmean_")
    assert input_path(cfg, 2003, 7) == Path("/data/hmean_2003_07.mean.nc")
    assert input_path(cfg, 2003, 12) == Path("/data/hmean_2003_12.mean.nc")


def test_month_intermediates_are_unique_per_key():
    tmp = Path("/tmp/run")
    seen: set[Path] = set()
    for year in (2000, 2001):
        for month in range(1, 13):
            paths = astuple(month_paths(tmp, year, month))
            assert len(set(paths)) == len(paths)
            assert all(f"{year}{month:02d}" in p.name for p in paths)
            assert not seen.intersection(paths)
            seen.update(paths)


def test_yearly_and_final_paths():
    cfg = PipelineConfig(region="Blacksea", first_year=2000, last_year=2005, output_dir=Path("out"))
    assert yearly_timeseries_path(Path("/t"), 2001) == Path("/t/timeseries_2001.nc")
    assert annual_mean_path(cfg, 2001) == Path("out/annual_mean_2001.nc")
    assert final_output_path(cfg) == Path("out/Blacksea_timeseries_2000-2005.nc")
