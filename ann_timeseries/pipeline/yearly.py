# ann_timeseries/pipeline/yearly.py
from __future__ import annotations

from pathlib import Path
import logging

from ..config import PipelineConfig
from ..paths import annual_mean_path, yearly_timeseries_path
from ..tools import cdo

logger = logging.getLogger(__name__)


def build_annual_mean(cfg: PipelineConfig, temp_dir: Path, year: int, monthly: list[Path]) -> Path | None:
    """Merge the year's monthly files in time order and average them into one step."""
    if not monthly:
        logger.info("No monthly files processed for %d. Cannot create annual mean.", year)
        return None

    logger.info("Calculating annual mean for %d from %d month(s)...", year, len(monthly))

    ts_path = yearly_timeseries_path(temp_dir, year)
    out_path = annual_mean_path(cfg, year)

    cdo.mergetime(sorted(monthly), ts_path)
    cdo.timselmean(ts_path, out_path, nsets=cfg.window, timestat_date=cfg.timestat_date)

    logger.info("Generated annual mean file: %s", out_path)
    return out_path
