# ann_timeseries/pipeline/timeseries.py
from __future__ import annotations

from pathlib import Path
import logging

from ..config import PipelineConfig
from ..paths import final_output_path
from ..tools import cdo

logger = logging.getLogger(__name__)


def build_timeseries(cfg: PipelineConfig, annual: list[Path]) -> Path | None:
    """
    Concatenate the annual means into the final file, then remove them.
    Returns None (and leaves nothing behind) when no year produced a mean.
    """
    if not annual:
        logger.info("No annual mean files found. Final concatenation skipped.")
        return None

    out_path = final_output_path(cfg)
    logger.info("Finalizing: concatenating %d annual file(s)...", len(annual))
    cdo.mergetime(annual, out_path)
    logger.info("Successfully created final output file: %s", out_path)

    logger.info("Cleaning up intermediate annual files...")
    for p in annual:
        p.unlink(missing_ok=True)

    return out_path
