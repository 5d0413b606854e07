# ann_timeseries/pipeline/monthly.py
from __future__ import annotations

from pathlib import Path
import logging

from ..config import PipelineConfig
from ..paths import input_path, month_paths
from ..tools import cdo, gvc2zax, nco

logger = logging.getLogger(__name__)


def process_month(cfg: PipelineConfig, temp_dir: Path, year: int, month: int) -> Path | None:
    """
    Build the 2D file for one month: bottom-level oxygen (renamed) merged with
    the 0-20 m vertical means of the surface variables.

    Returns the merged monthly file, or None when the input is missing.
    Any tool failure propagates as ToolInvocationError.
    """
    ifile = input_path(cfg, year, month)
    if not ifile.exists():
        logger.warning("Input file not found, skipping: %s", ifile)
        return None

    p = month_paths(temp_dir, year, month)

    # ---- Bottom level ----
    logger.info("  Step 1: extracting bottom %s (level %d)", cfg.bottom_var, cfg.bottom_level)
    cdo.select_level(ifile, p.oxy_with_level, cfg.bottom_var, cfg.bottom_level)
    nco.squeeze_dim(p.oxy_with_level, p.oxy_squeezed, cfg.level_dim)
    cdo.rename_var(p.oxy_squeezed, p.bottom, cfg.bottom_var, cfg.bottom_var_renamed)

    # ---- Bathymetry, should be redundant but gvc2zax relies on it ----
    logger.info("  Step 2: adding bathymetry")
    cdo.merge([ifile, cfg.bathy_file], p.with_bathy)

    # ---- Top layer regrid + vertical mean ----
    logger.info("  Step 3: regridding surface layer (%s)", cfg.depth.as_arg())
    gvc2zax.regrid_to_depth(p.with_bathy, p.regridded, cfg.depth)

    logger.info("  Step 4: vertical mean of %s", cfg.surface_vars_arg)
    cdo.vertmean(p.regridded, p.vertmean, cfg.surface_vars_arg)

    # Both inputs are 2D now, so this is a single timestep
    logger.info("  Step 5: merging into monthly 2D file")
    cdo.merge([p.vertmean, p.bottom], p.merged)

    return p.merged
