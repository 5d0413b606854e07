# ann_timeseries/tools/nco.py
from __future__ import annotations

from pathlib import Path

from .runner import run_tool

NCWA = "ncwa"


def squeeze_dim(ifile: Path, ofile: Path, dim: str) -> None:
    """Average over a length-1 dimension, which drops it from every variable."""
    run_tool([NCWA, "-O", "-a", dim, ifile, ofile])
