# ann_timeseries/tools/gvc2zax.py
from __future__ import annotations

from pathlib import Path

from ..config import DepthSpec
from .runner import run_tool

GVC2ZAX = "gvc2zax"


def regrid_to_depth(ifile: Path, ofile: Path, depth: DepthSpec) -> None:
    """
    Interpolate model levels onto fixed depths from the surface down.
    Needs the bathymetry variables present in ifile.
    """
    run_tool([GVC2ZAX, "-z", depth.as_arg(), "-p", "-s", "-i", ifile, ofile])
