# ann_timeseries/tools/cdo.py
from __future__ import annotations

from pathlib import Path

from .runner import run_tool

CDO = "cdo"


def select_level(ifile: Path, ofile: Path, var: str, level: int) -> None:
    run_tool([CDO, f"-sellevel,{level}", f"-selname,{var}", ifile, ofile])


def rename_var(ifile: Path, ofile: Path, old: str, new: str) -> None:
    run_tool([CDO, f"-chname,{old},{new}", ifile, ofile])


def merge(ifiles: list[Path], ofile: Path) -> None:
    run_tool([CDO, "merge", *ifiles, ofile])


def vertmean(ifile: Path, ofile: Path, names: str) -> None:
    run_tool([CDO, "-vertmean", f"-selname,{names}", ifile, ofile])


def mergetime(ifiles: list[Path], ofile: Path) -> None:
    if not ifiles:
        raise ValueError("mergetime needs at least one input file")
    run_tool([CDO, "mergetime", *ifiles, ofile])


def timselmean(ifile: Path, ofile: Path, nsets: int = 12, timestat_date: str = "middle") -> None:
    # Output timestamp labelled at the window midpoint by default
    run_tool([CDO, "--timestat_date", timestat_date, f"timselmean,{nsets}", ifile, ofile])
