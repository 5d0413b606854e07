from __future__ import annotations

from pathlib import Path
import subprocess

import pytest

from ann_timeseries.config import PipelineConfig
from ann_timeseries.paths import input_path
from ann_timeseries.tools import runner


class FakeTools:
    """
    Stands in for cdo/ncwa/gvc2zax. Records argv and writes the output file
    (always the last argument):
      mergetime  -> input lines concatenated
      timselmean -> one line "annual:<input lines joined by |>"
      otherwise  -> the output file's own name
    """

    def __init__(self, fail_when=None):
        self.calls: list[list[str]] = []
        self.fail_when = fail_when

    def __call__(self, args, **kwargs):
        args = [str(a) for a in args]
        self.calls.append(args)

        if self.fail_when is not None and self.fail_when(args):
            return subprocess.CompletedProcess(args, 1, "", "cdo (Abort): something broke\n")

        out = Path(args[-1])
        inputs = [Path(a) for a in args[1:-1] if a.endswith(".nc")]

        if "mergetime" in args:
            lines = []
            for p in inputs:
                lines.extend(p.read_text().splitlines())
            out.write_text("\n".join(lines) + "\n")
        elif any(a.startswith("timselmean") for a in args):
            lines = inputs[0].read_text().splitlines()
            out.write_text("annual:" + "|".join(lines) + "\n")
        else:
            out.write_text(out.name + "\n")

        return subprocess.CompletedProcess(args, 0, "", "")

    def ops(self, tool: str = "cdo") -> list[list[str]]:
        return [c for c in self.calls if c[0] == tool]


@pytest.fixture
def install_tools(monkeypatch):
    def _install(fail_when=None) -> FakeTools:
        fake = FakeTools(fail_when)
        monkeypatch.setattr(runner.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(runner.subprocess, "run", fake)
        return fake

    return _install


@pytest.fixture
def fake_tools(install_tools):
    return install_tools()


@pytest.fixture
def cfg(tmp_path) -> PipelineConfig:
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    bathy = input_dir / "bathy.nc"
    bathy.write_text("bathy\n")
    return PipelineConfig(
        region="Testsea",
        first_year=2000,
        last_year=2001,
        input_dir=input_dir,
        output_dir=tmp_path / "out",
        temp_root=tmp_path / "tmp",
        file_prefix="model_",
        bathy_file=bathy,
        surface_vars=("oxy", "temp"),
        bottom_var="oxy",
    )


@pytest.fixture
def make_inputs():
    def _make(cfg: PipelineConfig, months: list[tuple[int, int]]) -> list[Path]:
        paths = []
        for year, month in months:
            p = input_path(cfg, year, month)
            p.write_text(f"input {year}-{month:02d}\n")
            paths.append(p)
        return paths

    return _make
