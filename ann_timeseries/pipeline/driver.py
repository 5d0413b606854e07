# ann_timeseries/pipeline/driver.py
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
import logging
import signal
import tempfile
import threading

from ..config import PipelineConfig
from ..tools.runner import require_tools
from .monthly import process_month
from .timeseries import build_timeseries
from .yearly import build_annual_mean

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """What a run produced, tracked in memory rather than re-globbed from disk."""

    monthly: dict[int, list[Path]] = field(default_factory=dict)
    annual: dict[int, Path] = field(default_factory=dict)
    skipped_months: list[tuple[int, int]] = field(default_factory=list)
    final_path: Path | None = None

    @property
    def n_months(self) -> int:
        return sum(len(v) for v in self.monthly.values())


def _raise_exit(signum, frame):
    raise SystemExit(128 + signum)


@contextmanager
def _sigterm_as_exit():
    # SIGTERM would otherwise kill us without unwinding the temp dir
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGTERM, _raise_exit)
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


def run_year(cfg: PipelineConfig, temp_dir: Path, year: int, summary: RunSummary) -> Path | None:
    logger.info("-" * 40)
    logger.info("Processing Year: %d", year)
    logger.info("-" * 40)

    produced: list[Path] = []
    for month in range(1, 13):
        logger.info("  - Processing Month: %02d", month)
        merged = process_month(cfg, temp_dir, year, month)
        if merged is None:
            summary.skipped_months.append((year, month))
        else:
            produced.append(merged)

    summary.monthly[year] = produced
    annual = build_annual_mean(cfg, temp_dir, year, produced)
    if annual is not None:
        summary.annual[year] = annual
    return annual


def run_pipeline(cfg: PipelineConfig) -> RunSummary:
    """
    Full run: monthly 2D files -> annual means -> one multi-year file.

    Tools are checked before any directory is created. The temp directory is
    removed on every exit path, including Ctrl-C and SIGTERM.
    """
    require_tools(cfg.tools)

    cfg.output_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Output will be saved in: %s", cfg.output_dir)

    if cfg.temp_root is not None:
        cfg.temp_root.mkdir(parents=True, exist_ok=True)

    summary = RunSummary()
    with _sigterm_as_exit(), tempfile.TemporaryDirectory(prefix="ann_timeseries_", dir=cfg.temp_root) as tmp:
        temp_dir = Path(tmp)
        logger.info("Temporary files will be stored in: %s", temp_dir)
        try:
            for year in cfg.years:
                run_year(cfg, temp_dir, year, summary)

            annual = [summary.annual[y] for y in sorted(summary.annual)]
            summary.final_path = build_timeseries(cfg, annual)
        finally:
            logger.info("Cleaning up temporary directory...")

    logger.info(
        "Done: %d month(s) processed, %d skipped, %d annual mean(s).",
        summary.n_months,
        len(summary.skipped_months),
        len(summary.annual),
    )
    return summary
