# ann_timeseries/cli.py
from __future__ import annotations

from pathlib import Path
import argparse
import logging
import sys

from .checks.inputs import check_inputs, format_results, inputs_ok
from .checks.report import report_timeseries, save_report
from .config import PipelineConfig, add_config_arguments
from .errors import PipelineError
from .pipeline.driver import run_pipeline

logger = logging.getLogger("ann_timeseries")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def _cmd_run(args: argparse.Namespace) -> int:
    cfg = PipelineConfig.from_args(args)
    logger.info("--- Starting NetCDF processing: %s %d-%d ---", cfg.region, cfg.first_year, cfg.last_year)

    summary = run_pipeline(cfg)

    if summary.final_path is not None and getattr(args, "report", False):
        print(report_timeseries(summary.final_path, cfg))

    logger.info("--- Finished successfully ---")
    return 0


def _cmd_check_inputs(args: argparse.Namespace) -> int:
    cfg = PipelineConfig.from_args(args)
    results = check_inputs(cfg)
    print(format_results(cfg, results))
    return 0 if inputs_ok(cfg, results) else 1


def _cmd_report(args: argparse.Namespace) -> int:
    cfg = PipelineConfig.from_args(args)
    path = Path(args.path)
    rep = report_timeseries(path, cfg)
    print(rep)
    if args.save:
        out = save_report(rep, path)
        print(f"\nSaved report to: {out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ann-timeseries",
        description="Build yearly 2D training time series from monthly 3D ocean-model NetCDF output.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every tool invocation")
    sub = parser.add_subparsers(dest="command")

    p_run = sub.add_parser("run", help="Run the extraction pipeline (default)")
    add_config_arguments(p_run)
    p_run.add_argument("--report", action="store_true", help="Print a report on the final file")
    p_run.set_defaults(func=_cmd_run)

    p_check = sub.add_parser("check-inputs", help="Check which monthly inputs exist and carry the variables")
    add_config_arguments(p_check)
    p_check.set_defaults(func=_cmd_check_inputs)

    p_rep = sub.add_parser("report", help="Report on a time-series NetCDF file")
    p_rep.add_argument("--path", required=True, help="Path to the time-series NetCDF file")
    p_rep.add_argument("--save", action="store_true", help="Save report to reports/<file stem>_report.txt")
    p_rep.add_argument("--surface-vars", dest="surface_vars", default=None, help="Comma list of expected surface variables")
    p_rep.add_argument("--bottom-var", dest="bottom_var", default=None, help="Bottom variable (expected with _bottom suffix)")
    p_rep.set_defaults(func=_cmd_report)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        # Bare invocation runs the pipeline with the built-in defaults
        args = parser.parse_args([*argv, "run"])

    _setup_logging(args.verbose)

    try:
        return args.func(args)
    except PipelineError as e:
        print(str(e), file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
