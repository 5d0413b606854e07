# ann_timeseries/config.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
import argparse


# -------------------------
# Defaults (Black Sea run)
# -------------------------
REGION = "Blacksea"

FIRST_YEAR = 2010
LAST_YEAR = 2010

INPUT_DIR = Path("Blacksea_data")
OUTPUT_DIR = Path("ann_data")
FILE_PREFIX = "NO3_PO4_PL_PS_O2_TEMP_SALT_hmean_"

# gvc2zax needs the bathymetry merged into its input
BATHY_FILE = INPUT_DIR / "Blacksea_bathymetry.nc"

SURFACE_VARS = (
    "jrc_bsem_ni",
    "jrc_bsem_o2",
    "jrc_bsem_po",
    "jrc_bsem_pl",
    "jrc_bsem_ps",
    "tempmean",
    "saltmean",
)
BOTTOM_VAR = "jrc_bsem_o2"

# Level 1 = bottom (level 0 not used)
N_LEVELS = 69
BOTTOM_LEVEL = 1
LEVEL_DIM = "level"

REQUIRED_TOOLS = ("cdo", "ncwa", "gvc2zax")


@dataclass(frozen=True)
class DepthSpec:
    """Target axis for gvc2zax: window depth (m), step (m), max level count."""

    depth: float = 20
    step: float = 0.5
    levels: int = 40

    def as_arg(self) -> str:
        return f"{_num(self.depth)},{_num(self.step)},{self.levels}"

    @classmethod
    def parse(cls, text: str) -> "DepthSpec":
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 3:
            raise ValueError(f"Depth spec must be DEPTH,STEP,LEVELS, got: {text!r}")
        return cls(depth=float(parts[0]), step=float(parts[1]), levels=int(parts[2]))


def _num(x: float) -> str:
    # 20.0 -> "20", 0.5 -> "0.5"
    return f"{x:g}"


@dataclass(frozen=True)
class PipelineConfig:
    region: str = REGION
    first_year: int = FIRST_YEAR
    last_year: int = LAST_YEAR
    input_dir: Path = INPUT_DIR
    output_dir: Path = OUTPUT_DIR
    temp_root: Path | None = None
    file_prefix: str = FILE_PREFIX
    bathy_file: Path = BATHY_FILE
    surface_vars: tuple[str, ...] = SURFACE_VARS
    bottom_var: str = BOTTOM_VAR
    n_levels: int = N_LEVELS
    bottom_level: int = BOTTOM_LEVEL
    level_dim: str = LEVEL_DIM
    bottom_suffix: str = "_bottom"
    depth: DepthSpec = field(default_factory=DepthSpec)
    window: int = 12
    timestat_date: str = "middle"
    tools: tuple[str, ...] = REQUIRED_TOOLS

    @property
    def years(self) -> range:
        return range(self.first_year, self.last_year + 1)

    @property
    def bottom_var_renamed(self) -> str:
        return f"{self.bottom_var}{self.bottom_suffix}"

    @property
    def surface_vars_arg(self) -> str:
        # CDO wants a comma list with no spaces
        return ",".join(self.surface_vars)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "PipelineConfig":
        """Defaults, overridden by any flag that was actually given."""
        cfg = cls()
        overrides = {}

        for name in ("region", "first_year", "last_year", "file_prefix", "bottom_var", "n_levels"):
            value = getattr(args, name, None)
            if value is not None:
                overrides[name] = value

        for name in ("input_dir", "output_dir", "temp_root", "bathy_file"):
            value = getattr(args, name, None)
            if value is not None:
                overrides[name] = Path(value)

        surface = getattr(args, "surface_vars", None)
        if surface is not None:
            overrides["surface_vars"] = split_var_list(surface)

        depth = getattr(args, "depth", None)
        if depth is not None:
            overrides["depth"] = DepthSpec.parse(depth)

        return replace(cfg, **overrides)


def split_var_list(text: str) -> tuple[str, ...]:
    """'a, b,a,c' -> ('a', 'b', 'c'); keeps first occurrence order."""
    out: list[str] = []
    for name in text.split(","):
        name = name.strip()
        if name and name not in out:
            out.append(name)
    if not out:
        raise ValueError(f"Empty variable list: {text!r}")
    return tuple(out)


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--region", default=None, help=f"Region label for the output name (default: {REGION})")
    parser.add_argument("--first-year", dest="first_year", type=int, default=None, help=f"First year (default: {FIRST_YEAR})")
    parser.add_argument("--last-year", dest="last_year", type=int, default=None, help=f"Last year, inclusive (default: {LAST_YEAR})")
    parser.add_argument("--input-dir", dest="input_dir", default=None, help=f"Monthly input directory (default: {INPUT_DIR})")
    parser.add_argument("--output-dir", dest="output_dir", default=None, help=f"Output directory (default: {OUTPUT_DIR})")
    parser.add_argument("--temp-root", dest="temp_root", default=None, help="Where to create the run's temp directory (default: system temp)")
    parser.add_argument("--file-prefix", dest="file_prefix", default=None, help="Input file name prefix")
    parser.add_argument("--bathy-file", dest="bathy_file", default=None, help=f"Bathymetry NetCDF (default: {BATHY_FILE})")
    parser.add_argument("--surface-vars", dest="surface_vars", default=None, help="Comma list of variables to average over the top layer")
    parser.add_argument("--bottom-var", dest="bottom_var", default=None, help=f"Variable taken at the bottom level (default: {BOTTOM_VAR})")
    parser.add_argument("--n-levels", dest="n_levels", type=int, default=None, help=f"Model level count, used by check-inputs (default: {N_LEVELS})")
    parser.add_argument("--depth", default=None, help="gvc2zax target axis DEPTH,STEP,LEVELS (default: 20,0.5,40)")
