# ann_timeseries/tools/runner.py
from __future__ import annotations

from pathlib import Path
import logging
import shutil
import subprocess

from ..errors import MissingToolError, ToolInvocationError

logger = logging.getLogger(__name__)


def require_tools(names: tuple[str, ...] | list[str]) -> dict[str, str]:
    """Resolve every tool on PATH or raise naming all that are missing."""
    found: dict[str, str] = {}
    missing: list[str] = []
    for name in names:
        path = shutil.which(name)
        if path is None:
            missing.append(name)
        else:
            found[name] = path

    if missing:
        raise MissingToolError(missing)

    logger.info("Required tools (%s) found.", ", ".join(names))
    return found


def run_tool(argv: list[str | Path]) -> None:
    """Run one tool to completion; non-zero exit raises ToolInvocationError."""
    args = [str(a) for a in argv]
    logger.debug("$ %s", " ".join(args))

    proc = subprocess.run(args, capture_output=True, text=True)

    if proc.stderr:
        logger.debug(proc.stderr.rstrip())
    if proc.returncode != 0:
        raise ToolInvocationError(args, proc.returncode, proc.stderr or "")
