# ann_timeseries/errors.py
from __future__ import annotations


class PipelineError(Exception):
    """Base class for failures that abort a run."""

    exit_code = 1


class MissingToolError(PipelineError):
    exit_code = 1

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Required tool(s) not found on PATH: {', '.join(self.missing)}. Aborting.")


class ToolInvocationError(PipelineError):
    exit_code = 2

    def __init__(self, argv: list[str], returncode: int, stderr: str = ""):
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"{self.argv[0]} exited with status {returncode}: {' '.join(self.argv)}"
        tail = stderr.strip().splitlines()[-5:] if stderr else []
        if tail:
            msg += "\n" + "\n".join(f"  {line}" for line in tail)
        super().__init__(msg)
