# loudcheck/common/ffmpeg/process.py
from __future__ import annotations

import shlex
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from loudcheck.common.logging import get_logger
from loudcheck.domain.errors import ToolInvocationError, ToolUnavailableError

logger = get_logger(__name__)


def resolve_binary(candidate: Optional[str], default: str) -> str:
    """
    Return an absolute path for an ffmpeg-family binary.
    Accepts either a bare name looked up on PATH or an explicit file path.
    """
    name = candidate or default
    if Path(name).is_absolute():
        if Path(name).is_file():
            return name
        raise ToolUnavailableError(f"{default} not found at {name}")
    resolved = shutil.which(name)
    if not resolved:
        raise ToolUnavailableError(f"{name} not found on PATH; install ffmpeg or configure its location.")
    return resolved


def run_tool(cmd: List[str], label: str, *, timeout_sec: Optional[int] = None) -> subprocess.CompletedProcess:
    """
    Run an external tool to completion, capturing text stdout/stderr.
    Launch failures, timeouts and non-zero exits become ToolInvocationError.
    """
    logger.debug("%s cmd: %s", label, " ".join(shlex.quote(p) for p in cmd))
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout_sec,
            check=False,  # we handle rc manually to attach stderr
        )
    except subprocess.TimeoutExpired as e:
        raise ToolInvocationError(f"{label} timed out after {timeout_sec}s", stderr=str(e)) from e
    except OSError as e:
        raise ToolInvocationError(f"Failed to execute {label} (OS error).", stderr=str(e)) from e

    if proc.returncode != 0:
        raise ToolInvocationError(
            f"{label} returned non-zero exit code {proc.returncode}",
            stderr=proc.stderr,
            rc=proc.returncode,
        )
    return proc
