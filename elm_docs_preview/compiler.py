"""External Elm compiler invocation."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .config import BuildConfig
from .models import BuildResult


@dataclass
class BuildHandle:
    """A started (or failed-to-start) compiler run."""

    command: list[str]
    process: subprocess.Popen | None = None
    result: BuildResult | None = None


def build_compiler_command(config: BuildConfig, output_dir: Path, debug: bool = False) -> list[str]:
    """Return the argument list for `elm make` targeting <output_dir>/app.js."""
    command = [
        config.compiler,
        "make",
        config.entry,
        f"--output={output_dir / 'app.js'}",
        "--yes",
    ]
    if debug:
        command.append("--debug")
    return command


def start_build(config: BuildConfig, output_dir: Path, debug: bool = False) -> BuildHandle:
    """Spawn the compiler in the project directory without waiting for it."""
    command = build_compiler_command(config, output_dir, debug)

    if shutil.which(config.compiler) is None:
        return BuildHandle(
            command=command,
            result=BuildResult(
                command=command,
                error=(
                    f"Compiler not found: {config.compiler}\n"
                    "  Fix: Install Elm and ensure it is available on PATH, "
                    "or set ELM_DOCS_PREVIEW_COMPILER."
                ),
            ),
        )

    try:
        process = subprocess.Popen(
            command,
            cwd=str(config.project_dir),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        return BuildHandle(
            command=command,
            result=BuildResult(command=command, error=f"Could not start compiler: {exc}"),
        )
    return BuildHandle(command=command, process=process)


def wait_for_build(handle: BuildHandle) -> BuildResult:
    """Wait for the compiler to exit and capture its output."""
    if handle.result is not None:
        return handle.result

    stdout, stderr = handle.process.communicate()
    handle.result = BuildResult(
        command=handle.command,
        returncode=handle.process.returncode,
        stdout=stdout or "",
        stderr=stderr or "",
    )
    return handle.result
