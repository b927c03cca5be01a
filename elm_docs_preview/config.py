"""Configuration loading for the compiler invocation."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


TOOL_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_NAME = "elm-docs-preview.json"


def default_project_dir() -> Path:
    """Return the checkout root when it holds elm.json, else the current directory.

    An installed package lives in site-packages, which has no Elm project, so
    the compiler then runs wherever the command was invoked.
    """
    if (TOOL_ROOT / "elm.json").is_file():
        return TOOL_ROOT
    return Path.cwd()


@dataclass
class BuildConfig:
    """Settings for locating and running the Elm compiler."""

    compiler: str = "elm"
    entry: str = "src/Main.elm"
    project_dir: Path = field(default_factory=default_project_dir)


def _config_path() -> Path:
    """Return the JSON config location, honoring ELM_DOCS_PREVIEW_CONFIG."""
    override = os.getenv("ELM_DOCS_PREVIEW_CONFIG", "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return TOOL_ROOT / DEFAULT_CONFIG_NAME


def _read_payload(path: Path) -> dict:
    if not path.is_file():
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Config file is not valid JSON: {path} ({exc})") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return payload


def load_build_config(path: Path | None = None) -> BuildConfig:
    """Load compiler settings from an optional JSON file and environment variables."""
    load_dotenv()
    config_path = path or _config_path()
    payload = _read_payload(config_path)

    env_project_dir = os.getenv("ELM_DOCS_PREVIEW_PROJECT_DIR", "").strip()
    if env_project_dir:
        project_dir = Path(env_project_dir).expanduser()
    elif "project_dir" in payload:
        project_dir = Path(str(payload["project_dir"])).expanduser()
        if not project_dir.is_absolute():
            project_dir = config_path.parent / project_dir
    else:
        project_dir = default_project_dir()

    return BuildConfig(
        compiler=(
            os.getenv("ELM_DOCS_PREVIEW_COMPILER", "").strip()
            or str(payload.get("compiler", "elm")).strip()
        ),
        entry=(
            os.getenv("ELM_DOCS_PREVIEW_ENTRY", "").strip()
            or str(payload.get("entry", "src/Main.elm")).strip()
        ),
        project_dir=project_dir.resolve(),
    )
