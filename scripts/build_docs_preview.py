"""Wrapper script for running the docs preview build from a checkout."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
from elm_docs_preview.cli import main


if __name__ == "__main__":
    main()
