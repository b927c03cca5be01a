"""Command line interface for building the Elm docs preview page."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .compiler import start_build, wait_for_build
from .config import BuildConfig, load_build_config
from .html_export import write_index_html
from .models import InvocationParameters
from .utils import ensure_output_dir, read_docs_json, resolve_cli_path


USAGE_MESSAGE = "Must pass input json and output dir"


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="elm-docs-preview",
        description="Compile the Elm docs viewer and write an index.html embedding docs JSON.",
    )
    parser.add_argument("docs_input", nargs="?", default=None, help="Path to docs JSON file.")
    parser.add_argument("docs_output", nargs="?", default=None, help="Output directory.")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Pass --debug to the Elm compiler.",
    )
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> InvocationParameters:
    """Parse process arguments; --debug may appear anywhere."""
    args = build_parser().parse_intermixed_args(argv)
    return InvocationParameters(
        docs_input=args.docs_input,
        docs_output=args.docs_output,
        debug=args.debug,
    )


def report_error(error: object) -> None:
    """Single failure reporter: print the error to stdout."""
    print(f"Error: {error}")


def run(params: InvocationParameters, config: BuildConfig) -> int:
    """Build app.js and write index.html; return the process exit status."""
    if not params.complete:
        # Missing arguments still exit 0.
        print(USAGE_MESSAGE)
        print(build_parser().format_usage().rstrip())
        return 0

    output_dir = resolve_cli_path(params.docs_output)
    input_file = resolve_cli_path(params.docs_input)

    try:
        if ensure_output_dir(output_dir):
            print(f"Output directory created: {output_dir}")
    except OSError as exc:
        report_error(exc)
        return 1

    handle = start_build(config, output_dir, debug=params.debug)

    page_written = False
    try:
        docs_json = read_docs_json(input_file)
    except (OSError, UnicodeDecodeError) as exc:
        report_error(exc)
    else:
        try:
            index_path = write_index_html(output_dir, docs_json)
        except OSError as exc:
            report_error(exc)
        else:
            page_written = True
            print(f"Docs page written: {index_path}")

    result = wait_for_build(handle)
    if result.ok:
        print(f"App bundle written: {output_dir / 'app.js'}")
    else:
        report_error(result.describe_failure())

    return 0 if page_written and result.ok else 1


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entrypoint."""
    params = parse_arguments(argv)
    try:
        config = load_build_config()
    except ValueError as exc:
        report_error(exc)
        raise SystemExit(1)
    exit_code = run(params, config)
    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
