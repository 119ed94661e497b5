"""Command line entry point: generate Markdown documentation from a config."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

from gmdoc.config import ConfigError, load_config
from gmdoc.processor import process_outputs

CONFIG_FILENAME = "gmd-config.yaml"
DEFAULT_OUTPUT_DIRNAME = "gmd_ouput"

_DEFAULT_CONFIG = """outputs:
  # First output file
  main_docs.md:
    - base_dir: "."
      include:
        - "*.go" # Include all Go files
      exclude:
        - "test_*.go" # Exclude test files
      exclude_dirs:
        - "gmd_output" # Exclude the markdown output directory
      section_heading: "Source Code"
      description: >
        This section contains source Go files and associated documentation.
  # Second output file
  subdir_docs.md:
    - base_dir: "./subdir"
      include:
        - "*.go" # Include all Go files in the `subdir`
      exclude: []
      section_heading: "Subdirectory Go Files"
      description: >
        Documentation for Go files located in the project's subdirectories.
"""

_HELP = """
gmd: Generate Markdown Documentation

Usage:
  gmd [OPTIONS]      Processes files and generates Markdown documentation based on gmd-config.yaml.
      --config       Path to config file (defaults to ./gmd-config.yaml).
      --output_dir   Path to write markdown output (defaults to ./gmd_output/).
  gmd init           Creates a default gmd-config.yaml file in the current directory.
  gmd help           Displays this help message.

Configuration File:
  - gmd-config.yaml must exist in the current directory to run 'gmd' if --config option is not passed.

Examples:
  gmd
  gmd init
"""


def default_config_text() -> str:
    """Return the template written by the init command."""
    return _DEFAULT_CONFIG


def help_text() -> str:
    """Return the usage message."""
    return _HELP


def init_config(directory: str | os.PathLike[str]) -> str:
    """Create the default configuration file in directory and return its path.

    Raises FileExistsError if the file is already there.
    """
    path = os.path.join(os.fspath(directory), CONFIG_FILENAME)
    with open(path, "x", encoding="utf-8", newline="") as handle:
        handle.write(default_config_text())
    return path


def _parser(base: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gmd", add_help=False)
    parser.add_argument(
        "-config",
        "--config",
        dest="config",
        default=os.path.join(base, CONFIG_FILENAME),
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "-output_dir",
        "--output_dir",
        dest="output_dir",
        default=os.path.join(base, DEFAULT_OUTPUT_DIRNAME),
        help="Directory to save the generated Markdown files.",
    )
    parser.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    return parser


def generate(
    argv: Sequence[str] | None = None, cwd: str | os.PathLike[str] | None = None
) -> str:
    """Parse options, load the configuration and write the documents.

    Returns the output directory. Raises ConfigError when the configuration
    is missing or invalid and OSError when the documents cannot be written.
    """
    base = os.getcwd() if cwd is None else os.fspath(cwd)
    args = _parser(base).parse_args(list(argv or []))
    config_path = os.path.join(base, args.config)
    output_dir = os.path.join(base, args.output_dir)

    try:
        os.stat(config_path)
    except FileNotFoundError:
        raise ConfigError(
            f"Configuration file '{config_path}' does not exist. "
            "Use the --config flag to specify the correct file."
        ) from None
    except OSError:
        pass

    try:
        config = load_config(config_path)
    except ConfigError as exc:
        raise ConfigError(f"Error loading config file: {exc}") from exc

    print(f"Processing configuration file: {config_path}")
    print(f"Output will be written to: {output_dir}")
    process_outputs(config, output_dir)
    print("Markdown documentation generated successfully.", file=sys.stderr)
    return output_dir


def _run_init() -> int:
    try:
        path = init_config(os.getcwd())
    except FileExistsError as exc:
        print(
            f"A configuration file ('{exc.filename}') already exists in the current directory.",
            file=sys.stderr,
        )
        return 1
    except OSError as exc:
        print(f"Failed to create configuration file: {exc}", file=sys.stderr)
        return 1
    print(f"Default configuration file created: {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the gmd command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    command = args[0] if args else None

    if command == "init":
        return _run_init()
    if command in ("help", "--help", "-h"):
        print(help_text())
        return 0

    try:
        generate(args)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error processing outputs: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())