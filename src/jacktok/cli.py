"""Command-line interface for the Jack tokenizer."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from jacktok.errors import InvalidTokenError

DEFAULT_SUFFIX = "T"
PROMPT = "Enter the path to the .jack file: "


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_files: list[Path]
    output_file: Path | None
    output_dir: Path | None
    suffix: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="jacktok",
        description="Jack tokenizer: writes an XML token stream for each .jack file",
    )
    p.add_argument(
        "input",
        nargs="?",
        help="Input .jack file or directory (prompted for when omitted)",
    )
    p.add_argument(
        "-o",
        "--output",
        help="Output file for a single input, or - for stdout",
    )
    p.add_argument(
        "--output-dir",
        metavar="DIR",
        help="Directory for derived output files (default: next to the input)",
    )
    p.add_argument(
        "--suffix",
        default=None,
        help=f"Suffix appended to the output base name (default: {DEFAULT_SUFFIX})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover jacktok.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def prompt_for_input() -> str:
    """Ask for the input path on stdin."""
    return input(PROMPT).strip()


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "jacktok.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def find_jack_files(path: Path) -> list[Path]:
    """Expand an input path into the .jack files to tokenize.

    A directory yields its ``*.jack`` files sorted by name.
    """
    if path.is_dir():
        files = sorted(p for p in path.glob("*.jack") if p.is_file())
        if not files:
            raise FileNotFoundError(f"no .jack files in directory: {path}")
        return files
    if not path.is_file():
        raise FileNotFoundError(f"cannot open input file: {path}")
    return [path]


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_path = Path(args.input)
    input_dir = input_path if input_path.is_dir() else input_path.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    input_files = find_jack_files(input_path)

    suffix = DEFAULT_SUFFIX
    output_dir: Path | None = None
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_suffix = cfg_output.get("suffix")
        if isinstance(cfg_suffix, str):
            suffix = cfg_suffix
        cfg_dir = cfg_output.get("directory")
        if isinstance(cfg_dir, str):
            output_dir = Path(cfg_dir)
    if args.suffix is not None:
        suffix = args.suffix
    if args.output_dir:
        output_dir = Path(args.output_dir)

    output_file = Path(args.output) if args.output else None
    if output_file is not None and len(input_files) > 1:
        raise argparse.ArgumentTypeError("-o/--output needs a single input file, not a directory")

    return CliOptions(
        input_files=input_files,
        output_file=output_file,
        output_dir=output_dir,
        suffix=suffix,
        debug=args.debug,
    )


def output_path_for(input_file: Path, suffix: str, output_dir: Path | None = None) -> Path:
    """Derive the output path: base name without extension, plus suffix and .xml."""
    directory = output_dir if output_dir is not None else input_file.parent
    return directory / f"{input_file.stem}{suffix}.xml"


def tokenize_source(
    source: str, filename: str, out: TextIO, debug: bool = False
) -> list[InvalidTokenError]:
    """Tokenize Jack source text and write its XML token stream to *out*.

    Returns the invalid lexemes that were reported and skipped.
    """
    from jacktok.debug import dump_tokens
    from jacktok.lexer import Lexer, split_lines
    from jacktok.render import write_tokens

    lexer = Lexer(filename)
    tokens = list(lexer.tokenize(split_lines(source)))

    if debug:
        dump_tokens(tokens, file=sys.stderr)

    write_tokens(tokens, out)
    return lexer.errors


def _run_one(input_file: Path, options: CliOptions) -> list[InvalidTokenError]:
    # Read before opening the sink so a bad input leaves no partial output
    source = input_file.read_text(encoding="utf-8")
    filename = str(input_file)

    if options.output_file is not None and str(options.output_file) == "-":
        return tokenize_source(source, filename, sys.stdout, options.debug)

    dest = options.output_file or output_path_for(input_file, options.suffix, options.output_dir)
    dest.parent.mkdir(parents=True, exist_ok=True)
    with open(dest, "w", encoding="utf-8") as f:
        return tokenize_source(source, filename, f, options.debug)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1). Does not call sys.exit()."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code == 0 else 1

    if args.input is None:
        try:
            args.input = prompt_for_input()
        except EOFError:
            args.input = ""
        if not args.input:
            print("error: no input file given", file=sys.stderr)
            return 1

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, OSError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for input_file in options.input_files:
        try:
            errors = _run_one(input_file, options)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        for err in errors:
            print(err.format(str(input_file)), file=sys.stderr)

    return 0
