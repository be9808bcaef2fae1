"""Command-line interface for loxscan: scan a file or an interactive prompt."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from loxscan.errors import LexError, LexErrorKind
from loxscan.tokens import Token

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    format: str
    prompt: str
    continuation: str


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan Lox source into tokens. Starts a prompt when no file is given.",
    )
    p.add_argument("input", nargs="?", help="Input .lox file (default: interactive prompt)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Token listing format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover loxscan.toml)",
    )
    return p


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / "loxscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input) if args.input else None
    base_dir = input_file.parent if input_file is not None else Path(".")
    if not base_dir.parts:
        base_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir)

    fmt = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config (expected text or json): {cfg_format}"
                )
            fmt = cfg_format
    if args.format is not None:
        fmt = args.format

    prompt = "> "
    continuation = "... "
    cfg_prompt = config.get("prompt")
    if isinstance(cfg_prompt, dict):
        if isinstance(cfg_prompt.get("prompt"), str):
            prompt = cfg_prompt["prompt"]
        if isinstance(cfg_prompt.get("continuation"), str):
            continuation = cfg_prompt["continuation"]

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        prompt=prompt,
        continuation=continuation,
    )


def render(tokens: list[Token], errors: list[LexError], fmt: str) -> str:
    """Render a scan result in the requested output format."""
    from loxscan.debug import dump_tokens, to_json

    if fmt == "json":
        return to_json(tokens, errors) + "\n"
    buf = io.StringIO()
    dump_tokens(tokens, file=buf)
    return buf.getvalue()


def report(errors: list[LexError], filename: str, *, file: TextIO | None = None) -> None:
    """Print formatted diagnostics, one block per error."""
    out = file if file is not None else sys.stderr
    for err in errors:
        print(err.format(filename), file=out)


def scan_file(options: CliOptions) -> tuple[str, list[LexError]]:
    """Read and scan a whole file; return (rendered listing, errors)."""
    from loxscan.scanner import scan

    assert options.input_file is not None
    source = options.input_file.read_text(encoding="utf-8")
    tokens, errors = scan(source)
    return render(tokens, errors, options.format), errors


def run_prompt(
    options: CliOptions,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Scan line-buffered input until EOF.

    A line that leaves a string open is held back and joined with the
    following lines, so each completed unit ends in exactly one EOF token.
    """
    from loxscan.scanner import scan

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    pending: list[str] = []
    status = 0
    while True:
        stdout.write(options.continuation if pending else options.prompt)
        stdout.flush()
        line = stdin.readline()
        if line == "":
            break
        pending.append(line)
        tokens, errors = scan("".join(pending))
        if errors and errors[-1].kind is LexErrorKind.UNTERMINATED_STRING:
            continue
        pending.clear()
        stdout.write(render(tokens, errors, options.format))
        if errors:
            report(errors, "<stdin>", file=stderr)

    stdout.write("\n")
    if pending:
        tokens, errors = scan("".join(pending))
        stdout.write(render(tokens, errors, options.format))
        report(errors, "<stdin>", file=stderr)
        status = 1
    return status


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    if options.input_file is None:
        return run_prompt(options)

    try:
        listing, errors = scan_file(options)
    except OSError as exc:
        print(f"error: cannot read {options.input_file}: {exc.strerror}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as exc:
        print(f"error: {options.input_file} is not valid UTF-8: {exc.reason}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(listing, encoding="utf-8")
    else:
        sys.stdout.write(listing)

    if errors:
        report(errors, str(options.input_file))
        return 1
    return 0
