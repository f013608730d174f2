"""Command-line driver for the micro lexer."""

from __future__ import annotations

import argparse
import json
import sys

from micro.dialect import DEFAULT_DIALECT, available_dialects, get_dialect
from micro.errors import CLIError, Diagnostic, MicroError, format_diagnostic
from micro.main import ScanArtifacts, scan_file, scan_line, scan_source
from micro.serialization import tokens_to_json, write_tokens


def build_parser() -> argparse.ArgumentParser:
    """Build argparse options for the micro CLI."""
    parser = argparse.ArgumentParser(
        prog="micro",
        description="Tokenize micro source. Reads one line from stdin unless a file or --code is given.",
    )
    parser.add_argument("input", nargs="?", help="Input source file")
    parser.add_argument("--code", help="Inline source string")
    parser.add_argument(
        "--dialect",
        default=DEFAULT_DIALECT,
        help=f"Grammar dialect ({', '.join(available_dialects())}); default {DEFAULT_DIALECT}",
    )
    parser.add_argument("--json", action="store_true", help="Print tokens as a JSON array")
    parser.add_argument("--all", action="store_true", help="Keep scanning past illegal tokens")
    parser.add_argument("-o", "--output", help="Write the scan result as JSON to this path")
    parser.add_argument("--list-dialects", action="store_true", help="Print dialect definitions and exit")
    parser.add_argument("--debug", action="store_true", help="Emit debug info to stderr")
    return parser


def run(argv: list[str] | None = None) -> int:
    """Run CLI and return shell exit code."""
    args = build_parser().parse_args(argv)

    try:
        if args.list_dialects:
            payload = [get_dialect(name).to_dict() for name in available_dialects()]
            print(json.dumps(payload, indent=2, sort_keys=True))
            return 0

        artifacts = _scan(args)

        if args.json:
            print(tokens_to_json(artifacts.tokens))
        else:
            for token in artifacts.tokens:
                print(token)

        if args.output:
            write_tokens(artifacts, args.output)

        for diag in artifacts.diagnostics:
            print(format_diagnostic(diag), file=sys.stderr)

        if args.debug:
            print(
                f"debug: tokens={len(artifacts.tokens)} illegal={len(artifacts.illegal)} "
                f"dialect={artifacts.dialect.name} bytes={len(artifacts.source.encode('utf-8'))}",
                file=sys.stderr,
            )

        return 0 if artifacts.ok else 1

    except MicroError as err:
        print(format_diagnostic(err.to_diagnostic()), file=sys.stderr)
        return 2
    except OSError as err:
        diag = Diagnostic(code="CLI002", message=str(err), span=None, hint="Check the input path.")
        print(format_diagnostic(diag), file=sys.stderr)
        return 2
    except Exception as err:  # pragma: no cover - defensive fallback
        diag = Diagnostic(code="CLI999", message=f"Internal error: {err}", span=None, hint="Run with --debug")
        print(format_diagnostic(diag), file=sys.stderr)
        return 3


def _scan(args: argparse.Namespace) -> ScanArtifacts:
    if args.input and args.code is not None:
        raise CLIError("CLI001", "Use either input file path or --code, not both.", hint="Run micro --help for usage.")

    if args.input:
        return scan_file(args.input, dialect=args.dialect, stop_on_illegal=not args.all)

    if args.code is not None:
        source, filename = args.code, "<inline>"
    else:
        source, filename = sys.stdin.readline(), "<stdin>"

    if args.all:
        return scan_source(source, dialect=args.dialect, filename=filename)
    return scan_line(source, dialect=args.dialect, filename=filename)


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
