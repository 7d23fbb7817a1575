"""CLI entrypoints for errdoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import ErrDocError
from .generator import ReferenceGenerator
from .logging import configure_logging


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_quiet_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Only log warnings, such as skipped classes.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="errdoc",
        description="Generate reference documentation for an exception class hierarchy.",
    )
    _add_verbose_option(parser)
    _add_quiet_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Render the exception reference document.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_quiet_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Directory holding the class manifests (defaults to ./exceptions).",
    )
    generate_parser.add_argument(
        "--config",
        default=".",
        help="Path to .errdoc.yml or the directory containing it.",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the document to this file instead of standard output.",
    )
    generate_parser.add_argument(
        "--toc",
        action="store_true",
        default=None,
        help="Insert a table of contents listing every class.",
    )
    generate_parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for errdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if getattr(args, "log_file", None) else None
    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=log_file
    )

    if args.command == "generate":
        try:
            config = load_config(Path(args.config))
            if args.source:
                config.source_dir = Path(args.source).expanduser().resolve()
            if args.toc:
                config.toc = True
            result = ReferenceGenerator(config).run()
        except (ErrDocError, FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"errdoc generate failed: {exc}\nRun with --verbose for more details.\n")

        if args.output:
            output = Path(args.output)
            output.write_text(result.document, encoding="utf-8")
            print(f"Reference written to {_relativize(output)}", file=sys.stderr)
        else:
            sys.stdout.write(result.document)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
