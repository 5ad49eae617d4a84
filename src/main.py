# src/main.py - v1
"""CLI entry point: fingerprint, check, serve commands.

Usage:
    etagfiles fingerprint <file>...
    etagfiles check <file> [--if-none-match TAG]
    etagfiles serve <root> [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from etagfiles.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="etagfiles",
        description=f"etagfiles v{__version__}: static files with ETag validation",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- fingerprint ---
    p_fp = subparsers.add_parser(
        "fingerprint", help="Print the content fingerprint of files",
    )
    p_fp.add_argument("files", type=Path, nargs="+", help="Files to hash")
    p_fp.set_defaults(func=_cmd_fingerprint)

    # --- check ---
    p_check = subparsers.add_parser(
        "check", help="Evaluate a conditional request for one file",
    )
    p_check.add_argument("file", type=Path, help="Path to file")
    p_check.add_argument(
        "--if-none-match", dest="if_none_match", default=None,
        help="Client validator, raw header value (e.g. '\"ABC123\"')",
    )
    p_check.set_defaults(func=_cmd_check)

    # --- serve ---
    p_serve = subparsers.add_parser(
        "serve", help="Serve a directory over HTTP",
    )
    p_serve.add_argument("root", type=Path, help="Directory to serve")
    p_serve.add_argument("--host", default=None, help="Bind address")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port")
    p_serve.set_defaults(func=_cmd_serve)

    return parser


def _cmd_fingerprint(args: argparse.Namespace) -> int:
    """Print ``<fingerprint>  <canonical path>`` per file."""
    from etagfiles.cache.fingerprint import fingerprint_file
    from etagfiles.responder.errors import FileResponseError
    from etagfiles.responder.paths import canonicalize, require_regular_file

    status = 0
    for file_path in args.files:
        try:
            canonical = require_regular_file(canonicalize(file_path))
            print(f"{fingerprint_file(canonical)}  {canonical}")
        except FileResponseError as exc:
            logger.error("%s", exc)
            status = 1
        except OSError as exc:
            logger.error("Cannot read %s: %s", file_path, exc)
            status = 1
    return status


def _cmd_check(args: argparse.Namespace) -> int:
    """Run the responder once and print the decision without reading the body."""
    from etagfiles.cache.fingerprint_store import FingerprintStore
    from etagfiles.responder.errors import FileResponseError
    from etagfiles.responder.responder import FileValidationResponder
    from etagfiles.web.conditional import parse_if_none_match

    responder = FileValidationResponder(FingerprintStore())
    try:
        response = responder.respond(
            args.file, parse_if_none_match(args.if_none_match)
        )
    except FileResponseError as exc:
        logger.error("%s (%s)", exc, exc.kind)
        return 1

    print(f"\nOutcome:  {response.outcome}")
    print(f"  Status:       {response.status_code}")
    print(f"  Fingerprint:  {response.fingerprint}")
    for name, value in response.headers().items():
        print(f"  {name}: {value}")
    if response.body is not None:
        response.body.close()
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Serve ``root`` with uvicorn until interrupted."""
    import uvicorn

    from etagfiles.config.settings import load_settings
    from etagfiles.logging.logger import setup_logging
    from etagfiles.web.starlette_adapter import create_app

    root: Path = args.root
    if not root.is_dir():
        logger.error("Not a directory: %s", root)
        return 1

    overrides: dict[str, object] = {"static_root": root}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    settings = load_settings(**overrides)

    log_level = "DEBUG" if args.verbose else settings.log_level
    setup_logging(
        level=log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )

    app = create_app(settings)
    uvicorn.run(
        app, host=settings.host, port=settings.port, log_level=log_level.lower(),
    )
    return 0


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


if __name__ == "__main__":
    sys.exit(main())
