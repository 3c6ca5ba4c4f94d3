#!/usr/bin/env python3
"""
Dining Wrap CLI.

USAGE:
  python -m dining_wrap.cli serve                 # Start API server on $PORT (default 8000)
  python -m dining_wrap.cli serve --port 9000 --reload
"""
from __future__ import annotations

import argparse
import sys

from dining_wrap.config import DEFAULT_PORT
from dining_wrap.logging_setup import configure_logging


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Dining Wrap API on port {args.port}...")
    uvicorn.run("dining_wrap.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Dining Wrap — campus dining recap engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default $DINING_WRAP_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    configure_logging(args.log_level)
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
