"""Command-line interface for DrillMap."""

import argparse
import logging
import sys

import uvicorn

from .config import settings


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="DrillMap - drilling data intake and channel mapping wizard"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the web server")
    server_parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    # Match command
    match_parser = subparsers.add_parser(
        "match", help="Show the proposed channel for each header using the default bank"
    )
    match_parser.add_argument("headers", nargs="+", help="File column headers")

    # Steps command
    steps_parser = subparsers.add_parser("steps", help="Print the wizard step indicator")
    steps_parser.add_argument(
        "--current", type=int, default=1, help="Current step number (default: 1)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "match":
        run_match(args.headers)
    elif args.command == "steps":
        run_steps(args.current)
    else:
        parser.print_help()
        sys.exit(1)


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    uvicorn.run(
        "drillmap.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


def run_match(headers: list[str]):
    """Print header -> standard channel for each header."""
    from .channels import ChannelBank, match_header

    bank = ChannelBank()
    width = max(len(h) for h in headers)
    unmapped = 0
    for header in headers:
        mapped = match_header(header, bank)
        if not mapped:
            unmapped += 1
        print(f"{header.ljust(width)}  ->  {mapped or '(unmapped)'}")

    if unmapped:
        print(f"\n{unmapped} of {len(headers)} headers have no matching alias.")


def run_steps(current_step: int):
    """Print the step indicator for the default steps."""
    from .wizard import DEFAULT_STEPS, render_steps

    print(render_steps(DEFAULT_STEPS, current_step))


if __name__ == "__main__":
    main()
