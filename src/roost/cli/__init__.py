"""Roost CLI — compile site records into Caddy configuration.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import sys


def _add_site_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("sites", help="JSON file of site records")
    parser.add_argument(
        "--sites-domain",
        default=None,
        help="Platform hostname (overrides ROOST_SITES_DOMAIN)",
    )
    parser.add_argument(
        "--sites-dir",
        default=None,
        help="Branch content directory as seen by Caddy (overrides ROOST_SITES_DIR)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=("debug", "info", "warning", "error"),
        help="Logging verbosity (overrides ROOST_LOG_LEVEL)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — compile per-site routing policy into Caddy configuration.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost compile ----------------------------------------------------
    compile_parser = subparsers.add_parser("compile", help="Print the Caddy JSON config")
    _add_site_arguments(compile_parser)
    compile_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the config to a file instead of stdout",
    )
    compile_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (0 for compact output)",
    )

    # -- roost hosts ------------------------------------------------------
    hosts_parser = subparsers.add_parser("hosts", help="List the hostnames of every branch")
    _add_site_arguments(hosts_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "compile":
        from roost.cli._compile import run_compile

        run_compile(args)
    elif args.command == "hosts":
        from roost.cli._hosts import run_hosts

        run_hosts(args)
