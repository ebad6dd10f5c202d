"""``roost compile`` — print the Caddy JSON config for a sites file."""

import argparse
import json
import sys
from pathlib import Path

from roost.caddy.server import caddy_config
from roost.cli._resolve import resolve_inputs


def run_compile(args: argparse.Namespace) -> None:
    """Compile ``args.sites`` and write the config to stdout or ``args.output``."""
    config, collaborators, sites = resolve_inputs(args)
    document = caddy_config(sites, collaborators, config)
    text = json.dumps(document, indent=args.indent or None)

    if args.output is None:
        print(text)
        return

    try:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
