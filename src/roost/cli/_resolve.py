"""Config and site resolution shared by ``roost compile`` and ``roost hosts``.

Failures print ``Error: ...`` to stderr and exit with status 1.
"""

import argparse
import dataclasses
import logging
import sys

from roost.compiler.collaborators import Collaborators
from roost.config import CompilerConfig
from roost.errors import RoostError
from roost.sites.loader import read_sites
from roost.sites.site import Site

logger = logging.getLogger("roost.cli")


def resolve_config(args: argparse.Namespace) -> CompilerConfig:
    """Environment config with command-line flags layered on top.

    Also configures logging at the resolved level.
    """
    config = CompilerConfig.from_env()
    overrides = {
        name: value
        for name in ("sites_domain", "sites_dir", "log_level")
        if (value := getattr(args, name, None)) is not None
    }
    if overrides:
        config = dataclasses.replace(config, **overrides)

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return config


def resolve_inputs(args: argparse.Namespace) -> tuple[CompilerConfig, Collaborators, list[Site]]:
    """Config, collaborators, and sites for *args*, or exit 1."""
    config = resolve_config(args)
    try:
        collaborators = Collaborators.from_config(config)
        sites = read_sites(args.sites)
    except (RoostError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.info("Loaded %d sites from %s", len(sites), args.sites)
    return config, collaborators, sites
