"""Full Caddy configuration for a set of sites.

Branch routes go into one HTTP server. Their error routes are lifted
into the server's ``errors`` block, each wrapped in a route carrying the
branch route's host match and group so a branch only ever handles its
own errors::

    {"apps": {"http": {"servers": {"sites": {
        "listen": [...],
        "routes": [<branch route>, ...],
        "errors": {"routes": [<branch error route>, ...]},
    }}}, "tls": {...}}}
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from roost.caddy.route import Route, subroute
from roost.caddy.tls import tls_app
from roost.compiler.collaborators import Collaborators
from roost.compiler.site import site_routes
from roost.config import CompilerConfig
from roost.sites.site import Site

logger = logging.getLogger("roost.compiler")


def lift_error_routes(route: Route) -> Route | None:
    """Server-level error route for *route*, or ``None`` if it has none."""
    if not route.errors:
        return None
    return Route(
        route_id=f"{route.route_id}-errors" if route.route_id else None,
        group=route.group,
        match=route.match,
        handle=(subroute(route.errors),),
    )


def server_config(
    sites: Iterable[Site], collaborators: Collaborators, config: CompilerConfig
) -> dict[str, Any]:
    """Caddy HTTP server object serving every branch of *sites*."""
    routes = [route for site in sites for route in site_routes(site, collaborators)]
    error_routes = [lifted for route in routes if (lifted := lift_error_routes(route))]

    server: dict[str, Any] = {
        "listen": list(config.listen),
        "routes": [route.to_json() for route in routes],
    }
    if error_routes:
        server["errors"] = {"routes": [route.to_json() for route in error_routes]}
    return server


def caddy_config(
    sites: Sequence[Site], collaborators: Collaborators, config: CompilerConfig
) -> dict[str, Any]:
    """Top-level Caddy config with the ``http`` and ``tls`` apps."""
    logger.info("Compiling %d sites", len(sites))
    apps: dict[str, Any] = {
        "http": {"servers": {config.server_name: server_config(sites, collaborators, config)}},
    }
    tls = tls_app(sites, collaborators)
    if tls:
        apps["tls"] = tls
    return {"apps": apps}
