"""Branch routes — one self-contained Caddy route per branch.

Structure of a compiled branch route::

    match: host in <branch hosts>        group: <site id>
    handle: subroute
        1. authentication   (only with a site or branch password)
        2. redirect routes  (declared order, terminal)
        3. content route
    errors:
        - 401 -> "not authenticated"
        - 404 -> branch 404 page, else "not found"

Error routes sit on the outer route rather than inside the subroute's
own ``errors`` block: Caddy's subroute error handling clashes with the
authentication handler's 401 challenge and breaks password protection.
"""

import logging

from roost.caddy.route import Route, error_status, static_response, subroute
from roost.compiler.collaborators import Collaborators
from roost.compiler.content import content_route
from roost.compiler.domains import resolve_domains
from roost.compiler.hosts import branch_hosts
from roost.sites.site import Branch, Site

logger = logging.getLogger("roost.compiler")


def not_authenticated_route() -> Route:
    """Error route answering 401s with a plaintext body."""
    return Route(
        match=(error_status(401),),
        handle=(static_response("not authenticated", "{http.error.status_code}"),),
    )


def branch_route(site: Site, branch: Branch, collaborators: Collaborators) -> Route:
    """Compile the route serving *branch* of *site*."""
    hosts = branch_hosts(resolve_domains(site, collaborators), branch, site)
    if not hosts:
        logger.warning("Branch %s of site %s is not reachable from any host", branch.id, site.id)

    routes: list[Route] = []
    password = branch.effective_password(site)
    if password:
        routes.append(Route(handle=(collaborators.auth_handler(password),)))
    routes.extend(collaborators.redirect_route(site, branch, redirect) for redirect in branch.redirects)
    routes.append(content_route(site, branch, collaborators))

    root = collaborators.content_root(site.id, branch.id)
    route_id = collaborators.route_id(site, branch)
    logger.debug("Compiled %s: %d hosts, %d subroutes", route_id, len(hosts), len(routes))
    return Route(
        route_id=route_id,
        group=site.id,
        match=({"host": hosts},),
        handle=(subroute(routes),),
        errors=(not_authenticated_route(), collaborators.not_found_route(site, branch, root)),
    )
