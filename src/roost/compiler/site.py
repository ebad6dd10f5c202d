"""Site routes — every branch of a site, in declared order."""

from roost.caddy.route import Route
from roost.compiler.branch import branch_route
from roost.compiler.collaborators import Collaborators
from roost.sites.site import Site


def site_routes(site: Site, collaborators: Collaborators) -> list[Route]:
    return [branch_route(site, branch, collaborators) for branch in site.branches]
