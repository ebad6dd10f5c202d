"""Host lists for branch routes."""

from collections.abc import Sequence

from roost.sites.domain import Domain
from roost.sites.site import Branch, Site


def branch_hosts(domains: Sequence[Domain], branch: Branch, site: Site) -> list[str]:
    """Hostnames selecting *branch*.

    ``<slug>.<domain>`` for every domain exposing branches, then, for the
    main branch only, every bare domain name. Duplicates across the two
    groups are kept; Caddy's host matcher tolerates them.
    """
    hosts = [f"{branch.slug}.{domain.name}" for domain in domains if domain.expose_branches]
    if branch.id == site.main_branch:
        hosts.extend(domain.name for domain in domains)
    return hosts
