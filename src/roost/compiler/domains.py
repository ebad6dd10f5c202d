"""Domains routed to a site.

Custom domains come first in declared order, then the platform domain
(``<site name>.<sites domain>``, always exposing branches, ACME managed).
Duplicates are dropped by ``name`` keeping the first occurrence, so a
custom domain that repeats the platform hostname keeps its own
``expose_branches`` and SSL settings.
"""

from roost.compiler.collaborators import Collaborators
from roost.sites.domain import AcmeSslConfiguration, Domain
from roost.sites.site import Site


def platform_domain(site: Site, collaborators: Collaborators) -> Domain:
    return Domain(
        name=collaborators.main_domain(site),
        expose_branches=True,
        ssl_configuration=AcmeSslConfiguration(),
    )


def resolve_domains(site: Site, collaborators: Collaborators) -> list[Domain]:
    """Deduplicated domains of *site*, platform domain included."""
    seen: set[str] = set()
    resolved: list[Domain] = []
    for domain in (*site.domains, platform_domain(site, collaborators)):
        if domain.name in seen:
            continue
        seen.add(domain.name)
        resolved.append(domain)
    return resolved
