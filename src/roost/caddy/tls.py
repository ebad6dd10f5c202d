"""TLS app — certificates for every hostname the HTTP routes answer.

Manual certificates are loaded from the PEM text stored on the domain
and tagged with its name. ACME domains contribute their bare name when
the site has a main branch and, when they expose branches, one
``<slug>.<name>`` subject per branch.
"""

from collections.abc import Iterable
from typing import Any

from roost.compiler.collaborators import Collaborators
from roost.compiler.domains import resolve_domains
from roost.sites.domain import AcmeSslConfiguration, ManualSslConfiguration
from roost.sites.site import Site


def tls_app(sites: Iterable[Site], collaborators: Collaborators) -> dict[str, Any]:
    """Caddy ``tls`` app for *sites*. Empty sections are omitted."""
    load_pem: list[dict[str, Any]] = []
    subjects: set[str] = set()

    for site in sites:
        # Bare names are only routed to an existing main branch
        serves_bare_names = (
            site.main_branch is not None and site.branch(site.main_branch) is not None
        )
        for domain in resolve_domains(site, collaborators):
            match domain.ssl_configuration:
                case ManualSslConfiguration(fullchain=fullchain, private_key=private_key):
                    load_pem.append(
                        {"certificate": fullchain, "key": private_key, "tags": [domain.name]}
                    )
                case AcmeSslConfiguration():
                    if serves_bare_names:
                        subjects.add(domain.name)
                    if domain.expose_branches:
                        subjects.update(f"{branch.slug}.{domain.name}" for branch in site.branches)

    app: dict[str, Any] = {}
    if load_pem:
        app["certificates"] = {"load_pem": load_pem}
    if subjects:
        app["automation"] = {"policies": [{"subjects": sorted(subjects)}]}
    return app
