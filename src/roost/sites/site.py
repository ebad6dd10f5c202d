"""Site, Branch, and Header frozen dataclasses."""

from dataclasses import dataclass

from roost.sites.domain import Domain
from roost.sites.redirect import Redirect


@dataclass(frozen=True, slots=True)
class Header:
    """One response header to set on served content."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class Branch:
    """A deployable content variant of a site.

    ``slug`` is the DNS label used for branch subdomains. ``password``
    takes precedence over the site password when set.
    """

    id: str
    slug: str
    name: str = ""
    password: str | None = None
    redirects: tuple[Redirect, ...] = ()
    headers: tuple[Header, ...] = ()

    def effective_password(self, site: "Site") -> str | None:
        """Password guarding this branch: its own, else the site's."""
        return self.password or site.password


@dataclass(frozen=True, slots=True)
class Site:
    """A tenant owning branches and shared routing settings.

    ``main_branch`` is the id of the branch also served at the site's
    bare domain names.
    """

    id: str
    name: str
    main_branch: str | None = None
    spa: bool = False
    password: str | None = None
    domains: tuple[Domain, ...] = ()
    headers: tuple[Header, ...] = ()
    branches: tuple[Branch, ...] = ()

    def branch(self, branch_id: str) -> Branch | None:
        """Return the branch with *branch_id*, or ``None``."""
        for branch in self.branches:
            if branch.id == branch_id:
                return branch
        return None
