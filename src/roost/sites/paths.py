"""Hostnames and directories derived from site identity."""

from roost.sites.site import Site


def get_site_main_domain(site: Site, *, sites_domain: str) -> str:
    """Platform hostname of *site*: ``<site name>.<sites_domain>``."""
    return f"{site.name}.{sites_domain}"


def get_branch_dir(site_id: str, branch_id: str, *, sites_dir: str) -> str:
    """Directory holding the deployed content of a branch."""
    return f"{sites_dir.rstrip('/')}/{site_id}/{branch_id}"


def get_branch_redirects_dir(site_id: str, branch_id: str, *, sites_dir: str) -> str:
    """Directory holding the files served by a branch's file redirects."""
    return f"{sites_dir.rstrip('/')}/{site_id}/redirects/{branch_id}"
