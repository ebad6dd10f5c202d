"""``roost hosts`` — list the hostnames routed to every branch.

Prints a table of SITE, BRANCH, and HOSTS, one row per branch.
"""

import argparse

from roost.cli._resolve import resolve_inputs
from roost.compiler.domains import resolve_domains
from roost.compiler.hosts import branch_hosts


def run_hosts(args: argparse.Namespace) -> None:
    _, collaborators, sites = resolve_inputs(args)

    rows: list[tuple[str, str, str]] = []
    for site in sites:
        domains = resolve_domains(site, collaborators)
        for branch in site.branches:
            hosts = branch_hosts(domains, branch, site)
            rows.append((site.name, branch.slug, ", ".join(hosts) or "-"))

    if not rows:
        print("No branches found.")
        return

    max_site = max(max(len(r[0]) for r in rows), 4)  # "SITE" header
    max_branch = max(max(len(r[1]) for r in rows), 6)  # "BRANCH" header

    fmt = f"{{:<{max_site}}}  {{:<{max_branch}}}  {{}}"
    print(fmt.format("SITE", "BRANCH", "HOSTS"))
    sep_len = max_site + max_branch + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for site_name, slug, hosts in rows:
        print(fmt.format(site_name, slug, hosts))
