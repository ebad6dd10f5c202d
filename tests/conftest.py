"""Shared fixtures for roost tests."""

import pytest

from roost.compiler.collaborators import Collaborators
from roost.config import CompilerConfig
from roost.sites.site import Branch, Site


@pytest.fixture
def config() -> CompilerConfig:
    return CompilerConfig(sites_domain="sites.test", sites_dir="/srv/sites")


@pytest.fixture
def collaborators(config: CompilerConfig) -> Collaborators:
    return Collaborators.from_config(config)


@pytest.fixture
def prod() -> Branch:
    return Branch(id="b1", slug="prod")


@pytest.fixture
def site(prod: Branch) -> Site:
    """Site ``blog`` with a single main branch and no custom domains."""
    return Site(id="s1", name="blog", main_branch="b1", branches=(prod,))
