"""Tests for roost.compiler.branch — route precedence for one branch."""

import dataclasses
import logging

import pytest

from roost.caddy.route import Route
from roost.compiler.branch import branch_route
from roost.compiler.collaborators import Collaborators
from roost.compiler.content import content_route
from roost.sites.domain import Domain
from roost.sites.redirect import FileRedirect, UrlRedirect
from roost.sites.site import Branch, Site


def _stub_auth(password: str) -> dict:
    return {"handler": "authentication", "password": password}


@pytest.fixture
def stubbed(collaborators: Collaborators) -> Collaborators:
    """Collaborators with a deterministic auth handler."""
    return dataclasses.replace(collaborators, auth_handler=_stub_auth)


def _subroutes(route: Route) -> tuple[Route, ...]:
    (handler,) = route.handle
    assert handler["handler"] == "subroute"
    return handler["routes"]


class TestEndToEnd:
    def test_minimal_site(self, collaborators: Collaborators, site: Site, prod: Branch) -> None:
        route = branch_route(site, prod, collaborators)

        assert route.route_id == "site-s1-branch-b1"
        assert route.group == "s1"
        assert route.match == ({"host": ["prod.blog.sites.test", "blog.sites.test"]},)

        (content,) = _subroutes(route)
        assert [h["handler"] for h in content.handle] == ["headers", "encode", "file_server"]

        not_authenticated, not_found = route.errors
        assert not_authenticated.match == ({"expression": "{http.error.status_code} == 401"},)
        assert not_found == collaborators.not_found_route(site, prod, "/srv/sites/s1/b1")


class TestMatchStage:
    def test_group_is_site_id_for_every_branch(self, collaborators: Collaborators) -> None:
        branches = (Branch(id="b1", slug="prod"), Branch(id="b2", slug="staging"))
        site = Site(id="s1", name="blog", main_branch="b1", branches=branches)

        assert {branch_route(site, b, collaborators).group for b in branches} == {"s1"}

    def test_non_main_branch_hosts(self, collaborators: Collaborators) -> None:
        staging = Branch(id="b2", slug="staging")
        site = Site(
            id="s1",
            name="blog",
            main_branch="b1",
            domains=(Domain(name="example.com"),),
            branches=(Branch(id="b1", slug="prod"), staging),
        )
        route = branch_route(site, staging, collaborators)
        assert route.match == ({"host": ["staging.blog.sites.test"]},)

    def test_explicit_platform_domain_settings_used(self, collaborators: Collaborators) -> None:
        staging = Branch(id="b2", slug="staging")
        site = Site(
            id="s1",
            name="blog",
            main_branch="b1",
            domains=(Domain(name="blog.sites.test", expose_branches=False),),
            branches=(staging,),
        )
        assert branch_route(site, staging, collaborators).match == ({"host": []},)

    def test_unreachable_branch_logs_warning(
        self, collaborators: Collaborators, caplog: pytest.LogCaptureFixture
    ) -> None:
        staging = Branch(id="b2", slug="staging")
        site = Site(
            id="s1",
            name="blog",
            domains=(Domain(name="blog.sites.test"),),
            branches=(staging,),
        )
        with caplog.at_level(logging.WARNING, logger="roost.compiler"):
            branch_route(site, staging, collaborators)
        assert "not reachable" in caplog.text


class TestSubrouteStage:
    def test_no_password_no_auth_route(self, stubbed: Collaborators, site: Site, prod: Branch) -> None:
        routes = _subroutes(branch_route(site, prod, stubbed))
        assert all(h["handler"] != "authentication" for r in routes for h in r.handle)

    def test_site_password_auth_first(self, stubbed: Collaborators, prod: Branch) -> None:
        site = Site(id="s1", name="blog", password="site-pw", branches=(prod,))
        auth, content = _subroutes(branch_route(site, prod, stubbed))

        assert auth == Route(handle=({"handler": "authentication", "password": "site-pw"},))
        assert content.handle[-1]["handler"] == "file_server"

    def test_branch_password_overrides_site(self, stubbed: Collaborators) -> None:
        branch = Branch(id="b1", slug="prod", password="branch-pw")
        site = Site(id="s1", name="blog", password="site-pw", branches=(branch,))

        auth = _subroutes(branch_route(site, branch, stubbed))[0]
        assert auth.handle[0]["password"] == "branch-pw"

    def test_real_auth_handler(self, collaborators: Collaborators) -> None:
        branch = Branch(id="b1", slug="prod", password="s3cr3t")
        site = Site(id="s1", name="blog", branches=(branch,))

        auth = _subroutes(branch_route(site, branch, collaborators))[0]
        assert auth.handle[0]["handler"] == "authentication"
        assert auth.terminal is False

    def test_redirects_in_order_before_content(self, stubbed: Collaborators) -> None:
        redirects = (
            UrlRedirect(path="/b", to="/bb"),
            FileRedirect(id="r1", path="/robots.txt"),
            UrlRedirect(path="/a", to="/aa"),
        )
        branch = Branch(id="b1", slug="prod", password="pw", redirects=redirects)
        site = Site(id="s1", name="blog", branches=(branch,))

        auth, *redirect_routes, content = _subroutes(branch_route(site, branch, stubbed))

        assert auth.handle[0]["handler"] == "authentication"
        assert [r.match[0]["path"] for r in redirect_routes] == [["/b"], ["/robots.txt"], ["/a"]]
        assert all(r.terminal for r in redirect_routes)
        assert content == content_route(site, branch, stubbed)


class TestErrorStage:
    @pytest.mark.parametrize(
        ("password", "redirects", "spa"),
        [
            (None, (), False),
            ("pw", (), False),
            (None, (UrlRedirect(path="/a", to="/b"),), True),
            ("pw", (UrlRedirect(path="/a", to="/b"),), True),
        ],
    )
    def test_always_two_error_routes(
        self, stubbed: Collaborators, password, redirects, spa
    ) -> None:
        branch = Branch(id="b1", slug="prod", password=password, redirects=redirects)
        site = Site(id="s1", name="blog", spa=spa, branches=(branch,))

        errors = branch_route(site, branch, stubbed).errors

        assert len(errors) == 2
        assert errors[0].handle[0]["body"] == "not authenticated"
        assert errors[1].match == ({"expression": "{http.error.status_code} == 404"},)

    def test_404_page_served_from_content_root(
        self, collaborators: Collaborators, site: Site, prod: Branch
    ) -> None:
        moved = dataclasses.replace(
            collaborators, content_root=lambda site_id, branch_id: f"/mnt/{branch_id}"
        )
        route = branch_route(site, prod, moved)

        (content,) = _subroutes(route)
        custom_page = route.errors[1].handle[0]["routes"][0]
        assert content.handle[-1]["root"] == "/mnt/b1"
        assert custom_page.match[0]["file"]["root"] == "/mnt/b1"
        assert custom_page.handle[-1]["root"] == "/mnt/b1"

    def test_errors_not_inside_subroute(self, collaborators: Collaborators, site: Site, prod: Branch) -> None:
        (handler,) = branch_route(site, prod, collaborators).handle
        assert "errors" not in handler


class TestCollaboratorFailures:
    def test_errors_propagate(self, collaborators: Collaborators, site: Site, prod: Branch) -> None:
        def broken_root(site_id: str, branch_id: str) -> str:
            raise LookupError(branch_id)

        broken = dataclasses.replace(collaborators, content_root=broken_root)
        with pytest.raises(LookupError):
            branch_route(site, prod, broken)
