"""Site records to frozen dataclasses.

Converts the JSON documents produced by the persistence layer (camelCase
keys, ``_id`` identifiers) into ``Site`` values. This is the only place
site data is validated: anything the compiler receives has been through
here or was built directly in Python.

Unknown keys are ignored. Malformed values raise ``SiteDataError`` with
the JSON path of the offending value.
"""

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from roost.errors import SiteDataError
from roost.sites.domain import AcmeSslConfiguration, Domain, ManualSslConfiguration, SslConfiguration
from roost.sites.redirect import FileRedirect, Redirect, UrlRedirect
from roost.sites.site import Branch, Header, Site

# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _mapping(value: Any, location: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SiteDataError(location, f"expected an object, got {type(value).__name__}")
    return value


def _list(data: Mapping[str, Any], key: str, location: str) -> list[Any]:
    """Optional array field; absent or null reads as empty."""
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise SiteDataError(f"{location}.{key}", f"expected an array, got {type(value).__name__}")
    return list(value)


def _str(data: Mapping[str, Any], key: str, location: str) -> str:
    """Required, non-empty string field."""
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise SiteDataError(f"{location}.{key}", "expected a non-empty string")
    return value


def _optional_str(data: Mapping[str, Any], key: str, location: str) -> str | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise SiteDataError(f"{location}.{key}", f"expected a string, got {type(value).__name__}")
    return value


def _bool(data: Mapping[str, Any], key: str, location: str) -> bool:
    value = data.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise SiteDataError(f"{location}.{key}", f"expected a boolean, got {type(value).__name__}")
    return value


def _id(data: Mapping[str, Any], location: str) -> str:
    """Identifier under ``_id`` (persistence layer) or ``id``."""
    key = "_id" if "_id" in data else "id"
    return _str(data, key, location)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


def _load_ssl(value: Any, location: str) -> SslConfiguration:
    if value is None:
        return AcmeSslConfiguration()
    data = _mapping(value, location)
    kind = data.get("type", AcmeSslConfiguration.type)
    if kind == AcmeSslConfiguration.type:
        return AcmeSslConfiguration()
    if kind == ManualSslConfiguration.type:
        return ManualSslConfiguration(
            fullchain=_str(data, "fullchain", location),
            private_key=_str(data, "privateKey", location),
        )
    raise SiteDataError(f"{location}.type", f"unknown ssl configuration type {kind!r}")


def _load_domain(value: Any, location: str) -> Domain:
    data = _mapping(value, location)
    return Domain(
        name=_str(data, "name", location),
        expose_branches=_bool(data, "exposeBranches", location),
        ssl_configuration=_load_ssl(data.get("sslConfiguration"), f"{location}.sslConfiguration"),
    )


def _load_header(value: Any, location: str) -> Header:
    data = _mapping(value, location)
    header_value = data.get("value")
    if not isinstance(header_value, str):
        raise SiteDataError(f"{location}.value", "expected a string")
    return Header(name=_str(data, "name", location), value=header_value)


def _load_redirect(value: Any, location: str) -> Redirect:
    data = _mapping(value, location)
    kind = data.get("type", FileRedirect.type)
    path = _str(data, "path", location)
    if not path.startswith("/"):
        raise SiteDataError(f"{location}.path", "must start with '/'")
    if kind == FileRedirect.type:
        return FileRedirect(
            id=_id(data, location),
            path=path,
            content_type=_optional_str(data, "contentType", location) or "text/plain",
        )
    if kind == UrlRedirect.type:
        return UrlRedirect(
            path=path,
            to=_str(data, "to", location),
            permanent=_bool(data, "permanent", location),
        )
    raise SiteDataError(f"{location}.type", f"unknown redirect type {kind!r}")


def _load_branch(value: Any, location: str) -> Branch:
    data = _mapping(value, location)
    return Branch(
        id=_id(data, location),
        slug=_str(data, "slug", location),
        name=_optional_str(data, "name", location) or "",
        password=_optional_str(data, "password", location),
        redirects=tuple(
            _load_redirect(item, f"{location}.redirects[{i}]")
            for i, item in enumerate(_list(data, "redirects", location))
        ),
        headers=tuple(
            _load_header(item, f"{location}.headers[{i}]")
            for i, item in enumerate(_list(data, "headers", location))
        ),
    )


def load_site(value: Any, location: str = "site") -> Site:
    """Map one site record to a ``Site``.

    Raises ``SiteDataError`` if a required field is missing or a value
    has the wrong shape.
    """
    data = _mapping(value, location)
    return Site(
        id=_id(data, location),
        name=_str(data, "name", location),
        main_branch=_optional_str(data, "mainBranch", location),
        spa=_bool(data, "spa", location),
        password=_optional_str(data, "password", location),
        domains=tuple(
            _load_domain(item, f"{location}.domains[{i}]")
            for i, item in enumerate(_list(data, "domains", location))
        ),
        headers=tuple(
            _load_header(item, f"{location}.headers[{i}]")
            for i, item in enumerate(_list(data, "headers", location))
        ),
        branches=tuple(
            _load_branch(item, f"{location}.branches[{i}]")
            for i, item in enumerate(_list(data, "branches", location))
        ),
    )


def load_sites(value: Any) -> list[Site]:
    """Map a list of site records, or an object with a ``sites`` list."""
    if isinstance(value, Mapping):
        value = value.get("sites")
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise SiteDataError("sites", "expected an array of sites")
    return [load_site(item, f"sites[{i}]") for i, item in enumerate(value)]


def read_sites(path: str | Path) -> list[Site]:
    """Read and map a JSON file of site records."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SiteDataError(str(path), f"invalid JSON: {exc.msg} (line {exc.lineno})") from exc
    return load_sites(document)
