"""Pytest fixtures for RHCC registry tests."""

from __future__ import annotations

import base64
import json
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
import yaml

from apb_catalog.config import RegistryConfig
from apb_catalog.registries.rhcc import RegistryClient, RHCCRegistry

REGISTRY_URL = "registry.example.com"

Route = httpx.Response | Exception | Callable[[httpx.Request], httpx.Response]


def encode_spec(document: dict[str, Any]) -> str:
    """Encode a spec document the way APB images label it."""
    return base64.b64encode(yaml.safe_dump(document).encode("utf-8")).decode("ascii")


def build_manifest(
    labels: dict[str, Any] | None = None,
    spec: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a schema v1 manifest whose first history entry carries labels."""
    labels = dict(labels or {})
    if spec is not None:
        labels["com.redhat.apb.spec"] = encode_spec(spec)
        labels.setdefault("com.redhat.apb.version", "0.1.0")
    v1_compat = {
        "id": "7c0ea3c7b0b4",
        "created": "2017-06-01T12:00:00Z",
        "config": {"Hostname": "", "Labels": labels},
    }
    return {
        "schemaVersion": 1,
        "name": "test/image",
        "tag": "latest",
        "history": [
            {"v1Compatibility": json.dumps(v1_compat)},
            {"v1Compatibility": json.dumps({"id": "parent"})},
        ],
    }


class FakeRegistry:
    """Routes requests by URL path to canned responses and records them."""

    def __init__(self) -> None:
        self.routes: dict[str, Route] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, route: Route) -> None:
        self.routes[path] = route

    def add_json(self, path: str, payload: Any, status_code: int = 200) -> None:
        self.routes[path] = httpx.Response(status_code, json=payload)

    def add_search(self, results: list[dict[str, Any]], num_results: int | None = None) -> None:
        self.add_json(
            "/v1/search",
            {
                "num_results": len(results) if num_results is None else num_results,
                "query": '"*-apb"',
                "results": results,
            },
        )

    def add_manifest(self, image_name: str, manifest: Any) -> None:
        self.add_json(f"/v2/{image_name}/manifests/latest", manifest)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"errors": [{"code": "MANIFEST_UNKNOWN"}]})
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        return route

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def fake_registry() -> FakeRegistry:
    """An empty fake registry."""
    return FakeRegistry()


@pytest.fixture
def http_client(fake_registry: FakeRegistry) -> Iterator[httpx.Client]:
    """An httpx client wired to the fake registry."""
    client = httpx.Client(transport=httpx.MockTransport(fake_registry.handler))
    yield client
    client.close()


@pytest.fixture
def registry_client(http_client: httpx.Client) -> RegistryClient:
    """A RegistryClient pointed at the fake registry."""
    return RegistryClient(REGISTRY_URL, http_client)


@pytest.fixture
def registry_config() -> RegistryConfig:
    """Registry configuration pointed at the fake registry."""
    return RegistryConfig(name="test-rhcc", url=REGISTRY_URL)


@pytest.fixture
def rhcc_registry(registry_config: RegistryConfig, http_client: httpx.Client) -> RHCCRegistry:
    """An RHCCRegistry backed by the fake registry."""
    return RHCCRegistry(registry_config, http_client)


@pytest.fixture
def foo_spec() -> dict[str, Any]:
    """A complete APB spec document."""
    return {
        "version": "1.0",
        "name": "foo",
        "description": "Foo APB for testing",
        "bindable": True,
        "async": "optional",
        "tags": ["database", "test"],
        "metadata": {"displayName": "Foo (APB)", "documentationUrl": "https://example.com"},
        "plans": [
            {
                "name": "default",
                "description": "Default deployment",
                "free": True,
                "metadata": {"displayName": "Default"},
                "parameters": [
                    {
                        "name": "db_name",
                        "title": "Database name",
                        "type": "string",
                        "default": "foodb",
                        "required": True,
                    },
                    {
                        "name": "size",
                        "type": "enum",
                        "enum": ["small", "large"],
                        "default": "small",
                    },
                ],
            }
        ],
    }


@pytest.fixture
def make_manifest() -> Callable[..., dict[str, Any]]:
    """Factory for schema v1 manifests."""
    return build_manifest


@pytest.fixture
def make_encoded_spec() -> Callable[[dict[str, Any]], str]:
    """Factory for base64 spec labels."""
    return encode_spec
