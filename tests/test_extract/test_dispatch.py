"""Tests for specroutes.extract.dispatch and specroutes.extract.summarise."""

from __future__ import annotations

from typing import Any

from specroutes import extract_paths as package_extract_paths
from specroutes.extract import extract_paths, summarise_api
from specroutes.extract.dispatch import is_openapi3
from specroutes.models import ApiInfo, ApiSummary


class TestDispatch:
    def test_is_openapi3(self) -> None:
        assert is_openapi3({"openapi": "3.0.0"})
        assert not is_openapi3({"swagger": "2.0"})
        assert not is_openapi3({"paths": {}})

    def test_swagger_uses_base_path(self, swagger_20_raw: dict[str, Any]) -> None:
        routes = extract_paths(swagger_20_raw)
        assert routes[2].route == "/api/v1/test"

    def test_openapi_uses_servers(self, openapi_30_raw: dict[str, Any]) -> None:
        routes = extract_paths(openapi_30_raw)
        assert routes[2].route == "/api/v2/test"

    def test_openapi_ignores_base_path(self) -> None:
        doc = {
            "openapi": "3.0.0",
            "basePath": "/ignored",
            "paths": {"/a": {"get": {}}},
        }
        assert extract_paths(doc)[0].route == "/a"

    def test_bare_document_is_treated_as_swagger(self) -> None:
        doc = {"basePath": "/api/v1", "paths": {"/a": {"get": {}}}}
        assert extract_paths(doc)[0].route == "/api/v1/a"

    def test_exported_from_package(self) -> None:
        assert package_extract_paths is extract_paths


class TestSummariseApi:
    def test_swagger_summary(self, swagger_20_raw: dict[str, Any]) -> None:
        summary = summarise_api(swagger_20_raw)
        assert summary == ApiSummary(
            info=ApiInfo(
                name="Example API",
                description="A small API used by the specroutes test suite",
                version="1.0.0",
            ),
            paths={
                "get": ["/", "/ping", "/api/v1/test", "/api/v1/test/{id}"],
                "post": ["/api/v1/test"],
                "delete": ["/api/v1/test/{id}"],
            },
        )

    def test_method_keys_in_fixed_order(self, swagger_20_raw: dict[str, Any]) -> None:
        assert list(summarise_api(swagger_20_raw).paths) == ["get", "post", "delete"]

    def test_openapi_summary(self, openapi_30_raw: dict[str, Any]) -> None:
        summary = summarise_api(openapi_30_raw)
        assert summary.info.version == "2.1.0"
        assert summary.paths["put"] == ["/v0/legacy"]

    def test_missing_info(self) -> None:
        summary = summarise_api({"paths": {}})
        assert summary.info == ApiInfo()
        assert summary.paths == {}

    def test_numeric_version(self) -> None:
        summary = summarise_api({"info": {"title": "T", "version": 2}, "paths": {}})
        assert summary.info.version == "2"

    def test_non_string_info_is_stringified(self) -> None:
        summary = summarise_api(
            {
                "swagger": "2.0",
                "info": {"title": 42, "description": 7, "version": "1"},
                "paths": {},
            }
        )
        assert summary.info == ApiInfo(name="42", description="7", version="1")
