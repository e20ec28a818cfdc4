"""Tests for specroutes.parser.loader."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from specroutes.exceptions import SpecParseError
from specroutes.parser.loader import (
    _parse_content,
    detect_spec_version,
    load_spec,
)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# load_spec dispatch
# ---------------------------------------------------------------------------


class TestLoadSpec:
    """Test load_spec dispatcher routes to the correct loader."""

    def test_loads_from_file_json(self) -> None:
        result = load_spec(str(FIXTURES_DIR / "swagger_2.0.json"))
        assert result["swagger"] == "2.0"
        assert "/test" in result["paths"]

    def test_loads_from_file_yaml(self) -> None:
        result = load_spec(str(FIXTURES_DIR / "openapi_3.0.yaml"))
        assert result["openapi"] == "3.0.3"
        assert result["paths"]["/"]["get"]["tags"] == ["root"]

    def test_loads_from_yml_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "api.yml"
        path.write_text("swagger: '2.0'\npaths: {}\n")
        assert load_spec(str(path)) == {"swagger": "2.0", "paths": {}}

    def test_loads_from_stdin(self) -> None:
        with patch("specroutes.parser.loader.sys") as mock_sys:
            mock_sys.stdin.read.return_value = '{"swagger": "2.0", "paths": {}}'
            assert load_spec("-") == {"swagger": "2.0", "paths": {}}

    def test_loads_from_url(self) -> None:
        body = {"openapi": "3.0.0", "paths": {}}
        mock_response = httpx.Response(
            200,
            json=body,
            request=httpx.Request("GET", "https://example.com/openapi.json"),
        )
        with patch("specroutes.parser.loader.httpx.get", return_value=mock_response):
            assert load_spec("https://example.com/openapi.json") == body


# ---------------------------------------------------------------------------
# Error paths
# ---------------------------------------------------------------------------


class TestLoadErrors:
    def test_file_not_found_raises(self) -> None:
        with pytest.raises(SpecParseError, match="not found"):
            load_spec("/nonexistent/swagger.json")

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("   \n")
        with pytest.raises(SpecParseError, match="empty"):
            load_spec(str(path))

    def test_invalid_json_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(SpecParseError, match="Invalid JSON"):
            load_spec(str(path))

    def test_non_object_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(SpecParseError, match="must be a JSON/YAML object"):
            load_spec(str(path))

    def test_empty_stdin_raises(self) -> None:
        with patch("specroutes.parser.loader.sys") as mock_sys:
            mock_sys.stdin.read.return_value = ""
            with pytest.raises(SpecParseError, match="No input"):
                load_spec("-")

    def test_http_error_raises(self) -> None:
        mock_response = httpx.Response(
            404,
            request=httpx.Request("GET", "https://example.com/missing.json"),
        )
        with patch("specroutes.parser.loader.httpx.get", return_value=mock_response):
            with pytest.raises(SpecParseError, match="HTTP 404"):
                load_spec("https://example.com/missing.json")

    def test_connection_error_raises(self) -> None:
        with patch(
            "specroutes.parser.loader.httpx.get",
            side_effect=httpx.ConnectError("Connection refused"),
        ):
            with pytest.raises(SpecParseError, match="Failed to fetch"):
                load_spec("https://example.com/openapi.json")


# ---------------------------------------------------------------------------
# Content parsing
# ---------------------------------------------------------------------------


class TestParseContent:
    def test_parses_json(self) -> None:
        assert _parse_content('{"a": 1}') == {"a": 1}

    def test_parses_yaml(self) -> None:
        assert _parse_content("a: 1\nb: two\n") == {"a": 1, "b": "two"}

    def test_yaml_hint_skips_json(self) -> None:
        assert _parse_content("a: 1", hint="yaml") == {"a": 1}

    def test_invalid_content_raises(self) -> None:
        with pytest.raises(SpecParseError, match="Failed to parse"):
            _parse_content("a: [unclosed")

    def test_null_yaml_raises(self) -> None:
        with pytest.raises(SpecParseError, match="empty document"):
            _parse_content("~", hint="yaml")


# ---------------------------------------------------------------------------
# Version detection
# ---------------------------------------------------------------------------


class TestDetectSpecVersion:
    @pytest.mark.parametrize(
        ("spec", "expected"),
        [
            ({"swagger": "2.0"}, "2.0"),
            ({"swagger": 2.0}, "2.0"),
            ({"openapi": "3.0.3"}, "3.0.3"),
            ({"openapi": "3.1.0"}, "3.1.0"),
        ],
    )
    def test_accepts(self, spec: dict, expected: str) -> None:
        assert detect_spec_version(spec) == expected

    def test_rejects_swagger_1(self) -> None:
        with pytest.raises(SpecParseError, match="Unsupported Swagger"):
            detect_spec_version({"swagger": "1.2"})

    def test_rejects_openapi_4(self) -> None:
        with pytest.raises(SpecParseError, match="Unsupported OpenAPI"):
            detect_spec_version({"openapi": "4.0.0"})

    def test_missing_version_raises(self) -> None:
        with pytest.raises(SpecParseError, match="Missing"):
            detect_spec_version({"paths": {}})
