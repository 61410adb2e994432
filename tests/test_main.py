"""Tests for the CLI entry point."""

import base64
import json

import httpx
import pytest
import yaml

from apb_catalog import __main__ as cli
from apb_catalog.config import RegistryConfig


def _manifest(spec: dict) -> dict:
    label = base64.b64encode(yaml.safe_dump(spec).encode("utf-8")).decode("ascii")
    v1_compat = json.dumps({"config": {"Labels": {"com.redhat.apb.spec": label}}})
    return {"history": [{"v1Compatibility": v1_compat}]}


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/v1/search":
        return httpx.Response(
            200,
            json={
                "num_results": 2,
                "query": request.url.params["q"],
                "results": [{"name": "foo-apb"}, {"name": "bar"}],
            },
        )
    if request.url.path == "/v2/foo-apb/manifests/latest":
        return httpx.Response(200, json=_manifest({"name": "foo", "async": "optional"}))
    return httpx.Response(200, json={"schemaVersion": 2})


def _failing_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


class TestMain:
    """Tests for main()."""

    @pytest.fixture(autouse=True)
    def _isolate(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Run from an empty directory without registry env vars."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("APB_REGISTRY_URL", raising=False)

    def _use_handler(self, monkeypatch: pytest.MonkeyPatch, handler) -> list[RegistryConfig]:
        seen: list[RegistryConfig] = []

        def fake_client(config: RegistryConfig) -> httpx.Client:
            seen.append(config)
            return httpx.Client(transport=httpx.MockTransport(handler))

        monkeypatch.setattr(cli, "create_http_client", fake_client)
        return seen

    def test_specs(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        """Test the specs command prints decoded specs and the total."""
        seen = self._use_handler(monkeypatch, _handler)

        exit_code = cli.main(["--url", "registry.example.com", "specs"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output == {
            "num_results": 2,
            "specs": [{"name": "foo", "async": "optional"}],
        }
        assert seen[0].url == "registry.example.com"

    def test_search(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        """Test the search command prints the raw search result."""
        self._use_handler(monkeypatch, _handler)

        exit_code = cli.main(["search", "foo"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["num_results"] == 2
        assert output["query"] == "foo"
        assert [r["name"] for r in output["results"]] == ["foo-apb", "bar"]

    def test_search_failure(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Test a failed search exits non-zero without output."""
        self._use_handler(monkeypatch, _failing_handler)

        exit_code = cli.main(["specs"])

        assert exit_code == 1
        assert capsys.readouterr().out == ""

    def test_cli_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test CLI flags override configuration defaults."""
        seen = self._use_handler(monkeypatch, _handler)

        cli.main(["--name", "lab", "--timeout", "3", "--log-level", "DEBUG", "specs"])

        assert seen[0].name == "lab"
        assert seen[0].request_timeout == 3.0
        assert seen[0].log_level.value == "DEBUG"

    def test_invalid_config(self, capsys: pytest.CaptureFixture) -> None:
        """Test an invalid setting is reported as a configuration error."""
        exit_code = cli.main(["--timeout", "-1", "specs"])

        assert exit_code == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_command_required(self) -> None:
        """Test running without a command is a usage error."""
        with pytest.raises(SystemExit):
            cli.main([])
