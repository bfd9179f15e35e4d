"""Tests for the component-registry command-line client."""

from pathlib import Path

import httpx
import pytest
from click.testing import CliRunner

from component_registry.cli import cli
from component_registry.client import KitClient

COMPONENTS = [
    {"name": "accordion", "version": "0.1.0", "tags": [], "themes": ["default"]},
    {"name": "button", "version": "0.1.0", "tags": [], "themes": ["default"]},
]
BUTTON = {
    "metadata": COMPONENTS[1],
    "code": {"tsx": "export function Button() {}\n", "css": ""},
}


def _handler(request: httpx.Request) -> httpx.Response:
    routes = {
        "/kits": httpx.Response(200, json={"kits": ["shadcn", "starter"]}),
        "/shadcn/components": httpx.Response(200, json=COMPONENTS),
        "/shadcn/components/button": httpx.Response(200, json=BUTTON),
        "/shadcn/components/nope": httpx.Response(404, json={"error": "Component not found"}),
    }
    return routes.get(request.url.path, httpx.Response(404, json={"error": "Kit not found"}))


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def obj() -> dict[str, KitClient]:
    client = KitClient(http_client=httpx.Client(transport=httpx.MockTransport(_handler)))
    return {"client": client}


def test_list_prints_name_and_version(cli_runner: CliRunner, obj: dict) -> None:
    result = cli_runner.invoke(cli, ["list", "shadcn"], obj=obj, catch_exceptions=False)

    assert result.exit_code == 0
    assert result.output.splitlines() == ["accordion  -  0.1.0", "button  -  0.1.0"]


def test_kits_prints_kit_names(cli_runner: CliRunner, obj: dict) -> None:
    result = cli_runner.invoke(cli, ["kits"], obj=obj, catch_exceptions=False)

    assert result.exit_code == 0
    assert result.output.splitlines() == ["shadcn", "starter"]


def test_get_prints_source(cli_runner: CliRunner, obj: dict) -> None:
    result = cli_runner.invoke(cli, ["get", "shadcn", "button"], obj=obj, catch_exceptions=False)

    assert result.exit_code == 0
    assert "button.tsx" in result.output
    assert "export function Button() {}" in result.output


def test_get_writes_to_file(cli_runner: CliRunner, obj: dict, tmp_path: Path) -> None:
    out = tmp_path / "button.tsx"

    result = cli_runner.invoke(
        cli, ["get", "shadcn", "button", "--out", str(out)], obj=obj, catch_exceptions=False
    )

    assert result.exit_code == 0
    assert f"Saved to {out}" in result.output
    assert out.read_text(encoding="utf-8") == "export function Button() {}\n"


def test_unknown_component_exits_with_error(cli_runner: CliRunner, obj: dict) -> None:
    result = cli_runner.invoke(cli, ["get", "shadcn", "nope"], obj=obj)

    assert result.exit_code == 1
    assert "Error: Component not found" in result.output


def test_unknown_kit_exits_with_error(cli_runner: CliRunner, obj: dict) -> None:
    result = cli_runner.invoke(cli, ["list", "unknownkit"], obj=obj)

    assert result.exit_code == 1
    assert "Error: Kit not found" in result.output


def test_no_subcommand_prints_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [], obj={})

    assert result.exit_code == 0
    assert "Browse and fetch components" in result.output


def test_non_json_response_exits_with_error(cli_runner: CliRunner) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html></html>"))
    obj = {"client": KitClient(http_client=httpx.Client(transport=transport))}

    result = cli_runner.invoke(cli, ["list", "shadcn"], obj=obj)

    assert result.exit_code == 1
    assert "Error: Invalid JSON" in result.output
