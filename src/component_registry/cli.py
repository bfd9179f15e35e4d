"""Command-line client for the component registry."""

import functools
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from component_registry import __version__
from component_registry.client import DEFAULT_SERVER_URL, KitClient, KitRegistryClientError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Show registry client errors as a clean message instead of a traceback.

    Catches KitRegistryClientError and OSError (writing the output file).
    All other exceptions bubble up normally with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except KitRegistryClientError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except OSError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]


def _client(ctx: click.Context) -> KitClient:
    client = ctx.obj.get("client")
    if client is None:
        client = KitClient(ctx.obj["server_url"])
        ctx.obj["client"] = client
        ctx.call_on_close(client.close)
    return client


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--server-url",
    envvar="COMPONENT_REGISTRY_URL",
    default=DEFAULT_SERVER_URL,
    show_default=True,
    help="Registry server URL.",
)
@click.pass_context
def cli(ctx: click.Context, server_url: str) -> None:
    """Browse and fetch components from a component registry."""
    ctx.ensure_object(dict)
    ctx.obj.setdefault("server_url", server_url)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="kits")
@click.pass_context
@cli_error_boundary
def list_kits(ctx: click.Context) -> None:
    """List the kits served by the registry."""
    for kit in _client(ctx).list_kits():
        click.echo(kit)


@cli.command(name="list")
@click.argument("kit")
@click.pass_context
@cli_error_boundary
def list_components(ctx: click.Context, kit: str) -> None:
    """List components for a specific KIT (e.g. shadcn)."""
    for meta in _client(ctx).list_components(kit):
        name = click.style(meta.name, fg="green")
        version = click.style(meta.version, dim=True)
        click.echo(f"{name}  -  {version}")


@cli.command(name="get")
@click.argument("kit")
@click.argument("name")
@click.option(
    "-o",
    "--out",
    "out_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the component source to a file.",
)
@click.pass_context
@cli_error_boundary
def get_component(ctx: click.Context, kit: str, name: str, out_path: Path | None) -> None:
    """Get the source of component NAME from KIT."""
    component = _client(ctx).get_component(kit, name)

    if out_path is not None:
        out_path.write_text(component.code.tsx, encoding="utf-8")
        click.echo(click.style(f"Saved to {out_path}", fg="green"))
        return

    click.echo(click.style(f"{name}.tsx", fg="yellow"))
    click.echo(component.code.tsx)


if __name__ == "__main__":
    cli()
