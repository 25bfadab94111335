"""CLI commands for the factom client.

Every command performs one call against factomd or factom-walletd and prints
the result as JSON. Daemon-side errors exit with status 1; transport and
decoding failures exit with status 2.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Coroutine

import typer
from rich.console import Console
from rich.markup import escape

from factom import __version__
from factom.api import balance as balance_api
from factom.api import chain as chain_api
from factom.api import entry as entry_api
from factom.api import tx as tx_api
from factom.api import wallet as wallet_api
from factom.cli.shared.logging_utils import configure_console_logging, ensure_rotating_log_file
from factom.cli.shared.params import parse_params
from factom.client import Factom, factomd_call, fetch, parse, walletd_call
from factom.config.loader import load_config
from factom.envelope import ApiResponse
from factom.errors import FactomError

app = typer.Typer(
    name="factom",
    help="factom - client for the factomd and factom-walletd JSON-RPC APIs",
    no_args_is_help=True,
)

console = Console()


def build_api(host: str | None = None, https: bool = False, config_path: Path | None = None) -> Factom:
    """Handle from the config file and FACTOM_* env, with command line overrides."""
    settings = load_config(config_path)
    update: dict[str, Any] = {}
    if host:
        update["host"] = host
        update["factomd_uri"] = None
        update["walletd_uri"] = None
    if https:
        update["https"] = True
    if update:
        settings = settings.model_copy(update=update)
    return Factom.from_config(settings)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"factom v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    host: str = typer.Option(None, "--host", help="Host running both daemons"),
    https: bool = typer.Option(False, "--https", help="Use https for both daemons"),
    config: Path = typer.Option(None, "--config", "-c", help="Config file (default ~/.factom/config.json)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every call"),
    log_file: bool = typer.Option(False, "--log-file", help="Also log to ~/.factom/logs/factom.log"),
    version: bool = typer.Option(None, "--version", callback=_version_callback, is_eager=True),
) -> None:
    """factom - client for the factomd and factom-walletd JSON-RPC APIs."""
    configure_console_logging(verbose)
    if log_file:
        ensure_rotating_log_file("factom", level="DEBUG" if verbose else "INFO")
    try:
        ctx.obj = build_api(host=host, https=https, config_path=config)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--config")


def _run(call: Coroutine[Any, Any, ApiResponse[Any]]) -> None:
    try:
        response = fetch(call)
    except FactomError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)
    if response.is_err():
        console.print(f"[red]Error {response.error.code}: {escape(response.error.message)}[/red]")
        raise typer.Exit(1)
    data = response.model_dump(mode="json", by_alias=True)["result"]
    console.print_json(data=data)


@app.command()
def heights(ctx: typer.Context) -> None:
    """Directory block, leader and entry heights."""
    _run(chain_api.heights(ctx.obj))


@app.command()
def properties(ctx: typer.Context) -> None:
    """factomd version."""
    _run(chain_api.properties(ctx.obj))


@app.command("wallet-height")
def wallet_height(ctx: typer.Context) -> None:
    """Height the wallet has synced to."""
    _run(wallet_api.wallet_height(ctx.obj))


@app.command("wallet-properties")
def wallet_properties(ctx: typer.Context) -> None:
    """factom-walletd version."""
    _run(wallet_api.wallet_properties(ctx.obj))


@app.command()
def entry(ctx: typer.Context, hash: str = typer.Argument(..., help="Entry hash")) -> None:
    """Fetch an entry."""
    _run(entry_api.entry(ctx.obj, hash))


@app.command("pending-entries")
def pending_entries(ctx: typer.Context) -> None:
    """Entries not yet in a block."""
    _run(entry_api.pending_entries(ctx.obj))


@app.command()
def transaction(ctx: typer.Context, hash: str = typer.Argument(..., help="Transaction hash or id")) -> None:
    """Fetch a factoid transaction."""
    _run(tx_api.transaction(ctx.obj, hash))


@app.command("tmp-transactions")
def tmp_transactions(ctx: typer.Context) -> None:
    """Working transactions in the wallet."""
    _run(tx_api.tmp_transactions(ctx.obj))


@app.command()
def balance(ctx: typer.Context, address: str = typer.Argument(..., help="Public FA or EC address")) -> None:
    """Factoid or entry credit balance of an address."""
    if address.startswith("FA"):
        _run(balance_api.factoid_balance(ctx.obj, address))
    elif address.startswith("EC"):
        _run(balance_api.entry_credit_balance(ctx.obj, address))
    else:
        raise typer.BadParameter("address must start with FA or EC", param_hint="ADDRESS")


@app.command()
def call(
    ctx: typer.Context,
    method: str = typer.Argument(..., help="Wire method name, e.g. chain-head"),
    params: list[str] = typer.Argument(None, help="KEY=VALUE params; values are parsed as JSON when possible"),
    wallet: bool = typer.Option(False, "--wallet", "-w", help="Send to factom-walletd instead of factomd"),
) -> None:
    """Call any method by name."""
    try:
        named = parse_params(params or [])
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="PARAMS")
    rpc = walletd_call if wallet else factomd_call

    async def _raw() -> ApiResponse[Any]:
        envelope = await rpc(ctx.obj, method, named)
        return parse(envelope, Any)

    _run(_raw())


if __name__ == "__main__":
    app()
