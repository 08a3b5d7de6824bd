import asyncio
import logging

import click
import psycopg
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from teikind.adapters import RecordingStakingWatcher, TransactionDriver, load_transaction
from teikind.core.config import load_config
from teikind.core.errors import TeikindError
from teikind.core.use_cases import HandlerContext, classify, dispatch
from teikind.storage import PostgresProjectRepository, setup_schema

console = Console()

dsn_option = click.option(
    "--dsn", envvar="TEIKIND_DSN", required=True, help="PostgreSQL DSN (or TEIKIND_DSN)"
)
config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="Indexer config JSON (network + project token units)",
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """teikind — project state indexer for Teiki outputs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@cli.command("init-db")
@dsn_option
def init_db_cmd(dsn: str) -> None:
    """Create the project tables, status enum and indices (idempotent)."""

    async def run() -> None:
        async with await psycopg.AsyncConnection.connect(dsn) as conn:
            await setup_schema(conn)

    try:
        asyncio.run(run())
    except psycopg.Error as e:
        raise click.ClickException(str(e)) from e
    console.print("[bold]schema ready[/]")


@cli.command("classify")
@click.argument("tx_file", type=click.Path(exists=True, dir_okay=False))
@config_option
def classify_cmd(tx_file: str, config_path: str) -> None:
    """Print the project events found in a JSON transaction."""
    try:
        config = load_config(config_path)
        tx = load_transaction(tx_file)
    except TeikindError as e:
        raise click.ClickException(str(e)) from e

    events = classify(tx, config.tokens)
    if not events:
        console.print(f"[yellow]no project events[/] in tx {tx.id}")
        return
    for event in events:
        indices = getattr(event, "indices", ())
        console.print(f"[bold]{type(event).__name__}[/] {list(indices)}")


@cli.command("index")
@click.argument("tx_file", type=click.Path(exists=True, dir_okay=False))
@config_option
@dsn_option
def index_cmd(tx_file: str, config_path: str, dsn: str) -> None:
    """Classify a JSON transaction and store its project records."""
    try:
        config = load_config(config_path)
        tx = load_transaction(tx_file)
    except TeikindError as e:
        raise click.ClickException(str(e)) from e

    driver = TransactionDriver(tx)
    staking = RecordingStakingWatcher()
    table = Table("event", "stored", "effects")

    async def run() -> None:
        async with await psycopg.AsyncConnection.connect(dsn) as conn:
            ctx = HandlerContext(
                driver=driver,
                repository=PostgresProjectRepository(conn),
                staking=staking,
                config=config,
            )
            async with conn.transaction():
                for event in classify(tx, config.tokens):
                    result = await dispatch(ctx, event)
                    table.add_row(
                        type(event).__name__,
                        str(result.stored),
                        ", ".join(repr(e) for e in result.effects) or "-",
                    )

    try:
        asyncio.run(run())
    except (psycopg.Error, TeikindError) as e:
        raise click.ClickException(str(e)) from e

    console.print(table)
    console.print(
        f"[bold]summary[/]: "
        f"notified={driver.notified}  refreshed={driver.refreshed}  "
        f"watched={len(staking.watched)}"
    )


if __name__ == "__main__":
    cli()
