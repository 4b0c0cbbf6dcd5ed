"""laneboard command line interface."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated, Optional

import typer

from ..client import BoardClient, ClientConfig, DragEndEvent, DragSession, ServerError
from ..ordering import Column
from ..web.config import LOG_FORMAT
from .output import board_table, console, print_error, print_info, print_success

app = typer.Typer(
    name="laneboard",
    help="Kanban boards with drag-and-drop card ordering",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    ctx: typer.Context,
    server: Annotated[
        Optional[str],
        typer.Option("--server", "-S", help="Server URL (overrides config)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose output"),
    ] = False,
):
    """Work with laneboard boards from the terminal."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    config = ClientConfig.load()
    if server:
        config.server_url = server
    ctx.obj = config


def _board_id(config: ClientConfig, board: str | None) -> str:
    board_id = board or config.default_board
    if not board_id:
        print_error("No board given and no default_board configured")
        raise typer.Exit(1)
    return board_id


def _run(config: ClientConfig, work) -> None:
    """Run an async client operation, turning server errors into exit code 1."""

    async def _main():
        client = BoardClient(config.server_url, timeout=config.timeout)
        try:
            await work(client)
        finally:
            await client.close()

    try:
        asyncio.run(_main())
    except ServerError as e:
        print_error(e.message)
        raise typer.Exit(1) from None


@app.command("new-board")
def new_board(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Board name")],
):
    """Create a board and print its id."""

    async def work(client: BoardClient):
        board = await client.create_board(name)
        print_success(f"Created board {board['name']!r}: {board['id']}")

    _run(ctx.obj, work)


@app.command("add")
def add_card(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Card title")],
    board: Annotated[
        Optional[str],
        typer.Option("--board", "-b", help="Board id (defaults to default_board)"),
    ] = None,
    column: Annotated[
        Column,
        typer.Option("--column", "-c", help="Column to append the card to"),
    ] = Column.TODO,
    description: Annotated[
        Optional[str],
        typer.Option("--description", "-d", help="Card description"),
    ] = None,
):
    """Add a card to the end of a column."""
    board_id = _board_id(ctx.obj, board)

    async def work(client: BoardClient):
        card = await client.create_card(board_id, title, column=column, description=description)
        print_success(f"Added {card.id} to {card.column.value} at position {card.order}")

    _run(ctx.obj, work)


@app.command("show")
def show_board(
    ctx: typer.Context,
    board: Annotated[Optional[str], typer.Argument(help="Board id")] = None,
):
    """Show a board's columns and cards."""
    board_id = _board_id(ctx.obj, board)

    async def work(client: BoardClient):
        info, cards = await client.get_board(board_id)
        console.print(board_table(info["name"], cards))
        if not cards:
            print_info("No cards yet")

    _run(ctx.obj, work)


@app.command("move")
def move_card(
    ctx: typer.Context,
    card: Annotated[str, typer.Argument(help="Id of the card to move")],
    target: Annotated[
        str,
        typer.Argument(help="Column name (append to it) or card id (take its place)"),
    ],
    board: Annotated[
        Optional[str],
        typer.Option("--board", "-b", help="Board id (defaults to default_board)"),
    ] = None,
    server_side: Annotated[
        bool,
        typer.Option("--server-side", help="Let the server resolve the move"),
    ] = False,
):
    """Move a card as if it had been dragged onto TARGET."""
    board_id = _board_id(ctx.obj, board)

    event = DragEndEvent.from_raw(card, target)

    async def work(client: BoardClient):
        if event.active_id is None:
            print_info("Nothing to move")
            return
        if server_side:
            changed, cards = await client.drag(board_id, event.active_id, event.over_id)
        else:
            session = DragSession(client, board_id)
            await session.load()
            result = await session.handle_drag_end(event)
            changed, cards = result.changed, result.cards

        if not changed:
            print_info("Nothing to move")
            return
        moved = next(c for c in cards if c.id == event.active_id)
        print_success(f"Moved {moved.id} to {moved.column.value} at position {moved.order}")

    _run(ctx.obj, work)


@app.command("config")
def show_config(
    ctx: typer.Context,
    save: Annotated[
        bool,
        typer.Option("--save", help="Write the effective config to the config file"),
    ] = False,
):
    """Show the effective client configuration."""
    config: ClientConfig = ctx.obj
    console.print(f"[bold]server_url[/bold]    {config.server_url}")
    console.print(f"[bold]timeout[/bold]       {config.timeout}")
    console.print(f"[bold]default_board[/bold] {config.default_board or '-'}")
    if save:
        config.save()
        print_success(f"Saved to {config.CONFIG_FILE}")


if __name__ == "__main__":
    app()
